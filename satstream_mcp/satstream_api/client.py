"""
Thin HTTP proxy client for the Satstream REST API.

Each ``invoke`` turns one endpoint descriptor plus an argument bundle into
exactly one authenticated GET. Upstream and transport failures come back as
``ProxyFailure`` results instead of exceptions so a single bad call never
takes the server down.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional, Union

import httpx

from satstream_mcp.catalogue import EndpointDescriptor
from satstream_mcp.config import ApiCredential, SatstreamConfig, default_config
from satstream_mcp.errors import (
    MissingPathParamError,
    SatstreamMcpError,
    TransportError,
    UpstreamHttpError,
)

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-KEY"


@dataclass(frozen=True, slots=True)
class ProxySuccess:
    """Upstream answered 2xx; ``payload`` is the decoded body, untouched."""

    payload: Any
    status_code: int = 200
    ok: ClassVar[bool] = True

    def to_dict(self) -> Any:
        return self.payload


@dataclass(frozen=True, slots=True)
class ProxyFailure:
    """Any invocation-local failure, carried as data."""

    error: SatstreamMcpError
    ok: ClassVar[bool] = False

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def status_code(self) -> Optional[int]:
        return self.error.status_code

    def to_dict(self) -> Dict[str, Any]:
        return self.error.to_dict()


ProxyResult = Union[ProxySuccess, ProxyFailure]


def _normalize_url(url: str) -> str:
    return url.rstrip("/")


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _describe_transport_error(exc: httpx.RequestError) -> str:
    detail = str(exc)
    if detail:
        return f"{exc.__class__.__name__}: {detail}"
    return exc.__class__.__name__


class SatstreamApiClient:
    """Async client that proxies catalogue endpoints to the Satstream API."""

    def __init__(
        self,
        config: SatstreamConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    @property
    def base_url(self) -> str:
        return _normalize_url(self.config.base_url)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout, follow_redirects=True)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def build_url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _build_headers(self, credential: ApiCredential) -> Dict[str, str]:
        return {API_KEY_HEADER: credential.value}

    def _process_response(self, response: httpx.Response) -> ProxyResult:
        body = _decode_body(response)
        if 200 <= response.status_code < 300:
            return ProxySuccess(body, status_code=response.status_code)
        logger.info("Satstream returned HTTP %s", response.status_code)
        return ProxyFailure(UpstreamHttpError(response.status_code, body))

    async def invoke(
        self,
        descriptor: EndpointDescriptor,
        args: Mapping[str, Any],
        credential: ApiCredential,
    ) -> ProxyResult:
        """
        Execute one upstream GET for ``descriptor``.

        Args:
            descriptor: Catalogue entry describing the endpoint.
            args: Argument bundle; path placeholders are taken from here and the
                declared query parameters forwarded when present.
            credential: API key sent as the ``X-API-KEY`` header.

        Returns:
            ``ProxySuccess`` with the decoded body, or ``ProxyFailure`` carrying a
            ``MissingPathParamError``, ``UpstreamHttpError`` or ``TransportError``.
        """
        try:
            path = descriptor.resolve_path(args)
        except MissingPathParamError as exc:
            logger.warning("tool=%s missing path parameter %s", descriptor.name, exc.param)
            return ProxyFailure(exc)

        params = descriptor.build_query(args)
        client = await self._get_client()
        try:
            response = await client.get(
                self.build_url(path),
                params=params or None,
                headers=self._build_headers(credential),
            )
        except httpx.RequestError as exc:
            logger.warning("Satstream unreachable for path %s", path)
            return ProxyFailure(TransportError(_describe_transport_error(exc)))
        return self._process_response(response)


default_client = SatstreamApiClient()
