"""FastAPI application exposing the Satstream tool catalogue over HTTP and JSON-RPC."""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from satstream_mcp import MCP_SERVER_NAME, __version__, dispatcher
from satstream_mcp.catalogue import Catalogue
from satstream_mcp.config import ApiCredential, SatstreamConfig, default_config
from satstream_mcp.errors import InvalidArgumentsError, StartupConfigError, UnknownToolError
from satstream_mcp.logging_config import configure_logging
from satstream_mcp.metrics import default_metrics
from satstream_mcp.satstream_api import ProxyFailure, ProxyResult, SatstreamApiClient, default_client
from satstream_mcp.tools import DEFAULT_CATALOGUE
from satstream_mcp.tools.validators import coerce_query_arguments

logger = logging.getLogger(__name__)
configure_logging(default_config)

HEALTH_STATUS = {"status": "ok"}
APP_VERSION = __version__
MCP_SERVER_VERSION = APP_VERSION

# HTTP status for each error kind on the plain /tools routes.
ERROR_HTTP_STATUS = {
    "unknown_tool": 404,
    "invalid_arguments": 400,
    "missing_path_param": 400,
    "transport_error": 502,
}


def _jsonrpc_success_payload(rpc_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "result": result}


def _jsonrpc_error_payload(rpc_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "error": {"code": code, "message": message}}


PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


class JsonRpcError(Exception):
    """A gateway request answered with a JSON-RPC error object."""

    def __init__(self, code: int, message: str, *, http_status: int = 200) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status


def _is_notification(method: str) -> bool:
    # Notifications never get a response body.
    return method == "initialized" or method.startswith("notifications/")


def _http_status(result: ProxyResult) -> int:
    if result.ok:
        return 200
    if result.code == "upstream_http_error" and result.status_code:
        return result.status_code
    return ERROR_HTTP_STATUS.get(result.code, 500)


def create_app(
    config: SatstreamConfig | None = None,
    *,
    client: SatstreamApiClient | None = None,
    catalogue: Catalogue = DEFAULT_CATALOGUE,
) -> FastAPI:
    """
    Build the HTTP application.

    The credential is resolved once here; the lifespan hook refuses to start
    the server when it is missing.
    """
    config = config or default_config
    if client is None:
        client = default_client if config is default_config else SatstreamApiClient(config)
    credential: Optional[ApiCredential] = (
        ApiCredential(config.api_key) if config.api_key else None
    )

    def _require_credential() -> ApiCredential:
        if credential is None:
            raise StartupConfigError("SATSTREAM_API_KEY is not configured.")
        return credential

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        # Startup
        _require_credential()
        logger.info("Serving %d Satstream tools from %s", len(catalogue), config.base_url)
        yield
        # Shutdown
        await client.aclose()

    app = FastAPI(
        title="Satstream MCP Server",
        description="Read-only Satstream Bitcoin API tool surface for LLM agents.",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    @app.exception_handler(StartupConfigError)
    async def startup_config_error(_request: Request, exc: StartupConfigError) -> JSONResponse:
        return JSONResponse(status_code=503, content=exc.to_dict())

    @app.middleware("http")
    async def add_request_context(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start = time.time()
        default_metrics.incr_request()
        response = await call_next(request)
        duration_ms = (time.time() - start) * 1000
        default_metrics.record_duration(request_id, duration_ms)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/health")
    async def health() -> JSONResponse:
        """Lightweight health endpoint for monitoring."""
        return JSONResponse(content=HEALTH_STATUS)

    @app.get("/metrics")
    async def metrics() -> JSONResponse:
        """Return in-process metrics snapshot."""
        return JSONResponse(content=default_metrics.snapshot())

    @app.get("/tools")
    async def tools_index() -> JSONResponse:
        return JSONResponse(content={"tools": dispatcher.list_tools(catalogue)})

    @app.get("/tools/{tool_name}")
    async def tool_route(tool_name: str, request: Request) -> JSONResponse:
        """Invoke a tool with query-string arguments."""
        request_id = getattr(request.state, "request_id", None)
        try:
            descriptor = catalogue.lookup(tool_name)
            arguments = coerce_query_arguments(descriptor, dict(request.query_params))
        except (UnknownToolError, InvalidArgumentsError) as exc:
            result: ProxyResult = ProxyFailure(exc)
        else:
            result = await dispatcher.call_tool(
                tool_name,
                arguments,
                credential=_require_credential(),
                catalogue=catalogue,
                client=client,
                request_id=request_id,
            )
        return JSONResponse(status_code=_http_status(result), content=result.to_dict())

    async def _initialize(params: Dict[str, Any], _request_id: Optional[str]) -> Dict[str, Any]:
        protocol_version = params.get("protocolVersion")
        if not isinstance(protocol_version, str) or not protocol_version:
            raise JsonRpcError(INVALID_PARAMS, "Invalid params")
        return {
            "protocolVersion": protocol_version,
            "serverInfo": {"name": MCP_SERVER_NAME, "version": MCP_SERVER_VERSION},
            "capabilities": {"tools": {"listChanged": False}},
        }

    async def _tools_list(_params: Dict[str, Any], _request_id: Optional[str]) -> Dict[str, Any]:
        return {"tools": dispatcher.list_tools(catalogue)}

    async def _tools_call(params: Dict[str, Any], request_id: Optional[str]) -> Dict[str, Any]:
        # Accepts both the MCP shape (name/arguments) and the legacy one (tool/params).
        tool_name = params.get("name") or params.get("tool")
        arguments = params.get("arguments")
        if arguments is None:
            arguments = params.get("params") or {}
        if not isinstance(tool_name, str) or not tool_name.strip() or not isinstance(arguments, dict):
            raise JsonRpcError(INVALID_PARAMS, "Invalid params")
        result = await dispatcher.call_tool(
            tool_name,
            arguments,
            credential=_require_credential(),
            catalogue=catalogue,
            client=client,
            request_id=request_id,
        )
        return dispatcher.wrap_tool_result(result)

    rpc_methods = {
        "initialize": _initialize,
        "tools/list": _tools_list,
        "list_tools": _tools_list,
        "tools/call": _tools_call,
        "call_tool": _tools_call,
    }

    @app.post("/mcp")
    async def mcp_gateway(request: Request) -> Response:
        """JSON-RPC 2.0 entry point for MCP clients speaking HTTP."""
        request_id = getattr(request.state, "request_id", None)
        rpc_id: Any = None
        method: Any = None
        try:
            try:
                body = await request.json()
            except ValueError:
                raise JsonRpcError(PARSE_ERROR, "Parse error", http_status=400) from None
            if not isinstance(body, dict):
                raise JsonRpcError(INVALID_REQUEST, "Invalid request", http_status=400)
            rpc_id = body.get("id")
            method = body.get("method")
            if not isinstance(method, str) or not method:
                raise JsonRpcError(INVALID_REQUEST, "Invalid request")
            if _is_notification(method):
                return Response(status_code=204)
            params = body.get("params")
            if params is None:
                params = {}
            elif not isinstance(params, dict):
                raise JsonRpcError(INVALID_PARAMS, "Invalid params")
            handler = rpc_methods.get(method)
            if handler is None:
                raise JsonRpcError(METHOD_NOT_FOUND, "Method not found")
            result = await handler(params, request_id)
        except JsonRpcError as exc:
            logger.debug(
                "mcp method=%s id=%s error_code=%s",
                method,
                rpc_id,
                exc.code,
                extra={"request_id": request_id, "error": exc.code},
            )
            return JSONResponse(
                status_code=exc.http_status,
                content=_jsonrpc_error_payload(rpc_id, exc.code, exc.message),
            )
        logger.debug("mcp method=%s id=%s outcome=success", method, rpc_id, extra={"request_id": request_id})
        return JSONResponse(content=_jsonrpc_success_payload(rpc_id, result))

    return app


app = create_app()

# Run with: uvicorn satstream_mcp.server:app
