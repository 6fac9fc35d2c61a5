"""
Tool dispatch shared by the stdio and HTTP transports.

Tools are generated from the endpoint catalogue. ``call_tool`` looks up the
descriptor, validates the argument shapes, hands off to the proxy client and
always returns exactly one ``ProxyResult``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from satstream_mcp.catalogue import Catalogue
from satstream_mcp.config import ApiCredential
from satstream_mcp.errors import InvalidArgumentsError, SatstreamMcpError, UnknownToolError
from satstream_mcp.metrics import default_metrics
from satstream_mcp.satstream_api import ProxyFailure, ProxyResult, SatstreamApiClient, default_client
from satstream_mcp.tools import DEFAULT_CATALOGUE
from satstream_mcp.tools.validators import validate_arguments

logger = logging.getLogger(__name__)


def list_tools(catalogue: Catalogue = DEFAULT_CATALOGUE) -> List[Dict[str, Any]]:
    """Return a simple list of available tools."""
    return [
        {
            "name": descriptor.name,
            "description": descriptor.description,
            "params": descriptor.params_summary(),
            "inputSchema": descriptor.input_schema,
        }
        for descriptor in catalogue
    ]


def _log_tool_result(tool_name: str, result: ProxyResult, request_id: Optional[str] = None) -> None:
    if result.ok:
        logger.info(
            "tool=%s outcome=success request_id=%s",
            tool_name,
            request_id,
            extra={"tool": tool_name, "request_id": request_id},
        )
        default_metrics.record_tool(tool_name, success=True)
        return
    logger.warning(
        "tool=%s outcome=error error=%s request_id=%s",
        tool_name,
        result.code,
        request_id,
        extra={"tool": tool_name, "request_id": request_id, "error": result.code},
    )
    default_metrics.record_tool(tool_name, success=False, error_code=result.code)


async def call_tool(
    tool_name: str,
    params: Optional[Dict[str, Any]] = None,
    *,
    credential: ApiCredential,
    catalogue: Catalogue = DEFAULT_CATALOGUE,
    client: SatstreamApiClient = default_client,
    request_id: Optional[str] = None,
) -> ProxyResult:
    """Dispatch to a tool by name."""
    result: ProxyResult
    try:
        descriptor = catalogue.lookup(tool_name)
        arguments = validate_arguments(descriptor, params)
    except (UnknownToolError, InvalidArgumentsError) as exc:
        result = ProxyFailure(exc)
    else:
        try:
            result = await client.invoke(descriptor, arguments, credential)
        except Exception:
            logger.exception("Unexpected error calling tool %s", tool_name)
            result = ProxyFailure(SatstreamMcpError("Unexpected error while calling tool."))
    _log_tool_result(tool_name, result, request_id)
    return result


def render_result_text(result: ProxyResult) -> str:
    """Pretty-printed JSON for success payloads and error dicts alike."""
    payload = result.to_dict()
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, indent=2, ensure_ascii=False)


def wrap_tool_result(result: ProxyResult) -> Dict[str, Any]:
    """
    Shape a proxy result into an MCP ``tools/call`` result.
    """
    wrapped: Dict[str, Any] = {"content": [{"type": "text", "text": render_result_text(result)}]}
    payload = result.to_dict()
    # structuredContent must be a JSON object; arrays and scalars stay text-only.
    if isinstance(payload, dict):
        wrapped["structuredContent"] = payload
    if not result.ok:
        wrapped["isError"] = True
    return wrapped
