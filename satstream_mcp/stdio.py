"""stdio transport built on the MCP Python SDK's low-level server."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from satstream_mcp import MCP_SERVER_NAME, __version__, dispatcher
from satstream_mcp.catalogue import Catalogue
from satstream_mcp.config import ApiCredential
from satstream_mcp.satstream_api import SatstreamApiClient, default_client
from satstream_mcp.tools import DEFAULT_CATALOGUE

logger = logging.getLogger(__name__)


class ToolCallFailed(Exception):
    """Raised from the call handler so the SDK marks the result ``isError``."""


def tool_definitions(catalogue: Catalogue = DEFAULT_CATALOGUE) -> List[Tool]:
    return [
        Tool(
            name=descriptor.name,
            description=descriptor.description,
            inputSchema=descriptor.input_schema,
        )
        for descriptor in catalogue
    ]


async def handle_call(
    name: str,
    arguments: Optional[Dict[str, Any]],
    *,
    credential: ApiCredential,
    catalogue: Catalogue = DEFAULT_CATALOGUE,
    client: SatstreamApiClient = default_client,
) -> List[TextContent]:
    result = await dispatcher.call_tool(
        name, arguments, credential=credential, catalogue=catalogue, client=client
    )
    text = dispatcher.render_result_text(result)
    if not result.ok:
        raise ToolCallFailed(text)
    return [TextContent(type="text", text=text)]


def build_server(
    credential: ApiCredential,
    *,
    catalogue: Catalogue = DEFAULT_CATALOGUE,
    client: SatstreamApiClient = default_client,
) -> Server:
    server = Server(MCP_SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return tool_definitions(catalogue)

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        return await handle_call(
            name, arguments, credential=credential, catalogue=catalogue, client=client
        )

    return server


async def serve(
    credential: ApiCredential,
    *,
    catalogue: Catalogue = DEFAULT_CATALOGUE,
    client: SatstreamApiClient = default_client,
) -> None:
    """Serve the catalogue over stdin/stdout until the client disconnects."""
    server = build_server(credential, catalogue=catalogue, client=client)
    logger.info("MCP stdio server running (Satstream API proxy, %d tools)", len(catalogue))
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await client.aclose()
