"""
Command-line entry point.

    python -m satstream_mcp [API_KEY] [--transport stdio|http]

The API key is taken from ``SATSTREAM_API_KEY`` or, failing that, the first
positional argument. Without one the process exits before any tool is served.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from satstream_mcp.config import default_config, load_api_key, require_credential
from satstream_mcp.errors import StartupConfigError
from satstream_mcp.logging_config import configure_logging
from satstream_mcp.satstream_api import SatstreamApiClient

logger = logging.getLogger("satstream_mcp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="satstream-mcp",
        description="Read-only MCP server proxying the Satstream Bitcoin API.",
    )
    parser.add_argument("api_key", nargs="?", help="Satstream API key (SATSTREAM_API_KEY wins if set)")
    parser.add_argument("--transport", choices=("stdio", "http"), default="stdio")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address for --transport http")
    parser.add_argument("--port", type=int, default=8000, help="Port for --transport http")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(default_config)

    config = replace(default_config, api_key=load_api_key(args.api_key))
    try:
        credential = require_credential(config)
    except StartupConfigError as exc:
        logger.error("Startup aborted: %s", exc)
        return 1

    if args.transport == "http":
        import uvicorn

        from satstream_mcp.server import create_app

        uvicorn.run(create_app(config), host=args.host, port=args.port)
        return 0

    from satstream_mcp import stdio

    asyncio.run(stdio.serve(credential, client=SatstreamApiClient(config)))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
