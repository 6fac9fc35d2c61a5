"""Minimal sanity checks for the Satstream MCP tools against the live API."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from satstream_mcp import dispatcher  # noqa: E402
from satstream_mcp.config import default_config, require_credential  # noqa: E402
from satstream_mcp.satstream_api import SatstreamApiClient  # noqa: E402

# Satoshi's genesis coinbase address; override via env.
SAMPLE_ADDRESS = os.getenv("SATSTREAM_SAMPLE_ADDRESS", "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa")
# Opt-in to the heavier paginated listings.
RUN_LISTINGS = os.getenv("RUN_LISTING_SANITY", "false").lower() in {"1", "true", "yes"}


async def main() -> None:
    credential = require_credential(default_config)
    client = SatstreamApiClient(default_config)

    async def show(label: str, tool: str, args: dict | None = None) -> None:
        result = await dispatcher.call_tool(tool, args or {}, credential=credential, client=client)
        print(f"{label}:", dispatcher.render_result_text(result))

    try:
        await show("Status", "status_get")
        await show("Blockchain info", "blockchain_info")
        await show("Latest block height", "latest_block_height_get")
        await show("Genesis block hash", "blockhash_by_height_get", {"block_height": 0})
        await show("Validate address", "address_validate", {"address": SAMPLE_ADDRESS})
        await show("Balance", "address_balance_get", {"address": SAMPLE_ADDRESS})
        await show("Mempool info", "mempool_info_get")

        if RUN_LISTINGS:
            await show("Deltas (page_size=5)", "address_deltas_get", {"address": SAMPLE_ADDRESS, "page_size": 5})
            await show("Latest runes", "runes_latest_get")
            await show("Latest inscriptions", "inscriptions_latest_get")
    finally:
        await client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
