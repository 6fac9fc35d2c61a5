"""
Read-only Satstream MCP server package.

This package exposes LLM-friendly tools that proxy the Satstream Bitcoin REST
API (addresses, blocks, transactions, inscriptions, runes, mempool, status).
See DESIGN.md for full details.
"""

__version__ = "1.0.0"
MCP_SERVER_NAME = "satstream-bitcoin-mcp-server"

__all__ = ["MCP_SERVER_NAME", "__version__", "config"]
