"""LLM-facing tool catalogue, one module per Satstream API area."""

from satstream_mcp.catalogue import Catalogue

from . import address, blocks, inscriptions, mempool, runes, status, transactions
from . import validators

DEFAULT_CATALOGUE = Catalogue.from_descriptors(
    address.ENDPOINTS,
    blocks.ENDPOINTS,
    transactions.ENDPOINTS,
    inscriptions.ENDPOINTS,
    runes.ENDPOINTS,
    mempool.ENDPOINTS,
    status.ENDPOINTS,
)

__all__ = [
    "DEFAULT_CATALOGUE",
    "address",
    "blocks",
    "inscriptions",
    "mempool",
    "runes",
    "status",
    "transactions",
    "validators",
]
