"""Address endpoints: details, balance, deltas, validation and outputs."""

from __future__ import annotations

from satstream_mcp.catalogue import EndpointDescriptor, path_param, query_param

ADDRESS = path_param("address", description="Bitcoin address")

OUTPUT_TYPES = ("any", "cardinal", "inscribed", "runic")

# Shared by the BTC and rune delta listings; cursors are passed through verbatim.
DELTA_PAGINATION = (
    query_param("page_size", "integer", "Number of deltas per page"),
    query_param("start_height", "integer", "Only include deltas at or above this block height"),
    query_param("end_height", "integer", "Only include deltas at or below this block height"),
    query_param("cursor", description="Pagination cursor returned by a previous page"),
)

ENDPOINTS = (
    EndpointDescriptor(
        name="address_get",
        description=(
            "Get detailed information about a specific Bitcoin address, including transaction "
            "history and UTXO details. Use this when you need comprehensive data about an address."
        ),
        path="/address/{address}",
        path_params=(ADDRESS,),
    ),
    EndpointDescriptor(
        name="address_balance_get",
        description=(
            "Get the total Bitcoin balance (in satoshis) of an address by summing all its deltas. "
            "Use this when you only need the balance information without the full address details."
        ),
        path="/address/{address}/balance",
        path_params=(ADDRESS,),
    ),
    EndpointDescriptor(
        name="address_deltas_get",
        description=(
            "Get transaction deltas (inputs and outputs) for a specific Bitcoin address with "
            "pagination. Use this to analyze the transaction history of an address with filtering "
            "by block height."
        ),
        path="/address/{address}/deltas",
        path_params=(ADDRESS,),
        query_params=DELTA_PAGINATION,
    ),
    EndpointDescriptor(
        name="address_validate",
        description=(
            "Validate a Bitcoin address and retrieve information about its format, type, and "
            "validity. Use this to check if an address is valid before sending or receiving "
            "transactions."
        ),
        path="/address/{address}/validate",
        path_params=(ADDRESS,),
    ),
    EndpointDescriptor(
        name="address_outputs_get",
        description=(
            "Retrieve UTXOs (unspent transaction outputs) held by a specific Bitcoin address with "
            "optional type filtering. Use this to get detailed information about available UTXOs "
            "for spending or analysis."
        ),
        path="/address/{address}/outputs",
        path_params=(ADDRESS,),
        query_params=(
            query_param("type", description="Output type filter", enum=OUTPUT_TYPES),
        ),
    ),
    EndpointDescriptor(
        name="address_rune_deltas_get",
        description=(
            "Get rune deltas (changes in rune balances) for a specific Bitcoin address with "
            "pagination. Use this to analyze the history of rune token transfers for an address."
        ),
        path="/address/{address}/deltas/runes",
        path_params=(ADDRESS,),
        query_params=DELTA_PAGINATION,
    ),
)
