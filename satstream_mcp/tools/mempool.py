"""Mempool endpoints."""

from __future__ import annotations

from satstream_mcp.catalogue import NO_ARGUMENTS, EndpointDescriptor, query_param

ENDPOINTS = (
    EndpointDescriptor(
        name="mempool_info_get",
        description=(
            "Get current Bitcoin mempool statistics including size, transaction count, and fee "
            "estimates. Use this to understand the current state of unconfirmed transactions."
        ),
        path="/mempool/info",
        ignored_params=NO_ARGUMENTS,
    ),
    EndpointDescriptor(
        name="mempool_transactions_get",
        description=(
            "List unconfirmed transactions in the Bitcoin mempool with pagination. Use this to "
            "monitor incoming transactions before they are included in a block."
        ),
        path="/mempool/transactions",
        query_params=(
            query_param("page_size", "integer", "Number of transactions per page"),
            query_param("cursor", description="Pagination cursor returned by a previous page"),
        ),
    ),
)
