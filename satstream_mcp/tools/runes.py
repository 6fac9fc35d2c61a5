"""Rune endpoints."""

from __future__ import annotations

from satstream_mcp.catalogue import NO_ARGUMENTS, EndpointDescriptor, path_param

ENDPOINTS = (
    EndpointDescriptor(
        name="rune_get",
        description=(
            "Retrieve information about a specific Bitcoin Rune by name or ID (e.g., "
            "\"UNCOMMON•GOODS\" or \"1:0\"). Use this to get details about a specific rune "
            "token, including supply, minting status, and transactions."
        ),
        path="/rune/{identifier}",
        path_params=(path_param("identifier", description="Rune name or ID"),),
    ),
    EndpointDescriptor(
        name="runes_latest_get",
        description=(
            "Retrieve information about the last 100 inscribed Bitcoin Runes (first page). Use "
            "this to get an overview of the most recently created rune tokens on the Bitcoin "
            "blockchain."
        ),
        path="/runes",
        ignored_params=NO_ARGUMENTS,
    ),
    EndpointDescriptor(
        name="runes_page_get",
        description=(
            "Retrieve a specific page of 100 inscribed Bitcoin Runes. Use this for paginated access "
            "to the complete list of rune tokens on the blockchain."
        ),
        path="/runes/{page}",
        path_params=(path_param("page", "integer", "Page number"),),
    ),
)
