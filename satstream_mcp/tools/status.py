"""API status endpoint."""

from __future__ import annotations

from satstream_mcp.catalogue import NO_ARGUMENTS, EndpointDescriptor

ENDPOINTS = (
    EndpointDescriptor(
        name="status_get",
        description=(
            "Get the current status of the Satstream API server, including uptime, version "
            "information, and performance metrics. Use this to check if the API is functioning "
            "properly."
        ),
        path="/status",
        ignored_params=NO_ARGUMENTS,
    ),
)
