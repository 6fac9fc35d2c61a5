"""Ordinals inscription and sat endpoints."""

from __future__ import annotations

from satstream_mcp.catalogue import NO_ARGUMENTS, EndpointDescriptor, path_param

INSCRIPTION_ID = path_param("inscription_id", description="Inscription ID")
PAGE = path_param("page", "integer", "Page number")
BLOCK_HEIGHT = path_param("block_height", "integer", "Block height")

ENDPOINTS = (
    EndpointDescriptor(
        name="ordinals_inscription_get",
        description=(
            "Get information about a specific Bitcoin Ordinals inscription by its ID. Use this to "
            "retrieve metadata about NFT-like inscriptions on Bitcoin, including content type and "
            "ownership details."
        ),
        path="/ordinals/inscription/{inscription_id}",
        path_params=(INSCRIPTION_ID,),
    ),
    EndpointDescriptor(
        name="inscription_child_get",
        description=(
            "Get information about a specific child of a Bitcoin Ordinals inscription. Use this to "
            "retrieve metadata about nested or child inscriptions."
        ),
        path="/inscription/{inscription_id}/{child_index}",
        path_params=(INSCRIPTION_ID, path_param("child_index", "integer", "Child index")),
    ),
    EndpointDescriptor(
        name="inscriptions_latest_get",
        description=(
            "Get the latest Bitcoin Ordinals inscriptions. Use this to retrieve recently created "
            "NFT-like inscriptions on the Bitcoin blockchain."
        ),
        path="/inscriptions",
        ignored_params=NO_ARGUMENTS,
    ),
    EndpointDescriptor(
        name="inscriptions_page_get",
        description=(
            "Get a specific page of Bitcoin Ordinals inscriptions. Use this for paginated access to "
            "the complete list of inscriptions on the blockchain."
        ),
        path="/inscriptions/{page}",
        path_params=(PAGE,),
    ),
    EndpointDescriptor(
        name="inscriptions_block_get",
        description=(
            "Get all Bitcoin Ordinals inscriptions in a specific block. Use this to analyze the "
            "inscriptions created in a particular block height."
        ),
        path="/inscriptions/block/{block_height}",
        path_params=(BLOCK_HEIGHT,),
    ),
    EndpointDescriptor(
        name="inscriptions_block_page_get",
        description=(
            "Get a specific page of Bitcoin Ordinals inscriptions in a particular block. Use this "
            "for paginated access to the inscriptions created in a specific block height."
        ),
        path="/inscriptions/block/{block_height}/{page}",
        path_params=(BLOCK_HEIGHT, PAGE),
    ),
    EndpointDescriptor(
        name="tx_inscriptions_get",
        description=(
            "Get all Bitcoin Ordinals inscriptions contained in a specific transaction. Use this to "
            "analyze the inscriptions created or transferred in a particular transaction."
        ),
        path="/tx/{txid}/inscriptions",
        path_params=(path_param("txid", description="Transaction ID"),),
    ),
    EndpointDescriptor(
        name="sat_get",
        description=(
            "Get information about a specific satoshi by its absolute number (index). Use this to "
            "retrieve details about a particular satoshi, including its rarity, block of creation, "
            "and inscription status."
        ),
        path="/sat/{number}",
        path_params=(path_param("number", "integer", "Absolute sat number"),),
    ),
)
