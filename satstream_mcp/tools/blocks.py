"""Block and chain-tip endpoints."""

from __future__ import annotations

from satstream_mcp.catalogue import NO_ARGUMENTS, EndpointDescriptor, path_param

IDENTIFIER = path_param("identifier", description="Block hash or height")
BLOCK_HEIGHT = path_param("block_height", "integer", "Block height")

ENDPOINTS = (
    EndpointDescriptor(
        name="block_get",
        description=(
            "Get detailed information about a specific Bitcoin block by its hash or height. Use "
            "this to retrieve block header data, transaction IDs, and mining details."
        ),
        path="/block/{identifier}",
        path_params=(IDENTIFIER,),
    ),
    EndpointDescriptor(
        name="blocks_get",
        description=(
            "Get information about the last 100 Bitcoin blocks. Use this for obtaining an overview "
            "of recent blockchain activity including block heights, hashes, and timestamps."
        ),
        path="/blocks",
        ignored_params=NO_ARGUMENTS,
    ),
    EndpointDescriptor(
        name="block_raw_hex_get",
        description=(
            "Get the raw hexadecimal representation of a specific Bitcoin block by its hash or "
            "height. This provides the complete serialized block data in hexadecimal format."
        ),
        path="/block/raw/{identifier}/hex",
        path_params=(IDENTIFIER,),
    ),
    EndpointDescriptor(
        name="block_raw_decoded_get",
        description=(
            "Get the full decoded (verbose) representation of a specific Bitcoin block by its hash "
            "or height. This provides extensive details about the block structure and contained "
            "transactions."
        ),
        path="/block/raw/{identifier}/decoded",
        path_params=(IDENTIFIER,),
    ),
    EndpointDescriptor(
        name="block_raw_prevout_get",
        description=(
            "Get the full decoded representation of a specific Bitcoin block with prevout "
            "information by its hash or height. This provides extensive details about the block "
            "including input and output data."
        ),
        path="/block/raw/{identifier}/prevout",
        path_params=(IDENTIFIER,),
    ),
    EndpointDescriptor(
        name="block_raw_summary_get",
        description=(
            "Get a summary of a specific Bitcoin block by its hash or height. This provides a "
            "condensed view of block data without full transaction details."
        ),
        path="/block/raw/{identifier}/summary",
        path_params=(IDENTIFIER,),
    ),
    EndpointDescriptor(
        name="blockchain_info",
        description=(
            "Get current blockchain information including chain height, latest block details, and "
            "network status. Use this for obtaining overall Bitcoin network statistics."
        ),
        path="/blockchain/info",
        ignored_params=NO_ARGUMENTS,
    ),
    EndpointDescriptor(
        name="block_count_get",
        description=(
            "Get the current block height of the Bitcoin blockchain. This returns the height of "
            "the latest block that has been processed."
        ),
        path="/blockcount",
        ignored_params=NO_ARGUMENTS,
    ),
    EndpointDescriptor(
        name="latest_blockhash_get",
        description=(
            "Get the hash of the latest block in the Bitcoin blockchain. Use this to retrieve the "
            "most recent block hash."
        ),
        path="/blockhash",
        ignored_params=NO_ARGUMENTS,
    ),
    EndpointDescriptor(
        name="blockhash_by_height_get",
        description=(
            "Get the hash of a specific Bitcoin block by its height. Use this to convert a block "
            "height to its corresponding block hash."
        ),
        path="/blockhash/{block_height}",
        path_params=(BLOCK_HEIGHT,),
    ),
    EndpointDescriptor(
        name="latest_block_height_get",
        description=(
            "Get the current height of the Bitcoin blockchain. This returns the height of the "
            "latest block that has been processed."
        ),
        path="/blockheight",
        ignored_params=NO_ARGUMENTS,
    ),
    EndpointDescriptor(
        name="latest_blocktime_get",
        description=(
            "Get the timestamp of the latest block in the Bitcoin blockchain. This returns the "
            "UNIX timestamp of when the latest block was mined."
        ),
        path="/blocktime",
        ignored_params=NO_ARGUMENTS,
    ),
)
