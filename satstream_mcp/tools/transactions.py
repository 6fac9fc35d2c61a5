"""Transaction and output endpoints."""

from __future__ import annotations

from satstream_mcp.catalogue import EndpointDescriptor, path_param

TXID = path_param("txid", description="Transaction ID")

ENDPOINTS = (
    EndpointDescriptor(
        name="transaction_get",
        description=(
            "Get detailed information about a specific Bitcoin transaction by its transaction ID "
            "(txid). Use this to retrieve comprehensive data about inputs, outputs, fees, and "
            "confirmation status."
        ),
        path="/transaction/{txid}",
        path_params=(TXID,),
    ),
    EndpointDescriptor(
        name="tx_raw_decode_get",
        description=(
            "Get a raw Bitcoin transaction with basic decoded information by its transaction ID. "
            "This provides the transaction structure and decoded script data."
        ),
        path="/tx/{txid}/raw/decode",
        path_params=(TXID,),
    ),
    EndpointDescriptor(
        name="tx_raw_hex_get",
        description=(
            "Get the raw hexadecimal representation of a Bitcoin transaction by its transaction "
            "ID. This provides the complete serialized transaction data in hexadecimal format."
        ),
        path="/tx/{txid}/raw/hex",
        path_params=(TXID,),
    ),
    EndpointDescriptor(
        name="tx_raw_prevout_get",
        description=(
            "Get a raw Bitcoin transaction with prevout information by its transaction ID. This "
            "provides the transaction with details about the previous outputs being spent."
        ),
        path="/tx/{txid}/raw/prevout",
        path_params=(TXID,),
    ),
    EndpointDescriptor(
        name="output_get",
        description=(
            "Get detailed information about a specific Bitcoin UTXO (unspent transaction output) "
            "by its outpoint in the format 'txid:vout'. Use this to retrieve spend status, value, "
            "and script details of an output."
        ),
        path="/output/{outpoint}",
        path_params=(path_param("outpoint", description="Outpoint in the form txid:vout"),),
    ),
)
