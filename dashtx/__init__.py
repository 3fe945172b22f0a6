"""
dashtx: consensus serialization for Dash special transaction payloads

Packages:
    -core: byte streams, exceptions, consensus constants, logging, the Serializable base
    -data: CompactSize, fixed bitsets, IP/port and fixed-width byte codecs
    -crypto: double SHA256 and the nominal hash and BLS types
    -tx: outpoints, inputs, outputs and the special transaction type tags
    -special: the special payloads and the TransactionPayload union
    -chain: the transaction envelope
    -ephemeral: InstantLock
"""
__version__ = "0.1.0"
