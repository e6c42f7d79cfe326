from txsummary.decoder.logs import extract_transfers
from txsummary.decoder.transaction import decode_tx
from txsummary.decoder.types import (
    DecodedTransaction,
    LogRecord,
    NFTTransfer,
    RawTransaction,
    Receipt,
    Transfer,
)

__all__ = [
    "DecodedTransaction",
    "LogRecord",
    "NFTTransfer",
    "RawTransaction",
    "Receipt",
    "Transfer",
    "decode_tx",
    "extract_transfers",
]
