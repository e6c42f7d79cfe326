from enum import Enum


class TxStatus(str, Enum):
    """Execution status of a transaction. PENDING means no receipt was available."""

    SUCCESS = "success"
    FAILED = "failed"
    PENDING = "pending"
