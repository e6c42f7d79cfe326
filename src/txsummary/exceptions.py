"""Exception hierarchy. The decode/summarize core never raises these; they belong to the I/O layers."""


class TxSummaryError(Exception):
    """Base for all txsummary errors."""


class ExternalServiceError(TxSummaryError):
    """RPC node unreachable, rate-limited or returned a JSON-RPC error. Retriable."""


class TransactionNotFoundError(TxSummaryError):
    def __init__(self, tx_hash: str) -> None:
        super().__init__(f"Transaction not found: {tx_hash}")
        self.tx_hash = tx_hash


class UnknownChainError(TxSummaryError):
    def __init__(self, chain: str, supported: list[str]) -> None:
        super().__init__(f"Unknown chain: {chain}. Supported: {', '.join(supported)}")
        self.chain = chain
        self.supported = supported


class InvalidTransactionHashError(TxSummaryError):
    def __init__(self, tx_hash: str) -> None:
        super().__init__(f"Invalid transaction hash format: {tx_hash} (expected 0x followed by 64 hex characters)")
        self.tx_hash = tx_hash
