"""SummaryContext — read-only view over one DecodedTransaction for the summary rules."""

from txsummary.decoder.types import DecodedTransaction, NFTTransfer, Transfer
from txsummary.registry import ReferenceRegistry, build_default_registry
from txsummary.summarizer.formatting import format_address, format_native
from txsummary.summarizer.protocols import protocol_name

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class SummaryContext:
    """Query helpers shared by all rules. Address comparisons are case-insensitive."""

    def __init__(
        self,
        tx: DecodedTransaction,
        native_symbol: str = "ETH",
        registry: ReferenceRegistry | None = None,
    ) -> None:
        self.tx = tx
        self.native_symbol = native_symbol
        self.registry = registry or build_default_registry()
        self._caller = tx.from_address.lower()

    @property
    def caller(self) -> str:
        return self._caller

    @property
    def function_name(self) -> str | None:
        return self.tx.function_name

    @property
    def contract_name(self) -> str | None:
        return self.tx.contract_name

    @property
    def value(self) -> int:
        return self.tx.value

    def is_caller(self, address: str) -> bool:
        return address.lower() == self._caller

    def native_amount(self) -> str:
        return format_native(self.tx.value, self.native_symbol)

    @property
    def target_address(self) -> str:
        """Formatted recipient of the transaction."""
        return format_address(self.tx.to_address) if self.tx.to_address else "new contract"

    @property
    def target_label(self) -> str:
        return self.contract_name or self.target_address

    @property
    def protocol(self) -> str:
        """Protocol display name of the called contract, else its formatted address."""
        return protocol_name(self.contract_name) or self.target_address

    def token_symbol(self, address: str) -> str:
        return self.registry.token_info(address).symbol

    # --- fungible transfers ---

    def peek_transfers(
        self,
        *,
        from_address: str | None = None,
        to_address: str | None = None,
        token: str | None = None,
        exclude_token: str | None = None,
    ) -> list[Transfer]:
        """Matching transfers in emission order."""
        result = []
        for t in self.tx.transfers:
            if from_address is not None and t.from_address.lower() != from_address.lower():
                continue
            if to_address is not None and t.to_address.lower() != to_address.lower():
                continue
            if token is not None and t.token.lower() != token.lower():
                continue
            if exclude_token is not None and t.token.lower() == exclude_token.lower():
                continue
            result.append(t)
        return result

    def first_transfer(self, **filters: str | None) -> Transfer | None:
        matches = self.peek_transfers(**filters)
        return matches[0] if matches else None

    def sent(self) -> list[Transfer]:
        return self.peek_transfers(from_address=self._caller)

    def received(self) -> list[Transfer]:
        return self.peek_transfers(to_address=self._caller)

    # --- NFT transfers ---

    def peek_nfts(
        self,
        *,
        from_address: str | None = None,
        to_address: str | None = None,
    ) -> list[NFTTransfer]:
        result = []
        for n in self.tx.nft_transfers:
            if from_address is not None and n.from_address.lower() != from_address.lower():
                continue
            if to_address is not None and n.to_address.lower() != to_address.lower():
                continue
            result.append(n)
        return result
