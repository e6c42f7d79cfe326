"""Data types for the decode stage: raw RPC inputs and the normalized record."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from txsummary.decoder.codec import is_empty_hex, parse_quantity
from txsummary.domain.enums import NFTStandard, TxStatus

_SUCCESS_STATUSES = {"0x1", "1", "success"}
_FAILED_STATUSES = {"0x0", "0", "failed", "reverted", "failure"}


class LogRecord(BaseModel):
    """One emitted event: emitting address, indexed topic words, opaque data."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    address: str
    topics: tuple[str, ...] = ()
    data: str = "0x"

    @field_validator("data", mode="before")
    @classmethod
    def _default_data(cls, v: Any) -> Any:
        return "0x" if v is None else v


class RawTransaction(BaseModel):
    """Transaction as returned by eth_getTransactionByHash (hex quantities accepted)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    hash: str
    from_address: str = Field(alias="from")
    to_address: str | None = Field(default=None, alias="to")  # None = contract creation
    value: int = 0
    input: str = "0x"
    gas_price: int | None = Field(default=None, alias="gasPrice")
    nonce: int | None = None
    block_number: int | None = Field(default=None, alias="blockNumber")

    @field_validator("value", "gas_price", "nonce", "block_number", mode="before")
    @classmethod
    def _parse_quantity(cls, v: Any) -> Any:
        return parse_quantity(v)

    @field_validator("to_address", mode="before")
    @classmethod
    def _empty_to_none(cls, v: Any) -> Any:
        return v or None

    @field_validator("input", mode="before")
    @classmethod
    def _default_input(cls, v: Any) -> Any:
        return "0x" if is_empty_hex(v) else v


class Receipt(BaseModel):
    """Execution receipt (eth_getTransactionReceipt)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    status: bool
    logs: tuple[LogRecord, ...] = ()
    gas_used: int | None = Field(default=None, alias="gasUsed")
    effective_gas_price: int | None = Field(default=None, alias="effectiveGasPrice")

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, v: Any) -> Any:
        if isinstance(v, str):
            lowered = v.lower()
            if lowered in _SUCCESS_STATUSES:
                return True
            if lowered in _FAILED_STATUSES:
                return False
            raise ValueError(f"unrecognized receipt status: {v!r}")
        return v

    @field_validator("gas_used", "effective_gas_price", mode="before")
    @classmethod
    def _parse_quantity(cls, v: Any) -> Any:
        return parse_quantity(v)


class Transfer(BaseModel):
    """A fungible (ERC20) value movement extracted from a Transfer log."""

    model_config = ConfigDict(frozen=True)

    token: str  # emitting token contract
    symbol: str
    name: str | None = None
    from_address: str
    to_address: str
    amount: str  # raw_amount / 10**decimals as an exact decimal string
    raw_amount: int = Field(ge=0)
    decimals: int = 18

    @field_serializer("raw_amount", when_used="json")
    def _raw_amount_as_str(self, v: int) -> str:
        return str(v)


class NFTTransfer(BaseModel):
    """A non-fungible (ERC721) or semi-fungible (ERC1155) movement."""

    model_config = ConfigDict(frozen=True)

    contract: str
    contract_name: str | None = None
    token_id: str  # decimal string, ids routinely exceed 64 bits
    from_address: str
    to_address: str
    quantity: int = Field(default=1, ge=1)
    standard: NFTStandard

    @field_serializer("quantity", when_used="json")
    def _quantity_as_str(self, v: int) -> str:
        return str(v)


class DecodedTransaction(BaseModel):
    """Normalized view of one transaction, built once and handed to the summarizer."""

    model_config = ConfigDict(frozen=True)

    hash: str
    from_address: str
    to_address: str | None = None
    value: int = 0
    function_name: str | None = None
    function_signature: str | None = None
    contract_name: str | None = None
    is_contract_creation: bool = False
    status: TxStatus
    transfers: tuple[Transfer, ...] = ()
    nft_transfers: tuple[NFTTransfer, ...] = ()
    gas_used: int | None = None
    gas_price: int | None = None

    @property
    def gas_cost(self) -> int | None:
        """Fee paid in wei, when both gas used and price are known."""
        if self.gas_used is None or self.gas_price is None:
            return None
        return self.gas_used * self.gas_price
