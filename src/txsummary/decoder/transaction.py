"""Transaction Decoder — selector + contract lookup + log decoding into one record."""

from txsummary.decoder.codec import is_empty_hex
from txsummary.decoder.logs import extract_transfers
from txsummary.decoder.types import DecodedTransaction, RawTransaction, Receipt
from txsummary.domain.enums import TxStatus
from txsummary.registry import NATIVE_TRANSFER, ReferenceRegistry, SelectorInfo, build_default_registry

SELECTOR_LENGTH = 10  # "0x" + 4 bytes


def decode_selector(input_data: str, registry: ReferenceRegistry) -> SelectorInfo | None:
    """Resolve the called function from calldata. Empty calldata resolves to the native-transfer entry."""
    if is_empty_hex(input_data):
        return registry.lookup_selector(NATIVE_TRANSFER)
    if len(input_data) < SELECTOR_LENGTH:
        return None
    return registry.lookup_selector(input_data[:SELECTOR_LENGTH].lower())


def decode_tx(
    tx: RawTransaction,
    receipt: Receipt | None = None,
    registry: ReferenceRegistry | None = None,
) -> DecodedTransaction:
    """Build the normalized record for one transaction. Without a receipt the status is pending."""
    registry = registry or build_default_registry()

    selector_info = decode_selector(tx.input, registry)
    contract_name = registry.contract_name(tx.to_address) if tx.to_address else None

    if receipt is None:
        status = TxStatus.PENDING
        transfers, nft_transfers = [], []
    else:
        status = TxStatus.SUCCESS if receipt.status else TxStatus.FAILED
        transfers, nft_transfers = extract_transfers(receipt.logs, registry)

    gas_price = tx.gas_price
    if gas_price is None and receipt is not None:
        gas_price = receipt.effective_gas_price

    return DecodedTransaction(
        hash=tx.hash,
        from_address=tx.from_address,
        to_address=tx.to_address,
        value=tx.value,
        function_name=selector_info.name if selector_info else None,
        function_signature=selector_info.signature if selector_info else None,
        contract_name=contract_name,
        is_contract_creation=tx.to_address is None,
        status=status,
        transfers=tuple(transfers),
        nft_transfers=tuple(nft_transfers),
        gas_used=receipt.gas_used if receipt is not None else None,
        gas_price=gas_price,
    )
