import pytest
from pydantic import ValidationError

from txsummary.decoder import LogRecord, RawTransaction, Receipt, decode_tx
from txsummary.decoder.logs import TRANSFER_TOPIC
from txsummary.decoder.transaction import decode_selector
from txsummary.domain.enums import TxStatus

WALLET = "0x1111111111111111111111111111111111111111"
RECIPIENT = "0x2222222222222222222222222222222222222222"
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
UNI_V2_ROUTER = "0x7a250d5630b4cf539739df2c5dacb4c659f2488d"
TX_HASH = "0x" + "ab" * 32


def _make_tx(**overrides) -> RawTransaction:
    data = {"hash": TX_HASH, "from": WALLET, "to": RECIPIENT, "value": 0, "input": "0x"}
    data.update(overrides)
    return RawTransaction.model_validate(data)


def _topic(address: str) -> str:
    return "0x" + "0" * 24 + address[2:]


class TestDecodeSelector:
    def test_empty_input_is_native_transfer(self, registry):
        info = decode_selector("0x", registry)
        assert info.name == "native transfer"
        assert info.signature == ""

    def test_known_selector_case_insensitive(self, registry):
        info = decode_selector("0xA9059CBB" + "00" * 64, registry)
        assert info.name == "transfer"
        assert info.signature == "transfer(address,uint256)"

    def test_short_input_unresolved(self, registry):
        assert decode_selector("0x1234", registry) is None

    def test_unknown_selector(self, registry):
        assert decode_selector("0xdeadbeef", registry) is None


class TestDecodeTx:
    def test_native_transfer_without_receipt_is_pending(self):
        decoded = decode_tx(_make_tx(value=10**18))

        assert decoded.status == TxStatus.PENDING
        assert decoded.function_name == "native transfer"
        assert decoded.transfers == ()
        assert decoded.nft_transfers == ()
        assert decoded.gas_used is None
        assert decoded.is_contract_creation is False

    def test_contract_creation(self):
        decoded = decode_tx(_make_tx(to=None, input="0x6080604052"))
        assert decoded.is_contract_creation is True
        assert decoded.contract_name is None

    def test_contract_name_resolved(self):
        decoded = decode_tx(_make_tx(to=UNI_V2_ROUTER, input="0x38ed1739" + "00" * 32))
        assert decoded.contract_name == "Uniswap V2 Router"
        assert decoded.function_name == "swapExactTokensForTokens"

    def test_unknown_selector_leaves_names_empty(self):
        decoded = decode_tx(_make_tx(input="0xdeadbeef00"))
        assert decoded.function_name is None
        assert decoded.function_signature is None

    def test_receipt_transfers_and_status(self):
        log = LogRecord(
            address=USDC,
            topics=(TRANSFER_TOPIC, _topic(WALLET), _topic(RECIPIENT)),
            data="0x" + format(500 * 10**6, "064x"),
        )
        receipt = Receipt(status=True, logs=(log,), gas_used=50_000)
        decoded = decode_tx(_make_tx(to=USDC, input="0xa9059cbb"), receipt)

        assert decoded.status == TxStatus.SUCCESS
        assert len(decoded.transfers) == 1
        assert decoded.transfers[0].symbol == "USDC"
        assert decoded.gas_used == 50_000

    def test_failed_receipt(self):
        decoded = decode_tx(_make_tx(value=1), Receipt(status=False))
        assert decoded.status == TxStatus.FAILED

    def test_gas_price_falls_back_to_effective_price(self):
        receipt = Receipt(status=True, gas_used=21_000, effective_gas_price=10**9)
        decoded = decode_tx(_make_tx(), receipt)
        assert decoded.gas_price == 10**9
        assert decoded.gas_cost == 21_000 * 10**9

    def test_gas_cost_unknown_without_receipt(self):
        decoded = decode_tx(_make_tx(gasPrice="0x3b9aca00"))
        assert decoded.gas_price == 10**9
        assert decoded.gas_cost is None

    def test_decoding_is_deterministic(self):
        tx = _make_tx(value=5)
        assert decode_tx(tx) == decode_tx(tx)


class TestRawTransaction:
    def test_parses_rpc_json(self):
        tx = RawTransaction.model_validate({
            "hash": TX_HASH,
            "from": WALLET,
            "to": RECIPIENT,
            "value": "0xde0b6b3a7640000",
            "input": "0x",
            "gasPrice": "0x3b9aca00",
            "nonce": "0x5",
            "blockNumber": "0x10",
            "v": "0x1",
        })
        assert tx.value == 10**18
        assert tx.gas_price == 10**9
        assert tx.nonce == 5
        assert tx.block_number == 16

    def test_empty_input_and_to(self):
        tx = _make_tx(to="", input="")
        assert tx.to_address is None
        assert tx.input == "0x"


class TestReceipt:
    @pytest.mark.parametrize("raw,expected", [
        ("0x1", True),
        ("0x0", False),
        ("success", True),
        ("reverted", False),
        (1, True),
        (0, False),
        (True, True),
    ])
    def test_status_forms(self, raw, expected):
        assert Receipt.model_validate({"status": raw}).status is expected

    def test_unrecognized_status_rejected(self):
        with pytest.raises(ValidationError):
            Receipt.model_validate({"status": "maybe"})

    def test_null_log_data_defaults(self):
        receipt = Receipt.model_validate({
            "status": "0x1",
            "gasUsed": "0x5208",
            "logs": [{"address": USDC, "topics": [], "data": None, "logIndex": "0x0"}],
        })
        assert receipt.gas_used == 21_000
        assert receipt.logs[0].data == "0x"
