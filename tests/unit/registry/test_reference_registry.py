import pytest
from eth_utils import keccak

from txsummary.registry import (
    DEFAULT_DECIMALS,
    ReferenceRegistry,
    SelectorInfo,
    TokenInfo,
    build_default_registry,
    placeholder_symbol,
)
from txsummary.registry.selectors import KNOWN_SELECTORS, NATIVE_TRANSFER


class TestReferenceRegistry:
    def test_lookups_are_case_insensitive(self):
        reg = ReferenceRegistry(
            {"0xABCDEF01": SelectorInfo("foo", "foo()")},
            {"0xAAAA000000000000000000000000000000000001": "Thing"},
            {"0xBBBB000000000000000000000000000000000002": TokenInfo("TKN", 8)},
        )
        assert reg.lookup_selector("0xabcdef01").name == "foo"
        assert reg.contract_name("0xaaaa000000000000000000000000000000000001") == "Thing"
        assert reg.token_info("0xbbbb000000000000000000000000000000000002").decimals == 8

    def test_misses_are_not_errors(self):
        reg = ReferenceRegistry({}, {}, {})
        assert reg.lookup_selector("0x12345678") is None
        assert reg.contract_name("0x1234") is None
        assert reg.token_info("0x1234").decimals == DEFAULT_DECIMALS

    def test_unknown_token_placeholder(self):
        reg = ReferenceRegistry({}, {}, {})
        info = reg.token_info("0x1234567890abcdef1234567890abcdef12345678")
        assert info.symbol == "0x1234…"
        assert info.decimals == DEFAULT_DECIMALS
        assert info.name is None

    def test_tables_are_read_only(self):
        reg = build_default_registry()
        with pytest.raises(TypeError):
            reg.tokens["0xdead"] = TokenInfo("X", 1)  # type: ignore[index]
        with pytest.raises(TypeError):
            reg.contracts["0xdead"] = "X"  # type: ignore[index]


class TestDefaultRegistry:
    def test_built_once(self):
        assert build_default_registry() is build_default_registry()

    def test_well_known_entries(self, registry):
        assert registry.token_info("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48") == TokenInfo("USDC", 6, "USD Coin")
        assert registry.token_info("0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2").symbol == "WETH"
        assert registry.contract_name("0x7a250d5630b4cf539739df2c5dacb4c659f2488d") == "Uniswap V2 Router"
        assert registry.lookup_selector("0x095ea7b3").name == "approve"

    def test_selector_keys_well_formed(self):
        for selector, info in KNOWN_SELECTORS.items():
            assert selector == "0x" or (len(selector) == 10 and selector == selector.lower()), selector
            assert info.name

    def test_selector_keys_match_signatures(self, registry):
        for selector, info in registry.selectors.items():
            if selector == NATIVE_TRANSFER:
                continue
            assert "0x" + keccak(text=info.signature).hex()[:8] == selector, info.signature

    def test_morpho_blue_entry_points(self, registry):
        assert registry.lookup_selector("0xa99aad89").name == "supply"
        assert registry.lookup_selector("0xd8eabcb8").name == "liquidate"

    def test_bridge_and_marketplace_entry_points(self, registry):
        assert registry.lookup_selector("0x6fd3504e").name == "depositForBurn"
        assert registry.lookup_selector("0xe11013dd").name == "bridgeETHTo"
        assert registry.lookup_selector("0xa8174404").name == "matchOrders"
        assert registry.lookup_selector("0x93b3774c").name == "transferValueAndprocessRoute"
        assert registry.contract_name("0xbd3fa81b58ba92a82136038b25adec7066af3155") == "Circle CCTP TokenMessenger"

    def test_placeholder_symbol(self):
        assert placeholder_symbol("0xabcdef0000") == "0xabcd…"
