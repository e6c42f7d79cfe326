import pytest

from txsummary.chains import CHAINS, explorer_url, get_chain, supported_chains
from txsummary.exceptions import UnknownChainError

TX_HASH = "0x" + "ab" * 32


class TestGetChain:
    def test_case_insensitive(self):
        assert get_chain("Ethereum").chain_id == 1
        assert get_chain("KATANA").chain_id == 17777

    def test_mainnet_alias(self):
        assert get_chain("mainnet") == get_chain("ethereum")

    def test_unknown_chain_lists_supported(self):
        with pytest.raises(UnknownChainError) as exc:
            get_chain("solana")
        assert "Unknown chain: solana" in str(exc.value)
        assert "ethereum" in str(exc.value)
        assert exc.value.supported == supported_chains()

    def test_polygon_native_symbol(self):
        assert get_chain("polygon").native_symbol == "MATIC"

    def test_every_chain_has_rpc(self):
        for name, config in CHAINS.items():
            assert config.rpc_urls, name
            assert config.default_rpc.startswith("https://")


class TestExplorerUrl:
    def test_katana(self):
        assert explorer_url("katana", TX_HASH) == f"https://explorer.katana.network/tx/{TX_HASH}"

    def test_unknown_chain_empty(self):
        assert explorer_url("nope", TX_HASH) == ""
