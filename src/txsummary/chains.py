"""Supported EVM chains: RPC endpoints, native symbol and block explorer."""

from pydantic import BaseModel, ConfigDict

from txsummary.exceptions import UnknownChainError


class ChainConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    chain_id: int
    native_symbol: str = "ETH"
    rpc_urls: tuple[str, ...]
    explorer_url: str | None = None

    @property
    def default_rpc(self) -> str:
        return self.rpc_urls[0]


_ETHEREUM = ChainConfig(
    name="Ethereum",
    chain_id=1,
    rpc_urls=(
        "https://eth.llamarpc.com",
        "https://rpc.ankr.com/eth",
        "https://ethereum.publicnode.com",
    ),
    explorer_url="https://etherscan.io",
)

CHAINS: dict[str, ChainConfig] = {
    "ethereum": _ETHEREUM,
    "mainnet": _ETHEREUM,
    "katana": ChainConfig(
        name="Katana",
        chain_id=17777,
        rpc_urls=("https://rpc.katana.network",),
        explorer_url="https://explorer.katana.network",
    ),
    "arbitrum": ChainConfig(
        name="Arbitrum One",
        chain_id=42161,
        rpc_urls=("https://arb1.arbitrum.io/rpc", "https://arbitrum-one.publicnode.com"),
        explorer_url="https://arbiscan.io",
    ),
    "optimism": ChainConfig(
        name="OP Mainnet",
        chain_id=10,
        rpc_urls=("https://mainnet.optimism.io", "https://optimism.publicnode.com"),
        explorer_url="https://optimistic.etherscan.io",
    ),
    "base": ChainConfig(
        name="Base",
        chain_id=8453,
        rpc_urls=("https://mainnet.base.org", "https://base.publicnode.com"),
        explorer_url="https://basescan.org",
    ),
    "polygon": ChainConfig(
        name="Polygon",
        chain_id=137,
        native_symbol="MATIC",
        rpc_urls=("https://polygon-rpc.com", "https://polygon-bor.publicnode.com"),
        explorer_url="https://polygonscan.com",
    ),
}


def supported_chains() -> list[str]:
    return list(CHAINS)


def get_chain(name: str) -> ChainConfig:
    """Case-insensitive lookup. Raises UnknownChainError listing supported names."""
    config = CHAINS.get(name.lower())
    if config is None:
        raise UnknownChainError(name, supported_chains())
    return config


def explorer_url(chain: str, tx_hash: str) -> str:
    """Explorer link for a transaction, or "" when the chain has none."""
    config = CHAINS.get(chain.lower())
    if config is None or not config.explorer_url:
        return ""
    return f"{config.explorer_url}/tx/{tx_hash}"
