"""Fungible token metadata for well-known ERC20s (all addresses lowercase)."""

from txsummary.registry.types import TokenInfo

KNOWN_TOKENS: dict[str, TokenInfo] = {
    # Stablecoins
    "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48": TokenInfo("USDC", 6, "USD Coin"),
    "0xdac17f958d2ee523a2206206994597c13d831ec7": TokenInfo("USDT", 6, "Tether USD"),
    "0x6b175474e89094c44da98b954eedeac495271d0f": TokenInfo("DAI", 18, "Dai Stablecoin"),
    "0x4c9edd5852cd905f086c759e8383e09bff1e68b3": TokenInfo("USDe", 18, "Ethena USDe"),

    # ETH and derivatives
    "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2": TokenInfo("WETH", 18, "Wrapped Ether"),
    "0xae7ab96520de3a18e5e111b5eaab095312d7fe84": TokenInfo("stETH", 18, "Lido Staked ETH"),
    "0x7f39c581f595b53c5cb19bd0b3f8da6c935e2ca0": TokenInfo("wstETH", 18, "Wrapped liquid staked Ether 2.0"),
    "0xae78736cd615f374d3085123a210448e74fc6393": TokenInfo("rETH", 18, "Rocket Pool ETH"),
    "0xbe9895146f7af43049ca1c1ae358b0541ea49704": TokenInfo("cbETH", 18, "Coinbase Wrapped Staked ETH"),

    # BTC
    "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599": TokenInfo("WBTC", 8, "Wrapped BTC"),

    # Governance / DeFi
    "0x514910771af9ca656af840dff83e8264ecf986ca": TokenInfo("LINK", 18, "ChainLink Token"),
    "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984": TokenInfo("UNI", 18, "Uniswap"),
    "0x7fc66500c84a76ad7e9c93437bfc5ac33e2ddae9": TokenInfo("AAVE", 18, "Aave Token"),
    "0x9f8f72aa9304c8b593d555f12ef6589cc3a579a2": TokenInfo("MKR", 18, "Maker"),
    "0xd533a949740bb3306d119cc777fa900ba034cd52": TokenInfo("CRV", 18, "Curve DAO Token"),
    "0x5a98fcbea516cf06857215779fd812ca3bef1b32": TokenInfo("LDO", 18, "Lido DAO Token"),

    # Aave V3 aTokens
    "0x98c23e9d8f34fefb1b7bd6a91b7ff122f4e16f5c": TokenInfo("aEthUSDC", 6, "Aave Ethereum USDC"),
    "0x4d5f47fa6a74757f35c14fd3a6ef8e3c9bc514e8": TokenInfo("aEthWETH", 18, "Aave Ethereum WETH"),

    # Memecoins
    "0x6982508145454ce325ddbe47a25d4ec3d2311933": TokenInfo("PEPE", 18, "Pepe"),
    "0x95ad61b0a150d79219dcf64e1e6cc01f0b64c4ce": TokenInfo("SHIB", 18, "SHIBA INU"),
}
