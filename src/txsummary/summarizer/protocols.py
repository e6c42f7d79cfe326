"""Protocol display names derived from contract display names."""

# (substring of contract name, protocol display name). First match wins.
PROTOCOL_NAMES: tuple[tuple[str, str], ...] = (
    ("Morpho", "Morpho"),
    ("Aave", "Aave"),
    ("Spark", "Spark"),
    ("Compound", "Compound"),
    ("Uniswap", "Uniswap"),
    ("SushiSwap", "SushiSwap"),
    ("PancakeSwap", "PancakeSwap"),
    ("Curve", "Curve"),
    ("Balancer", "Balancer"),
    ("1inch", "1inch"),
    ("Pendle", "Pendle"),
    ("Lido", "Lido"),
    ("Seaport", "OpenSea"),
    ("OpenSea", "OpenSea"),
    ("Blur", "Blur"),
    ("Optimism", "Optimism Bridge"),
    ("Arbitrum", "Arbitrum Bridge"),
    ("Across", "Across"),
    ("CCTP", "Circle CCTP"),
)


def protocol_name(contract_name: str | None) -> str | None:
    """"Aave V3 Pool" -> "Aave", "Morpho Steakhouse USDC Vault" -> "Morpho". Unmatched names pass through."""
    if not contract_name:
        return None
    lowered = contract_name.lower()
    for needle, display in PROTOCOL_NAMES:
        if needle.lower() in lowered:
            return display
    return contract_name
