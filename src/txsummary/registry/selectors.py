"""Known 4-byte function selectors (first 4 bytes of keccak256 of the signature)."""

from txsummary.registry.types import SelectorInfo

# Pseudo-selector for calls with empty input data
NATIVE_TRANSFER = "0x"
NATIVE_TRANSFER_NAME = "native transfer"

# Seaport 1.5 struct encodings
_SEAPORT_PARAMETERS = (
    "(address,address,(uint8,address,uint256,uint256,uint256)[],"
    "(uint8,address,uint256,uint256,uint256,address)[],uint8,uint256,uint256,bytes32,uint256,bytes32,uint256)"
)
_SEAPORT_ORDER = f"({_SEAPORT_PARAMETERS},bytes)"
_SEAPORT_ADVANCED_ORDER = f"({_SEAPORT_PARAMETERS},uint120,uint120,bytes,bytes)"
_SEAPORT_CRITERIA_RESOLVER = "(uint256,uint8,uint256,uint256,bytes32[])"
_SEAPORT_COMPONENT = "(uint256,uint256)"
_SEAPORT_FULFILLMENT = f"({_SEAPORT_COMPONENT}[],{_SEAPORT_COMPONENT}[])"

KNOWN_SELECTORS: dict[str, SelectorInfo] = {
    # ERC20
    "0xa9059cbb": SelectorInfo("transfer", "transfer(address,uint256)"),
    "0x23b872dd": SelectorInfo("transferFrom", "transferFrom(address,address,uint256)"),
    "0x095ea7b3": SelectorInfo("approve", "approve(address,uint256)"),
    "0xd505accf": SelectorInfo("permit", "permit(address,address,uint256,uint256,uint8,bytes32,bytes32)"),

    # ERC721 / ERC1155
    "0x42842e0e": SelectorInfo("safeTransferFrom", "safeTransferFrom(address,address,uint256)"),
    "0xb88d4fde": SelectorInfo("safeTransferFrom", "safeTransferFrom(address,address,uint256,bytes)"),
    "0xf242432a": SelectorInfo("safeTransferFrom", "safeTransferFrom(address,address,uint256,uint256,bytes)"),
    "0x2eb2c2d6": SelectorInfo("safeBatchTransferFrom", "safeBatchTransferFrom(address,address,uint256[],uint256[],bytes)"),
    "0xa22cb465": SelectorInfo("setApprovalForAll", "setApprovalForAll(address,bool)"),

    # Uniswap V2 Router (and forks)
    "0x7ff36ab5": SelectorInfo("swapExactETHForTokens", "swapExactETHForTokens(uint256,address[],address,uint256)"),
    "0x18cbafe5": SelectorInfo("swapExactTokensForETH", "swapExactTokensForETH(uint256,uint256,address[],address,uint256)"),
    "0x38ed1739": SelectorInfo("swapExactTokensForTokens", "swapExactTokensForTokens(uint256,uint256,address[],address,uint256)"),
    "0xfb3bdb41": SelectorInfo("swapETHForExactTokens", "swapETHForExactTokens(uint256,address[],address,uint256)"),
    "0x8803dbee": SelectorInfo("swapTokensForExactTokens", "swapTokensForExactTokens(uint256,uint256,address[],address,uint256)"),
    "0x4a25d94a": SelectorInfo("swapTokensForExactETH", "swapTokensForExactETH(uint256,uint256,address[],address,uint256)"),
    "0xb6f9de95": SelectorInfo(
        "swapExactETHForTokensSupportingFeeOnTransferTokens",
        "swapExactETHForTokensSupportingFeeOnTransferTokens(uint256,address[],address,uint256)",
    ),
    "0x791ac947": SelectorInfo(
        "swapExactTokensForETHSupportingFeeOnTransferTokens",
        "swapExactTokensForETHSupportingFeeOnTransferTokens(uint256,uint256,address[],address,uint256)",
    ),
    "0x5c11d795": SelectorInfo(
        "swapExactTokensForTokensSupportingFeeOnTransferTokens",
        "swapExactTokensForTokensSupportingFeeOnTransferTokens(uint256,uint256,address[],address,uint256)",
    ),
    "0xe8e33700": SelectorInfo(
        "addLiquidity",
        "addLiquidity(address,address,uint256,uint256,uint256,uint256,address,uint256)",
    ),
    "0xf305d719": SelectorInfo("addLiquidityETH", "addLiquidityETH(address,uint256,uint256,uint256,address,uint256)"),
    "0xbaa2abde": SelectorInfo(
        "removeLiquidity",
        "removeLiquidity(address,address,uint256,uint256,uint256,address,uint256)",
    ),
    "0x02751cec": SelectorInfo("removeLiquidityETH", "removeLiquidityETH(address,uint256,uint256,uint256,address,uint256)"),
    "0x2195995c": SelectorInfo(
        "removeLiquidityWithPermit",
        "removeLiquidityWithPermit(address,address,uint256,uint256,uint256,address,uint256,bool,uint8,bytes32,bytes32)",
    ),
    "0xded9382a": SelectorInfo(
        "removeLiquidityETHWithPermit",
        "removeLiquidityETHWithPermit(address,uint256,uint256,uint256,address,uint256,bool,uint8,bytes32,bytes32)",
    ),
    "0xaf2979eb": SelectorInfo(
        "removeLiquidityETHSupportingFeeOnTransferTokens",
        "removeLiquidityETHSupportingFeeOnTransferTokens(address,uint256,uint256,uint256,address,uint256)",
    ),
    "0x5b0d5984": SelectorInfo(
        "removeLiquidityETHWithPermitSupportingFeeOnTransferTokens",
        "removeLiquidityETHWithPermitSupportingFeeOnTransferTokens("
        "address,uint256,uint256,uint256,address,uint256,bool,uint8,bytes32,bytes32)",
    ),

    # Uniswap V3 SwapRouter
    "0x414bf389": SelectorInfo(
        "exactInputSingle",
        "exactInputSingle((address,address,uint24,address,uint256,uint256,uint256,uint160))",
    ),
    "0xc04b8d59": SelectorInfo("exactInput", "exactInput((bytes,address,uint256,uint256,uint256))"),
    "0xdb3e2198": SelectorInfo(
        "exactOutputSingle",
        "exactOutputSingle((address,address,uint24,address,uint256,uint256,uint256,uint160))",
    ),
    "0xf28c0498": SelectorInfo("exactOutput", "exactOutput((bytes,address,uint256,uint256,uint256))"),

    # Uniswap V3 SwapRouter02
    "0x04e45aaf": SelectorInfo(
        "exactInputSingle",
        "exactInputSingle((address,address,uint24,address,uint256,uint256,uint160))",
    ),
    "0xb858183f": SelectorInfo("exactInput", "exactInput((bytes,address,uint256,uint256))"),
    "0x5023b4df": SelectorInfo(
        "exactOutputSingle",
        "exactOutputSingle((address,address,uint24,address,uint256,uint256,uint160))",
    ),
    "0x09b81346": SelectorInfo("exactOutput", "exactOutput((bytes,address,uint256,uint256))"),
    "0x5ae401dc": SelectorInfo("multicall", "multicall(uint256,bytes[])"),
    "0xac9650d8": SelectorInfo("multicall", "multicall(bytes[])"),
    "0x1f0464d1": SelectorInfo("multicall", "multicall(bytes32,bytes[])"),

    # Uniswap V3 NonfungiblePositionManager
    "0x88316456": SelectorInfo(
        "mint",
        "mint((address,address,uint24,int24,int24,uint256,uint256,uint256,uint256,address,uint256))",
    ),
    "0x219f5d17": SelectorInfo("increaseLiquidity", "increaseLiquidity((uint256,uint256,uint256,uint256,uint256,uint256))"),
    "0x0c49ccbe": SelectorInfo("decreaseLiquidity", "decreaseLiquidity((uint256,uint128,uint256,uint256,uint256))"),
    "0xfc6f7865": SelectorInfo("collect", "collect((uint256,address,uint128,uint128))"),

    # Uniswap Universal Router
    "0x3593564c": SelectorInfo("execute", "execute(bytes,bytes[],uint256)"),
    "0x24856bc3": SelectorInfo("execute", "execute(bytes,bytes[])"),

    # 1inch AggregationRouter
    "0x12aa3caf": SelectorInfo(
        "swap",
        "swap(address,(address,address,address,address,uint256,uint256,uint256),bytes,bytes)",
    ),
    "0x0502b1c5": SelectorInfo("unoswap", "unoswap(address,uint256,uint256,uint256[])"),
    "0xe449022e": SelectorInfo("uniswapV3Swap", "uniswapV3Swap(uint256,uint256,uint256[])"),

    # SushiSwap RouteProcessor
    "0x2646478b": SelectorInfo("processRoute", "processRoute(address,uint256,address,uint256,address,bytes)"),
    "0x93b3774c": SelectorInfo(
        "transferValueAndprocessRoute",
        "transferValueAndprocessRoute(address,uint256,address,uint256,address,uint256,address,bytes)",
    ),

    # Curve pools
    "0x3df02124": SelectorInfo("exchange", "exchange(int128,int128,uint256,uint256)"),
    "0xa6417ed6": SelectorInfo("exchange_underlying", "exchange_underlying(int128,int128,uint256,uint256)"),
    "0x0b4c7e4d": SelectorInfo("add_liquidity", "add_liquidity(uint256[2],uint256)"),
    "0x4515cef3": SelectorInfo("add_liquidity", "add_liquidity(uint256[3],uint256)"),
    "0x029b2f34": SelectorInfo("add_liquidity", "add_liquidity(uint256[4],uint256)"),
    "0xecb586a5": SelectorInfo("remove_liquidity", "remove_liquidity(uint256,uint256[3])"),
    "0x1a4d01d2": SelectorInfo("remove_liquidity_one_coin", "remove_liquidity_one_coin(uint256,int128,uint256)"),
    "0x9fdaea0c": SelectorInfo("remove_liquidity_imbalance", "remove_liquidity_imbalance(uint256[3],uint256)"),

    # WETH
    "0xd0e30db0": SelectorInfo("deposit", "deposit()"),
    "0x2e1a7d4d": SelectorInfo("withdraw", "withdraw(uint256)"),

    # Aave V2 / V3 Pool
    "0xe8eda9df": SelectorInfo("deposit", "deposit(address,uint256,address,uint16)"),
    "0x617ba037": SelectorInfo("supply", "supply(address,uint256,address,uint16)"),
    "0x69328dec": SelectorInfo("withdraw", "withdraw(address,uint256,address)"),
    "0xa415bcad": SelectorInfo("borrow", "borrow(address,uint256,uint256,uint16,address)"),
    "0x573ade81": SelectorInfo("repay", "repay(address,uint256,uint256,address)"),
    "0x2dad97d4": SelectorInfo("repayWithATokens", "repayWithATokens(address,uint256,uint256)"),
    "0x00a718a9": SelectorInfo("liquidationCall", "liquidationCall(address,address,address,uint256,bool)"),
    "0xab9c4b5d": SelectorInfo(
        "flashLoan",
        "flashLoan(address,address[],uint256[],uint256[],address,bytes,uint16)",
    ),
    "0x42b0b77c": SelectorInfo("flashLoanSimple", "flashLoanSimple(address,address,uint256,bytes,uint16)"),

    # Morpho Blue
    "0xa99aad89": SelectorInfo(
        "supply",
        "supply((address,address,address,address,uint256),uint256,uint256,address,bytes)",
    ),
    "0x5c2bea49": SelectorInfo(
        "withdraw",
        "withdraw((address,address,address,address,uint256),uint256,uint256,address,address)",
    ),
    "0x50d8cd4b": SelectorInfo(
        "borrow",
        "borrow((address,address,address,address,uint256),uint256,uint256,address,address)",
    ),
    "0x20b76e81": SelectorInfo(
        "repay",
        "repay((address,address,address,address,uint256),uint256,uint256,address,bytes)",
    ),
    "0x238d6579": SelectorInfo(
        "supplyCollateral",
        "supplyCollateral((address,address,address,address,uint256),uint256,address,bytes)",
    ),
    "0x8720316d": SelectorInfo(
        "withdrawCollateral",
        "withdrawCollateral((address,address,address,address,uint256),uint256,address,address)",
    ),
    "0xd8eabcb8": SelectorInfo(
        "liquidate",
        "liquidate((address,address,address,address,uint256),address,uint256,uint256,bytes)",
    ),
    "0xe0232b42": SelectorInfo("flashLoan", "flashLoan(address,uint256,bytes)"),

    # ERC-4626 vaults (MetaMorpho and others)
    "0x6e553f65": SelectorInfo("deposit", "deposit(uint256,address)"),
    "0x94bf804d": SelectorInfo("mint", "mint(uint256,address)"),
    "0xb460af94": SelectorInfo("withdraw", "withdraw(uint256,address,address)"),
    "0xba087652": SelectorInfo("redeem", "redeem(uint256,address,address)"),

    # Compound
    "0xa0712d68": SelectorInfo("mint", "mint(uint256)"),
    "0xdb006a75": SelectorInfo("redeem", "redeem(uint256)"),
    "0xc5ebeaec": SelectorInfo("borrow", "borrow(uint256)"),
    "0x0e752702": SelectorInfo("repayBorrow", "repayBorrow(uint256)"),
    "0xf2b9fdb8": SelectorInfo("supply", "supply(address,uint256)"),
    "0xf3fef3a3": SelectorInfo("withdraw", "withdraw(address,uint256)"),

    # Lido
    "0xa1903eab": SelectorInfo("submit", "submit(address)"),
    "0xea598cb0": SelectorInfo("wrap", "wrap(uint256)"),
    "0xde0e9a3e": SelectorInfo("unwrap", "unwrap(uint256)"),

    # Seaport
    "0xfb0f3ee1": SelectorInfo(
        "fulfillBasicOrder",
        "fulfillBasicOrder((address,uint256,uint256,address,address,address,uint256,uint256,uint8,uint256,uint256,"
        "bytes32,uint256,bytes32,bytes32,uint256,(uint256,address)[],bytes))",
    ),
    "0x00000000": SelectorInfo(
        "fulfillBasicOrder_efficient_6GL6yc",
        "fulfillBasicOrder_efficient_6GL6yc((address,uint256,uint256,address,address,address,uint256,uint256,uint8,"
        "uint256,uint256,bytes32,uint256,bytes32,bytes32,uint256,(uint256,address)[],bytes))",
    ),
    "0xb3a34c4c": SelectorInfo("fulfillOrder", f"fulfillOrder({_SEAPORT_ORDER},bytes32)"),
    "0xe7acab24": SelectorInfo(
        "fulfillAdvancedOrder",
        f"fulfillAdvancedOrder({_SEAPORT_ADVANCED_ORDER},{_SEAPORT_CRITERIA_RESOLVER}[],bytes32,address)",
    ),
    "0xed98a574": SelectorInfo(
        "fulfillAvailableOrders",
        f"fulfillAvailableOrders({_SEAPORT_ORDER}[],{_SEAPORT_COMPONENT}[][],{_SEAPORT_COMPONENT}[][],bytes32,uint256)",
    ),
    "0x87201b41": SelectorInfo(
        "fulfillAvailableAdvancedOrders",
        f"fulfillAvailableAdvancedOrders({_SEAPORT_ADVANCED_ORDER}[],{_SEAPORT_CRITERIA_RESOLVER}[],"
        f"{_SEAPORT_COMPONENT}[][],{_SEAPORT_COMPONENT}[][],bytes32,address,uint256)",
    ),
    "0xa8174404": SelectorInfo("matchOrders", f"matchOrders({_SEAPORT_ORDER}[],{_SEAPORT_FULFILLMENT}[])"),
    "0xf2d12b12": SelectorInfo(
        "matchAdvancedOrders",
        f"matchAdvancedOrders({_SEAPORT_ADVANCED_ORDER}[],{_SEAPORT_CRITERIA_RESOLVER}[],"
        f"{_SEAPORT_FULFILLMENT}[],address)",
    ),

    # Bridges
    "0xb1a1a882": SelectorInfo("depositETH", "depositETH(uint32,bytes)"),
    "0x9a2ac6d5": SelectorInfo("depositETHTo", "depositETHTo(address,uint32,bytes)"),
    "0x58a997f6": SelectorInfo("depositERC20", "depositERC20(address,address,uint256,uint32,bytes)"),
    "0x838b2520": SelectorInfo("depositERC20To", "depositERC20To(address,address,address,uint256,uint32,bytes)"),
    "0x439370b1": SelectorInfo("depositEth", "depositEth()"),
    "0xd2ce7d65": SelectorInfo("outboundTransfer", "outboundTransfer(address,address,uint256,uint256,uint256,bytes)"),
    "0x7b939232": SelectorInfo(
        "depositV3",
        "depositV3(address,address,address,address,uint256,uint256,uint256,address,uint32,uint32,uint32,bytes)",
    ),

    # OP Stack StandardBridge
    "0x09fc8843": SelectorInfo("bridgeETH", "bridgeETH(uint32,bytes)"),
    "0xe11013dd": SelectorInfo("bridgeETHTo", "bridgeETHTo(address,uint32,bytes)"),
    "0x87087623": SelectorInfo("bridgeERC20", "bridgeERC20(address,address,uint256,uint32,bytes)"),
    "0x540abf73": SelectorInfo("bridgeERC20To", "bridgeERC20To(address,address,address,uint256,uint32,bytes)"),
    # Circle CCTP TokenMessenger
    "0x6fd3504e": SelectorInfo("depositForBurn", "depositForBurn(uint256,uint32,bytes32,address)"),
    # Generic bridge entry point
    "0x5e583a5a": SelectorInfo("bridge", "bridge(address,uint256,uint256,address)"),

    # Permit2
    "0x30f28b7a": SelectorInfo(
        "permitTransferFrom",
        "permitTransferFrom(((address,uint256),uint256,uint256),(address,uint256),address,bytes)",
    ),
    "0x2b67b570": SelectorInfo(
        "permit",
        "permit(address,((address,uint160,uint48,uint48),address,uint256),bytes)",
    ),

    # Multicall3
    "0x82ad56cb": SelectorInfo("aggregate3", "aggregate3((address,bool,bytes)[])"),

    # Common
    NATIVE_TRANSFER: SelectorInfo(NATIVE_TRANSFER_NAME, ""),
}
