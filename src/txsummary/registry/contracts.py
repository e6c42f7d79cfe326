"""Display names for well-known contracts (all addresses lowercase)."""

KNOWN_CONTRACTS: dict[str, str] = {
    # Uniswap
    "0x7a250d5630b4cf539739df2c5dacb4c659f2488d": "Uniswap V2 Router",
    "0xe592427a0aece92de3edee1f18e0157c05861564": "Uniswap V3 Router",
    "0x68b3465833fb72a70ecdf485e0e4c7bd8665fc45": "Uniswap V3 Router 2",
    "0x3fc91a3afd70395cd496c647d5a6cc9d4b2b7fad": "Uniswap Universal Router",
    "0x66a9893cc07d91d95644aedd05d03f95e1dba8af": "Uniswap V4 Universal Router",
    "0xc36442b4a4522e871399cd717abdd847ab11fe88": "Uniswap V3 Positions NFT",

    # Other DEXes / aggregators
    "0xd9e1ce17f2641f24ae83637ab66a2cca9c378b9f": "SushiSwap Router",
    "0x1111111254eeb25477b68fb85ed929f73a960582": "1inch Router",
    "0x111111125421ca6dc452d289314280a0f8842a65": "1inch Router V6",
    "0x13f4ea83d0bd40e75c8222255bc855a974568dd4": "PancakeSwap Smart Router",
    "0xbebc44782c7db0a1a60cb6fe97d0b483032ff1c7": "Curve 3pool",
    "0xdc24316b9ae028f1497c275eb9192a3ea0f67022": "Curve stETH Pool",
    "0xd51a44d3fae010294c616388b506acda1bfaae46": "Curve Tricrypto2",
    "0xba12222222228d8ba445958a75a0704d566bf2c8": "Balancer Vault",
    "0x00000000005bbb0ef59571e58418f9a4357b68a0": "Pendle Router",
    "0x888888888889758f76e7103c6cbf23abbf58f946": "Pendle Router V4",

    # Lending
    "0x87870bca3f3fd6335c3f4ce8392d69350b4fa4e2": "Aave V3 Pool",
    "0x7d2768de32b0b80b7a3454c06bdac94a69ddc7a9": "Aave V2 Pool",
    "0xc13e21b648a5ee794902342038ff3adab66be987": "Spark Pool",
    "0xbbbbbbbbbb9cc5e90e3b3af64bdaf62c37eeffcb": "Morpho Blue",
    "0xc3d688b66703497daa19211eedff47f25384cdc3": "Compound V3 cUSDCv3",

    # MetaMorpho vaults
    "0x78fc2c2ed1a4cdb5402365934ae5648adad094d0": "Morpho Steakhouse USDC Vault",
    "0xa0e430870c4604ccfc7b38ca7845b1ff653d0ff1": "Morpho Steakhouse USDT Vault",
    "0xd63070114470f685b75b74d60eec7c1113d33a3d": "Morpho Gauntlet USDC Prime Vault",
    "0x4881ef0bf6d2365d3dd6499ccd7532bcdbce0658": "Morpho Gauntlet WETH Prime Vault",

    # Staking / wrappers
    "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2": "WETH",
    "0xae7ab96520de3a18e5e111b5eaab095312d7fe84": "Lido stETH",
    "0x7f39c581f595b53c5cb19bd0b3f8da6c935e2ca0": "Lido wstETH",

    # NFT marketplaces
    "0x00000000000000adc04c56bf30ac9d3c0aaf14dc": "OpenSea Seaport",
    "0x0000000000000068f116a894984e2db1123eb395": "OpenSea Seaport 1.6",
    "0x000000000000ad05ccc4f10045630fb830b95127": "Blur Marketplace",
    "0x0000000000a39bb272e79075ade125fd351887ac": "Blur Pool",

    # NFT collections
    "0xbc4ca0eda7647a8ab7c2061c2e118a18a936f13d": "Bored Ape Yacht Club",
    "0x60e4d786628fea6478f785a6d7e704777c86a7c6": "Mutant Ape Yacht Club",
    "0xed5af388653567af2f388e6224dc7c4b3241c544": "Azuki",
    "0xbd3531da5cf5857e7cfaa92426877b022e612cf8": "Pudgy Penguins",
    "0x57f1887a8bf19b14fc0df6fd9b2acc9af147ea85": "ENS",

    # Bridges
    "0x99c9fc46f92e8a1c0dec1b1747d010903e884be1": "Optimism Gateway",
    "0x4dbd4fc535ac27206064b68ffcf827b0a60bab3f": "Arbitrum Delayed Inbox",
    "0x72ce9c846789fdb6fc1f34ac4ad25dd9ef7031ef": "Arbitrum Gateway Router",
    "0x5c7bcd6e7de5423a257d81b442095a1a6ced35c5": "Across SpokePool",
    "0xbd3fa81b58ba92a82136038b25adec7066af3155": "Circle CCTP TokenMessenger",
    "0x3154cf16ccdb4c6d922629664174b904d80f2c35": "Base Bridge",

    # Utilities
    "0x000000000022d473030f116ddee9f6b43ac78ba3": "Permit2",
    "0xca11bde05977b3631167028862be2a173976ca11": "Multicall3",
}
