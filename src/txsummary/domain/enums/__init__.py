from txsummary.domain.enums.nft_standard import NFTStandard
from txsummary.domain.enums.status import TxStatus

__all__ = [
    "NFTStandard",
    "TxStatus",
]
