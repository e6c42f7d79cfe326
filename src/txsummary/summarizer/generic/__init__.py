from txsummary.summarizer.generic.creation import ContractCreationRule
from txsummary.summarizer.generic.fallback import FinalFallbackRule
from txsummary.summarizer.generic.native import NativeTransferRule
from txsummary.summarizer.generic.nft import NFTTransferRule
from txsummary.summarizer.generic.swap import SwapRule
from txsummary.summarizer.generic.transfers import TransferFallbackRule
from txsummary.summarizer.generic.vault import VaultRule

__all__ = [
    "ContractCreationRule",
    "FinalFallbackRule",
    "NFTTransferRule",
    "NativeTransferRule",
    "SwapRule",
    "TransferFallbackRule",
    "VaultRule",
]
