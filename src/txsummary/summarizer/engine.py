"""Summarizer — ordered rule table producing one sentence per transaction."""

import logging

from txsummary.decoder.types import DecodedTransaction
from txsummary.domain.enums import TxStatus
from txsummary.registry import ReferenceRegistry
from txsummary.summarizer.base import BaseRule
from txsummary.summarizer.context import SummaryContext
from txsummary.summarizer.generic.fallback import FinalFallbackRule

logger = logging.getLogger(__name__)

FAILED_PREFIX = "❌ FAILED: "


class Summarizer:
    """Runs rules in order; the first sentence wins.

    Falls back to FinalFallbackRule when no rule answers, so summarize() never raises
    for a well-formed DecodedTransaction.
    """

    def __init__(
        self,
        rules: list[BaseRule] | None = None,
        registry: ReferenceRegistry | None = None,
    ) -> None:
        self._rules = rules if rules is not None else build_default_rules()
        self._registry = registry
        self._fallback = FinalFallbackRule()

    def summarize(self, decoded: DecodedTransaction, native_symbol: str = "ETH") -> str:
        ctx = SummaryContext(decoded, native_symbol=native_symbol, registry=self._registry)
        sentence = self._classify(ctx)
        if decoded.status == TxStatus.FAILED:
            return FAILED_PREFIX + sentence
        return sentence

    def _classify(self, ctx: SummaryContext) -> str:
        for rule in self._rules:
            try:
                if not rule.can_summarize(ctx):
                    continue
                sentence = rule.summarize(ctx)
            except Exception:
                logger.warning("Rule %s failed on tx %s", rule.RULE_NAME, ctx.tx.hash, exc_info=True)
                continue
            if sentence:
                logger.debug("Rule %s matched tx %s", rule.RULE_NAME, ctx.tx.hash)
                return sentence
        return self._fallback.summarize(ctx)


def build_default_rules() -> list[BaseRule]:
    """Default cascade, most specific first."""
    from txsummary.summarizer.dispatch import FunctionDispatchRule
    from txsummary.summarizer.generic import (
        ContractCreationRule,
        NativeTransferRule,
        NFTTransferRule,
        SwapRule,
        TransferFallbackRule,
        VaultRule,
    )
    from txsummary.summarizer.handlers import (
        ApprovalHandler,
        BridgeHandler,
        LendingHandler,
        LiquidityHandler,
        MarketplaceHandler,
        MulticallHandler,
        NFTHandler,
        PermitHandler,
        SwapHandler,
        TokenHandler,
    )

    dispatch = FunctionDispatchRule([
        ApprovalHandler(),
        LendingHandler(),
        TokenHandler(),
        NFTHandler(),
        MarketplaceHandler(),
        LiquidityHandler(),
        MulticallHandler(),
        SwapHandler(),
        BridgeHandler(),
        PermitHandler(),
    ])

    return [
        ContractCreationRule(),
        NFTTransferRule(),
        NativeTransferRule(),
        VaultRule(),
        SwapRule(),
        dispatch,
        TransferFallbackRule(),
        FinalFallbackRule(),  # Always last
    ]


_default_summarizer: Summarizer | None = None


def summarize(decoded: DecodedTransaction, native_symbol: str = "ETH") -> str:
    """Summarize with the default rule table."""
    global _default_summarizer
    if _default_summarizer is None:
        _default_summarizer = Summarizer()
    return _default_summarizer.summarize(decoded, native_symbol)
