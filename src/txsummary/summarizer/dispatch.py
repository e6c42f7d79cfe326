"""FunctionDispatchRule — function name → handler lookup."""

import logging

from txsummary.summarizer.base import BaseRule, FunctionHandler
from txsummary.summarizer.context import SummaryContext

logger = logging.getLogger(__name__)


class FunctionDispatchRule(BaseRule):
    """Routes the resolved function name to the handler that owns it.

    A function name may be owned by one handler only.
    """

    RULE_NAME = "FunctionDispatchRule"

    def __init__(self, handlers: list[FunctionHandler]) -> None:
        self._handlers: dict[str, FunctionHandler] = {}
        for handler in handlers:
            self.register(handler)

    def register(self, handler: FunctionHandler) -> None:
        for name in handler.FUNCTION_HANDLERS:
            existing = self._handlers.get(name)
            if existing is not None and existing is not handler:
                raise ValueError(
                    f"{name} already handled by {existing.HANDLER_NAME}, cannot add {handler.HANDLER_NAME}"
                )
            self._handlers[name] = handler

    @property
    def function_names(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def handler_for(self, function_name: str | None) -> FunctionHandler | None:
        if function_name is None:
            return None
        return self._handlers.get(function_name)

    def can_summarize(self, ctx: SummaryContext) -> bool:
        return self.handler_for(ctx.function_name) is not None

    def summarize(self, ctx: SummaryContext) -> str | None:
        handler = self.handler_for(ctx.function_name)
        if handler is None:
            return None
        sentence = handler.handle(ctx)
        if sentence is None:
            logger.debug("%s found nothing for %s on %s", handler.HANDLER_NAME, ctx.function_name, ctx.tx.hash)
        return sentence
