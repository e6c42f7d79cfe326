"""Base rule interfaces."""

from abc import ABC, abstractmethod

from txsummary.summarizer.context import SummaryContext


class BaseRule(ABC):
    """One step of the summary cascade."""

    RULE_NAME: str = "BaseRule"

    @abstractmethod
    def can_summarize(self, ctx: SummaryContext) -> bool:
        """Quick check: is this rule relevant to the TX at all?"""

    @abstractmethod
    def summarize(self, ctx: SummaryContext) -> str | None:
        """Return a sentence, or None to let the next rule try."""


class FunctionHandler:
    """Declarative function-name -> handler mapping for a family of contract calls.

    Subclasses define:
        FUNCTION_HANDLERS: dict mapping resolved function names to handler method names

    Handler method signature:
        def _handle_xxx(self, ctx) -> str | None
    Returning None means the expected transfers were not found.
    """

    HANDLER_NAME: str = "FunctionHandler"
    FUNCTION_HANDLERS: dict[str, str] = {}

    def handle(self, ctx: SummaryContext) -> str | None:
        method_name = self.FUNCTION_HANDLERS.get(ctx.function_name or "")
        if method_name is None:
            return None
        return getattr(self, method_name)(ctx)
