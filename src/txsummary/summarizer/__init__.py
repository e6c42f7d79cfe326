from txsummary.summarizer.base import BaseRule, FunctionHandler
from txsummary.summarizer.context import ZERO_ADDRESS, SummaryContext
from txsummary.summarizer.engine import FAILED_PREFIX, Summarizer, build_default_rules, summarize
from txsummary.summarizer.formatting import format_address, format_amount, format_native, format_units

__all__ = [
    "BaseRule",
    "FAILED_PREFIX",
    "FunctionHandler",
    "SummaryContext",
    "Summarizer",
    "ZERO_ADDRESS",
    "build_default_rules",
    "format_address",
    "format_amount",
    "format_native",
    "format_units",
    "summarize",
]
