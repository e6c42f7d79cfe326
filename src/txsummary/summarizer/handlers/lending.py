"""Lending markets: Aave, Morpho Blue, Compound, Spark and lookalikes.

Direction is read from the caller's transfers, so one handler covers every
pool that follows the supply/borrow/repay naming.
"""

from txsummary.summarizer.base import FunctionHandler
from txsummary.summarizer.context import SummaryContext
from txsummary.summarizer.formatting import format_transfer


class LendingHandler(FunctionHandler):
    HANDLER_NAME = "LendingHandler"
    FUNCTION_HANDLERS = {
        "supply": "_handle_supply",
        "supplyCollateral": "_handle_supply",
        "borrow": "_handle_borrow",
        "repay": "_handle_repay",
        "repayBorrow": "_handle_repay",
        "repayWithATokens": "_handle_repay",
        "withdrawCollateral": "_handle_withdraw_collateral",
        "liquidate": "_handle_liquidate",
        "liquidationCall": "_handle_liquidate",
        "flashLoan": "_handle_flash_loan",
        "flashLoanSimple": "_handle_flash_loan",
    }

    def _handle_supply(self, ctx: SummaryContext) -> str | None:
        sent = ctx.sent()
        if not sent:
            return None
        return f"Supplied {format_transfer(sent[0])} to {ctx.protocol}"

    def _handle_borrow(self, ctx: SummaryContext) -> str | None:
        received = ctx.received()
        if not received:
            return None
        return f"Borrowed {format_transfer(received[0])} from {ctx.protocol}"

    def _handle_repay(self, ctx: SummaryContext) -> str | None:
        sent = ctx.sent()
        if not sent:
            return None
        return f"Repaid {format_transfer(sent[0])} to {ctx.protocol}"

    def _handle_withdraw_collateral(self, ctx: SummaryContext) -> str | None:
        received = ctx.received()
        if not received:
            return None
        return f"Withdrew {format_transfer(received[0])} collateral from {ctx.protocol}"

    def _handle_liquidate(self, ctx: SummaryContext) -> str | None:
        seized = ctx.received()
        if not seized:
            return None
        repaid = ctx.sent()
        if repaid:
            return (
                f"Liquidated position on {ctx.protocol}: "
                f"repaid {format_transfer(repaid[0])}, seized {format_transfer(seized[0])}"
            )
        return f"Liquidated position on {ctx.protocol}, seized {format_transfer(seized[0])}"

    def _handle_flash_loan(self, ctx: SummaryContext) -> str | None:
        if not ctx.tx.transfers:
            return None
        # Pool -> receiver comes first; the caller is often a helper contract
        loan = ctx.tx.transfers[0]
        return f"Took flash loan of {format_transfer(loan)} from {ctx.protocol}"
