"""tx-summary — one-line plain English description of an EVM transaction."""

import argparse
import asyncio
import logging
import sys

import httpx
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from txsummary.api import SummaryResult, summarize_tx, validate_tx_hash
from txsummary.chains import get_chain, supported_chains
from txsummary.config import settings
from txsummary.exceptions import TxSummaryError
from txsummary.summarizer.formatting import format_address, format_transfer
from txsummary.summarizer.generic.nft import nft_label

console = Console()

_STATUS_STYLE = {
    "success": "green",
    "failed": "red",
    "pending": "yellow",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tx-summary",
        description="Summarize an EVM transaction in plain English.",
    )
    parser.add_argument("hash", type=str, help="Transaction hash (0x + 64 hex characters)")
    parser.add_argument(
        "-c", "--chain",
        default=settings.default_chain,
        help=f"Chain name ({', '.join(supported_chains())}; default: {settings.default_chain})",
    )
    parser.add_argument("-r", "--rpc", default=None, help="Custom RPC URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show transaction details")
    parser.add_argument("-j", "--json", action="store_true", help="Print the full result as JSON")
    return parser


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-5s %(name)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
    sys.exit(1)


def render_details(result: SummaryResult) -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()

    status_style = _STATUS_STYLE.get(result.status.value, "white")
    table.add_row("Hash", result.hash)
    table.add_row("From", result.from_address)
    table.add_row("To", result.to_address or "(contract creation)")
    table.add_row("Status", f"[{status_style}]{result.status.value}[/{status_style}]")
    table.add_row("Value", result.value)
    if result.block_number is not None:
        table.add_row("Block", f"{result.block_number:,}")
    if result.timestamp is not None:
        table.add_row("Time", result.timestamp.isoformat())
    if result.nonce is not None:
        table.add_row("Nonce", str(result.nonce))
    if result.gas_used is not None:
        gas = f"{result.gas_used:,}"
        if result.gas_cost:
            gas += f" ({result.gas_cost})"
        table.add_row("Gas", gas)
    if result.function_name:
        fn = result.function_name
        if result.contract_name:
            fn += f" on {result.contract_name}"
        table.add_row("Function", escape(fn))
    console.print(table)

    if result.transfers:
        console.print("\n[bold]Token transfers[/bold]")
        for t in result.transfers:
            console.print(
                f"  {format_transfer(t)}: {format_address(t.from_address)} → {format_address(t.to_address)}"
            )
    if result.nft_transfers:
        console.print("\n[bold]NFT transfers[/bold]")
        for n in result.nft_transfers:
            console.print(
                f"  {escape(nft_label(n))}: {format_address(n.from_address)} → {format_address(n.to_address)}"
            )
    if result.explorer_url:
        console.print(f"\n[dim]{result.explorer_url}[/dim]")


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging()

    # Reject bad input before touching the network
    try:
        validate_tx_hash(args.hash)
        get_chain(args.chain)
    except TxSummaryError as e:
        _fail(str(e))

    try:
        result = asyncio.run(summarize_tx(args.hash, args.chain, args.rpc))
    except (TxSummaryError, httpx.HTTPError, ValidationError) as e:
        _fail(str(e))

    if args.json:
        console.print_json(result.model_dump_json())
        return

    console.print(f"[bold]{escape(result.summary)}[/bold]", soft_wrap=True)
    if args.verbose:
        console.print()
        render_details(result)


if __name__ == "__main__":
    main()
