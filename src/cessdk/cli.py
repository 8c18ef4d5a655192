"""Typer-based CLI for the correlation API."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Awaitable, Callable, List, Optional
from uuid import UUID

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import CoinCorrelateInput, NetworkCorrelateInput, Ticker, TickerCorrelateInput

if TYPE_CHECKING:
    from .client import CESClient


# Import with local function to avoid circular imports
def _load_settings(config_path: Optional[Path] = None):
    from .config import load_settings
    return load_settings(config_path)

def _create_client_from_settings(settings):
    from .factory import create_client_from_settings
    return create_client_from_settings(settings)

app = typer.Typer(help="Crypto Exchange Standard API client")
console = Console()
logger = logging.getLogger(__name__)

ConfigOption = typer.Option(None, "--config", help="Path to config file")
JsonOption = typer.Option(False, "--json", help="Print raw JSON instead of a table")
FromOption = typer.Option("", "--from", help="Source exchange name")
FromIdOption = typer.Option(None, "--from-id", help="Source exchange ID")
ToOption = typer.Option(None, "--to", help="Target exchange name (repeatable)")
ToIdOption = typer.Option(None, "--to-id", help="Target exchange ID (repeatable)")


def run_cli(argv: list[str] | None = None) -> None:
    """Run CLI with optional argv parameter."""
    app(argv)


def init_client(config_path: Optional[Path] = None) -> "CESClient":
    settings = _load_settings(config_path)
    return _create_client_from_settings(settings)


async def _run(config: Optional[Path], operation: Callable[["CESClient"], Awaitable[list[Any]]]) -> list[Any]:
    client = init_client(config)
    try:
        return await operation(client)
    finally:
        await client.close()


def _execute(config: Optional[Path], operation: Callable[["CESClient"], Awaitable[list[Any]]]) -> list[Any]:
    try:
        return asyncio.run(_run(config, operation))
    except Exception as e:
        logger.debug("Request failed", exc_info=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _print_records(title: str, records: list[BaseModel], columns: list[tuple[str, str]], as_json: bool) -> None:
    if as_json:
        console.print_json(json.dumps([r.model_dump(mode="json", by_alias=True) for r in records]))
        return

    if not records:
        console.print("[yellow]No results[/yellow]")
        return

    table = Table(title=title)
    for header, _ in columns:
        table.add_column(header)

    for record in records:
        row = []
        for _, attr in columns:
            value = getattr(record, attr)
            row.append("" if value is None else str(value))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {len(records)}")


@app.command()
def exchange_list(
    config: Optional[Path] = ConfigOption,
    as_json: bool = JsonOption,
) -> None:
    """List exchanges known to the service."""
    records = _execute(config, lambda client: client.get_exchange_list())
    _print_records(
        "Exchanges",
        records,
        [("Name", "name"), ("ID", "id"), ("Ticker format", "ticker_format"), ("URL", "url")],
        as_json,
    )


@app.command()
def coin_correlate(
    exchange_from: str = FromOption,
    exchange_from_id: Optional[UUID] = FromIdOption,
    exchange_to: Optional[List[str]] = ToOption,
    exchange_to_id: Optional[List[UUID]] = ToIdOption,
    coin: str = typer.Option("", "--coin", help="Coin name on the source exchange"),
    coin_base: str = typer.Option("", "--coin-base", help="Coin base on the source exchange"),
    coin_id: Optional[UUID] = typer.Option(None, "--coin-id", help="Coin ID"),
    config: Optional[Path] = ConfigOption,
    as_json: bool = JsonOption,
) -> None:
    """Correlate a coin across exchanges."""
    data = CoinCorrelateInput(
        exchange_from=exchange_from,
        exchange_from_id=exchange_from_id,
        exchange_to=exchange_to or [],
        exchange_to_id=exchange_to_id or [],
        exchange_coin=coin,
        exchange_coin_base=coin_base,
        exchange_coin_id=coin_id,
    )
    records = _execute(config, lambda client: client.post_coin_correlate(data))
    _print_records(
        "Coin correlation",
        records,
        [
            ("Exchange", "exchange_name"),
            ("Coin", "exchange_coin"),
            ("Base", "exchange_coin_base"),
            ("Coin ID", "exchange_coin_id"),
            ("Unsafety", "exchange_coin_unsafety_score"),
        ],
        as_json,
    )


@app.command()
def network_correlate(
    exchange_from: str = FromOption,
    exchange_from_id: Optional[UUID] = FromIdOption,
    exchange_to: Optional[List[str]] = ToOption,
    exchange_to_id: Optional[List[UUID]] = ToIdOption,
    network: str = typer.Option("", "--network", help="Network name on the source exchange"),
    network_code: str = typer.Option("", "--network-code", help="Network code on the source exchange"),
    network_id: Optional[UUID] = typer.Option(None, "--network-id", help="Network ID"),
    config: Optional[Path] = ConfigOption,
    as_json: bool = JsonOption,
) -> None:
    """Correlate a blockchain network across exchanges."""
    data = NetworkCorrelateInput(
        exchange_from=exchange_from,
        exchange_from_id=exchange_from_id,
        exchange_to=exchange_to or [],
        exchange_to_id=exchange_to_id or [],
        exchange_network=network,
        exchange_network_code=network_code,
        exchange_network_id=network_id,
    )
    records = _execute(config, lambda client: client.post_network_correlate(data))
    _print_records(
        "Network correlation",
        records,
        [
            ("Exchange", "exchange_name"),
            ("Network", "exchange_network"),
            ("Code", "exchange_network_code"),
            ("Network ID", "exchange_network_id"),
            ("Unsafety", "exchange_network_unsafety_score"),
        ],
        as_json,
    )


@app.command()
def ticker_correlate(
    exchange_from: str = FromOption,
    exchange_from_id: Optional[UUID] = FromIdOption,
    exchange_to: Optional[List[str]] = ToOption,
    exchange_to_id: Optional[List[UUID]] = ToIdOption,
    base: str = typer.Option("", "--base", help="Ticker base symbol"),
    quote: str = typer.Option("", "--quote", help="Ticker quote symbol"),
    ticker_id: Optional[UUID] = typer.Option(None, "--ticker-id", help="Ticker ID"),
    config: Optional[Path] = ConfigOption,
    as_json: bool = JsonOption,
) -> None:
    """Correlate a trading pair across exchanges."""
    data = TickerCorrelateInput(
        exchange_from=exchange_from,
        exchange_from_id=exchange_from_id,
        exchange_to=exchange_to or [],
        exchange_to_id=exchange_to_id or [],
        exchange_ticker=Ticker(base=base, quote=quote),
        exchange_ticker_id=ticker_id,
    )
    records = _execute(config, lambda client: client.post_ticker_correlate(data))
    _print_records(
        "Ticker correlation",
        records,
        [
            ("Exchange", "exchange_name"),
            ("Ticker", "exchange_ticker"),
            ("Ticker ID", "exchange_ticker_id"),
        ],
        as_json,
    )

