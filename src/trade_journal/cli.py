"""CLI entry point for the trade journal."""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

import click

from .core.config import Settings, load_settings
from .core.enums import ExportFormat
from .core.errors import JournalError
from .journal.boundary import load_document
from .journal.cache import StatisticsCache
from .journal.export import JournalExporter
from .journal.record import TradeRecord
from .observability.logger import bind_journal, get_logger, reset_context, setup_logging

log = get_logger(__name__)


def _parse_balance(ctx: click.Context, param: click.Parameter, value: str | None) -> Decimal | None:
    if value is None:
        return None
    try:
        balance = Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"{value!r} is not a number") from None
    if not balance.is_finite():
        raise click.BadParameter("balance must be finite")
    return balance


def _load(
    ctx: click.Context,
    path: Path,
    balance: Decimal | None,
) -> tuple[Decimal, list[TradeRecord], str]:
    """Read a journal document and resolve the starting balance and label.

    Balance precedence: ``--balance`` > document ``initialBalance`` > config.
    The document's account label wins over ``account.label`` from config.
    """
    settings: Settings = ctx.obj["settings"]
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        click.echo(f"Error: {path} is not valid JSON: {exc}", err=True)
        ctx.exit(2)

    try:
        account, trades = load_document(data)
    except JournalError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(2)

    if balance is not None:
        starting = balance
    elif account is not None:
        starting = account.starting_balance
    else:
        starting = settings.account.starting_balance
    label = (account.label if account is not None else "") or settings.account.label

    bind_journal(path, trades=len(trades), starting_balance=starting)
    log.debug("journal_loaded")
    return starting, trades, label


_file_arg = click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
_balance_opt = click.option(
    "--balance", default=None, callback=_parse_balance, help="Starting balance override"
)


@click.group()
@click.option("--config", "config_path", default=None, help="Config file path (TOML)")
@click.pass_context
def main(ctx: click.Context, config_path: str | None) -> None:
    """Trade journal analytics."""
    try:
        settings = load_settings(config_path)
    except JournalError as exc:
        raise click.ClickException(str(exc)) from exc
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format.value,
    )
    reset_context()
    ctx.obj = {
        "settings": settings,
        "cache": StatisticsCache(max_entries=settings.cache.max_entries),
    }


@main.command()
@_file_arg
@_balance_opt
@click.option("--json", "as_json", is_flag=True, help="Print raw statistics as JSON")
@click.pass_context
def stats(ctx: click.Context, path: Path, balance: Decimal | None, as_json: bool) -> None:
    """Print performance statistics for a journal file."""
    settings: Settings = ctx.obj["settings"]
    cache: StatisticsCache = ctx.obj["cache"]
    starting, trades, label = _load(ctx, path, balance)
    result = cache.statistics(starting, trades)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    summary = result.summary(
        currency=settings.display.currency_symbol,
        decimal_places=settings.display.decimal_places,
    )
    if label:
        click.echo(f"Account         : {label}")
    click.echo(f"Current balance : {summary['balance']} ({summary['roi']})")
    click.echo(f"Win rate        : {summary['win_rate']} ({summary['record']}, {result.break_even} BE)")
    click.echo(f"Profit factor   : {summary['profit_factor']} ({summary['trades']})")
    click.echo(f"Max drawdown    : {summary['max_drawdown']}")


@main.command()
@_file_arg
@_balance_opt
@click.option("--csv", "as_csv", is_flag=True, help="Print the curve as CSV")
@click.pass_context
def equity(ctx: click.Context, path: Path, balance: Decimal | None, as_csv: bool) -> None:
    """Print the equity curve for a journal file."""
    settings: Settings = ctx.obj["settings"]
    cache: StatisticsCache = ctx.obj["cache"]
    starting, trades, _ = _load(ctx, path, balance)
    curve = cache.equity_curve(starting, trades, label_format=settings.display.label_format)

    exporter = JournalExporter(decimal_places=settings.display.decimal_places)
    if as_csv:
        click.echo(exporter.equity_to_csv(curve), nl=False)
        return

    dp = settings.display.decimal_places
    for point in curve:
        click.echo(f"{point.label:>8}  {point.balance:>14.{dp}f}  {point.pnl:>+12.{dp}f}")


@main.command()
@_file_arg
@_balance_opt
@click.option(
    "--format", "fmt",
    type=click.Choice([f.value for f in ExportFormat]),
    default=ExportFormat.CSV.value,
    help="Output format",
)
@click.pass_context
def export(ctx: click.Context, path: Path, balance: Decimal | None, fmt: str) -> None:
    """Export a journal file as CSV, JSON or a combined report."""
    settings: Settings = ctx.obj["settings"]
    starting, trades, _ = _load(ctx, path, balance)
    exporter = JournalExporter(decimal_places=settings.display.decimal_places)
    output = exporter.render(fmt, starting, trades, label_format=settings.display.label_format)
    click.echo(output, nl=not output.endswith("\n"))
