"""Mini README: Typer CLI for launching the finance tracker.

Commands:
    * run - start the interactive menu on a fresh (or demo) ledger.
    * summary - print the demo ledger's summary and category report.

Options fall back to ``FintrackSettings`` when omitted, so environment
variables and ``.env`` files configure defaults while the command line wins
for a single run. Option values pass the same checks as the settings model.
"""

from __future__ import annotations

from typing import Optional

import typer

from .configuration import get_settings
from .finance import FinanceLedger
from .interface import run_menu
from .interface.menu import display_category_report, display_summary
from .logging_utils import configure_root_logger, get_logger, resolve_level

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Track personal income and expenses from the terminal.")


def _validate_currency_symbol(value: Optional[str]) -> Optional[str]:
    """Reject blank symbols the way the settings validator does."""

    if value is None:
        return None
    symbol = value.strip()
    if not symbol:
        raise typer.BadParameter("currency symbol must not be blank")
    return symbol


def _validate_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        resolve_level(value)
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error
    return value.strip().upper()


@cli.callback()
def main() -> None:
    """Personal finance tracker with an in-memory ledger."""


@cli.command()
def run(
    currency_symbol: Optional[str] = typer.Option(
        None, help="Symbol shown before amounts.", callback=_validate_currency_symbol
    ),
    demo: Optional[bool] = typer.Option(
        None, "--demo/--no-demo", help="Start with the demo transactions recorded."
    ),
    log_level: Optional[str] = typer.Option(
        None, help="Logging level, e.g. DEBUG or INFO.", callback=_validate_log_level
    ),
) -> None:
    """Start the interactive finance menu."""

    settings = get_settings()
    configure_root_logger(log_level or settings.log_level)
    effective_symbol = currency_symbol or settings.currency_symbol
    seed_demo = settings.seed_demo_data if demo is None else demo
    LOGGER.debug(
        "Launching menu environment=%s symbol=%s demo=%s",
        settings.environment,
        effective_symbol,
        seed_demo,
    )

    ledger = FinanceLedger.with_demo_transactions() if seed_demo else FinanceLedger()
    run_menu(ledger, currency_symbol=effective_symbol)


@cli.command()
def summary(
    currency_symbol: Optional[str] = typer.Option(
        None, help="Symbol shown before amounts.", callback=_validate_currency_symbol
    ),
) -> None:
    """Print the summary and category report of the demo ledger."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    effective_symbol = currency_symbol or settings.currency_symbol

    ledger = FinanceLedger.with_demo_transactions()
    display_summary(ledger, effective_symbol)
    display_category_report(ledger, effective_symbol)
