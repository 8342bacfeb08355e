"""Mini README: Interactive text menu wrapping the finance ledger.

Structure:
    * display_menu - prints the five available options.
    * prompt_amount - asks for an amount until it parses as a number.
    * add_transaction_interactive / display_* - one handler per option.
    * run_menu - read-eval-print loop dispatching choices to handlers.

Handlers receive the ledger and currency symbol explicitly; nothing here
keeps state between calls. Input is read with ``typer.prompt`` and output is
written with ``typer.echo`` so the loop can be driven by Typer's test runner.
"""

from __future__ import annotations

from typing import Callable, Dict

import typer

from ..finance import AmountParseError, FinanceLedger, parse_amount, parse_kind, parse_recurring
from ..logging_utils import get_logger
from .formatting import category_lines, summary_lines, transaction_lines

LOGGER = get_logger(__name__)

MenuHandler = Callable[[FinanceLedger, str], None]

QUIT_OPTION = "5"


def _ask(message: str) -> str:
    """Read one trimmed line; an empty answer is allowed."""

    answer = typer.prompt(message, default="", show_default=False, prompt_suffix="")
    return answer.strip()


def _echo_block(title: str, lines: list[str], rule: str) -> None:
    typer.echo(f"\n=== {title} ===")
    for line in lines:
        typer.echo(line)
    typer.echo(f"{rule}\n")


def display_menu() -> None:
    typer.echo("\n=== Finance Tracker Menu ===")
    typer.echo("1) Add Transaction")
    typer.echo("2) View Summary")
    typer.echo("3) View Category Report")
    typer.echo("4) View All Transactions")
    typer.echo("5) Quit")
    typer.echo("============================")


def prompt_amount() -> float:
    """Keep asking until the answer parses as a float."""

    while True:
        raw = _ask("Enter amount: ")
        try:
            return parse_amount(raw)
        except AmountParseError as error:
            LOGGER.debug("Rejected amount input: %s", error)
            typer.echo("Invalid amount. Please enter a number.")


def add_transaction_interactive(ledger: FinanceLedger, currency_symbol: str) -> None:
    """Collect every field for a new transaction and record it."""

    description = _ask("Enter description: ")
    amount = prompt_amount()
    is_recurring = parse_recurring(_ask("Is this recurring? (yes/no): "))
    date = _ask("Enter date (YYYY-MM-DD): ")
    kind = parse_kind(_ask("Enter type (income/expense): "))
    category = _ask("Enter category: ")

    ledger.add(description, amount, is_recurring, date, kind, category)
    typer.echo("Transaction added successfully!")


def display_summary(ledger: FinanceLedger, currency_symbol: str) -> None:
    _echo_block("Financial Summary", summary_lines(ledger, currency_symbol), "=" * 23)


def display_category_report(ledger: FinanceLedger, currency_symbol: str) -> None:
    _echo_block("Category Breakdown", category_lines(ledger, currency_symbol), "=" * 24)


def display_all_transactions(ledger: FinanceLedger, currency_symbol: str) -> None:
    _echo_block("All Transactions", transaction_lines(ledger, currency_symbol), "=" * 22)


MENU_ACTIONS: Dict[str, MenuHandler] = {
    "1": add_transaction_interactive,
    "2": display_summary,
    "3": display_category_report,
    "4": display_all_transactions,
}


def run_menu(ledger: FinanceLedger, *, currency_symbol: str = "$") -> None:
    """Loop over menu choices until the user quits."""

    LOGGER.info("Starting interactive menu with %s recorded transactions", len(ledger))
    while True:
        display_menu()
        choice = _ask("Enter choice: ")
        if choice == QUIT_OPTION:
            typer.echo("Goodbye!")
            return
        handler = MENU_ACTIONS.get(choice)
        if handler is None:
            LOGGER.info("Ignoring invalid menu option %r", choice)
            typer.echo("Invalid option. Please try again.")
            continue
        handler(ledger, currency_symbol)
