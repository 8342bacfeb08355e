"""Mini README: Tests for the interactive menu and CLI commands.

The menu is driven through Typer's ``CliRunner`` with scripted input so the
full prompt flow, including amount retries and invalid options, is covered
without a terminal.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from typer.testing import CliRunner

from fintrack.cli import cli
from fintrack.configuration import get_settings
from fintrack.finance import FinanceLedger, TransactionKind
from fintrack.interface.formatting import (
    category_lines,
    format_currency,
    summary_lines,
    transaction_line,
)

runner = CliRunner()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Run each test from an empty directory so no local .env leaks in."""

    monkeypatch.chdir(tmp_path)
    for variable in ("FINTRACK_CURRENCY_SYMBOL", "FINTRACK_SEED_DEMO_DATA", "FINTRACK_LOG_LEVEL"):
        monkeypatch.delenv(variable, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _script(*lines: str) -> str:
    return "\n".join(lines) + "\n"


def test_add_then_list_and_summarise() -> None:
    """A transaction entered through the menu shows up in every report."""

    user_input = _script(
        "1", "Salary", "5000", "yes", "2025-01-04", "INCOME", "Work",
        "2",
        "3",
        "4",
        "5",
    )
    result = runner.invoke(cli, ["run", "--no-demo"], input=user_input)

    assert result.exit_code == 0, result.output
    assert "Transaction added successfully!" in result.output
    assert "Total Income: $5000.00" in result.output
    assert "Net Balance: $5000.00" in result.output
    assert "Work $5000.00" in result.output
    assert "ID: 1 | Salary | $5000.00 | Income | Work | 2025-01-04 | Recurring: true" in result.output
    assert result.output.rstrip().endswith("Goodbye!")


def test_invalid_amount_is_reprompted() -> None:
    user_input = _script("1", "Lunch", "abc", "12.5", "no", "2024-03-01", "food", "Food", "4", "5")
    result = runner.invoke(cli, ["run"], input=user_input)

    assert result.exit_code == 0, result.output
    assert result.output.count("Invalid amount. Please enter a number.") == 1
    assert "ID: 1 | Lunch | $12.50 | Expense | Food | 2024-03-01 | Recurring: false" in result.output


def test_invalid_option_keeps_looping() -> None:
    result = runner.invoke(cli, ["run"], input=_script("9", "", "4", "5"))

    assert result.exit_code == 0, result.output
    assert result.output.count("Invalid option. Please try again.") == 2
    assert "No transactions recorded yet." in result.output


def test_demo_flag_and_currency_override() -> None:
    result = runner.invoke(cli, ["run", "--demo", "--currency-symbol", "€"], input=_script("2", "5"))

    assert result.exit_code == 0, result.output
    assert "Total Expense: €2500.00" in result.output
    assert "Average Transaction: €2250.00" in result.output


def test_settings_seed_demo_data(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without a flag the demo toggle comes from the environment."""

    monkeypatch.setenv("FINTRACK_SEED_DEMO_DATA", "true")
    result = runner.invoke(cli, ["run"], input=_script("3", "5"))

    assert result.exit_code == 0, result.output
    assert "Housing $2000.00" in result.output


def test_summary_command_prints_reports() -> None:
    result = runner.invoke(cli, ["summary"])

    assert result.exit_code == 0, result.output
    assert "Net Balance: $4000.00" in result.output
    assert "Food $500.00" in result.output


def test_formatting_helpers() -> None:
    ledger = FinanceLedger()
    transaction = ledger.add("Refund", -4.5, False, "today", TransactionKind.EXPENSE, "Misc")

    assert format_currency(1234.5) == "$1234.50"
    assert format_currency(0.456, "£") == "£0.46"
    assert summary_lines(ledger)[1] == "Total Expense: $-4.50"
    assert category_lines(FinanceLedger()) == ["No categories recorded yet."]
    assert transaction_line(transaction, "$") == (
        "ID: 1 | Refund | $-4.50 | Expense | Misc | today | Recurring: false"
    )


def test_category_rows_match_report_layout() -> None:
    assert category_lines(FinanceLedger.with_demo_transactions()) == [
        "Work $6500.00",
        "Housing $2000.00",
        "Food $500.00",
    ]


def test_unknown_log_level_option_is_a_usage_error() -> None:
    """A bad --log-level is rejected before the menu starts."""

    result = runner.invoke(cli, ["run", "--log-level", "chatty"], input=_script("5"))

    assert result.exit_code == 2
    assert "Invalid value" in result.output
    assert "Goodbye!" not in result.output


def test_log_level_option_accepts_any_case() -> None:
    result = runner.invoke(cli, ["run", "--log-level", "error"], input=_script("5"))

    assert result.exit_code == 0, result.output


@pytest.mark.parametrize("command", ["run", "summary"])
def test_blank_currency_symbol_option_is_a_usage_error(command: str) -> None:
    result = runner.invoke(cli, [command, "--currency-symbol", "  "], input=_script("5"))

    assert result.exit_code == 2
    assert "Invalid value" in result.output


def test_currency_symbol_option_is_trimmed() -> None:
    result = runner.invoke(cli, ["summary", "--currency-symbol", " £ "])

    assert result.exit_code == 0, result.output
    assert "Net Balance: £4000.00" in result.output


def test_local_env_file_is_ignored_by_tests() -> None:
    """The working directory is empty, so settings fall back to defaults."""

    assert not Path(".env").exists()
    assert get_settings().currency_symbol == "$"
