"""Mini README: Text rendering for ledger reports.

Every monetary value is shown with a leading currency symbol and exactly two
decimal places. The helpers return lists of lines so the menu decides how to
print them and tests can compare them directly.
"""

from __future__ import annotations

from typing import List

from ..finance import FinanceLedger, Transaction


def format_currency(amount: float, symbol: str = "$") -> str:
    """Format a float as a currency string, e.g. ``'$1234.56'``."""

    return f"{symbol}{amount:.2f}"


def summary_lines(ledger: FinanceLedger, symbol: str = "$") -> List[str]:
    summary = ledger.summarise()
    return [
        f"Total Income: {format_currency(summary['total_income'], symbol)}",
        f"Total Expense: {format_currency(summary['total_expense'], symbol)}",
        f"Net Balance: {format_currency(summary['net_balance'], symbol)}",
        f"Average Transaction: {format_currency(summary['average_transaction'], symbol)}",
    ]


def category_lines(ledger: FinanceLedger, symbol: str = "$") -> List[str]:
    breakdown = ledger.category_breakdown()
    if not breakdown:
        return ["No categories recorded yet."]
    return [f"{category} {format_currency(total, symbol)}" for category, total in breakdown.items()]


def transaction_line(transaction: Transaction, symbol: str = "$") -> str:
    """Render one transaction as a pipe separated row."""

    recurring = "true" if transaction.is_recurring else "false"
    return (
        f"ID: {transaction.id} | {transaction.description} | "
        f"{format_currency(transaction.amount, symbol)} | {transaction.kind.label} | "
        f"{transaction.category} | {transaction.date} | Recurring: {recurring}"
    )


def transaction_lines(ledger: FinanceLedger, symbol: str = "$") -> List[str]:
    transactions = ledger.list_transactions()
    if not transactions:
        return ["No transactions recorded yet."]
    return [transaction_line(transaction, symbol) for transaction in transactions]
