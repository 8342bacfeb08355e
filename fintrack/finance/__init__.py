"""Mini README: Finance utilities for the personal finance tracker.

This package groups the in-memory ledger that records income and expense
entries together with the helpers that turn prompt answers into typed
values. The ledger is append-only and owned by whoever constructs it; the
interactive menu receives it explicitly rather than through module state.
"""

from .ledger import FinanceLedger, Transaction, TransactionKind
from .parsing import AmountParseError, parse_amount, parse_kind, parse_recurring

__all__ = [
    "AmountParseError",
    "FinanceLedger",
    "Transaction",
    "TransactionKind",
    "parse_amount",
    "parse_kind",
    "parse_recurring",
]
