"""Mini README: Core package initializer for the finance tracker.

This module exposes convenience imports so the CLI and tests can reach the
ledger and logging helpers without knowing the exact module structure. The
file stays lightweight so importing the package never touches configuration
or prompts for input.
"""

from .finance import FinanceLedger, Transaction, TransactionKind
from .logging_utils import get_logger

__all__ = ["FinanceLedger", "Transaction", "TransactionKind", "get_logger"]
