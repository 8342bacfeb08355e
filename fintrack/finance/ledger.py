"""Mini README: In-memory finance ledger supporting income and expenses.

Structure:
    * TransactionKind - enum representing income versus expense entries.
    * Transaction - frozen dataclass storing one recorded entry.
    * FinanceLedger - append-only store with aggregate queries.

The ledger keeps transactions in insertion order and maintains a running
signed total per category on every insert. Amounts are stored exactly as
given: expenses are not negated, so ``net_balance`` is only a true net when
callers record expenses as positive magnitudes. Category totals iterate in
the order each category was first seen.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Tuple

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class TransactionKind(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce free text into a kind, falling back to ``EXPENSE``.

        Matching ignores case and surrounding whitespace. Anything that is
        not ``income`` or ``expense``, the empty string included, is treated
        as an expense rather than rejected.
        """

        normalised = value.strip().lower()
        if normalised == cls.INCOME.value:
            return cls.INCOME
        if normalised == cls.EXPENSE.value:
            return cls.EXPENSE
        LOGGER.debug("Unrecognised transaction kind %r; defaulting to expense", value)
        return cls.EXPENSE

    @property
    def label(self) -> str:
        """Human readable name used in reports."""

        return self.value.capitalize()

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a recorded ledger entry."""

    id: int
    description: str
    amount: float
    is_recurring: bool
    date: str
    kind: TransactionKind
    category: str

    def as_dict(self) -> Dict[str, Any]:
        """Export the transaction with serialisable values."""

        return {
            "id": self.id,
            "description": self.description,
            "amount": self.amount,
            "is_recurring": self.is_recurring,
            "date": self.date,
            "kind": self.kind.value,
            "category": self.category,
        }


class FinanceLedger:
    """Record transactions and answer aggregate questions about them."""

    def __init__(self) -> None:
        self._transactions: List[Transaction] = []
        self._category_totals: Dict[str, float] = {}
        self._next_id = 1
        LOGGER.debug("Finance ledger initialised")

    @classmethod
    def with_demo_transactions(cls) -> "FinanceLedger":
        """Return a ledger seeded with a deterministic set of demo entries."""

        ledger = cls()
        ledger.add("Salary", 5000.0, True, "2025-01-04", TransactionKind.INCOME, "Work")
        ledger.add("Freelance", 1500.0, False, "2024-01-20", TransactionKind.INCOME, "Work")
        ledger.add("Rent", 2000.0, True, "2024-01-01", TransactionKind.EXPENSE, "Housing")
        ledger.add("Groceries", 500.0, False, "2024-01-10", TransactionKind.EXPENSE, "Food")
        return ledger

    def __len__(self) -> int:
        return len(self._transactions)

    def add(
        self,
        description: str,
        amount: float,
        is_recurring: bool,
        date: str,
        kind: TransactionKind,
        category: str,
    ) -> Transaction:
        """Append a transaction and fold its amount into the category total."""

        transaction = Transaction(
            id=self._next_id,
            description=description,
            amount=amount,
            is_recurring=is_recurring,
            date=date,
            kind=kind,
            category=category,
        )
        self._transactions.append(transaction)
        self._category_totals[category] = self._category_totals.get(category, 0.0) + amount
        self._next_id += 1
        LOGGER.debug(
            "Recorded transaction %s (%s %.2f) under category %r",
            transaction.id,
            kind.value,
            amount,
            category,
        )
        return transaction

    def _sum_for(self, kind: TransactionKind) -> float:
        return sum(
            (transaction.amount for transaction in self._transactions if transaction.kind is kind),
            0.0,
        )

    def total_income(self) -> float:
        """Sum the amounts of all income entries."""

        return self._sum_for(TransactionKind.INCOME)

    def total_expense(self) -> float:
        """Sum the amounts of all expense entries."""

        return self._sum_for(TransactionKind.EXPENSE)

    def net_balance(self) -> float:
        """Income minus expenses, using amounts exactly as recorded."""

        return self.total_income() - self.total_expense()

    def average_transaction(self) -> float:
        """Mean amount across every transaction; ``0.0`` for an empty ledger."""

        if not self._transactions:
            return 0.0
        total = sum((transaction.amount for transaction in self._transactions), 0.0)
        return total / len(self._transactions)

    def category_breakdown(self) -> Mapping[str, float]:
        """Read-only view of signed totals per category, in first-seen order."""

        return MappingProxyType(self._category_totals)

    def categories(self) -> FrozenSet[str]:
        """Return every category name recorded so far."""

        return frozenset(self._category_totals)

    def has_category(self, name: str) -> bool:
        return name in self._category_totals

    def list_transactions(self) -> Tuple[Transaction, ...]:
        """Return transactions in insertion order."""

        return tuple(self._transactions)

    def summarise(self) -> Dict[str, Any]:
        """Aggregate headline figures for summary screens."""

        return {
            "transaction_count": len(self._transactions),
            "category_count": len(self._category_totals),
            "total_income": self.total_income(),
            "total_expense": self.total_expense(),
            "net_balance": self.net_balance(),
            "average_transaction": self.average_transaction(),
        }
