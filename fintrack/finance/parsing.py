"""Mini README: Text-to-field conversion for transaction prompts.

Structure:
    * AmountParseError - raised when an amount cannot be read as a number.
    * parse_amount - converts trimmed text into a float.
    * parse_recurring - interprets yes/no answers.
    * parse_kind - thin wrapper over ``TransactionKind.from_str``.

These helpers never touch a ledger; the menu calls them and only passes
successfully converted values on to ``FinanceLedger.add``.
"""

from __future__ import annotations

import re

from .ledger import TransactionKind

_AFFIRMATIVE_ANSWERS = frozenset({"yes", "y"})

# Plain decimal or exponent notation plus inf/nan; no digit separators.
_AMOUNT_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


class AmountParseError(ValueError):
    """Amount text could not be interpreted as a floating point number."""


def parse_amount(text: str) -> float:
    """Return ``text`` as a float or raise ``AmountParseError``."""

    candidate = text.strip()
    if not _AMOUNT_PATTERN.fullmatch(candidate):
        raise AmountParseError(f"Invalid amount: {text!r}")
    return float(candidate)


def parse_recurring(text: str) -> bool:
    """Treat ``yes``/``y`` in any casing as true and everything else as false."""

    return text.strip().lower() in _AFFIRMATIVE_ANSWERS


def parse_kind(text: str) -> TransactionKind:
    return TransactionKind.from_str(text)
