"""Mini README: Interactive text interface for the finance tracker.

Exports the menu loop used by the CLI together with the formatting helpers
that render ledger reports. The interface owns no ledger of its own; callers
construct one and pass it in.
"""

from .formatting import format_currency
from .menu import run_menu

__all__ = ["format_currency", "run_menu"]
