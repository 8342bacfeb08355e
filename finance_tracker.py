"""Mini README: Entry point script for the finance tracker.

Running ``python finance_tracker.py run`` starts the interactive menu. The
Typer application itself lives in ``fintrack.cli`` so it can be installed as
the ``finance-tracker`` console script and exercised in tests.
"""

from fintrack.cli import cli

if __name__ == "__main__":
    cli()
