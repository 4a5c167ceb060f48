"""Rich Console factory and theme for acctctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ACCT_THEME = Theme(
    {
        "acct.ok": "bold green",
        "acct.error": "bold red",
        "acct.warning": "bold yellow",
        "acct.op": "bold cyan",
        "acct.key": "dim",
        "acct.balance": "bold",
        "acct.credit": "green",
        "acct.debit": "yellow",
    }
)

_OP_STYLES: dict[str, str] = {
    "credit": "acct.credit",
    "debit": "acct.debit",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ACCT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_op(op: str) -> str:
    """Return the Rich style name for a balance operation."""
    return _OP_STYLES.get(op, "")
