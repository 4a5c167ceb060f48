"""Command: interactive account menu.

One balance lives for the whole session. Rejected credits and debits are
reported and the loop carries on; only choice 4 (or end of input) ends it.
"""

from __future__ import annotations

import re
from enum import IntEnum
from typing import TYPE_CHECKING

import click

from acctctl.commands._base import AcctCommand
from acctctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from acctctl.commands._context import AppContext
    from acctctl.config.models import MenuConfig


class MenuChoice(IntEnum):
    """Numbered menu entries."""

    VIEW = 1
    CREDIT = 2
    DEBIT = 3
    EXIT = 4


_LABELS: dict[MenuChoice, str] = {
    MenuChoice.VIEW: "View Balance",
    MenuChoice.CREDIT: "Credit Account",
    MenuChoice.DEBIT: "Debit Account",
    MenuChoice.EXIT: "Exit",
}

GOODBYE = "Exiting the program. Goodbye!"
INVALID_CHOICE = "Invalid choice, please select 1-4."

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_choice(raw: str) -> MenuChoice | None:
    """Map user input to a MenuChoice, or None when it is not 1-4.

    Only the leading integer counts, so ``"2abc"`` selects 2 and ``"1.5"``
    selects 1.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    try:
        return MenuChoice(int(match.group(1)))
    except ValueError:
        return None


def render_menu(config: MenuConfig) -> str:
    """Build the menu block shown before each prompt."""
    rule = "-" * config.rule_width
    entries = [f"{choice.value}. {_LABELS[choice]}" for choice in MenuChoice]
    return "\n".join([rule, config.title, *entries, rule])


def _ask(text: str) -> str | None:
    """Prompt for one line. Returns None at end of input (EOF, Ctrl-C)."""
    try:
        return click.prompt(text, default="", show_default=False)
    except click.Abort:
        return None


@click.command(
    cls=AcctCommand,
    examples="""\
  acctctl menu
  acctctl --verbose menu
  printf '2\\n250\\n1\\n4\\n' | acctctl menu""",
)
@click.pass_obj
def menu(app: AppContext) -> None:
    """Run the interactive menu: view, credit, debit, exit."""
    if not app.interactive:
        app.emit(
            ServiceResult(
                ok=False,
                op="menu",
                error=ServiceError(
                    code="NON_INTERACTIVE",
                    message="The menu needs interactive input; use balance, credit, "
                    "debit, or batch with --no-interact.",
                ),
            )
        )
        return

    account = app.account
    config = app.settings.menu
    click.echo(f"\n=== {config.title} Started ===\n")

    while True:
        click.echo(render_menu(config))
        raw = _ask("Enter your choice (1-4)")
        choice = MenuChoice.EXIT if raw is None else parse_choice(raw)

        if choice in (MenuChoice.CREDIT, MenuChoice.DEBIT):
            verb = "credit" if choice is MenuChoice.CREDIT else "debit"
            amount = _ask(f"Enter {verb} amount")
            if amount is None:
                choice = MenuChoice.EXIT
            elif choice is MenuChoice.CREDIT:
                app.emit(account.credit(amount), exit_on_error=False)
            else:
                app.emit(account.debit(amount), exit_on_error=False)

        if choice is MenuChoice.VIEW:
            app.emit(account.view_balance(), exit_on_error=False)
        elif choice is MenuChoice.EXIT:
            click.echo(GOODBYE)
            break
        elif choice is None:
            click.echo(INVALID_CHOICE)

        click.echo()
