"""Subcommand modules for acctctl.

Provides register_commands() which uses deferred imports to keep
``acctctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group.

    Uses deferred imports so modules are only loaded when the CLI is built.
    """
    from acctctl.commands.batch import batch
    from acctctl.commands.menu import menu
    from acctctl.commands.transactions import balance, credit, debit

    cli.add_command(menu)
    cli.add_command(balance)
    cli.add_command(credit)
    cli.add_command(debit)
    cli.add_command(batch)
