"""Commands: one-shot balance, credit, and debit.

Each process opens a fresh balance, so these are for scripting and for
checking the overdraft and rounding policy. Rejected operations exit 1.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from acctctl.commands._base import AcctCommand

if TYPE_CHECKING:
    from acctctl.commands._context import AppContext


@click.command(
    cls=AcctCommand,
    examples="""\
  acctctl balance
  acctctl --json balance
  acctctl -q balance""",
)
@click.pass_obj
def balance(app: AppContext) -> None:
    """Show the current balance."""
    app.emit(app.account.view_balance())


@click.command(
    cls=AcctCommand,
    examples="""\
  acctctl credit 250
  acctctl credit 0.99
  acctctl --json credit 123.45""",
)
@click.argument("amount")
@click.pass_obj
def credit(app: AppContext, amount: str) -> None:
    """Credit AMOUNT to the account (rounded to cents)."""
    app.emit(app.account.credit(amount))


@click.command(
    cls=AcctCommand,
    examples="""\
  acctctl debit 100
  acctctl debit 1000.01     # rejected: insufficient funds
  acctctl --json debit 0.33""",
)
@click.argument("amount")
@click.pass_obj
def debit(app: AppContext, amount: str) -> None:
    """Debit AMOUNT from the account unless it would overdraw."""
    app.emit(app.account.debit(amount))
