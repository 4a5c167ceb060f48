"""Command: apply a scripted sequence of operations in one session."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import IO, TYPE_CHECKING

import click

from acctctl.commands._base import AcctCommand
from acctctl.domain.outcomes import Operation
from acctctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from acctctl.commands._context import AppContext


@click.command(
    cls=AcctCommand,
    examples="""\
  acctctl batch steps.json
  acctctl batch steps.json --partial
  acctctl --json batch steps.json
  echo '[{"op": "credit", "amount": 250}]' | acctctl batch -""",
)
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.option("--partial", is_flag=True, help="Keep going after a rejected step.")
@click.pass_obj
def batch(app: AppContext, file: IO[str], partial: bool) -> None:
    """Apply the steps in FILE against one balance.

    FILE must contain a JSON array of objects, each with an "op" key
    ("view", "credit", or "debit") and, for credit and debit, an
    "amount". Use "-" to read from stdin.
    """
    try:
        steps = json.load(file, parse_float=Decimal)
    except (ValueError, OSError) as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        app.emit(
            ServiceResult(
                ok=False,
                op=Operation.BATCH,
                error=ServiceError(
                    code="invalid_file",
                    message=f"Error reading {file.name}: {exc}",
                ),
            )
        )
        return

    if not isinstance(steps, list):
        app.emit(
            ServiceResult(
                ok=False,
                op=Operation.BATCH,
                error=ServiceError(
                    code="invalid_format",
                    message="JSON file must contain a top-level array.",
                ),
            )
        )
        return

    app.emit(app.account.apply_batch(steps, partial=partial))
