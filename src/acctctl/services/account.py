"""AccountService — view, credit, and debit with overdraft protection.

Pipeline per mutation: VALIDATE → APPLY → WRITE → RESPOND.
Rejections (invalid amount, insufficient funds) never touch the store and
return the current balance unchanged.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

import structlog

from acctctl.domain.money import (
    DISPLAY_LIMIT,
    Amount,
    credit_cents,
    debit_cents,
    exact_sum,
    format_amount,
    is_valid_amount,
    shortfall_cents,
    to_decimal,
)
from acctctl.domain.outcomes import STEP_ALIASES, ErrorCode, Operation
from acctctl.services.base import BaseService
from acctctl.services.contracts import (
    BalanceData,
    BatchData,
    TransactionData,
    dump_validated,
)
from acctctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from acctctl.infrastructure.store import BalanceStore

log = structlog.get_logger(__name__)


class AccountService(BaseService):
    """Transaction processor for a single balance.

    The service is the only writer of its store. Every public method
    returns a :class:`ServiceResult` whose ``data["balance"]`` is the
    balance after the call.
    """

    def __init__(self, store: BalanceStore, *, display_limit: Decimal = DISPLAY_LIMIT) -> None:
        super().__init__(store)
        self._display_limit = display_limit

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def view_balance(self) -> ServiceResult:
        """Report the current balance. Never fails."""
        balance = self._store.read()
        log.debug("balance.viewed", balance=format_amount(balance))
        return ServiceResult(
            ok=True,
            op=Operation.VIEW,
            data=dump_validated(BalanceData, {"balance": balance}),
        )

    def credit(self, amount: Amount | None) -> ServiceResult:
        """Add *amount* to the balance, rounded to cents."""
        op = Operation.CREDIT
        value = to_decimal(amount)
        previous = self._store.read()

        # ── VALIDATE ─────────────────────────────────────────
        if not is_valid_amount(value):
            return self._invalid_amount(op, value, previous)

        # ── APPLY / WRITE ────────────────────────────────────
        balance = self._store.round_currency(exact_sum(previous, credit_cents(value)))
        self._store.write(balance)
        log.debug(
            "balance.credited",
            amount=str(value),
            previous=format_amount(previous),
            balance=format_amount(balance),
        )

        # ── RESPOND ──────────────────────────────────────────
        return self._applied(op, value, previous, balance)

    def debit(self, amount: Amount | None) -> ServiceResult:
        """Subtract *amount* from the balance unless it would overdraw."""
        op = Operation.DEBIT
        value = to_decimal(amount)
        previous = self._store.read()

        # ── VALIDATE ─────────────────────────────────────────
        if not is_valid_amount(value):
            return self._invalid_amount(op, value, previous)
        if previous < value:
            log.info(
                "debit.rejected",
                amount=str(value),
                balance=format_amount(previous),
            )
            # Nothing changed, so the balance is returned exactly as read.
            return self._rejected(
                op,
                ErrorCode.INSUFFICIENT_FUNDS,
                balance=previous,
                amount=str(value),
                shortfall=str(shortfall_cents(value, previous)),
            )

        # ── APPLY / WRITE ────────────────────────────────────
        balance = self._store.round_currency(exact_sum(previous, -debit_cents(value)))
        self._store.write(balance)
        log.debug(
            "balance.debited",
            amount=str(value),
            previous=format_amount(previous),
            balance=format_amount(balance),
        )

        # ── RESPOND ──────────────────────────────────────────
        return self._applied(op, value, previous, balance)

    def apply_batch(
        self,
        steps: list[Any],
        *,
        partial: bool = False,
    ) -> ServiceResult:
        """Apply a sequence of steps in order.

        Each step is a mapping with an ``op`` (``view``, ``credit``,
        ``debit``) and, for mutations, an ``amount``. Stops at the first
        rejected step unless *partial* is True. Steps already applied stay
        applied either way.
        """
        op = Operation.BATCH
        applied: list[dict[str, Any]] = []
        errors: list[dict[str, Any]] = []

        for index, step in enumerate(steps):
            result = self._run_step(step)
            if result.ok:
                applied.append(
                    {
                        "index": index,
                        "op": result.op,
                        "amount": result.data.get("amount"),
                        "balance": result.data["balance"],
                    }
                )
                continue

            error = result.error
            errors.append(
                {
                    "index": index,
                    "op": result.op,
                    "code": error.code if error else "",
                    "error": error.message if error else "",
                }
            )
            if not partial:
                break

        data = dump_validated(
            BatchData,
            {
                "balance": self._store.read(),
                "steps": len(steps),
                "applied": applied,
                "errors": errors,
            },
        )
        log.debug(
            "batch.complete",
            steps=len(steps),
            applied=len(applied),
            errors=len(errors),
        )

        if not errors:
            return ServiceResult(ok=True, op=op, data=data)

        if partial:
            error = ServiceError(
                code=ErrorCode.BATCH_PARTIAL,
                message=f"{len(errors)} of {len(steps)} steps failed",
            )
        else:
            first = errors[0]
            error = ServiceError(
                code=ErrorCode.BATCH_FAILED,
                message=f"Step {first['index']} failed: {first['error']}",
            )
        return ServiceResult(ok=False, op=op, data=data, error=error)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run_step(self, step: Any) -> ServiceResult:
        name = str(step.get("op", "")) if isinstance(step, dict) else ""
        operation = STEP_ALIASES.get(name.strip().lower())
        if operation is Operation.VIEW:
            return self.view_balance()
        if operation is Operation.CREDIT:
            return self.credit(step.get("amount"))
        if operation is Operation.DEBIT:
            return self.debit(step.get("amount"))
        return ServiceResult(
            ok=False,
            op=name or "?",
            data={"balance": self._store.read()},
            error=ServiceError(
                code=ErrorCode.UNKNOWN_OPERATION,
                message=f"Unknown operation: {name!r} (expected view, credit, or debit)",
            ),
        )

    def _invalid_amount(self, op: str, value: Decimal, balance: Decimal) -> ServiceResult:
        log.info("amount.rejected", op=op, amount=str(value), balance=format_amount(balance))
        return self._rejected(
            op,
            ErrorCode.INVALID_AMOUNT,
            balance=balance,
            amount=str(value),
        )

    def _applied(
        self,
        op: str,
        amount: Decimal,
        previous: Decimal,
        balance: Decimal,
    ) -> ServiceResult:
        warnings: list[str] = []
        if balance > self._display_limit:
            warnings.append(
                f"Balance {format_amount(balance)} exceeds the display limit "
                f"of {format_amount(self._display_limit)}"
            )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                TransactionData,
                {"balance": balance, "previous_balance": previous, "amount": amount},
            ),
            warnings=warnings,
        )
