"""Operation names and rejection codes shared by services and the CLI.

Rejections are recoverable: the balance is left untouched and the session
carries on. They travel as ``ServiceError.code`` values, never as raised
exceptions.
"""

from __future__ import annotations

from enum import StrEnum


class Operation(StrEnum):
    """Balance operations, named as they appear in ``ServiceResult.op``."""

    VIEW = "view_balance"
    CREDIT = "credit"
    DEBIT = "debit"
    BATCH = "batch"


class ErrorCode(StrEnum):
    """Rejection codes carried by ``ServiceError.code``."""

    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    UNKNOWN_OPERATION = "UNKNOWN_OPERATION"
    BATCH_FAILED = "BATCH_FAILED"
    BATCH_PARTIAL = "BATCH_PARTIAL"


ERROR_MESSAGES: dict[str, str] = {
    ErrorCode.INVALID_AMOUNT: "Invalid amount. Please enter a positive number.",
    ErrorCode.INSUFFICIENT_FUNDS: "Insufficient funds for this debit.",
}

# Batch step names accepted in place of the full operation name.
STEP_ALIASES: dict[str, Operation] = {
    "view": Operation.VIEW,
    "view_balance": Operation.VIEW,
    "balance": Operation.VIEW,
    "credit": Operation.CREDIT,
    "debit": Operation.DEBIT,
}
