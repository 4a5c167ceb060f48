"""Typed payload contracts for service boundaries.

These models validate operation payload shapes before they leave the
service layer so key regressions (for example ``new_balance`` vs
``balance``) fail fast in tests.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class BalanceData(BaseModel):
    """Payload contract for ``AccountService.view_balance``."""

    balance: Decimal = Field(ge=0)


class TransactionData(BaseModel):
    """Payload contract for successful ``credit`` and ``debit``."""

    balance: Decimal = Field(ge=0)
    previous_balance: Decimal = Field(ge=0)
    amount: Decimal = Field(ge=0)


class BatchStep(BaseModel):
    """One applied step in a batch run."""

    index: int
    op: str
    amount: Decimal | None = None
    balance: Decimal = Field(ge=0)


class BatchError(BaseModel):
    """One rejected step in a batch run."""

    index: int
    op: str
    code: str
    error: str


class BatchData(BaseModel):
    """Payload contract for ``AccountService.apply_batch``."""

    balance: Decimal = Field(ge=0)
    steps: int
    applied: list[BatchStep]
    errors: list[BatchError]
