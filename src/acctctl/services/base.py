"""BaseService — foundation for acctctl services.

Every service receives the session's :class:`BalanceStore` at construction
time. The store is passed in explicitly; there is no module-level balance.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from acctctl.domain.outcomes import ERROR_MESSAGES
from acctctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from acctctl.infrastructure.store import BalanceStore


class BaseService:
    """Base for service-layer classes.

    Usage::

        class AccountService(BaseService):
            def view_balance(self) -> ServiceResult:
                balance = self._store.read()
                ...
    """

    def __init__(self, store: BalanceStore) -> None:
        self._store = store

    def _rejected(
        self,
        op: str,
        code: str,
        *,
        balance: Decimal,
        **detail: Any,
    ) -> ServiceResult:
        """Build a non-fatal rejection that still reports *balance*."""
        return ServiceResult(
            ok=False,
            op=op,
            data={"balance": balance},
            error=ServiceError(
                code=code,
                message=ERROR_MESSAGES.get(code, code),
                detail=dict(detail),
            ),
        )
