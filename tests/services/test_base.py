"""Tests for BaseService."""

from decimal import Decimal

from acctctl.infrastructure.store import BalanceStore
from acctctl.services.account import AccountService
from acctctl.services.base import BaseService


class TestBaseService:
    def test_store_stored(self) -> None:
        store = BalanceStore()
        service = BaseService(store)
        assert service._store is store

    def test_rejected_uses_known_message(self) -> None:
        service = BaseService(BalanceStore())
        result = service._rejected(
            "debit", "INSUFFICIENT_FUNDS", balance=Decimal("5.00"), amount="6"
        )
        assert result.ok is False
        assert result.op == "debit"
        assert result.data == {"balance": Decimal("5.00")}
        assert result.error is not None
        assert result.error.message == "Insufficient funds for this debit."
        assert result.error.detail == {"amount": "6"}

    def test_rejected_unknown_code_falls_back_to_code(self) -> None:
        result = BaseService(BalanceStore())._rejected("x", "SOMETHING", balance=Decimal("0"))
        assert result.error is not None
        assert result.error.message == "SOMETHING"

    def test_account_service_extends_base(self) -> None:
        assert issubclass(AccountService, BaseService)
