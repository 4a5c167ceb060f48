"""Tests for the in-memory BalanceStore."""

from decimal import Decimal

from acctctl.infrastructure.store import BalanceStore


class TestBalanceStore:
    def test_fresh_store_reads_opening_balance(self) -> None:
        store = BalanceStore()
        assert store.read() == Decimal("1000.00")
        assert str(store.read()) == "1000.00"

    def test_custom_opening_balance(self) -> None:
        assert BalanceStore(Decimal("5.00")).read() == Decimal("5.00")

    def test_read_has_no_side_effects(self) -> None:
        store = BalanceStore()
        assert store.read() == store.read()

    def test_write_replaces_unconditionally(self) -> None:
        """The store itself never validates; that is the service's job."""
        store = BalanceStore()
        store.write(Decimal("-1"))
        assert store.read() == Decimal("-1")
        store.write(Decimal("0.00"))
        assert store.read() == Decimal("0.00")

    def test_round_currency_is_pure(self) -> None:
        store = BalanceStore()
        assert store.round_currency(123.456) == Decimal("123.46")
        assert BalanceStore.round_currency(0.999) == Decimal("1.00")
        assert store.round_currency(0.001) == Decimal("0.00")
        assert store.read() == Decimal("1000.00")

    def test_stores_are_independent(self) -> None:
        a, b = BalanceStore(), BalanceStore()
        a.write(Decimal("1.00"))
        assert b.read() == Decimal("1000.00")

    def test_repr(self) -> None:
        assert repr(BalanceStore()) == "BalanceStore(balance=1000.00)"
