"""Hypothesis property tests for the balance policy.

- **Credit**: any finite non-negative amount lands on ``round(old + amount)``.
- **Debit**: any amount up to the balance lands on ``round(old - amount)``.
- **Overdraft**: any amount above the balance leaves it untouched.
- **Invalid input**: negative or non-finite amounts leave it untouched.
- **Non-negative**: the balance never drops below zero, whatever the sequence.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from hypothesis import given
from hypothesis import strategies as st

from acctctl.infrastructure.store import BalanceStore
from acctctl.services.account import AccountService

# ============================================================================
#                               Strategies
# ============================================================================

balances = st.decimals(min_value=0, max_value=10**9, places=2, allow_nan=False)
amounts = st.decimals(min_value=0, max_value=10**9, places=3, allow_nan=False)
negative = st.decimals(max_value=Decimal("-0.001"), allow_nan=False, allow_infinity=False)
non_finite = st.sampled_from([Decimal("NaN"), Decimal("Infinity"), Decimal("-Infinity")])
steps = st.lists(
    st.tuples(st.sampled_from(["credit", "debit", "view"]), amounts),
    max_size=25,
)


def _cents(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _service(opening: Decimal) -> tuple[BalanceStore, AccountService]:
    store = BalanceStore(opening)
    return store, AccountService(store)


# ============================================================================
#                               Properties
# ============================================================================


@given(opening=balances, amount=amounts)
def test_credit_adds_rounded_amount(opening: Decimal, amount: Decimal) -> None:
    store, account = _service(opening)
    result = account.credit(amount)
    assert result.ok
    assert store.read() == _cents(opening + amount)


@given(opening=balances, data=st.data())
def test_debit_within_balance_succeeds(opening: Decimal, data: st.DataObject) -> None:
    amount = data.draw(st.decimals(min_value=0, max_value=opening, places=3))
    store, account = _service(opening)
    result = account.debit(amount)
    assert result.ok
    assert store.read() == _cents(opening - amount)
    assert store.read() >= 0


@given(opening=balances, excess=st.decimals(min_value=Decimal("0.001"), max_value=10**6, places=3))
def test_overdraft_leaves_balance(opening: Decimal, excess: Decimal) -> None:
    store, account = _service(opening)
    result = account.debit(opening + excess)
    assert result.error is not None
    assert result.error.code == "INSUFFICIENT_FUNDS"
    assert store.read() == opening


@given(opening=balances, amount=st.one_of(negative, non_finite))
def test_invalid_amounts_leave_balance(opening: Decimal, amount: Decimal) -> None:
    store, account = _service(opening)
    for op in (account.credit, account.debit):
        result = op(amount)
        assert result.error is not None
        assert result.error.code == "INVALID_AMOUNT"
        assert store.read() == opening


@given(opening=balances, sequence=steps)
def test_balance_never_negative(opening: Decimal, sequence: list[tuple[str, Decimal]]) -> None:
    store, account = _service(opening)
    for name, amount in sequence:
        if name == "credit":
            account.credit(amount)
        elif name == "debit":
            account.debit(amount)
        else:
            first = account.view_balance()
            assert account.view_balance().data == first.data
        assert store.read() >= 0
        assert store.read() == _cents(store.read())
