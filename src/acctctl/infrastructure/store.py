"""BalanceStore — the single in-memory balance.

The store is a plain holder: it never validates what it is given.
:class:`~acctctl.services.account.AccountService` is its only writer and
is responsible for handing it non-negative, cent-rounded values.
"""

from __future__ import annotations

from decimal import Decimal

from acctctl.domain.money import OPENING_BALANCE, Amount, round_currency


class BalanceStore:
    """Holds the current balance for one session.

    Created by the session owner (``AppContext`` in the CLI, a fixture in
    tests) and passed explicitly to the service that mutates it.
    """

    def __init__(self, opening_balance: Decimal = OPENING_BALANCE) -> None:
        self._balance = opening_balance

    def read(self) -> Decimal:
        """Return the current balance."""
        return self._balance

    def write(self, new_balance: Decimal) -> None:
        """Replace the stored balance unconditionally."""
        self._balance = new_balance

    @staticmethod
    def round_currency(amount: Amount) -> Decimal:
        """Round *amount* to cents (half-up). Independent of stored state."""
        return round_currency(amount)

    def __repr__(self) -> str:
        return f"BalanceStore(balance={self._balance!s})"
