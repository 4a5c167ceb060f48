"""Currency arithmetic — cent rounding, amount coercion, and validation.

Every balance is a ``Decimal`` quantized to two fractional digits.
Floats are converted through ``str()`` so binary artefacts such as
``0.1 + 0.2 == 0.30000000000000004`` never reach the cents.

Amounts are rounded to cents before they touch a balance, so an amount
with an extreme exponent never reaches the arithmetic. Sums run under
``MAX_PREC`` so that very large balances keep their cents; there is no
upper bound on a balance, only on a single amount (``MAX_AMOUNT_DIGITS``).
"""

from __future__ import annotations

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_DOWN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import TypeAlias

Amount: TypeAlias = Decimal | int | float | str

CENTS = Decimal("0.01")
OPENING_BALANCE = Decimal("1000.00")

# Widest balance the legacy ledger could print (PIC 9(6)V99).
DISPLAY_LIMIT = Decimal("999999.99")

# Integer digits allowed in one credit or debit amount.
MAX_AMOUNT_DIGITS = 30


def to_decimal(value: Amount | None) -> Decimal:
    """Coerce *value* to ``Decimal``.

    Unparseable input (``"abc"``, ``""``, ``None``) becomes ``NaN`` rather
    than raising, so it is rejected by :func:`is_valid_amount` like any
    other non-finite amount.

    Examples:
        >>> to_decimal("12.50")
        Decimal('12.50')
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("twelve")
        Decimal('NaN')
    """
    if isinstance(value, Decimal):
        return value
    if value is None or isinstance(value, bool):
        return Decimal("NaN")
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return Decimal("NaN")


def is_valid_amount(value: Decimal) -> bool:
    """True when *value* is finite, not negative, and under ``MAX_AMOUNT_DIGITS``.

    ``adjusted()`` reads the exponent without expanding the coefficient, so
    the check stays cheap for inputs such as ``1e999999999999``.
    """
    if not value.is_finite() or value < 0:
        return False
    return value.is_zero() or value.adjusted() < MAX_AMOUNT_DIGITS


def round_currency(amount: Amount, *, rounding: str = ROUND_HALF_UP) -> Decimal:
    """Round *amount* to cents, half-up on the cents boundary by default.

    Examples:
        >>> round_currency("123.456")
        Decimal('123.46')
        >>> round_currency(0.999)
        Decimal('1.00')
        >>> round_currency(0.001)
        Decimal('0.00')

    Raises:
        ValueError: *amount* is not a finite number.
    """
    value = to_decimal(amount)
    if not value.is_finite():
        msg = f"Cannot round non-finite amount: {value}"
        raise ValueError(msg)
    with localcontext(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN):
        return value.quantize(CENTS, rounding=rounding)


def exact_sum(*values: Decimal) -> Decimal:
    """Add finite decimals without rounding to the context precision."""
    with localcontext(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN):
        return sum(values, Decimal(0))


def format_amount(value: Decimal) -> str:
    """Render a balance or amount with exactly two decimals (``1000.00``)."""
    return f"{value:.2f}"


def credit_cents(amount: Decimal) -> Decimal:
    """Cents actually added when crediting *amount* to a whole-cents balance.

    ``round(balance + amount) == balance + round(amount)`` whenever the
    balance is whole cents, so the amount is rounded first.
    """
    return round_currency(amount)


def debit_cents(amount: Decimal) -> Decimal:
    """Cents actually removed when debiting *amount* from a whole-cents balance.

    Half-up on ``balance - amount`` is half-down on ``amount``.
    """
    return round_currency(amount, rounding=ROUND_HALF_DOWN)


def shortfall_cents(amount: Decimal, balance: Decimal) -> Decimal:
    """Whole cents missing from *balance* to cover a debit of *amount*."""
    return exact_sum(round_currency(amount, rounding=ROUND_UP), -balance)
