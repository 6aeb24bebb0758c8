"""Currency helpers for Nisapoti amounts.

All money is Tanzanian shillings (TZS) stored as DECIMAL(12, 2).

The database driver hands amounts back in several shapes depending on the
column and the aggregate: ``Decimal`` for plain columns, ``str`` for some
``SUM``/``CAST`` results, ``float`` or ``int`` on SQLite, and ``None`` when an
aggregate ran over no rows. ``to_amount`` folds all of them into one
fixed-point value.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

CENT: Decimal = Decimal("0.01")
ZERO: Decimal = Decimal("0.00")


def to_amount(value: Any) -> Decimal:
    """Coerce a raw amount to a non-negative ``Decimal`` with two places.

    ``None`` and empty strings become ``0.00``; negative inputs are clamped
    to ``0.00``.
    """
    if value is None or value == "":
        return ZERO
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValueError(f"Not a currency amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Not a currency amount: {value!r}")
    amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    return amount if amount > ZERO else ZERO


def amount_to_json(amount: Decimal) -> float:
    """JSON representation of an amount (a number, never a string)."""
    return float(amount)
