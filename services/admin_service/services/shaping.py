"""Normalization of raw result rows before they become API records.

The driver returns amounts as ``Decimal``/``str``/``float``, counts as
``int`` or ``Decimal`` (``SUM`` over integers), flags as ``0``/``1``, statuses
in whichever case they were written, and image lists as one comma-joined
string. Every query in the catalog passes its rows through ``shape_row`` so
those differences are resolved in one place.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from libs.common.currency import to_amount

LIST_SEPARATOR = ","

_TRUE_STRINGS = frozenset({"1", "true", "t", "yes", "y"})


def to_count(value: Any) -> int:
    if value is None or value == "":
        return 0
    return int(Decimal(str(value)))


def to_flag(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (bytes, bytearray)):
        # MySQL BIT(1) columns
        return any(value)
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def to_status(value: Any) -> str:
    """Upper-case a stored status so legacy lowercase rows read like current ones."""
    value = getattr(value, "value", value)
    return str(value or "").strip().upper()


def split_list(value: Any) -> list[str]:
    """Split a ``GROUP_CONCAT`` result into its items, ``[]`` for NULL/empty."""
    if not value:
        return []
    return [part.strip() for part in str(value).split(LIST_SEPARATOR) if part.strip()]


def shape_row(
    row: Mapping[str, Any],
    *,
    money: Iterable[str] = (),
    counts: Iterable[str] = (),
    flags: Iterable[str] = (),
    lists: Iterable[str] = (),
    statuses: Iterable[str] = (),
) -> dict[str, Any]:
    """Copy ``row`` into a dict with the named fields normalized."""
    record = dict(row)
    for field in money:
        record[field] = to_amount(record.get(field))
    for field in counts:
        record[field] = to_count(record.get(field))
    for field in flags:
        record[field] = to_flag(record.get(field))
    for field in lists:
        record[field] = split_list(record.get(field))
    for field in statuses:
        record[field] = to_status(record.get(field))
    return record
