"""Unit tests for row shaping and amount coercion."""

from decimal import Decimal

import pytest
from libs.common.currency import to_amount
from services.admin_service.models import PaymentStatus
from services.admin_service.services.shaping import (
    shape_row,
    split_list,
    to_count,
    to_flag,
    to_status,
)


# ---------------------------------------------------------------------------
# Amounts
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, Decimal("0.00")),
        ("", Decimal("0.00")),
        ("1500.5", Decimal("1500.50")),
        (Decimal("99.999"), Decimal("100.00")),
        (1000, Decimal("1000.00")),
        (12.3, Decimal("12.30")),
        ("-50", Decimal("0.00")),
    ],
)
def test_to_amount(raw, expected):
    assert to_amount(raw) == expected


@pytest.mark.unit
def test_to_amount_rejects_text():
    with pytest.raises(ValueError):
        to_amount("abc")


# ---------------------------------------------------------------------------
# Counts, flags, lists
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_to_count_accepts_decimal_and_string():
    assert to_count(Decimal("7")) == 7
    assert to_count("3") == 3
    assert to_count(None) == 0


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [
        (1, True),
        (0, False),
        (True, True),
        (None, False),
        (b"\x01", True),
        (b"\x00", False),
        ("1", True),
        ("false", False),
    ],
)
def test_to_flag(raw, expected):
    assert to_flag(raw) is expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("completed", "COMPLETED"),
        (" Pending ", "PENDING"),
        (PaymentStatus.FAILED, "FAILED"),
        (None, ""),
    ],
)
def test_to_status(raw, expected):
    assert to_status(raw) == expected


@pytest.mark.unit
def test_split_list():
    assert split_list("a.jpg,b.jpg") == ["a.jpg", "b.jpg"]
    assert split_list(None) == []
    assert split_list("") == []


# ---------------------------------------------------------------------------
# shape_row
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_shape_row_normalizes_named_fields_only():
    row = {
        "id": 4,
        "amount": "2500",
        "supporters": Decimal("2"),
        "is_priority": 1,
        "images": "x.png",
        "name": "Drum kit",
        "status": "completed",
    }

    record = shape_row(
        row,
        money=("amount",),
        counts=("supporters",),
        flags=("is_priority",),
        lists=("images",),
        statuses=("status",),
    )

    assert record == {
        "id": 4,
        "amount": Decimal("2500.00"),
        "supporters": 2,
        "is_priority": True,
        "images": ["x.png"],
        "name": "Drum kit",
        "status": "COMPLETED",
    }
    # Input is not mutated
    assert row["amount"] == "2500"


@pytest.mark.unit
def test_shape_row_fills_missing_fields():
    record = shape_row({}, money=("total",), counts=("n",), lists=("images",))
    assert record == {"total": Decimal("0.00"), "n": 0, "images": []}
