"""Unit tests for the withdrawal status transition.

The executor is mocked; these tests check validation and the order of
database calls, not SQL.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import HTTPException
from services.admin_service.models import PaymentStatus
from services.admin_service.services.withdrawals import (
    WITHDRAWAL_TRANSITIONS,
    parse_status,
    update_withdrawal_status,
)


def _executor(current=None):
    executor = AsyncMock()
    executor.scalar.return_value = current
    executor.execute_write.return_value = 1
    return executor


# ---------------------------------------------------------------------------
# parse_status
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("completed", PaymentStatus.COMPLETED),
        ("COMPLETED", PaymentStatus.COMPLETED),
        ("Processing", PaymentStatus.PROCESSING),
        (" failed ", PaymentStatus.FAILED),
        ("pending", PaymentStatus.PENDING),
    ],
)
def test_parse_status_is_case_insensitive(raw, expected):
    assert parse_status(raw) is expected


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["bogus", "", None, "DONE"])
def test_parse_status_rejects_unknown(raw):
    with pytest.raises(HTTPException) as exc_info:
        parse_status(raw)
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Invalid status"


@pytest.mark.unit
def test_every_status_may_follow_every_status():
    for current in PaymentStatus:
        assert WITHDRAWAL_TRANSITIONS[current] == frozenset(PaymentStatus)


# ---------------------------------------------------------------------------
# update_withdrawal_status
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.unit
async def test_invalid_status_never_touches_database():
    executor = _executor(current=PaymentStatus.PENDING)

    with pytest.raises(HTTPException) as exc_info:
        await update_withdrawal_status(executor, 1, "bogus")

    assert exc_info.value.status_code == 400
    executor.scalar.assert_not_awaited()
    executor.execute_write.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.unit
async def test_unknown_withdrawal_is_404():
    executor = _executor(current=None)

    with pytest.raises(HTTPException) as exc_info:
        await update_withdrawal_status(executor, 999, "completed")

    assert exc_info.value.status_code == 404
    executor.execute_write.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.unit
async def test_update_writes_normalized_status():
    executor = _executor(current=PaymentStatus.PENDING)

    result = await update_withdrawal_status(executor, 1, "completed")

    assert result is PaymentStatus.COMPLETED
    executor.execute_write.assert_awaited_once()
    statement = executor.execute_write.await_args.args[0]
    params = statement.compile().params
    assert params["status"] == "COMPLETED"
    assert "updated_at" in params


@pytest.mark.asyncio
@pytest.mark.unit
async def test_completed_can_move_back_to_pending():
    executor = _executor(current=PaymentStatus.COMPLETED)

    result = await update_withdrawal_status(executor, 1, "PENDING")

    assert result is PaymentStatus.PENDING
    executor.execute_write.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.unit
async def test_lowercase_stored_status_is_read_case_insensitively():
    executor = _executor(current="completed")

    result = await update_withdrawal_status(executor, 1, "FAILED")

    assert result is PaymentStatus.FAILED
    executor.execute_write.assert_awaited_once()
