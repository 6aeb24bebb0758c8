"""Datetime utilities for timezone-aware UTC timestamps.

Usage:
    from libs.common.datetime_utils import utc_now

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC datetime.

    This replaces the deprecated datetime.utcnow() which returns naive datetimes.
    """
    return datetime.now(timezone.utc)


def month_label(year_month: str) -> str:
    """Short month name for a ``YYYY-MM`` bucket key, e.g. ``"2024-03"`` -> ``"Mar"``."""
    return datetime.strptime(year_month, "%Y-%m").strftime("%b")
