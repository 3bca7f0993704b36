from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


# Text format SQLite's datetime('now') writes into timestamp columns
STORE_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 datetime string and normalize to UTC-naive datetime.

    - None / "" -> None
    - "YYYY-MM-DD" is midnight of that day
    - "YYYY-MM-DDTHH:MM" (naive) is interpreted as UTC
    - "...Z" or "...+/-HH:MM" is converted to UTC and tzinfo is stripped
    """
    if value is None:
        return None
    s = value.strip()
    if not s:
        return None

    # Accept trailing Z
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    dt = datetime.fromisoformat(s)

    if dt.tzinfo is None:
        return dt

    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def to_store_timestamp(dt: Optional[datetime]) -> Optional[str]:
    """Format a naive UTC datetime the way timestamp columns are stored."""
    if dt is None:
        return None
    return dt.strftime(STORE_TIMESTAMP_FORMAT)


def range_bounds(date_from: Optional[str], date_to: Optional[str]) -> tuple[str | None, str | None]:
    """
    Normalize a caller-supplied date range to stored timestamp text.

    Range filters compare timestamp text, so both bounds are rewritten into
    the "YYYY-MM-DD HH:MM:SS" form. A bare date as the upper bound is
    inclusive through the end of that day.
    """
    start = to_store_timestamp(parse_iso_datetime(date_from))

    end = None
    if date_to and date_to.strip():
        s = date_to.strip()
        if len(s) == 10:
            end = f"{parse_iso_datetime(s).date().isoformat()} 23:59:59"
        else:
            end = to_store_timestamp(parse_iso_datetime(s))

    return start, end
