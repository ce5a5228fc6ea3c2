"""Date helpers for timestamps and card dates."""

from __future__ import annotations

from datetime import date, datetime, timezone


def utc_timestamp_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds")


def parse_mmddyyyy(value: str | None) -> date | None:
    """Parse a card date in ``MMDDYYYY`` form.

    Returns ``None`` for anything that is not exactly eight ASCII digits
    forming a real calendar date.
    """
    if not value or len(value) != 8 or not value.isascii() or not value.isdigit():
        return None
    try:
        return date(int(value[4:8]), int(value[0:2]), int(value[2:4]))
    except ValueError:
        return None


def whole_years_between(earlier: date, later: date) -> int:
    years = later.year - earlier.year
    if (later.month, later.day) < (earlier.month, earlier.day):
        years -= 1
    return years
