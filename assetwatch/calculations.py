"""Helper functions for deadline and cost calculations."""

from datetime import date, datetime
from typing import Any, List, Optional

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from .level import WarningLevel

CRITICAL_DAYS = 30
WARNING_DAYS = 60
INFO_DAYS = 90


def parse_date(value: Any) -> Optional[date]:
    """
    Coerce a date-ish value to a calendar date.

    Accepts date, datetime, or ISO 8601 strings (date or timestamp).
    Returns None for missing or unparseable input.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return isoparse(value.strip()).date()
    except (ValueError, OverflowError):
        return None


def as_today(now: Any) -> date:
    """Truncate a date or datetime to its calendar day."""
    if isinstance(now, datetime):
        return now.date()
    return now


def days_remaining(deadline: date, today: date) -> int:
    """Whole calendar days from today until deadline (negative if overdue)."""
    return (deadline - today).days


def classify_level(
    days: int,
    critical_days: int = CRITICAL_DAYS,
    warning_days: int = WARNING_DAYS,
    info_days: Optional[int] = None,
) -> Optional[WarningLevel]:
    """
    Classify days remaining into a warning level.

    Without info_days the split is binary (critical/warning). Returns None
    when the deadline is outside the lookback window.
    """
    if days <= critical_days:
        return WarningLevel.CRITICAL
    if days <= warning_days:
        return WarningLevel.WARNING
    if info_days is not None and days <= info_days:
        return WarningLevel.INFO
    return None


def parse_month(value: Any) -> Optional[date]:
    """Parse 'YYYY-MM' into the first day of that month."""
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value.strip(), "%Y-%m").date()
    except ValueError:
        return None


def month_key(d: date) -> str:
    """Format a date as its 'YYYY-MM' month key."""
    return f"{d.year:04d}-{d.month:02d}"


def next_month(d: date) -> Optional[date]:
    """First day of the month after d, or None past the last representable month."""
    try:
        return d.replace(day=1) + relativedelta(months=1)
    except (ValueError, OverflowError):
        return None


def month_range(start_month: str, end_month: str) -> List[str]:
    """All month keys from start through end, inclusive. Empty if invalid."""
    start = parse_month(start_month)
    end = parse_month(end_month)
    if start is None or end is None or end < start:
        return []
    months = []
    current = start
    while current is not None:
        months.append(month_key(current))
        if current == end:
            break
        current = next_month(current)
    return months


def lease_months(
    contract_start: Any,
    contract_end: Any,
    range_start: date,
    range_end: Optional[date],
) -> int:
    """
    Count billable lease months in the half-open range [range_start, range_end).

    A month is billable when its first day falls within
    [contract_start, contract_end], inclusive on both ends. A range_end of
    None leaves the range open past the last representable month.
    """
    cs = parse_date(contract_start)
    ce = parse_date(contract_end)
    if cs is None or ce is None or cs > ce:
        return 0

    current = range_start.replace(day=1)
    if current < range_start:
        current = next_month(current)

    count = 0
    while current is not None and (range_end is None or current < range_end):
        if cs <= current <= ce:
            count += 1
        current = next_month(current)
    return count
