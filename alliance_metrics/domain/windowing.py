"""Trailing-window membership, averaging and rounding shared by all aggregations"""

import math
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence
from alliance_metrics.domain.models import ContributionRecord
from alliance_metrics.domain.exceptions import InsufficientDataError


def window_start(end: date, days: int) -> date:
    """First day of the `days`-long window ending on `end`"""
    return end - timedelta(days=days - 1)


def in_range(day: date, end: date, days: int) -> bool:
    """True iff day falls in the inclusive window [end - (days-1), end]"""
    return window_start(end, days) <= day <= end


def average(values: Iterable[float]) -> float:
    """
    Arithmetic mean; 0 for no values.

    An empty window and an all-zero window both average to 0, and
    downstream threshold checks treat them the same.
    """
    values = list(values)
    if not values:
        return 0
    return sum(values) / len(values)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (2.5 -> 3, -2.5 -> -2)"""
    return math.floor(value + 0.5)


def percentage(count: int, total: int) -> int:
    """Rounded share of count in total; total is floored to 1"""
    return round_half_up(count / max(total, 1) * 100)


def window_values(records: Iterable[ContributionRecord], end: date, days: int) -> List[float]:
    """contribution_per_day of every record inside the window ending on `end`"""
    return [r.contribution_per_day for r in records if in_range(r.entry_date, end, days)]


def select_date_range(
    records: Iterable[ContributionRecord],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[ContributionRecord]:
    """Records with start <= entry_date <= end; a missing bound is open"""
    return [
        r for r in records
        if (start is None or r.entry_date >= start) and (end is None or r.entry_date <= end)
    ]


def latest_entry_date(records: Sequence[ContributionRecord]) -> date:
    """Most recent entry_date in the slice, used as the reference date"""
    if not records:
        raise InsufficientDataError("No contribution records in the selected range")
    return max(r.entry_date for r in records)
