# windowed aggregation over entry collections
# pure functions: every call takes the entry snapshot it works on
#
#   daily_average   - mean of one field for the entries of a single date
#   trailing_window - per-date averages for the last N dates that have data
#   rolling_mean    - mean of one field over every entry on/after a start date
#
# rolling means default to 0 when nothing qualifies; the alert thresholds
# are calibrated against that neutral default.

import math
from datetime import date, timedelta
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Sequence, Union

from medjournal.services.grouping import DateKeyFn, entry_date_key, group_by_date

DateLike = Union[date, str]


def round_display(value: float, places: int = 1) -> float:
    """round for display, halves away from zero (2.25 -> 2.3, -2.25 -> -2.3).

    nan and infinities pass through unchanged. precision grows with the
    magnitude so unclamped values such as 1e30 round instead of raising.
    """
    if not math.isfinite(value):
        return value
    number = Decimal(str(value))
    context = Context(prec=max(number.adjusted(), 0) + places + 2)
    quantum = Decimal(1).scaleb(-places)
    return float(number.quantize(quantum, rounding=ROUND_HALF_UP, context=context))


def _as_key(day: DateLike) -> str:
    return day.isoformat() if isinstance(day, date) else str(day)[:10]


def window_start(today: date, days: int) -> date:
    """first calendar date of a window of `days` dates ending on `today`"""
    return today - timedelta(days=max(days, 1) - 1)


def _mean(values: Sequence[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def daily_average(entries_for_date: Sequence, field: str) -> Optional[float]:
    """arithmetic mean of `field` across the entries of one date, None when empty"""
    return _mean([getattr(entry, field) for entry in entries_for_date])


def entries_since(entries: Iterable, since: DateLike, date_key: Optional[DateKeyFn] = None) -> list:
    """entries whose calendar date is on or after `since`, in their original order"""
    key_fn = date_key or entry_date_key
    start = _as_key(since)
    return [entry for entry in entries if key_fn(entry) >= start]


def rolling_mean(
    entries: Iterable,
    since: DateLike,
    field: str,
    date_key: Optional[DateKeyFn] = None,
) -> float:
    """mean of `field` over every entry on or after `since`; 0 when none qualify"""
    window = entries_since(entries, since, date_key)
    value = daily_average(window, field)
    return 0.0 if value is None else value


def trailing_window(
    entries: Iterable,
    days: int,
    fields: Sequence[str],
    date_key: Optional[DateKeyFn] = None,
) -> list[dict]:
    """per-date averages for the most recent `days` dates that have entries.

    gaps are skipped, so the window spans the last N dates with data rather
    than the last N calendar days. points are ascending by date and carry
    the entry count plus one rounded average per field.
    """
    if days <= 0:
        return []

    groups = group_by_date(entries, date_key)
    recent = list(groups.items())[-days:]

    points = []
    for day, day_entries in recent:
        point = {"date": day, "count": len(day_entries)}
        for field in fields:
            point[field] = round_display(daily_average(day_entries, field))
        points.append(point)
    return points
