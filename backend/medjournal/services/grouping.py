# date grouping for journal and mood entries
# keys are calendar-date strings (YYYY-MM-DD) taken verbatim from the stored value

from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")

DateKeyFn = Callable[[T], str]


def entry_date_key(entry) -> str:
    """calendar date of an entry: journal date, or the date part of a mood timestamp"""
    return entry.date_key


def group_by_date(
    entries: Iterable[T],
    date_key: Optional[DateKeyFn] = None,
) -> dict[str, list[T]]:
    """group entries by calendar date.

    entries keep their relative order within a date; the returned mapping
    iterates in ascending date order.
    """
    key_fn = date_key or entry_date_key
    groups: dict[str, list[T]] = {}
    for entry in entries:
        groups.setdefault(key_fn(entry), []).append(entry)
    return {day: groups[day] for day in sorted(groups)}
