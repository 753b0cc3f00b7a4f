"""Filter, sort and paginate stages applied to a deliverable snapshot.

All functions are pure: they take the snapshot and the filter inputs and
return new lists, so the UI state object only has to hold the inputs.
"""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from dateutil.relativedelta import relativedelta

from src.tracker.schemas import DeliverableRead

PAGE_SIZE = 10


class DateRangeToken(str, Enum):
    """Named due-date windows offered by the date filter."""

    NEXT_WEEK = "nextWeek"
    NEXT_MONTH = "nextMonth"
    NEXT_QUARTER = "nextQuarter"
    NEXT_6_MONTHS = "next6Months"
    NEXT_YEAR = "nextYear"


_RANGE_OFFSETS: dict[DateRangeToken, relativedelta] = {
    DateRangeToken.NEXT_WEEK: relativedelta(days=7),
    DateRangeToken.NEXT_MONTH: relativedelta(months=1),
    DateRangeToken.NEXT_QUARTER: relativedelta(months=3),
    DateRangeToken.NEXT_6_MONTHS: relativedelta(months=6),
    DateRangeToken.NEXT_YEAR: relativedelta(years=1),
}


@dataclass(frozen=True)
class DateRange:
    """Inclusive `[start, end]` window for due dates."""

    start: datetime
    end: datetime

    def __contains__(self, value: datetime) -> bool:
        return self.start <= value <= self.end


UNBOUNDED = DateRange(start=datetime.min, end=datetime.max)


@dataclass(frozen=True)
class Filters:
    """User-selected filter inputs; empty strings mean "no filter"."""

    search: str = ""
    project: str = ""
    date_range: str = ""


def get_date_range(token: str, now: datetime) -> DateRange:
    """Map a range token to a window starting at today's midnight.

    Month and year offsets are calendar-based and clamp to the end of the
    target month (Jan 31 + 1 month -> Feb 28/29). Empty or unknown tokens
    yield the unbounded range.
    """
    try:
        offset = _RANGE_OFFSETS[DateRangeToken(token)]
    except ValueError:
        return UNBOUNDED
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return DateRange(start=start, end=start + offset)


def matches_search(deliverable: DeliverableRead, term: str) -> bool:
    """True if title, project name, manager or frequency contains `term`."""
    term = term.lower()
    frequency = deliverable.frequency or ""
    return any(
        term in field.lower()
        for field in (
            deliverable.title,
            deliverable.project.name,
            deliverable.manager,
            frequency,
        )
    )


def filter_deliverables(
    deliverables: Iterable[DeliverableRead],
    filters: Filters,
    now: datetime,
) -> list[DeliverableRead]:
    """Apply search, project and date-range filters in that order."""
    result = list(deliverables)

    if filters.search.strip():
        result = [d for d in result if matches_search(d, filters.search)]

    if filters.project:
        result = [d for d in result if str(d.project.id) == filters.project]

    window = get_date_range(filters.date_range, now)
    return [d for d in result if d.due_date in window]


def sort_by_due_date(deliverables: Iterable[DeliverableRead]) -> list[DeliverableRead]:
    """Stable ascending sort by due date."""
    return sorted(deliverables, key=lambda d: d.due_date)


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(count / page_size)


def paginate[T](items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> list[T]:
    """Return the 1-based `page` slice; out-of-range pages are empty."""
    start = (page - 1) * page_size
    if start < 0:
        return []
    return list(items[start : start + page_size])


def days_until(due: datetime, now: datetime) -> float:
    return (due - now) / timedelta(days=1)
