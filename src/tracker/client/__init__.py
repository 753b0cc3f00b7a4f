"""Client data pipeline: API access plus in-memory filter/sort/paginate."""

from src.tracker.client.api import DeliverablesClient, Snapshot
from src.tracker.client.exceptions import (
    SnapshotLoadError,
    TrackerAPIError,
    TrackerClientError,
)
from src.tracker.client.pipeline import (
    PAGE_SIZE,
    DateRange,
    DateRangeToken,
    Filters,
    filter_deliverables,
    get_date_range,
    paginate,
    sort_by_due_date,
    total_pages,
)
from src.tracker.client.state import ViewState
from src.tracker.client.urgency import URGENCY_COLORS, Urgency, classify_urgency

__all__ = [
    # API
    "DeliverablesClient",
    "Snapshot",
    # Errors
    "SnapshotLoadError",
    "TrackerAPIError",
    "TrackerClientError",
    # Pipeline
    "PAGE_SIZE",
    "DateRange",
    "DateRangeToken",
    "Filters",
    "filter_deliverables",
    "get_date_range",
    "paginate",
    "sort_by_due_date",
    "total_pages",
    # State
    "ViewState",
    # Urgency
    "URGENCY_COLORS",
    "Urgency",
    "classify_urgency",
]
