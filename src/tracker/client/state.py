"""View state for the deliverables table.

`ViewState` owns the snapshot, the filter inputs and the current page.
Derived values (filtered list, page slice) are recomputed from those on
every access through the pure functions in `pipeline`.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime

from src.tracker.client.api import Snapshot
from src.tracker.client.pipeline import (
    PAGE_SIZE,
    Filters,
    filter_deliverables,
    paginate,
    sort_by_due_date,
    total_pages as page_count,
)
from src.tracker.models.base import utc_now
from src.tracker.schemas import DeliverableRead


@dataclass
class ViewState:
    snapshot: Snapshot = field(default_factory=Snapshot)
    filters: Filters = field(default_factory=Filters)
    page: int = 1
    page_size: int = PAGE_SIZE
    clock: Callable[[], datetime] = utc_now

    # -- inputs -----------------------------------------------------------

    def set_search(self, search: str) -> None:
        self._update_filters(search=search)

    def set_project_filter(self, project: str) -> None:
        self._update_filters(project=project)

    def set_date_filter(self, date_range: str) -> None:
        self._update_filters(date_range=date_range)

    def _update_filters(self, **changes: str) -> None:
        updated = replace(self.filters, **changes)
        if updated != self.filters:
            self.filters = updated
            self.page = 1

    def replace_snapshot(self, snapshot: Snapshot) -> None:
        """Swap in a freshly loaded snapshot; the page index is kept."""
        self.snapshot = snapshot

    # -- navigation -------------------------------------------------------

    def next_page(self) -> None:
        if self.page < self.total_pages:
            self.page += 1

    def prev_page(self) -> None:
        if self.page > 1:
            self.page -= 1

    def go_to_page(self, page: int) -> None:
        self.page = page

    # -- derived ----------------------------------------------------------

    @property
    def filtered(self) -> list[DeliverableRead]:
        """Snapshot deliverables after filtering, sorted by due date."""
        matches = filter_deliverables(self.snapshot.deliverables, self.filters, self.clock())
        return sort_by_due_date(matches)

    @property
    def total_pages(self) -> int:
        return page_count(len(self.filtered), self.page_size)

    @property
    def current_page_items(self) -> list[DeliverableRead]:
        return paginate(self.filtered, self.page, self.page_size)
