"""Test helper functions for building client-side records."""

from datetime import datetime
from itertools import count

from src.tracker.models.enums import Frequency
from src.tracker.schemas import DeliverableRead, ProjectRead

_ids = count(1)


def build_project(name: str = "Alpha", id: int | None = None) -> ProjectRead:
    return ProjectRead(id=id if id is not None else next(_ids), name=name)


def build_deliverable(
    due_date: datetime,
    *,
    title: str = "Quarterly report",
    manager: str = "Dana Smith",
    frequency: str | None = Frequency.QUARTERLY.value,
    project: ProjectRead | None = None,
    id: int | None = None,
) -> DeliverableRead:
    """Build a DeliverableRead as the client would receive it."""
    project = project or build_project()
    return DeliverableRead(
        id=id if id is not None else next(_ids),
        project_id=project.id,
        title=title,
        due_date=due_date,
        frequency=frequency,
        manager=manager,
        project=project,
    )
