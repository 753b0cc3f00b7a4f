"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.tracker.api.dependencies.db import DBSession
from src.tracker.repositories import DeliverableRepository, ProjectRepository


def get_project_repository(session: DBSession) -> ProjectRepository:
    """Get project repository for the request session."""
    return ProjectRepository(session)


def get_deliverable_repository(session: DBSession) -> DeliverableRepository:
    """Get deliverable repository for the request session."""
    return DeliverableRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
DeliverableRepo = Annotated[DeliverableRepository, Depends(get_deliverable_repository)]
