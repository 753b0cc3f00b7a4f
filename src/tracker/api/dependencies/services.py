"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.tracker.api.dependencies.db import DBSession
from src.tracker.api.dependencies.repositories import DeliverableRepo, ProjectRepo
from src.tracker.services import DeliverableService


def get_deliverable_service(
    project_repo: ProjectRepo,
    deliverable_repo: DeliverableRepo,
    session: DBSession,
) -> DeliverableService:
    """Get deliverable service."""
    return DeliverableService(project_repo, deliverable_repo, session)


DeliverableServiceDep = Annotated[DeliverableService, Depends(get_deliverable_service)]
