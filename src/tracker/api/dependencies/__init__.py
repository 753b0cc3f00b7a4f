"""FastAPI dependency injection definitions.

Re-exports all dependencies so routes import from one place.
"""

# Database
from src.tracker.api.dependencies.db import DBSession, get_db_session

# Path parameters
from src.tracker.api.dependencies.params import ProjectId, parse_project_id

# Repositories
from src.tracker.api.dependencies.repositories import (
    DeliverableRepo,
    ProjectRepo,
    get_deliverable_repository,
    get_project_repository,
)

# Services
from src.tracker.api.dependencies.services import (
    DeliverableServiceDep,
    get_deliverable_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Path parameters
    "ProjectId",
    "parse_project_id",
    # Repositories
    "DeliverableRepo",
    "ProjectRepo",
    "get_deliverable_repository",
    "get_project_repository",
    # Services
    "DeliverableServiceDep",
    "get_deliverable_service",
]
