"""Repository layer - data access abstraction."""

from src.tracker.repositories.base import BaseRepository
from src.tracker.repositories.deliverable import DeliverableRepository
from src.tracker.repositories.project import ProjectRepository

__all__ = [
    "BaseRepository",
    "DeliverableRepository",
    "ProjectRepository",
]
