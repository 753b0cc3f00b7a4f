"""Model exports.

Import from here: `from src.tracker.models import Project, Deliverable`
"""

from src.tracker.models.deliverable import Deliverable
from src.tracker.models.enums import Frequency
from src.tracker.models.project import Project

__all__ = [
    # Enums
    "Frequency",
    # Tables
    "Deliverable",
    "Project",
]
