from src.tracker.schemas.deliverable import DeliverableCreate, DeliverableRead
from src.tracker.schemas.project import ProjectRead

__all__ = [
    # Deliverable
    "DeliverableCreate",
    "DeliverableRead",
    # Project
    "ProjectRead",
]
