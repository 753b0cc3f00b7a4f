from src.tracker.services.deliverable_service import DeliverableService

__all__ = ["DeliverableService"]
