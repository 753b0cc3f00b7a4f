"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, DeliverableFactory
"""

from tests.factories.base import BaseFactory, days_from_now, utc_now
from tests.factories.project import DeliverableFactory, ProjectFactory

__all__ = [
    # Base
    "BaseFactory",
    "days_from_now",
    "utc_now",
    # Models
    "DeliverableFactory",
    "ProjectFactory",
]
