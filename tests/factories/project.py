"""Project and deliverable factories for test data generation."""

from itertools import count

from polyfactory import Use

from src.tracker.models import Deliverable, Frequency, Project
from tests.factories.base import BaseFactory, days_from_now

_sequence = count(1)


class ProjectFactory(BaseFactory):
    """Factory for generating Project test data."""

    __model__ = Project

    name = Use(lambda: f"Project {next(_sequence):04d}")


class DeliverableFactory(BaseFactory):
    """Factory for generating Deliverable test data.

    `project_id` must be passed explicitly.
    """

    __model__ = Deliverable

    title = Use(lambda: f"Report {next(_sequence):04d}")
    due_date = Use(days_from_now, 30)
    frequency = Frequency.MONTHLY.value
    manager = "Dana Smith"

    @classmethod
    def overdue(cls, **kwargs):
        """Create a deliverable due ten days ago."""
        return cls.build(due_date=days_from_now(-10), **kwargs)
