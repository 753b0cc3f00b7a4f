"""Shared enums for models."""

from enum import Enum


class Frequency(str, Enum):
    """Recurrence code of a deliverable."""

    MONTHLY = "M"
    QUARTERLY = "Q"
    SEMI_ANNUAL = "SA"
    ANNUAL = "A"
