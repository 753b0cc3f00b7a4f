"""Deliverable schemas for API request/response.

Wire names are camelCase (`dueDate`, `projectId`); attributes are snake_case.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from src.tracker.models.base import to_naive_utc
from src.tracker.models.enums import Frequency
from src.tracker.schemas.project import ProjectRead


class DeliverableCreate(BaseModel):
    """Schema for creating a deliverable under a project."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    due_date: datetime
    frequency: Frequency
    manager: str

    @field_validator("title", "manager")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace only")
        return v

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class DeliverableRead(BaseModel):
    """Schema for reading a deliverable joined with its project."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    project_id: int
    title: str
    due_date: datetime
    # Stored as free text; rows written outside the API may hold other codes
    frequency: str | None
    manager: str
    project: ProjectRead
