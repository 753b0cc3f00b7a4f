"""Project schemas for API responses."""

from pydantic import BaseModel


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: int
    name: str

    model_config = {"from_attributes": True}
