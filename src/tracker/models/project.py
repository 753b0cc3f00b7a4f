"""Project model - owner of deliverables."""

from typing import TYPE_CHECKING

from sqlalchemy import Index
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from src.tracker.models.deliverable import Deliverable


class Project(SQLModel, table=True):
    """Project grouping recurring deliverables.

    Projects are created by seed data or migrations; the API only reads them.
    """

    __tablename__ = "Project"
    __table_args__ = (Index("Project_name_key", "name", unique=True),)

    id: int | None = Field(default=None, primary_key=True)
    name: str

    deliverables: list["Deliverable"] = Relationship(back_populates="project")
