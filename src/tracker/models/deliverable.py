"""Deliverable model - a recurring obligation owned by a project."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlmodel import Field, Relationship, SQLModel

from src.tracker.models.project import Project


class Deliverable(SQLModel, table=True):
    """Deliverable row.

    Column names follow the camelCase persisted schema (`projectId`,
    `dueDate`); Python attributes stay snake_case.
    """

    __tablename__ = "Deliverable"

    id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(
        sa_column=Column(
            "projectId",
            Integer,
            ForeignKey("Project.id", ondelete="RESTRICT", onupdate="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    title: str = Field(nullable=False)
    due_date: datetime = Field(sa_column=Column("dueDate", DateTime(), nullable=False))
    # Stored as the frequency code; nullable for rows created outside the API
    frequency: str | None = Field(
        default=None, sa_column=Column("frequency", String, nullable=True)
    )
    manager: str = Field(nullable=False)

    project: Project = Relationship(back_populates="deliverables")
