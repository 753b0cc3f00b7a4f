"""Repository for Deliverable entity."""

from sqlalchemy.orm import selectinload
from sqlmodel import select

from src.tracker.models import Deliverable
from src.tracker.repositories.base import BaseRepository


class DeliverableRepository(BaseRepository[Deliverable]):
    """Repository for Deliverable entity.

    Every read eagerly loads the parent project, since responses embed it.
    """

    model = Deliverable

    def _with_project(self):
        return select(Deliverable).options(
            selectinload(Deliverable.project)  # type: ignore[arg-type]
        )

    async def list_for_project(self, project_id: int) -> list[Deliverable]:
        """List a project's deliverables ordered by due date."""
        query = (
            self._with_project()
            .where(Deliverable.project_id == project_id)
            .order_by(Deliverable.due_date, Deliverable.id)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_all(self) -> list[Deliverable]:
        """List every deliverable with its project, ordered by due date."""
        query = self._with_project().order_by(Deliverable.due_date, Deliverable.id)
        result = await self.session.execute(query)
        return list(result.scalars().all())
