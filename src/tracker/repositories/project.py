"""Repository for Project entity."""

from sqlmodel import select

from src.tracker.models import Project
from src.tracker.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def search(self, search: str | None = None) -> list[Project]:
        """List projects ordered by name, optionally filtered by name.

        Args:
            search: Case-insensitive substring of the project name. LIKE
                wildcards are matched literally. Empty means no filter.

        Returns:
            Matching projects ordered ascending by name.
        """
        query = select(Project)
        if search:
            pattern = Project.name.icontains(search, autoescape=True)  # type: ignore[attr-defined]
            query = query.where(pattern)
        query = query.order_by(Project.name)
        result = await self.session.execute(query)
        return list(result.scalars().all())
