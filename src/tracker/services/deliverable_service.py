"""Deliverable creation service."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.tracker.core.logging import get_logger
from src.tracker.models import Deliverable
from src.tracker.repositories import DeliverableRepository, ProjectRepository
from src.tracker.schemas.deliverable import DeliverableCreate

logger = get_logger(__name__)


class DeliverableService:
    """Deliverable business logic - owns the write transaction."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        deliverable_repo: DeliverableRepository,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.deliverable_repo = deliverable_repo
        self.session = session

    async def create_deliverable(
        self, project_id: int, request: DeliverableCreate
    ) -> Deliverable:
        """Create a deliverable under an existing project.

        Args:
            project_id: Owning project ID
            request: Validated creation payload

        Returns:
            The persisted deliverable with its project attached

        Raises:
            ValueError: If the project does not exist (including a foreign-key
                violation when the project disappears before commit)
        """
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            logger.info("Rejected deliverable for unknown project", project_id=project_id)
            raise ValueError(f"Project {project_id} does not exist")

        deliverable = Deliverable(
            project_id=project_id,
            title=request.title,
            due_date=request.due_date,
            frequency=request.frequency.value,
            manager=request.manager,
        )
        deliverable.project = project
        self.deliverable_repo.add(deliverable)

        try:
            await self.session.commit()
        except IntegrityError as e:
            # Fallback in case the project is removed concurrently
            await self.session.rollback()
            raise ValueError(f"Project {project_id} does not exist") from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "deliverable_created",
            deliverable_id=deliverable.id,
            project_id=project_id,
            due_date=deliverable.due_date.isoformat(),
        )
        return deliverable
