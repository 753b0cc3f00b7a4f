"""Deliverable endpoints - the full joined listing used by the UI snapshot."""

from fastapi import APIRouter

from src.tracker.api.dependencies import DeliverableRepo
from src.tracker.schemas import DeliverableRead

router = APIRouter(prefix="/deliverables", tags=["deliverables"])


@router.get(
    "",
    response_model=list[DeliverableRead],
    summary="List all deliverables",
    description="List every deliverable with its project in one query, ordered by due date.",
)
async def list_deliverables(repo: DeliverableRepo) -> list[DeliverableRead]:
    """List all deliverables across projects."""
    deliverables = await repo.list_all()
    return [DeliverableRead.model_validate(d) for d in deliverables]
