"""Project endpoints - project search and per-project deliverables."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from src.tracker.api.dependencies import (
    DeliverableRepo,
    DeliverableServiceDep,
    ProjectId,
    ProjectRepo,
)
from src.tracker.schemas import DeliverableCreate, DeliverableRead, ProjectRead

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List projects ordered by name, optionally filtered by a name substring.",
    responses={
        200: {"description": "Projects ordered by name"},
    },
)
async def list_projects(
    repo: ProjectRepo,
    search: Annotated[
        str | None, Query(description="Case-insensitive substring of the project name")
    ] = None,
) -> list[ProjectRead]:
    """List projects, optionally filtered by name."""
    projects = await repo.search(search)
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}/deliverables",
    response_model=list[DeliverableRead],
    summary="List project deliverables",
    description="List a project's deliverables ordered by due date, each with its project.",
    responses={
        200: {"description": "Deliverables ordered by due date"},
        400: {"description": "Invalid project ID"},
    },
)
async def list_project_deliverables(
    project_id: ProjectId,
    repo: DeliverableRepo,
) -> list[DeliverableRead]:
    """List deliverables belonging to a project."""
    deliverables = await repo.list_for_project(project_id)
    return [DeliverableRead.model_validate(d) for d in deliverables]


@router.post(
    "/{project_id}/deliverables",
    response_model=DeliverableRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create deliverable",
    description="Create a deliverable under an existing project.",
    responses={
        201: {"description": "Deliverable created"},
        400: {"description": "Invalid input or unknown project"},
    },
)
async def create_deliverable(
    project_id: ProjectId,
    request: DeliverableCreate,
    service: DeliverableServiceDep,
) -> DeliverableRead:
    """Create a new deliverable."""
    try:
        deliverable = await service.create_deliverable(project_id, request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return DeliverableRead.model_validate(deliverable)
