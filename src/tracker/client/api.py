"""Async HTTP client for the tracker API."""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Self

import httpx
from pydantic import TypeAdapter, ValidationError

from src.tracker.client.exceptions import SnapshotLoadError, TrackerAPIError
from src.tracker.core.logging import get_logger
from src.tracker.models.enums import Frequency
from src.tracker.schemas import DeliverableRead, ProjectRead

logger = get_logger(__name__)

_projects_adapter = TypeAdapter(list[ProjectRead])
_deliverables_adapter = TypeAdapter(list[DeliverableRead])


@dataclass(frozen=True)
class Snapshot:
    """Full in-memory copy of projects and their deliverables."""

    projects: list[ProjectRead] = field(default_factory=list)
    deliverables: list[DeliverableRead] = field(default_factory=list)


class DeliverablesClient:
    """Client for the `/api` endpoints.

    Usage:
        async with DeliverablesClient("http://localhost:4000/api") as client:
            snapshot = await client.load_snapshot()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise TrackerAPIError(f"Request to {url} failed: {e}") from e

        if response.is_error:
            message = f"Request failed with status {response.status_code}"
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and body.get("error"):
                message = str(body["error"])
            raise TrackerAPIError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise TrackerAPIError(
                "Invalid JSON response", status_code=response.status_code
            ) from e

    async def list_projects(self, search: str | None = None) -> list[ProjectRead]:
        """List projects ordered by name, optionally filtered by name."""
        params = {"search": search} if search else None
        data = await self._request("GET", "/projects", params=params)
        return _projects_adapter.validate_python(data)

    async def list_deliverables(self, project_id: int) -> list[DeliverableRead]:
        """List one project's deliverables ordered by due date."""
        data = await self._request("GET", f"/projects/{project_id}/deliverables")
        return _deliverables_adapter.validate_python(data)

    async def list_all_deliverables(self) -> list[DeliverableRead]:
        """List every deliverable with its project in a single request."""
        data = await self._request("GET", "/deliverables")
        return _deliverables_adapter.validate_python(data)

    async def create_deliverable(
        self,
        project_id: int,
        *,
        title: str,
        due_date: datetime,
        frequency: Frequency | str,
        manager: str,
    ) -> DeliverableRead:
        """Create a deliverable; server validation errors raise TrackerAPIError."""
        payload = {
            "title": title,
            "dueDate": due_date.isoformat(),
            "frequency": Frequency(frequency).value,
            "manager": manager,
        }
        data = await self._request(
            "POST", f"/projects/{project_id}/deliverables", json=payload
        )
        return DeliverableRead.model_validate(data)

    async def load_snapshot(self) -> Snapshot:
        """Load projects and all deliverables with two requests.

        Raises:
            SnapshotLoadError: If either request fails.
        """
        try:
            projects, deliverables = await asyncio.gather(
                self.list_projects(),
                self.list_all_deliverables(),
            )
        except (TrackerAPIError, ValidationError) as e:
            logger.warning("Snapshot load failed", error=str(e))
            raise SnapshotLoadError("Failed to load deliverables") from e
        return Snapshot(projects=projects, deliverables=deliverables)

    async def load_snapshot_by_project(self) -> Snapshot:
        """Load the snapshot by fanning out one request per project.

        All per-project requests run concurrently; if any fails the whole
        load fails and no partial data is returned.

        Raises:
            SnapshotLoadError: If the project list or any project's
                deliverables cannot be fetched.
        """
        try:
            projects = await self.list_projects()
            results = await asyncio.gather(
                *(self.list_deliverables(p.id) for p in projects)
            )
        except (TrackerAPIError, ValidationError) as e:
            logger.warning("Snapshot load failed", error=str(e))
            raise SnapshotLoadError("Failed to load deliverables") from e

        deliverables = [d for batch in results for d in batch]
        return Snapshot(projects=projects, deliverables=deliverables)
