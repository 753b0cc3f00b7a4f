"""Tests for the project listing endpoint."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from src.tracker.api.dependencies import get_project_repository

pytestmark = pytest.mark.integration


async def test_list_projects_ordered_by_name(client: AsyncClient, seeded, empty_project):
    response = await client.get("/api/projects")

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == [
        "Alpha Program",
        "Beta Operations",
        "Gamma Empty",
    ]


async def test_list_projects_returns_id_and_name_only(client: AsyncClient, seeded):
    response = await client.get("/api/projects")

    first = response.json()[0]
    assert set(first) == {"id", "name"}
    assert first["id"] == seeded["alpha"].id


async def test_search_is_case_insensitive_substring(client: AsyncClient, seeded):
    response = await client.get("/api/projects", params={"search": "OPERAT"})

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Beta Operations"]


async def test_empty_search_returns_all_projects(client: AsyncClient, seeded):
    response = await client.get("/api/projects", params={"search": ""})

    assert len(response.json()) == 2


async def test_search_treats_wildcards_literally(client: AsyncClient, seeded):
    response = await client.get("/api/projects", params={"search": "%"})

    assert response.status_code == 200
    assert response.json() == []


async def test_no_projects_returns_empty_list(client: AsyncClient):
    response = await client.get("/api/projects")

    assert response.status_code == 200
    assert response.json() == []


async def test_storage_failure_returns_500_with_message(app, client: AsyncClient):
    """Database errors surface as 500 with the raw message echoed."""
    repo = MagicMock()
    repo.search = AsyncMock(
        side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
    )
    app.dependency_overrides[get_project_repository] = lambda: repo

    response = await client.get("/api/projects")

    assert response.status_code == 500
    data = response.json()
    assert "connection refused" in data["error"]
    assert "request_id" in data
