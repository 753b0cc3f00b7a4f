"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh SQLite database file with foreign keys enforced,
wired into the app by overriding the session dependency.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from src.tracker.api.dependencies import get_db_session
from src.tracker.core.db import get_session
from src.tracker.main import create_app
from src.tracker.models import Deliverable, Project
from tests.factories import DeliverableFactory, ProjectFactory, days_from_now


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a per-test database with all tables."""
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'tracker.db'}",
        poolclass=NullPool,
    )

    @event.listens_for(test_engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for arranging test data.

    Tests must call `await session.commit()` to make rows visible to the app.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def app(engine: AsyncEngine):
    """Create the app with request sessions bound to the test engine."""
    application = create_app()

    async def _test_db_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    application.dependency_overrides[get_db_session] = _test_db_session
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def seeded(db_session: AsyncSession) -> dict:
    """Two projects with deliverables inserted out of due-date order.

    Returns:
        Dict with `alpha`, `beta` (Projects) and `deliverables` (all rows).
    """
    alpha = ProjectFactory.build(name="Alpha Program")
    beta = ProjectFactory.build(name="Beta Operations")
    db_session.add_all([alpha, beta])
    await db_session.flush()

    deliverables: list[Deliverable] = [
        DeliverableFactory.build(
            project_id=alpha.id,
            title="Annual filing",
            due_date=days_from_now(200),
            frequency="A",
        ),
        DeliverableFactory.build(
            project_id=alpha.id,
            title="Monthly KPI pack",
            due_date=days_from_now(5),
            frequency="M",
        ),
        DeliverableFactory.build(
            project_id=beta.id,
            title="Quarterly audit",
            due_date=days_from_now(60),
            frequency="Q",
            manager="Lee Chen",
        ),
        DeliverableFactory.overdue(project_id=beta.id, title="Licence renewal", frequency="SA"),
    ]
    db_session.add_all(deliverables)
    await db_session.commit()
    return {"alpha": alpha, "beta": beta, "deliverables": deliverables}


@pytest.fixture
async def empty_project(db_session: AsyncSession) -> Project:
    project = ProjectFactory.build(name="Gamma Empty")
    db_session.add(project)
    await db_session.commit()
    return project
