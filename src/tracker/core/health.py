"""Health check endpoint with database validation."""

from typing import Any

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text

from src.tracker.api.dependencies import DBSession


def setup_health_endpoint(app: FastAPI) -> None:
    """Configure the health check endpoint."""

    @app.get("/health", tags=["health"])
    async def health(session: DBSession) -> JSONResponse:
        """Health check that runs a trivial query against the store."""
        health_status: dict[str, Any] = {
            "status": "healthy",
            "database": "unknown",
        }

        try:
            await session.execute(text("SELECT 1"))
            health_status["database"] = "healthy"
        except Exception as e:
            health_status["database"] = f"unhealthy: {str(e)}"
            health_status["status"] = "unhealthy"

        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)
