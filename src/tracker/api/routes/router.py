from fastapi import APIRouter

from src.tracker.api.routes import deliverables, projects

api_router = APIRouter(prefix="/api")
api_router.include_router(projects.router)
api_router.include_router(deliverables.router)
