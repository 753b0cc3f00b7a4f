"""
API server entry point.

Run with:
    uv run python -m src.tracker.server                 # host/port from settings
    uv run python -m src.tracker.server --port 8080     # override the port
    uv run python -m src.tracker.server --migrate       # apply migrations first
"""

import argparse

import uvicorn

from src.tracker.core.config import get_settings
from src.tracker.core.db import run_migrations_sync
from src.tracker.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse CLI arguments for the API server."""
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Deliverables tracker API server")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Listen port")
    parser.add_argument(
        "--migrate",
        action="store_true",
        help="Apply database migrations before serving",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = get_settings()
    setup_logging(settings.debug)

    if args.migrate:
        logger.info("Applying database migrations")
        run_migrations_sync()

    logger.info(f"Server running on http://{args.host}:{args.port}")
    uvicorn.run(
        "src.tracker.main:app",
        host=args.host,
        port=args.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
