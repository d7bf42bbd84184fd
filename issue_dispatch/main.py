"""Issue dispatch service — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from issue_dispatch.adapters.persistence.database import engine
from issue_dispatch.config import settings
from issue_dispatch.infrastructure.api.routes_dispatch import router as dispatch_router
from issue_dispatch.infrastructure.api.routes_events import router as events_router
from issue_dispatch.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Issue Dispatch",
        description="Automatic nearest-worker assignment for citizen issue reports",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(events_router, prefix="/api")
    app.include_router(dispatch_router, prefix="/api")

    return app


app = create_app()
