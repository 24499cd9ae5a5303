"""Support Desk — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from support_desk.config import settings
from support_desk.infrastructure.api.routes_agents import router as agents_router
from support_desk.infrastructure.api.routes_health import router as health_router
from support_desk.infrastructure.api.routes_issues import router as issues_router
from support_desk.logging_setup import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    configure_logging()
    logger.info("%s started (in-memory store)", settings.app_title)
    yield
    logger.info("%s stopped", settings.app_title)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_title,
        description="Routes customer issues to qualified agents with round-robin fairness",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(agents_router, prefix="/api")
    app.include_router(issues_router, prefix="/api")

    return app


app = create_app()
