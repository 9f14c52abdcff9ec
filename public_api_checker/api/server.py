"""FastAPI server for the public API checker."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from public_api_checker import __version__
from public_api_checker.api.health_routes import health_router
from public_api_checker.api.status_routes import status_router
from public_api_checker.checks.registry import make_health_checks
from public_api_checker.config import CheckerSettings, settings as default_settings

logger = logging.getLogger(__name__)


def create_app(
    settings: CheckerSettings | None = None,
    http_client: httpx.Client | None = None,
) -> FastAPI:
    """Create the checker application.

    ``http_client`` lets callers supply the client used for outgoing checks;
    an injected client is left open on shutdown.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Build the check list and the shared HTTP client on startup."""
        client = http_client if http_client is not None else httpx.Client(follow_redirects=True)
        app.state.http_client = client
        app.state.checks = make_health_checks(
            settings.base_url,
            client,
            user=settings.check_user,
            password=settings.check_password,
        )
        logger.info(
            "Checker started on port %d: %d checks against %s (basic auth %s)",
            settings.app_port,
            len(app.state.checks),
            settings.base_url,
            "on" if settings.check_user else "off",
        )

        yield

        # Shutdown
        if http_client is None:
            client.close()

    app = FastAPI(
        title="Public API Checker",
        description="A checker for business level API endpoints",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(health_router)
    app.include_router(status_router)

    return app
