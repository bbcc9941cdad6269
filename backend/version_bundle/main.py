"""Entry point for the administrative API that serves the version endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from .bundle import VersionBundle
from .config import Settings, get_settings
from .logging_utils import get_logger
from .resolvers import VersionResolver

logger = get_logger("admin")


def create_admin_app(
    settings: Optional[Settings] = None,
    resolver: Optional[VersionResolver] = None,
) -> FastAPI:
    """Instantiate the admin FastAPI application with the version endpoint installed.

    ``resolver`` overrides the one derived from ``settings``.
    """
    settings = settings or get_settings()
    bundle = VersionBundle(
        resolver if resolver is not None else settings.build_resolver(),
        settings.version_url,
        retry_failures=settings.retry_failures,
    )

    app = FastAPI(
        title="Version Admin API",
        description="Administrative listener exposing the application version.",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.version_endpoint = bundle.run(app)
    logger.debug("Admin app created with version URL %s.", bundle.url)
    return app


app = create_admin_app()
