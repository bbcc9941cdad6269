"""Wire a version endpoint into a host FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from .endpoint import DEFAULT_URL, VersionEndpoint
from .logging_utils import get_logger
from .resolvers import VersionResolver

ROUTE_NAME = "version"
# HEAD is added by Starlette alongside GET.
ROUTED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")

logger = get_logger("bundle")


class VersionBundle:
    """Expose the application's version on an administrative app.

    The resolver is validated here, so a bad configuration fails at startup
    before anything is registered. ``run`` mounts the endpoint for every
    method so that non-GET requests get the endpoint's own 405 response.
    """

    def __init__(
        self,
        resolver: VersionResolver,
        url: str = DEFAULT_URL,
        *,
        retry_failures: bool = False,
    ) -> None:
        self.endpoint = VersionEndpoint(resolver, url, retry_failures=retry_failures)

    @property
    def url(self) -> str:
        return self.endpoint.url

    def run(self, app: FastAPI) -> VersionEndpoint:
        """Register the endpoint on ``app`` and return it."""
        app.add_route(
            self.endpoint.url,
            self.endpoint.handle_request,
            methods=list(ROUTED_METHODS),
            name=ROUTE_NAME,
            include_in_schema=False,
        )
        logger.info(
            "Registered version endpoint at %s using %r.",
            self.endpoint.url,
            self.endpoint.resolver,
        )
        return self.endpoint
