"""Request handler that serves the memoized application version."""

from __future__ import annotations

import anyio
from fastapi import Request
from fastapi.responses import JSONResponse

from .errors import InvalidArgument, MethodNotAllowed
from .logging_utils import get_logger
from .memo import MemoizedVersion, VersionOutcome, VersionState
from .resolvers import VersionResolver, as_resolver
from .schemas import VersionErrorResponse, VersionResponse

DEFAULT_URL = "/version"
ALLOWED_METHOD = "GET"

logger = get_logger("endpoint")


def normalize_url(url: object) -> str:
    """Validate the mount path and make sure it starts with a slash."""
    if not isinstance(url, str) or not url.strip():
        raise InvalidArgument("The version endpoint URL must be a non-empty string.")
    url = url.strip()
    return url if url.startswith("/") else f"/{url}"


class VersionEndpoint:
    """Answer GET requests with the application's version.

    The resolver runs on the first GET only; its outcome, success or failure,
    is served to every later request. Other methods get a 405 and never
    trigger resolution. Route registration is left to the caller, see
    :class:`version_bundle.bundle.VersionBundle`.
    """

    def __init__(
        self,
        resolver: VersionResolver,
        url: str = DEFAULT_URL,
        *,
        retry_failures: bool = False,
    ) -> None:
        self._resolver = as_resolver(resolver)
        self._url = normalize_url(url)
        self._memo = MemoizedVersion(self._resolver, retry_failures=retry_failures)

    @property
    def url(self) -> str:
        return self._url

    @property
    def resolver(self) -> VersionResolver:
        return self._resolver

    @property
    def state(self) -> VersionState:
        return self._memo.state

    def handle(self, method: str) -> JSONResponse:
        """Build the response for a request made with ``method``.

        Blocks while the resolver runs on the first GET.
        """
        try:
            self._check_method(method)
        except MethodNotAllowed as exc:
            logger.debug("Rejected %s request to %s.", exc.method, self._url)
            return self._method_not_allowed()
        return self._render(self._memo.get())

    async def handle_request(self, request: Request) -> JSONResponse:
        """Starlette endpoint; resolution runs on a worker thread."""
        try:
            self._check_method(request.method)
        except MethodNotAllowed as exc:
            logger.debug("Rejected %s request to %s.", exc.method, request.url.path)
            return self._method_not_allowed()
        outcome = await anyio.to_thread.run_sync(self._memo.get)
        return self._render(outcome)

    @staticmethod
    def _check_method(method: str) -> None:
        if (method or "").upper() != ALLOWED_METHOD:
            raise MethodNotAllowed(method)

    @staticmethod
    def _method_not_allowed() -> JSONResponse:
        body = VersionErrorResponse(error="Method Not Allowed")
        return JSONResponse(
            status_code=405,
            content=body.model_dump(),
            headers={"Allow": ALLOWED_METHOD},
        )

    @staticmethod
    def _render(outcome: VersionOutcome) -> JSONResponse:
        if outcome.failure is not None:
            body = VersionErrorResponse(
                error=f"Unable to resolve application version: {outcome.failure.message}"
            )
            return JSONResponse(status_code=500, content=body.model_dump())
        return JSONResponse(
            status_code=200,
            content=VersionResponse(version=outcome.version or "").model_dump(),
        )

    def __repr__(self) -> str:
        return f"VersionEndpoint(url={self._url!r}, state={self.state.value!r})"
