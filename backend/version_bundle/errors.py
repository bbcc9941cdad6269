"""Errors raised by the version endpoint and its resolvers."""

from __future__ import annotations


class VersionBundleError(RuntimeError):
    """Base error for the version bundle."""


class InvalidArgument(VersionBundleError, ValueError):
    """Raised when the endpoint is constructed with a missing resolver or URL."""


class ResolutionFailure(VersionBundleError):
    """Raised when the version resolver fails to produce a version string."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MethodNotAllowed(VersionBundleError):
    """Raised for requests that use any method other than GET."""

    def __init__(self, method: str) -> None:
        super().__init__(f"Method {method} is not allowed; use GET.")
        self.method = method
