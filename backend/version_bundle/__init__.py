"""Expose an application's version, resolved once, on an admin HTTP listener."""

from .bundle import VersionBundle
from .endpoint import DEFAULT_URL, VersionEndpoint
from .errors import InvalidArgument, MethodNotAllowed, ResolutionFailure, VersionBundleError
from .memo import MemoizedVersion, VersionOutcome, VersionState
from .resolvers import (
    CallableVersionResolver,
    FileVersionResolver,
    PackageVersionResolver,
    StaticVersionResolver,
    VersionResolver,
    as_resolver,
)

__all__ = [
    "CallableVersionResolver",
    "DEFAULT_URL",
    "FileVersionResolver",
    "InvalidArgument",
    "MemoizedVersion",
    "MethodNotAllowed",
    "PackageVersionResolver",
    "ResolutionFailure",
    "StaticVersionResolver",
    "VersionBundle",
    "VersionBundleError",
    "VersionEndpoint",
    "VersionOutcome",
    "VersionResolver",
    "VersionState",
    "as_resolver",
]
