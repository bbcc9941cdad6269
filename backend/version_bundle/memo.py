"""Single-assignment cell that remembers the outcome of version resolution."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import ResolutionFailure
from .logging_utils import get_logger
from .resolvers import VersionResolver

logger = get_logger("memo")


class VersionState(str, Enum):
    """Lifecycle of a memoized version."""

    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass(frozen=True)
class VersionOutcome:
    """Result of the one resolution attempt: a version or the failure."""

    version: Optional[str] = None
    failure: Optional[ResolutionFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class MemoizedVersion:
    """Resolve a version lazily, at most once, and cache the outcome.

    The first caller of :meth:`get` runs the resolver while holding the lock;
    concurrent callers wait on the same lock and then read the stored outcome.
    Failures are cached as well, unless ``retry_failures`` is set, in which case
    a failed cell is resolved again on the next call (still one caller at a time).
    """

    def __init__(self, resolver: VersionResolver, *, retry_failures: bool = False) -> None:
        self._resolver = resolver
        self._retry_failures = retry_failures
        self._lock = threading.Lock()
        self._outcome: Optional[VersionOutcome] = None

    @property
    def state(self) -> VersionState:
        outcome = self._outcome
        if outcome is None:
            return VersionState.UNRESOLVED
        return VersionState.RESOLVED if outcome.ok else VersionState.FAILED

    def get(self) -> VersionOutcome:
        """Return the cached outcome, resolving it first if needed."""
        outcome = self._outcome
        if outcome is not None and (outcome.ok or not self._retry_failures):
            return outcome

        with self._lock:
            outcome = self._outcome
            if outcome is not None and (outcome.ok or not self._retry_failures):
                return outcome
            outcome = self._resolve()
            self._outcome = outcome
            return outcome

    def _resolve(self) -> VersionOutcome:
        try:
            version = self._resolver.resolve()
        except ResolutionFailure as exc:
            logger.error("Version resolution failed: %s", exc.message)
            return VersionOutcome(failure=exc)
        except BaseException as exc:
            logger.exception("Version resolver %r raised unexpectedly.", self._resolver)
            failure = ResolutionFailure(f"{type(exc).__name__}: {exc}")
            failure.__cause__ = exc
            outcome = VersionOutcome(failure=failure)
            if isinstance(exc, (KeyboardInterrupt, SystemExit)):
                # get() holds the lock here.
                self._outcome = outcome
                raise
            return outcome

        if not isinstance(version, str):
            logger.error("Version resolver %r returned %r.", self._resolver, version)
            return VersionOutcome(
                failure=ResolutionFailure(
                    f"Version resolver returned {type(version).__name__}, expected a string."
                )
            )

        logger.info("Resolved application version %s.", version)
        return VersionOutcome(version=version)
