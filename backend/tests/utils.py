"""Testing utilities: resolvers that record how often they are called."""

from __future__ import annotations

import threading
import time
from typing import Optional


class CountingResolver:
    """Resolver stub that counts invocations and can fail or stall on demand."""

    def __init__(
        self,
        version: str = "1.2.3",
        *,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ) -> None:
        self.version = version
        self.error = error
        self.delay = delay
        self.calls = 0
        self._lock = threading.Lock()

    def resolve(self) -> str:
        with self._lock:
            self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.version


class ChangingResolver(CountingResolver):
    """Resolver that would return a different value on every call."""

    def resolve(self) -> str:
        super().resolve()
        return f"{self.version}+{self.calls}"


def run_concurrently(func, count: int) -> list:
    """Call ``func`` from ``count`` threads released at the same moment."""
    barrier = threading.Barrier(count)
    results: list = [None] * count
    errors: list[BaseException] = []

    def _worker(index: int) -> None:
        try:
            barrier.wait()
            results[index] = func()
        except BaseException as exc:  # surfaced to the calling test below
            errors.append(exc)

    threads = [threading.Thread(target=_worker, args=(index,)) for index in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)
    if errors:
        raise errors[0]
    return results
