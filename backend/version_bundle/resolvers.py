"""Version resolvers that can back the version endpoint."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Callable, Optional, Protocol, runtime_checkable

from .errors import InvalidArgument, ResolutionFailure

DEFAULT_VERSION_FILE = Path(__file__).resolve().parents[2] / "VERSION"


@runtime_checkable
class VersionResolver(Protocol):
    """Anything that can produce the application's version string.

    ``resolve`` may be slow or have side effects; the endpoint calls it at
    most once. Failures should be raised as exceptions.
    """

    def resolve(self) -> str:
        ...


class StaticVersionResolver:
    """Return a fixed version string."""

    def __init__(self, version: str) -> None:
        if not version:
            raise InvalidArgument("A static version must be a non-empty string.")
        self.version = version

    def resolve(self) -> str:
        return self.version

    def __repr__(self) -> str:
        return f"StaticVersionResolver({self.version!r})"


class FileVersionResolver:
    """Read the version from a plain text file such as ``VERSION``."""

    def __init__(
        self,
        path: Path | str = DEFAULT_VERSION_FILE,
        *,
        default: Optional[str] = None,
    ) -> None:
        self.path = Path(path)
        self.default = default

    def resolve(self) -> str:
        try:
            version = self.path.read_text(encoding="utf8").strip()
        except FileNotFoundError:
            if self.default is not None:
                return self.default
            raise ResolutionFailure(f"Version file {self.path} does not exist.") from None
        if not version:
            if self.default is not None:
                return self.default
            raise ResolutionFailure(f"Version file {self.path} is empty.")
        return version

    def __repr__(self) -> str:
        return f"FileVersionResolver({str(self.path)!r})"


class PackageVersionResolver:
    """Look up the version of an installed distribution."""

    def __init__(self, distribution: str) -> None:
        if not distribution:
            raise InvalidArgument("A distribution name is required.")
        self.distribution = distribution

    def resolve(self) -> str:
        try:
            return metadata.version(self.distribution)
        except metadata.PackageNotFoundError as exc:
            raise ResolutionFailure(
                f"Distribution {self.distribution!r} is not installed."
            ) from exc

    def __repr__(self) -> str:
        return f"PackageVersionResolver({self.distribution!r})"


class CallableVersionResolver:
    """Adapt a zero-argument callable to the resolver protocol."""

    def __init__(self, func: Callable[[], str]) -> None:
        if not callable(func):
            raise InvalidArgument("Version supplier must be callable.")
        self.func = func

    def resolve(self) -> str:
        return self.func()

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"CallableVersionResolver({name})"


def as_resolver(supplier: object) -> VersionResolver:
    """Return ``supplier`` as a resolver, wrapping bare callables."""
    if supplier is None:
        raise InvalidArgument("A version resolver is required.")
    if callable(getattr(supplier, "resolve", None)):
        return supplier  # type: ignore[return-value]
    if callable(supplier):
        return CallableVersionResolver(supplier)  # type: ignore[arg-type]
    raise InvalidArgument(
        f"{type(supplier).__name__} is neither a version resolver nor a callable."
    )
