"""Runtime configuration for the administrative app."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from .endpoint import DEFAULT_URL
from .resolvers import (
    DEFAULT_VERSION_FILE,
    FileVersionResolver,
    PackageVersionResolver,
    StaticVersionResolver,
    VersionResolver,
)

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Admin app settings sourced from environment variables."""

    version_url: str
    static_version: Optional[str]
    package_name: Optional[str]
    version_file: Path
    retry_failures: bool

    @classmethod
    def from_env(cls) -> "Settings":
        """Construct settings using environment variables with sane defaults."""
        return cls(
            version_url=os.getenv("VERSION_BUNDLE_URL", DEFAULT_URL),
            static_version=_optional_env("VERSION_BUNDLE_VERSION"),
            package_name=_optional_env("VERSION_BUNDLE_PACKAGE"),
            version_file=Path(
                os.getenv("VERSION_BUNDLE_VERSION_FILE", str(DEFAULT_VERSION_FILE))
            ),
            retry_failures=os.getenv("VERSION_BUNDLE_RETRY_FAILURES", "")
            .strip()
            .lower()
            in TRUTHY,
        )

    def build_resolver(self) -> VersionResolver:
        """Pick a resolver: static value, then installed package, then file."""
        if self.static_version:
            return StaticVersionResolver(self.static_version)
        if self.package_name:
            return PackageVersionResolver(self.package_name)
        return FileVersionResolver(self.version_file)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings.from_env()


def _optional_env(name: str) -> Optional[str]:
    raw = os.getenv(name, "").strip()
    return raw or None
