"""Shared pytest fixtures for the version bundle tests."""

from __future__ import annotations

from pathlib import Path

import sys

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
WORKSPACE_ROOT = ROOT.parent
for path in (ROOT, WORKSPACE_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from version_bundle.config import Settings  # noqa: E402
from version_bundle.main import create_admin_app  # noqa: E402
from backend.tests.utils import CountingResolver  # noqa: E402


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway VERSION file."""
    version_file = tmp_path / "VERSION"
    version_file.write_text("4.5.6\n", encoding="utf8")
    return Settings(
        version_url="/version",
        static_version=None,
        package_name=None,
        version_file=version_file,
        retry_failures=False,
    )


@pytest.fixture()
def resolver() -> CountingResolver:
    return CountingResolver("1.2.3")


@pytest.fixture()
def admin_client(settings: Settings, resolver: CountingResolver) -> TestClient:
    """Provide a TestClient for an admin app backed by the counting resolver."""
    app = create_admin_app(settings, resolver)
    with TestClient(app) as client:
        yield client
