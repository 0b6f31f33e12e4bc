"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src and repository root to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    for import_root in (project_root / "src", project_root):
        if str(import_root) not in sys.path:
            sys.path.insert(0, str(import_root))


@pytest.fixture(autouse=True)
def isolated_handover_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear Handover runtime variables so host settings never leak into tests."""
    for name in ("HANDOVER_ENV_PREFIX", "HANDOVER_LIST_SEPARATOR", "HANDOVER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
