from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so values loaded from a .env during the test are undone too.
    for name in ("SEXP2CPP_OUTPUT", "SEXP2CPP_ENCODING", "SEXP2CPP_LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
