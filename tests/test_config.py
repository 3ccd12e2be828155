from __future__ import annotations

import pytest

from sexp2cpp import config
from sexp2cpp.config import load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "load_env", lambda: None)
    settings = load_settings()
    assert settings.output_path == "output.cpp"
    assert settings.encoding == "utf-8"
    assert settings.log_level == "warning"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEXP2CPP_OUTPUT", " build/out.cpp ")
    monkeypatch.setenv("SEXP2CPP_ENCODING", "latin-1")
    monkeypatch.setenv("SEXP2CPP_LOG_LEVEL", "DEBUG")
    settings = load_settings()
    assert settings.output_path == "build/out.cpp"
    assert settings.encoding == "latin-1"
    assert settings.log_level == "debug"


def test_project_dotenv_is_loaded(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("SEXP2CPP_OUTPUT=from_dotenv.cpp\n", encoding="utf-8")
    monkeypatch.setattr(config, "repo_root", lambda: tmp_path)
    assert load_settings().output_path == "from_dotenv.cpp"


def test_unknown_encoding_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEXP2CPP_ENCODING", "nope")
    with pytest.raises(ValueError, match="not a known encoding"):
        load_settings()
