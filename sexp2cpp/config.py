from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


def repo_root() -> Path:
    # Project root is the directory that contains the `sexp2cpp/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


@dataclass(frozen=True)
class TranslatorSettings:
    output_path: str
    encoding: str
    log_level: str


def load_settings() -> TranslatorSettings:
    load_env()
    encoding = (os.getenv("SEXP2CPP_ENCODING") or "utf-8").strip()
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ValueError(f"SEXP2CPP_ENCODING is not a known encoding: {encoding}") from e
    return TranslatorSettings(
        output_path=(os.getenv("SEXP2CPP_OUTPUT") or "output.cpp").strip(),
        encoding=encoding,
        log_level=(os.getenv("SEXP2CPP_LOG_LEVEL") or "warning").strip().lower(),
    )
