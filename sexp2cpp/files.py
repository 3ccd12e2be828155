from __future__ import annotations

import sys
from pathlib import Path

STDIO = "-"


def read_source(path: str | Path, *, encoding: str = "utf-8") -> str:
    if str(path) == STDIO:
        return sys.stdin.read()
    return Path(path).read_text(encoding=encoding)


def write_text_atomic(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(text, encoding=encoding)
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def write_output(path: str | Path, text: str, *, encoding: str = "utf-8") -> None:
    """Persist a finished translation; ``-`` writes to stdout."""
    if str(path) == STDIO:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    write_text_atomic(Path(path), text, encoding=encoding)
