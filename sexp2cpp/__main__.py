from __future__ import annotations

from sexp2cpp.main import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
