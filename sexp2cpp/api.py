from __future__ import annotations

import logging

from sexp2cpp.emitter import Emitter
from sexp2cpp.errors import TranslateError
from sexp2cpp.lexer import Tokenizer
from sexp2cpp.schemas import RunStatus, TranslationResult
from sexp2cpp.translator import Translator

logger = logging.getLogger(__name__)


def translate(src: str, *, emitter: Emitter | None = None) -> str:
    """Translate ``src`` and return the generated C++ text.

    Output is appended to ``emitter`` when one is given, otherwise to a fresh
    one. Raises the first :class:`TranslateError` encountered.
    """
    translator = Translator(Tokenizer(src), emitter if emitter is not None else Emitter())
    return translator.translate()


def try_translate(src: str) -> TranslationResult:
    try:
        output = translate(src)
    except TranslateError as e:
        logger.debug("translation failed: %s: %s", e.kind, e)
        return TranslationResult(status=RunStatus.ERROR, error_kind=e.kind, error=str(e))
    return TranslationResult(status=RunStatus.OK, output=output)
