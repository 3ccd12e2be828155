from __future__ import annotations

from sexp2cpp.api import translate, try_translate
from sexp2cpp.emitter import Emitter
from sexp2cpp.errors import (
    InvalidCharacterError,
    SourceSyntaxError,
    TranslateError,
    UnsupportedConstructError,
    UnterminatedStringError,
)
from sexp2cpp.lexer import Token, TokenKind, Tokenizer, tokenize
from sexp2cpp.schemas import RunStatus, TokenRecord, TranslationResult
from sexp2cpp.translator import Translator

__all__ = [
    "__version__",
    # Pipeline
    "translate",
    "try_translate",
    "Tokenizer",
    "Translator",
    "Emitter",
    # Tokens
    "Token",
    "TokenKind",
    "tokenize",
    # Errors
    "TranslateError",
    "UnterminatedStringError",
    "InvalidCharacterError",
    "SourceSyntaxError",
    "UnsupportedConstructError",
    # Schemas
    "RunStatus",
    "TranslationResult",
    "TokenRecord",
]

__version__ = "0.1.0"
