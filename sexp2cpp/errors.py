from __future__ import annotations


class TranslateError(Exception):
    """Base for every fatal error raised while translating a program."""

    kind = "translate_error"

    def __init__(self, message: str) -> None:
        self.message = str(message)
        super().__init__(self.message)


class UnterminatedStringError(TranslateError):
    kind = "unterminated_string"


class InvalidCharacterError(TranslateError):
    kind = "invalid_character"


class SourceSyntaxError(TranslateError):
    kind = "syntax_error"


class UnsupportedConstructError(SourceSyntaxError):
    kind = "unsupported_construct"
