from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from sexp2cpp.lexer import Token, TokenKind


class RunStatus(str, Enum):
    OK = "ok"
    ERROR = "error"


class TranslationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: RunStatus
    output: str | None = None
    error_kind: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _validate_status(self) -> "TranslationResult":
        if self.status == RunStatus.OK:
            if self.output is None:
                raise ValueError("output is required when status=ok")
            if self.error is not None or self.error_kind is not None:
                raise ValueError("error fields must be empty when status=ok")
        else:
            if not self.error:
                raise ValueError("error message is required when status=error")
            if self.output is not None:
                # Partial output of a failed run is never handed out.
                raise ValueError("output must be empty when status=error")
        return self

    @property
    def ok(self) -> bool:
        return self.status == RunStatus.OK


class TokenRecord(BaseModel):
    kind: TokenKind
    value: str

    @classmethod
    def from_token(cls, tok: Token) -> "TokenRecord":
        return cls(kind=tok.kind, value=tok.value)
