from __future__ import annotations

import pytest
from pydantic import ValidationError

from sexp2cpp.api import try_translate
from sexp2cpp.lexer import Token, TokenKind
from sexp2cpp.schemas import RunStatus, TokenRecord, TranslationResult


def test_try_translate_success() -> None:
    result = try_translate("(class A)")
    assert result.ok
    assert result.status == RunStatus.OK
    assert result.output == "class A { \n}; \n"
    assert result.error is None and result.error_kind is None


@pytest.mark.parametrize(
    ("src", "kind"),
    [
        ('(fn main() (= s "abc', "unterminated_string"),
        ("(fn main() (= a & b))", "invalid_character"),
        ("(struct A)", "syntax_error"),
        ("(class A (public (cMethod A)))", "unsupported_construct"),
    ],
)
def test_try_translate_reports_error_kind(src: str, kind: str) -> None:
    result = try_translate(src)
    assert not result.ok
    assert result.status == RunStatus.ERROR
    assert result.error_kind == kind
    assert result.error
    # Partial output of a failed run is never exposed.
    assert result.output is None


def test_result_requires_consistent_fields() -> None:
    with pytest.raises(ValidationError, match="output is required"):
        TranslationResult(status=RunStatus.OK)
    with pytest.raises(ValidationError, match="error message is required"):
        TranslationResult(status=RunStatus.ERROR, error_kind="syntax_error")
    with pytest.raises(ValidationError, match="output must be empty"):
        TranslationResult(status=RunStatus.ERROR, error="boom", output="class A")


def test_result_json_round_trip() -> None:
    result = try_translate("(fn main())")
    again = TranslationResult.model_validate_json(result.model_dump_json())
    assert again == result


def test_token_record_from_token() -> None:
    rec = TokenRecord.from_token(Token(kind=TokenKind.ARROW, value="->"))
    assert rec.model_dump(mode="json") == {"kind": "arrow", "value": "->"}
