from __future__ import annotations

import logging
import string
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from sexp2cpp.errors import InvalidCharacterError, UnterminatedStringError

logger = logging.getLogger(__name__)


class TokenKind(str, Enum):
    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING = "string"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    COMMA = "comma"
    DOT = "dot"
    ASSIGN = "assign"
    EQUAL = "equal"
    ARROW = "arrow"
    ADD = "add"
    SUB = "sub"
    DIV = "div"
    MUT = "mut"
    COMMENT = "comment"
    EOF = "eof"
    SYMBOL = "symbol"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    value: str

    def is_ident(self, name: str) -> bool:
        return self.kind == TokenKind.IDENTIFIER and self.value == name


class CharClass(str, Enum):
    END = "end"
    SPACE = "space"
    LETTER = "letter"
    DIGIT = "digit"
    QUOTE = "quote"
    PUNCT = "punct"
    EQUALS = "equals"
    MINUS = "minus"
    PLUS = "plus"
    SLASH = "slash"
    STAR = "star"
    AMP = "amp"
    SEMICOLON = "semicolon"
    OTHER = "other"


# ASCII only: classification must not depend on the interpreter's unicode tables.
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_SPACES = frozenset(" \t\n\r\v\f")
_IDENT_TAIL = _LETTERS | _DIGITS | frozenset("_.*&")
_NUMBER_TAIL = _DIGITS | frozenset(".")

_PUNCT = {
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
}

_SINGLE = {
    "=": CharClass.EQUALS,
    "-": CharClass.MINUS,
    "+": CharClass.PLUS,
    "/": CharClass.SLASH,
    "*": CharClass.STAR,
    "&": CharClass.AMP,
    ";": CharClass.SEMICOLON,
    '"': CharClass.QUOTE,
}


def classify(ch: str) -> CharClass:
    if not ch:
        return CharClass.END
    if ch in _SPACES:
        return CharClass.SPACE
    if ch in _LETTERS:
        return CharClass.LETTER
    if ch in _DIGITS:
        return CharClass.DIGIT
    if ch in _PUNCT:
        return CharClass.PUNCT
    return _SINGLE.get(ch, CharClass.OTHER)


class Tokenizer:
    """Pull-based tokenizer over one immutable source string.

    ``pos`` only moves forward. ``start`` marks the first character of the
    token being scanned, so every token value is ``src[start:pos]``.
    Once the end of input is reached every call to :meth:`next` returns an
    EOF token and leaves the cursor where it is.
    """

    def __init__(self, src: str) -> None:
        self.src = src
        self.pos = 0
        self.start = 0

    def _peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        return self.src[i] if i < len(self.src) else ""

    def _consume_while(self, allowed: frozenset[str]) -> None:
        while self._peek() and self._peek() in allowed:
            self.pos += 1

    def _emit(self, kind: TokenKind) -> Token:
        tok = Token(kind=kind, value=self.src[self.start : self.pos])
        logger.debug("token %s %r", tok.kind.value, tok.value)
        return tok

    def _fixed(self, kind: TokenKind, width: int = 1) -> Token:
        self.pos += width
        return self._emit(kind)

    def next(self) -> Token:
        while classify(self._peek()) == CharClass.SPACE:
            self.pos += 1

        self.start = self.pos
        ch = self._peek()
        cls = classify(ch)

        if cls == CharClass.END:
            return Token(kind=TokenKind.EOF, value="")
        if cls == CharClass.LETTER:
            self._consume_while(_IDENT_TAIL)
            return self._emit(TokenKind.IDENTIFIER)
        if cls == CharClass.DIGIT:
            self._consume_while(_NUMBER_TAIL)
            return self._emit(TokenKind.NUMBER)
        if cls == CharClass.QUOTE:
            return self._string()
        if cls == CharClass.PUNCT:
            return self._fixed(_PUNCT[ch])
        if cls == CharClass.EQUALS:
            if self._peek(1) == "=":
                return self._fixed(TokenKind.EQUAL, 2)
            return self._fixed(TokenKind.ASSIGN)
        if cls == CharClass.MINUS:
            if self._peek(1) == ">":
                return self._fixed(TokenKind.ARROW, 2)
            return self._fixed(TokenKind.SUB)
        if cls == CharClass.PLUS:
            return self._fixed(TokenKind.ADD)
        if cls == CharClass.SLASH:
            return self._fixed(TokenKind.DIV)
        if cls == CharClass.STAR:
            if classify(self._peek(1)) == CharClass.LETTER:
                return self._sigil_identifier()
            return self._fixed(TokenKind.MUT)
        if cls == CharClass.AMP:
            if classify(self._peek(1)) == CharClass.LETTER:
                return self._sigil_identifier()
            raise InvalidCharacterError(
                f"invalid character: '&' must be followed by a letter, got {self._peek(1)!r}"
            )
        if cls == CharClass.SEMICOLON:
            while self._peek() not in ("", "\n"):
                self.pos += 1
            return self._emit(TokenKind.COMMENT)
        if cls == CharClass.OTHER:
            return self._fixed(TokenKind.SYMBOL)
        raise AssertionError(f"unhandled character class: {cls}")

    def _string(self) -> Token:
        self.pos += 1
        while self._peek() not in ("", '"'):
            self.pos += 1
        if not self._peek():
            raise UnterminatedStringError(
                f"unterminated string: {self.src[self.start : self.start + 20]!r}"
            )
        self.pos += 1
        return self._emit(TokenKind.STRING)

    def _sigil_identifier(self) -> Token:
        # `*name` / `&name`: the sigil is kept in the identifier text.
        self.pos += 1
        self._consume_while(_IDENT_TAIL)
        return self._emit(TokenKind.IDENTIFIER)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next()
            if tok.kind == TokenKind.EOF:
                return
            yield tok


def tokenize(src: str) -> list[Token]:
    """Return every token of ``src`` including the terminating EOF token."""
    lexer = Tokenizer(src)
    toks: list[Token] = []
    while True:
        tok = lexer.next()
        toks.append(tok)
        if tok.kind == TokenKind.EOF:
            return toks
