from __future__ import annotations

import logging

from sexp2cpp.emitter import Emitter
from sexp2cpp.errors import SourceSyntaxError, UnsupportedConstructError
from sexp2cpp.lexer import Token, TokenKind, Tokenizer

logger = logging.getLogger(__name__)

# Tokens skipped between top-level declarations.
_TOP_LEVEL_TRIVIA = frozenset({TokenKind.OPEN_PAREN, TokenKind.CLOSE_PAREN, TokenKind.COMMENT})

# Tokens that can never stand as an operator or operand of a call-form.
_NOT_OPERAND = frozenset(
    {TokenKind.OPEN_PAREN, TokenKind.CLOSE_PAREN, TokenKind.EOF, TokenKind.COMMENT}
)


def _describe(tok: Token) -> str:
    if tok.kind == TokenKind.EOF:
        return "end of input"
    return f"{tok.kind.value} {tok.value!r}"


class Translator:
    """Recursive-descent recognizer that writes C++ text as it goes.

    There is no syntax tree: each rule appends its output to the emitter as
    soon as the construct is recognized, so fragments come out in source
    order. The first grammar violation raises and the run is over; whatever
    the emitter holds at that point is not valid output.
    """

    def __init__(self, tokenizer: Tokenizer, emitter: Emitter) -> None:
        self.tokenizer = tokenizer
        self.emitter = emitter
        self.token = Token(kind=TokenKind.EOF, value="")

    def advance(self) -> Token:
        self.token = self.tokenizer.next()
        return self.token

    def expect(self, kind: TokenKind, what: str) -> Token:
        tok = self.advance()
        if tok.kind != kind:
            raise SourceSyntaxError(f"expected {what}, got {_describe(tok)}")
        return tok

    def translate(self) -> str:
        tok = self.advance()
        while tok.kind == TokenKind.COMMENT:
            tok = self.advance()
        if tok.kind == TokenKind.CLOSE_PAREN:
            return self.emitter.text
        if tok.kind != TokenKind.OPEN_PAREN:
            raise SourceSyntaxError(f"expected '(' at start of program, got {_describe(tok)}")

        while True:
            tok = self.advance()
            if tok.kind == TokenKind.EOF:
                return self.emitter.text
            if tok.is_ident("class"):
                self.class_decl()
            elif tok.is_ident("fn"):
                self.function_decl()
            elif tok.kind in _TOP_LEVEL_TRIVIA:
                continue
            else:
                raise SourceSyntaxError(f"expected 'class' or 'fn', got {_describe(tok)}")

    # -- classes ---------------------------------------------------------

    def class_decl(self) -> None:
        name = self.expect(TokenKind.IDENTIFIER, "class name").value
        logger.debug("class %s", name)
        self.emitter.append(f"class {name} {{ \n")

        tok = self.advance()
        if tok.kind == TokenKind.CLOSE_PAREN:
            self.emitter.append("}; \n")
            return
        if tok.kind != TokenKind.OPEN_PAREN:
            raise SourceSyntaxError(f"expected '(' or ')' after class {name}, got {_describe(tok)}")

        section = self.expect(TokenKind.IDENTIFIER, "'public' or 'private'")
        if section.value == "public":
            self.section("public")
            tok = self.advance()
            if tok.kind == TokenKind.CLOSE_PAREN:
                self.emitter.append("}; \n")
                return
            if tok.kind != TokenKind.OPEN_PAREN:
                raise SourceSyntaxError(
                    f"expected ')' or a private section in class {name}, got {_describe(tok)}"
                )
            section = self.expect(TokenKind.IDENTIFIER, "'private'")
            if section.value != "private":
                raise SourceSyntaxError(f"expected 'private', got {_describe(section)}")
            self.section("private")
        elif section.value == "private":
            self.section("private")
        else:
            raise SourceSyntaxError(f"expected 'public' or 'private', got {_describe(section)}")

        self.expect(TokenKind.CLOSE_PAREN, f"')' closing class {name}")
        self.emitter.append("}; \n")

    def section(self, label: str) -> None:
        self.emitter.append(f"{label}: \n")
        self.advance()
        self.call_forms()

    # -- statements ------------------------------------------------------

    def call_forms(self) -> None:
        """Translate call-forms until the double-close sentinel.

        The current token must be the '(' of the first form. After each form
        two tokens are read: the form's own ')' and then either '(' for the
        next form or ')' closing the enclosing block.
        """
        while True:
            if self.token.kind != TokenKind.OPEN_PAREN:
                raise SourceSyntaxError(f"expected '(' starting a call-form, got {_describe(self.token)}")
            self.call_form()
            self.expect(TokenKind.CLOSE_PAREN, "')' closing call-form")
            tok = self.advance()
            if tok.kind == TokenKind.CLOSE_PAREN:
                return

    def call_form(self) -> None:
        op = self.operand("operator")
        if op.is_ident("cMethod"):
            raise UnsupportedConstructError("constructor form 'cMethod' is not supported")
        if op.is_ident("init"):
            type_name = self.operand("type")
            var_name = self.operand("name")
            self.emitter.append(f"{type_name.value} {var_name.value} ; \n")
            return
        lhs = self.operand("left operand")
        rhs = self.operand("right operand")
        self.emitter.append(f"{lhs.value} {op.value}{rhs.value}; \n")

    def operand(self, what: str) -> Token:
        tok = self.advance()
        if tok.kind in _NOT_OPERAND:
            raise SourceSyntaxError(f"expected {what}, got {_describe(tok)}")
        return tok

    # -- functions -------------------------------------------------------

    def function_decl(self) -> None:
        name = self.expect(TokenKind.IDENTIFIER, "function name").value
        logger.debug("fn %s", name)
        if name == "main":
            self.main_entry()
        else:
            self.generic_function(name)

    def main_entry(self) -> None:
        self.expect(TokenKind.OPEN_PAREN, "'(' after main")
        self.expect(TokenKind.CLOSE_PAREN, "')': main takes no parameters")
        self.emitter.append("int main() { \n")
        if self.advance().kind != TokenKind.CLOSE_PAREN:
            self.call_forms()
        self.emitter.append("return 0;} ")

    def generic_function(self, name: str) -> None:
        self.emitter.append(f"void {name}(")
        self.expect(TokenKind.OPEN_PAREN, f"'(' after fn {name}")
        while True:
            tok = self.advance()
            if tok.kind == TokenKind.CLOSE_PAREN:
                break
            if tok.kind == TokenKind.EOF:
                raise SourceSyntaxError(f"unterminated parameter list for fn {name}")
            if tok.kind == TokenKind.COMMENT:
                continue
            self.emitter.append(tok.value + " ")
        self.emitter.append(") {")
        if self.advance().kind != TokenKind.CLOSE_PAREN:
            self.call_forms()
        self.emitter.append("}")
