"""
  Lisp Reader: recursive-descent parser over the token stream.

- lists -> Cons chains ending in Nil; `(a . b)` -> Cons(a, b)
- ()    -> Nil
- numbers -> int/float, strings -> str, other atoms -> Symbol
- a special character is handed, together with the datum that follows it,
  to `char_handler(char, datum)`; its return value is the datum read.
  This is how ' ` , @ # and \\ are implemented: see lumen.builtin.char_handlers.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

from lumen import SExpression
from lumen.errors import LispIncompleteInput, LispReadError
from lumen.reader.lexer import Token, lex
from lumen.types.cons import to_lisp_list
from lumen.types.nil import Nil
from lumen.types.symbol import Symbol

CharHandler = Callable[[str, SExpression], SExpression]

DOT = "."


class Parser:
    def __init__(self, tokens: Iterable[Token], char_handler: Optional[CharHandler] = None):
        self.tokens = iter(tokens)
        self.buffer: list[Token] = []
        self.char_handler = char_handler

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            tok = next(self.tokens, None)
            if tok is None:
                return None
            self.buffer.append(tok)
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def _expect_more(self, what: str) -> Token:
        tok = self.advance()
        if tok is None:
            raise LispIncompleteInput(f"unexpected end of input while reading {what}")
        return tok

    def parse_expr(self) -> SExpression:
        tok = self._expect_more("an expression")

        if tok.kind in ("int", "float", "string"):
            return tok.value
        if tok.kind == "ident":
            return Symbol(tok.value)
        if tok.kind == "lparen":
            return self._parse_list(tok)
        if tok.kind == "special":
            datum = self.parse_expr()
            if self.char_handler is None:
                raise LispReadError(f"{tok.line}:{tok.col}: no handler for special character {tok.value}")
            return self.char_handler(tok.value, datum)
        if tok.kind == "rparen":
            raise LispReadError(f"{tok.line}:{tok.col}: unexpected ')'")
        raise LispReadError(f"{tok.line}:{tok.col}: unknown token {tok.kind} {tok.value!r}")

    def _parse_list(self, open_tok: Token) -> SExpression:
        items: list[SExpression] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise LispIncompleteInput(f"{open_tok.line}:{open_tok.col}: unmatched '('")
            if tok.kind == "rparen":
                self.advance()
                return to_lisp_list(items) if items else Nil
            if tok.kind == "ident" and tok.value == DOT:
                self.advance()
                if not items:
                    raise LispReadError(f"{tok.line}:{tok.col}: nothing before '.' in dotted list")
                tail = self.parse_expr()
                close = self._expect_more("a dotted list")
                if close.kind != "rparen":
                    raise LispReadError(f"{close.line}:{close.col}: expected ')' after dotted tail")
                return to_lisp_list(items, tail)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()

    __iter__ = parse_all


def read_forms(source: str, source_name: str = "<string>", char_handler: Optional[CharHandler] = None) -> Iterator[SExpression]:
    """
    Yield forms one at a time. Lexing and parsing only run ahead as far as
    the next form, so a reader character defined by an earlier form is seen
    by later ones and an error further on leaves earlier forms readable.
    """
    return Parser(lex(source, source_name), char_handler).parse_all()


def read_all(source: str, source_name: str = "<string>", char_handler: Optional[CharHandler] = None) -> list[SExpression]:
    return list(read_forms(source, source_name, char_handler))
