"""Tokenizer for lumen source text.

Produces `Token(kind, value, line, col)` with kinds:

    lparen, rparen     ( and )
    int, float         numeric literals
    ident              any other atom (symbols, including a lone ".")
    string             double-quoted, with \\" \\\\ \\n \\t escapes decoded
    special            one of the reader characters @ ' ` , # \\

Comments run from ``;`` to the end of the line. Lines and columns are 1-based.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from lumen.errors import LispIncompleteInput, LispReadError

SPECIAL_CHARS = "@'`,#\\"

TOKEN_RE = re.compile(
    r"(?P<ws>\s+)"
    r"|(?P<comment>;[^\n]*)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r'|(?P<string>"(?:\\.|[^\\"])*")'
    r'|(?P<open_string>")'
    r"|(?P<special>[@'`,#\\])"
    r"|(?P<atom>[^\s()\"';`,\\]+)",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+\Z")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+(?:\.\d*)?[eE][+-]?\d+|\.\d+[eE][+-]?\d+)\Z")

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1

_ESCAPES = {'"': '"', "\\": "\\", "n": "\n", "t": "\t", "r": "\r", "0": "\0"}


class Token(NamedTuple):
    kind: str
    value: object
    line: int
    col: int


def _unescape(body: str, line: int, col: int, source_name: str) -> str:
    out = []
    chars = iter(body)
    for c in chars:
        if c != "\\":
            out.append(c)
            continue
        esc = next(chars)
        if esc not in _ESCAPES:
            raise LispReadError(f"{source_name}:{line}:{col}: unknown string escape \\{esc}")
        out.append(_ESCAPES[esc])
    return "".join(out)


def _atom(text: str, line: int, col: int, source_name: str) -> Token:
    if INT_RE.match(text):
        n = int(text)
        if not I64_MIN <= n <= I64_MAX:
            raise LispReadError(f"{source_name}:{line}:{col}: integer literal out of range: {text}")
        return Token("int", n, line, col)
    if FLOAT_RE.match(text):
        return Token("float", float(text), line, col)
    return Token("ident", text, line, col)


def lex(source: str, source_name: str = "<string>") -> Iterator[Token]:
    """Token generator over `source`."""
    pos, line, line_start = 0, 1, 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            raise LispReadError(f"{source_name}:{line}:{pos - line_start + 1}: unexpected character {source[pos]!r}")
        kind = m.lastgroup
        text = m.group()
        col = pos - line_start + 1

        if kind == "lparen" or kind == "rparen":
            yield Token(kind, text, line, col)
        elif kind == "special":
            yield Token("special", text, line, col)
        elif kind == "atom":
            yield _atom(text, line, col, source_name)
        elif kind == "string":
            yield Token("string", _unescape(text[1:-1], line, col, source_name), line, col)
        elif kind == "open_string":
            raise LispIncompleteInput(f"{source_name}:{line}:{col}: unterminated string")

        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = pos + text.rindex("\n") + 1
        pos = m.end()
