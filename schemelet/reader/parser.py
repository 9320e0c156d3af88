"""
  Schemelet Reader, Lexer and Parser

- Streaming, lazy parsing over a single compiled token regex
- Emits the Value variants of schemelet.types directly:

    - symbols          -> Atom
    - #t / #f          -> Bool
    - 42, #x2A, #b101  -> Number
    - 1.5, 1e3         -> Float
    - 3/4              -> Ratio (integral ratios read as Number)
    - 1+2i             -> Complex
    - "text"           -> String
    - #\\a, #\\space    -> Character
    - (a b c)          -> List
    - (a b . c)        -> DottedList (normalised through make_dotted)
    - #(a b c)         -> Vector
    - 'x               -> (quote x)

Every failure raises ParserError carrying a 1-based line and column.
"""

from __future__ import annotations

import re
from fractions import Fraction
from typing import Iterator, Optional

from schemelet.errors import ParserError
from schemelet.types.symbol import Atom
from schemelet.types.values import (
    Bool,
    Character,
    Complex,
    Float,
    List,
    Number,
    Ratio,
    String,
    Value,
    Vector,
    make_dotted,
)

Token = tuple[str, str, int]

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<vector>#\()"  # vector reader macro
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # '
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<char>#\\(?:[A-Za-z]+|\S))"  # character literals, named or single-char
    r"|(?P<hash>#[^\s()\"';`,]+)"  # booleans and radix numbers
    r"|(?P<atom>[^\s()\"';#`,][^\s()\"';`,]*)"  # fallback: symbols and numbers
)

NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
    "tab": "\t",
    "return": "\r",
}

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

RADIXES: dict[str, int] = {"b": 2, "o": 8, "d": 10, "x": 16}

_UFLOAT = r"(?:\d+\.\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|\d+[eE][+-]?\d+|\d+)"
_UREAL = r"(?:\d+/\d+|" + _UFLOAT + ")"
INTEGER_RE = re.compile(r"[+-]?\d+")
RATIO_RE = re.compile(r"([+-]?\d+)/(\d+)")
FLOAT_RE = re.compile(r"[+-]?" + _UFLOAT)
COMPLEX_RE = re.compile(rf"(?P<real>[+-]?{_UREAL})?(?P<imag>[+-]{_UREAL}?)i")


def _real(text: str) -> float:
    if "/" in text:
        num, den = text.split("/")
        return float(Fraction(int(num), int(den)))
    return float(text)


def parse_number(text: str) -> Optional[Value]:
    """Read `text` as a numeric literal, or return None if it is not one.

    Raises ValueError for an integer beyond the host digit limit.
    """
    if INTEGER_RE.fullmatch(text):
        return Number(int(text))
    m = RATIO_RE.fullmatch(text)
    if m:
        den = int(m.group(2))
        if den == 0:
            return None
        ratio = Fraction(int(m.group(1)), den)
        return Number(ratio.numerator) if ratio.denominator == 1 else Ratio(ratio)
    if FLOAT_RE.fullmatch(text):
        return Float(float(text))
    m = COMPLEX_RE.fullmatch(text)
    if m:
        real = m.group("real")
        imag = m.group("imag")
        if imag in ("+", "-"):
            imag += "1"
        try:
            return Complex(complex(_real(real) if real else 0.0, _real(imag)))
        except ZeroDivisionError:
            return None
    return None


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise _error("Unterminated string literal", source, pos)
            raise _error(f"Unexpected character {source[pos]!r}", source, pos)
        kind = m.lastgroup
        if kind != "comment":
            yield kind, m.group(kind), pos
        pos = m.end()


def _position(source: str, offset: int) -> tuple[int, int]:
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def _error(message: str, source: str, offset: int) -> ParserError:
    return ParserError(message, *_position(source, offset))


def _unescape(body: str) -> str:
    out = []
    chars = iter(body)
    for c in chars:
        if c == "\\":
            nxt = next(chars, "")
            out.append(STRING_ESCAPES.get(nxt, nxt))
        else:
            out.append(c)
    return "".join(out)


class TokenStream:
    def __init__(self, source: str):
        self.source = source
        self.tokens = lex(source)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def error(self, message: str, offset: Optional[int] = None) -> ParserError:
        return _error(message, self.source, len(self.source) if offset is None else offset)

    def parse_expr(self) -> Optional[Value]:
        """Parse the next expression, or return None at end of input."""
        token = self.advance()
        if token is None:
            return None
        kind, text, offset = token

        if kind == "atom":
            if text == ".":
                raise self.error("Unexpected '.'", offset)
            try:
                number = parse_number(text)
            except ValueError:
                raise self.error("Numeric literal too long", offset) from None
            return number if number is not None else Atom(text)

        if kind == "quote":
            expr = self.parse_expr()
            if expr is None:
                raise self.error("Expected an expression after quote")
            return List((Atom("quote"), expr))

        if kind == "lparen":
            return self._parse_list()

        if kind == "vector":
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise self.error("Unexpected end of input while reading vector")
                if nxt[0] == "rparen":
                    self.advance()
                    return Vector(tuple(items))
                items.append(self.parse_expr())

        if kind == "rparen":
            raise self.error("Unexpected ')'", offset)

        if kind == "string":
            return String(_unescape(text[1:-1]))

        if kind == "char":
            name = text[2:]
            if len(name) == 1:
                return Character(name)
            if name.lower() in NAMED_CHARS:
                return Character(NAMED_CHARS[name.lower()])
            raise self.error(f"Unknown character name {name!r}", offset)

        if kind == "hash":
            return self._parse_hash(text, offset)

        raise self.error(f"Unknown token {text!r}", offset)

    def _parse_list(self) -> Value:
        items: list[Value] = []
        while True:
            nxt = self.peek()
            if nxt is None:
                raise self.error("Unexpected end of input, expected ')'")
            kind, text, offset = nxt
            if kind == "rparen":
                self.advance()
                return List(tuple(items))
            if kind == "atom" and text == ".":
                self.advance()
                if not items:
                    raise self.error("Expected an expression before '.'", offset)
                tail = self.parse_expr()
                if tail is None:
                    raise self.error("Unexpected end of input after '.'")
                closing = self.advance()
                if closing is None or closing[0] != "rparen":
                    where = None if closing is None else closing[2]
                    raise self.error("Expected ')' after dotted tail", where)
                return make_dotted(items, tail)
            items.append(self.parse_expr())

    def _parse_hash(self, text: str, offset: int) -> Value:
        if text == "#t":
            return Bool(True)
        if text == "#f":
            return Bool(False)
        radix = RADIXES.get(text[1:2].lower())
        if radix is not None:
            try:
                return Number(int(text[2:], radix))
            except ValueError:
                pass
        raise self.error(f"Bad syntax {text!r}", offset)

    def parse_all(self) -> Iterator[Value]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read_expr(source: str) -> Value:
    """Read the first expression of `source`."""
    expr = TokenStream(source).parse_expr()
    if expr is None:
        raise _error("Expected an expression", source, len(source))
    return expr


def read_expr_list(source: str) -> list[Value]:
    """Read every expression of `source`, in order."""
    return list(TokenStream(source).parse_all())
