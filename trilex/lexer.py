"""A hand-written lexer for a small C-like language."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike

from .tokens import Token, TokenType, check_keyword

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_ALPHA = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_IDENT_START = _ALPHA | {"_"}
_IDENT_PART = _IDENT_START | _DIGITS

_TWO_CHAR_OPERATORS: tuple[tuple[str, TokenType], ...] = (
    ("++", TokenType.INCREMENT),
    ("--", TokenType.DECREMENT),
    ("+=", TokenType.PLUS_ASSIGN),
    ("-=", TokenType.MINUS_ASSIGN),
    ("*=", TokenType.MUL_ASSIGN),
    ("/=", TokenType.DIV_ASSIGN),
    ("%=", TokenType.MOD_ASSIGN),
    ("==", TokenType.EQ),
    ("!=", TokenType.NEQ),
    ("<=", TokenType.LTE),
    (">=", TokenType.GTE),
    ("&&", TokenType.AND),
    ("||", TokenType.OR),
    ("<<", TokenType.LSHIFT),
    (">>", TokenType.RSHIFT),
    ("##", TokenType.HASHHASH),
    ("->", TokenType.ARROW),
)

_SINGLE_CHAR_OPERATORS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
    "=": TokenType.ASSIGN,
    "&": TokenType.AMPERSAND,
    "|": TokenType.BIT_OR,
    "^": TokenType.BIT_XOR,
    "~": TokenType.BIT_NOT,
    "!": TokenType.NOT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "?": TokenType.QUESTION,
    "#": TokenType.HASH,
}


def read_file(filename: str | PathLike[str]) -> str:
    """Return the whole contents of ``filename``; raises OSError if it cannot be read."""
    with open(filename, "rb") as handle:
        data = handle.read()
    return data.decode("utf-8", errors="surrogateescape")


class Lexer:
    """Splits source text into tokens, with one token of lookahead."""

    def __init__(self, source: str) -> None:
        # A NUL character ends the input.
        nul = source.find("\0")
        self._src = source if nul < 0 else source[:nul]
        self._pos = 0
        self._lookahead: Token | None = None

    def _skip_space_and_comments(self) -> None:
        src = self._src
        while True:
            while self._pos < len(src) and src[self._pos] in _SPACE:
                self._pos += 1
            if src.startswith("//", self._pos):
                end = src.find("\n", self._pos + 2)
                self._pos = len(src) if end < 0 else end
            elif src.startswith("/*", self._pos):
                end = src.find("*/", self._pos + 2)
                self._pos = len(src) if end < 0 else end + 2
            else:
                return

    def _take_while(self, allowed: frozenset[str]) -> str:
        src = self._src
        start = self._pos
        while self._pos < len(src) and src[self._pos] in allowed:
            self._pos += 1
        return src[start:self._pos]

    def _string_literal(self) -> str:
        src = self._src
        start = self._pos
        pos = start + 1
        while pos < len(src) and (src[pos] != '"' or src[pos - 1] == "\\"):
            pos += 1
        if pos < len(src):
            pos += 1
        self._pos = pos
        return src[start:pos]

    def lex_token(self) -> Token:
        """Read the next token straight from the source, ignoring any lookahead."""
        self._skip_space_and_comments()
        src = self._src
        if self._pos >= len(src):
            return Token(TokenType.EOF, None)

        ch = src[self._pos]
        if ch == '"':
            return Token(TokenType.STRING_LITERAL, self._string_literal())
        if ch in _IDENT_START:
            text = self._take_while(_IDENT_PART)
            return Token(check_keyword(text), text)
        if ch in _DIGITS:
            return Token(TokenType.INT_LITERAL, self._take_while(_DIGITS | {"."}))

        for text, kind in _TWO_CHAR_OPERATORS:
            if src.startswith(text, self._pos):
                self._pos += 2
                return Token(kind, text)

        self._pos += 1
        return Token(_SINGLE_CHAR_OPERATORS.get(ch, TokenType.UNKNOWN), ch)

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        if self._lookahead is None:
            self._lookahead = self.lex_token()
        return self._lookahead

    def next(self) -> Token:
        """Consume and return the next token."""
        if self._lookahead is not None:
            token, self._lookahead = self._lookahead, None
            return token
        return self.lex_token()

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, stopping before end of input."""
        while True:
            token = self.next()
            if token.type is TokenType.EOF:
                return
            yield token


def tokenize(source: str) -> list[Token]:
    """Return every token in ``source``, without the end-of-input marker."""
    return list(Lexer(source))