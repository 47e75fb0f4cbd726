"""Token kinds, the token record and keyword classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto


class TokenType(IntEnum):
    """Every kind of token the lexer can produce, numbered from zero."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return count

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    INCREMENT = auto()
    DECREMENT = auto()

    # Assignment operators
    ASSIGN = auto()
    PLUS_ASSIGN = auto()
    MINUS_ASSIGN = auto()
    MUL_ASSIGN = auto()
    DIV_ASSIGN = auto()
    MOD_ASSIGN = auto()

    # Comparison operators
    EQ = auto()
    NEQ = auto()
    LT = auto()
    GT = auto()
    LTE = auto()
    GTE = auto()

    # Logical operators
    AND = auto()
    OR = auto()
    NOT = auto()

    # Bitwise operators
    BIT_AND = auto()
    BIT_OR = auto()
    BIT_XOR = auto()
    BIT_NOT = auto()
    LSHIFT = auto()
    RSHIFT = auto()

    # Pointer / address operators
    AMPERSAND = auto()
    STAR_DEREF = auto()
    ARROW = auto()

    # Array indexing
    LBRACKET = auto()
    RBRACKET = auto()

    # Parentheses and braces
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Delimiters and miscellaneous symbols
    SEMICOLON = auto()
    COLON = auto()
    COMMA = auto()
    DOT = auto()
    QUESTION = auto()
    HASH = auto()
    HASHHASH = auto()

    # Type keywords
    VOID = auto()
    CHAR = auto()
    SHORT = auto()
    INT = auto()
    LONG = auto()
    LONG_LONG = auto()
    FLOAT = auto()
    DOUBLE = auto()
    SIGNED = auto()
    UNSIGNED = auto()
    CONST = auto()
    VOLATILE = auto()
    STATIC = auto()
    EXTERN = auto()
    STRUCT = auto()
    UNION = auto()
    ENUM = auto()
    TYPEDEF = auto()
    SIZEOF = auto()

    # Control keywords
    IF = auto()
    ELSE = auto()
    FOR = auto()
    WHILE = auto()
    DO = auto()
    SWITCH = auto()
    CASE = auto()
    DEFAULT = auto()
    BREAK = auto()
    CONTINUE = auto()
    RETURN = auto()
    GOTO = auto()

    # Literals and identifiers
    IDENTIFIER = auto()
    INT_LITERAL = auto()
    FLOAT_LITERAL = auto()
    DOUBLE_LITERAL = auto()
    CHAR_LITERAL = auto()
    STRING_LITERAL = auto()

    UNKNOWN = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """A lexed token: its kind and the source text it covers (None at end of input)."""

    type: TokenType
    text: str | None = None


# Only these words are recognised; anything else is an identifier.
_KEYWORDS: dict[str, TokenType] = {
    "void": TokenType.VOID,
    "volatile": TokenType.VOLATILE,
    "char": TokenType.CHAR,
    "const": TokenType.CONST,
    "continue": TokenType.CONTINUE,
    "case": TokenType.CASE,
    "short": TokenType.SHORT,
    "signed": TokenType.SIGNED,
    "static": TokenType.STATIC,
    "struct": TokenType.STRUCT,
    "switch": TokenType.SWITCH,
    "sizeof": TokenType.SIZEOF,
    "int": TokenType.INT,
    "long": TokenType.LONG,
    "float": TokenType.FLOAT,
    "for": TokenType.FOR,
    "double": TokenType.DOUBLE,
    "do": TokenType.DO,
    "default": TokenType.DEFAULT,
    "else": TokenType.ELSE,
    "enum": TokenType.ENUM,
    "extern": TokenType.EXTERN,
    "return": TokenType.RETURN,
    "while": TokenType.WHILE,
    "unsigned": TokenType.UNSIGNED,
    "union": TokenType.UNION,
    "typedef": TokenType.TYPEDEF,
    "goto": TokenType.GOTO,
}


def check_keyword(text: str) -> TokenType:
    """Return the keyword type for ``text``, or IDENTIFIER if it is not a keyword."""
    return _KEYWORDS.get(text, TokenType.IDENTIFIER)