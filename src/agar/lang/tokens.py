"""Agar Token Types and Definitions

This module contains the token types, the token class and the token stream
shared by the lexer and the recognizer.
"""

from enum import Enum
from dataclasses import dataclass
from collections.abc import Sequence
from typing import Dict, Iterator, Tuple


class TokenType(Enum):
    """Token types for the Agar statement language"""

    # Declared-type keywords
    INT = "INT"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    STRING = "STRING"
    BOOL = "BOOL"
    CHAR = "CHAR"

    # Control keywords
    IF = "IF"  # Conditional keyword, spelled "Agar" or "if"
    ELSE = "ELSE"
    RETURN = "RETURN"
    WHILE = "WHILE"

    # Names and literals
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING_LITERAL = "STRING_LITERAL"
    CHAR_LITERAL = "CHAR_LITERAL"

    # Operators and punctuation
    ASSIGN = "ASSIGN"
    PLUS = "PLUS"
    MINUS = "MINUS"
    STAR = "STAR"
    SLASH = "SLASH"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    SEMICOLON = "SEMICOLON"
    GREATER = "GREATER"

    EOF = "EOF"


TYPE_KEYWORDS = frozenset(
    {
        TokenType.INT,
        TokenType.FLOAT,
        TokenType.DOUBLE,
        TokenType.STRING,
        TokenType.BOOL,
        TokenType.CHAR,
    }
)

# Conditional keyword spellings, keyed by dialect
CONDITIONAL_KEYWORDS = ("Agar", "if")

_BASE_KEYWORDS: Dict[str, TokenType] = {
    "int": TokenType.INT,
    "float": TokenType.FLOAT,
    "double": TokenType.DOUBLE,
    "string": TokenType.STRING,
    "bool": TokenType.BOOL,
    "char": TokenType.CHAR,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
    "while": TokenType.WHILE,
}

OPERATORS: Dict[str, TokenType] = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
    ">": TokenType.GREATER,
}

_DESCRIPTIONS: Dict[TokenType, str] = {
    TokenType.IDENTIFIER: "identifier",
    TokenType.NUMBER: "number",
    TokenType.STRING_LITERAL: "string literal",
    TokenType.CHAR_LITERAL: "char literal",
    TokenType.EOF: "end of input",
}
_DESCRIPTIONS.update({kind: symbol for symbol, kind in OPERATORS.items()})
_DESCRIPTIONS.update({kind: word for word, kind in _BASE_KEYWORDS.items()})


def keyword_table(conditional_keyword: str = "Agar") -> Dict[str, TokenType]:
    """Build the keyword lookup for a dialect.

    Args:
        conditional_keyword: Spelling of the conditional keyword

    Returns:
        Mapping of reserved words to their token types
    """
    if conditional_keyword not in CONDITIONAL_KEYWORDS:
        raise ValueError(f"Unknown conditional keyword: {conditional_keyword!r}")
    table = dict(_BASE_KEYWORDS)
    table[conditional_keyword] = TokenType.IF
    return table


def describe(token_type: TokenType, conditional_keyword: str = "Agar") -> str:
    """Human-readable name of a token type, as used in diagnostics."""
    if token_type is TokenType.IF:
        return conditional_keyword
    return _DESCRIPTIONS[token_type]


@dataclass(frozen=True)
class Token:
    """Token representation

    Attributes:
        type: The token type
        value: The exact source text of the token ("" for EOF)
        line: Line of the first character (1-based)
        column: Column of the first character (1-based)
    """

    type: TokenType
    value: str
    line: int
    column: int

    def display(self) -> str:
        """Text shown for this token in diagnostics."""
        if self.type is TokenType.EOF:
            return "end of input"
        return self.value


class TokenStream(Sequence):
    """Immutable, EOF-terminated sequence of tokens."""

    def __init__(self, tokens: Sequence[Token]):
        tokens = tuple(tokens)
        if not tokens or tokens[-1].type is not TokenType.EOF:
            raise ValueError("Token stream must end with an EOF token")
        if any(token.type is TokenType.EOF for token in tokens[:-1]):
            raise ValueError("Token stream must contain exactly one EOF token")
        self._tokens: Tuple[Token, ...] = tokens

    def __getitem__(self, index):
        return self._tokens[index]

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __eq__(self, other) -> bool:
        if isinstance(other, TokenStream):
            return self._tokens == other._tokens
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStream({len(self._tokens)} tokens)"

    @property
    def eof(self) -> Token:
        return self._tokens[-1]

    def render(self) -> str:
        """Join the token texts with single spaces, dropping EOF."""
        return " ".join(token.value for token in self._tokens[:-1])
