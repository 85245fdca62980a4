"""Agar Lexer

This module contains the lexer for the Agar statement language, which
tokenizes source text into a token stream for the recognizer.
"""

import re
from typing import List, Optional
import logging

from agar.core.config import DEFAULT_CONFIG, RecognizerConfig
from .errors import LexicalError
from .tokens import OPERATORS, Token, TokenStream, TokenType, keyword_table

logger = logging.getLogger("agar.lang.lexer")

# Longest literal excerpt quoted in a diagnostic
EXCERPT_LENGTH = 20

# Token types whose value maps straight to one TokenType
LITERAL_TYPES = {
    "NUMBER": TokenType.NUMBER,
    "STRING": TokenType.STRING_LITERAL,
    "CHAR": TokenType.CHAR_LITERAL,
}


def _excerpt(text: str) -> str:
    first_line = text.split("\n", 1)[0]
    if len(first_line) > EXCERPT_LENGTH:
        return first_line[:EXCERPT_LENGTH] + "..."
    return first_line


class AgarLexer:
    """Lexer for the Agar statement language.

    Patterns are tried in order at the current position and the first match
    wins. The lexer is reusable: each call to ``tokenize`` starts from fresh
    state and either returns a complete token stream or raises on the first
    error.

    Example:
        >>> tokens = AgarLexer().tokenize("int a;")
        >>> [token.value for token in tokens]
        ['int', 'a', ';', '']
    """

    # Token types
    TOKEN_TYPES = {
        "WHITESPACE": r"[ \t\n\r\v\f]+",
        "NUMBER": r"[0-9][0-9.]*",
        "WORD": r"[A-Za-z][A-Za-z0-9]*",  # Keyword or identifier
        "STRING": r'"[^"]*"',  # No escapes; may span lines
        "CHAR": r"'[^']'",
        "OPERATOR": "[" + "".join(re.escape(symbol) for symbol in OPERATORS) + "]",
    }

    INTEGER_PATTERN = r"[0-9]+"

    def __init__(self, config: Optional[RecognizerConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._keywords = keyword_table(self.config.conditional_keyword)

        self._source: str = ""
        self._pos: int = 0
        self._line: int = 1
        self._column: int = 1
        self._tokens: List[Token] = []

        # Compile token patterns for efficiency
        self.patterns = []
        for token_type, pattern in self.TOKEN_TYPES.items():
            if token_type == "NUMBER" and not self.config.decimal_numbers:
                pattern = self.INTEGER_PATTERN
            self.patterns.append((token_type, re.compile(pattern)))

    def tokenize(self, source: str) -> TokenStream:
        """Tokenize the input text.

        Args:
            source: The source text to tokenize

        Returns:
            The token stream, terminated by an EOF token

        Raises:
            LexicalError: On an unexpected character or a malformed literal
        """
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1
        self._tokens = []

        while self._pos < len(self._source):
            self._tokenize_next()

        # Add EOF token
        self._tokens.append(Token(TokenType.EOF, "", self._line, self._column))
        logger.debug(
            "Tokenized %d characters into %d tokens", len(source), len(self._tokens)
        )
        return TokenStream(self._tokens)

    def _tokenize_next(self) -> None:
        """Tokenize the next token in the source text."""
        for token_type, pattern in self.patterns:
            match = pattern.match(self._source, self._pos)
            if match:
                value = match.group(0)
                if token_type != "WHITESPACE":
                    self._tokens.append(
                        Token(self._token_type(token_type, value), value, self._line, self._column)
                    )
                self._consume(value)
                return

        # If we get here, no pattern matched
        raise self._no_match()

    def _token_type(self, token_type: str, value: str) -> TokenType:
        if token_type == "WORD":
            return self._keywords.get(value, TokenType.IDENTIFIER)
        if token_type == "OPERATOR":
            return OPERATORS[value]
        return LITERAL_TYPES[token_type]

    def _consume(self, value: str) -> None:
        """Move past a matched value, updating line and column."""
        newlines = value.count("\n")
        if newlines:
            self._line += newlines
            self._column = len(value) - value.rfind("\n")
        else:
            self._column += len(value)
        self._pos += len(value)

    def _no_match(self) -> LexicalError:
        """Build the error for the character at the current position."""
        char = self._source[self._pos]
        line, column = self._line, self._column

        if char == '"':
            text = _excerpt(self._source[self._pos :])
            return LexicalError(f"unterminated string literal {text}", text, line, column)

        if char == "'":
            following = self._source[self._pos + 1 : self._pos + 3]
            if following.startswith("'"):
                return LexicalError("empty char literal ''", "''", line, column)
            if not following:
                return LexicalError("unterminated char literal '", "'", line, column)
            text = _excerpt(char + following[0])
            return LexicalError(f"unterminated char literal {text}", text, line, column)

        return LexicalError(f"unexpected character '{char}'", char, line, column)


def tokenize(source: str, config: Optional[RecognizerConfig] = None) -> TokenStream:
    """Convenience function to tokenize source text.

    Args:
        source: Agar source text
        config: Optional recognizer configuration

    Returns:
        The token stream
    """
    return AgarLexer(config).tokenize(source)
