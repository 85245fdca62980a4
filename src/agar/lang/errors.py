"""Agar error types

Lexical and syntax errors carry the Diagnostic that describes them, so callers
can either catch the exception or turn it into a RecognitionResult.
"""

from typing import Optional

from agar.core.schemas import Diagnostic
from agar.enums import ErrorCategory


class AgarError(Exception):
    """Base class for all Agar errors."""


class ConfigError(AgarError):
    """Raised when a recognizer configuration is invalid."""


class RecognitionError(AgarError):
    """An error found while tokenizing or recognizing a source text."""

    category = ErrorCategory.SYNTAX

    def __init__(
        self, message: str, text: str, line: int, column: int, expected: Optional[str] = None
    ):
        self.diagnostic = Diagnostic(
            category=self.category,
            message=message,
            text=text,
            line=line,
            column=column,
            expected=expected,
        )
        super().__init__(self.diagnostic.format())

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def column(self) -> int:
        return self.diagnostic.column


class LexicalError(RecognitionError):
    """Raised when source text cannot be split into tokens."""

    category = ErrorCategory.LEXICAL


class ParseError(RecognitionError):
    """Raised when the token sequence does not match the grammar."""

    category = ErrorCategory.SYNTAX
