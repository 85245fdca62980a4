"""
Result schemas for Agar recognition runs.

Diagnostics and results are Pydantic models so they can be compared in tests
and dumped as JSON by the CLI.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from agar.enums import ErrorCategory, ResultStatus
from agar.lang.tokens import TokenStream

SUCCESS_MESSAGE = "Parsing completed successfully! No Syntax Error"


class Diagnostic(BaseModel):
    """The first error found in a source text."""

    model_config = ConfigDict(frozen=True)

    category: ErrorCategory = Field(..., description="Lexical or syntax error")
    message: str = Field(..., description="What went wrong, including the offending text")
    text: str = Field(..., description="Offending source text")
    line: int = Field(..., ge=1, description="1-based line of the offending text")
    column: int = Field(..., ge=1, description="1-based column of the offending text")
    expected: Optional[str] = Field(None, description="What the recognizer expected instead")

    def format(self) -> str:
        return f"{self.category.label}: {self.message} at line {self.line}, column {self.column}"

    def __str__(self) -> str:
        return self.format()


class RecognitionResult(BaseModel):
    """Outcome of checking one source text."""

    model_config = ConfigDict(frozen=True)

    status: ResultStatus = Field(..., description="Overall outcome")
    diagnostic: Optional[Diagnostic] = Field(None, description="First error, if any")
    token_count: int = Field(0, ge=0, description="Tokens produced, EOF included")

    @classmethod
    def succeeded(cls, token_count: int) -> "RecognitionResult":
        return cls(status=ResultStatus.SUCCESS, token_count=token_count)

    @classmethod
    def failed(cls, diagnostic: Diagnostic, token_count: int = 0) -> "RecognitionResult":
        return cls(
            status=ResultStatus.for_category(diagnostic.category),
            diagnostic=diagnostic,
            token_count=token_count,
        )

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    def message(self) -> str:
        """The single line shown to the user for this result."""
        if self.diagnostic is None:
            return SUCCESS_MESSAGE
        return self.diagnostic.format()


class ScanResult(BaseModel):
    """Outcome of tokenizing one source text."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tokens: Optional[TokenStream] = Field(None, description="Token stream on success")
    diagnostic: Optional[Diagnostic] = Field(None, description="Lexical error, if any")

    @property
    def ok(self) -> bool:
        return self.diagnostic is None

    def token_list(self) -> List:
        return list(self.tokens) if self.tokens is not None else []
