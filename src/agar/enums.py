# agar/enums.py
from enum import Enum

class ErrorCategory(str, Enum):
    """Kinds of failure a recognition run can end with"""

    LEXICAL = "lexical"  # Tokenizer could not classify the input
    SYNTAX = "syntax"  # Token sequence violates the grammar

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} error"

class ResultStatus(str, Enum):
    """Overall outcome of checking one source text"""

    SUCCESS = "success"
    LEXICAL_ERROR = "lexical_error"
    SYNTAX_ERROR = "syntax_error"

    @classmethod
    def for_category(cls, category: ErrorCategory) -> "ResultStatus":
        if category is ErrorCategory.LEXICAL:
            return cls.LEXICAL_ERROR
        return cls.SYNTAX_ERROR
