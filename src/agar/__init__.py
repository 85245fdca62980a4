"""
agar - recognizer for the Agar statement language

Tokenizes a small C-like statement language and checks it against a fixed
grammar with a recursive-descent recognizer, reporting success or the first
lexical or syntax error.

Example:
    >>> from agar import check_source
    >>> result = check_source("int a; a = 5;")
    >>> result.ok
    True
"""

__version__ = "0.1.0"

from .core.checker import check_source, recognize_tokens, scan_source
from .core.config import RecognizerConfig
from .core.schemas import Diagnostic, RecognitionResult, ScanResult
from .lang.errors import AgarError, ConfigError, LexicalError, ParseError
from .lang.lexer import AgarLexer, tokenize
from .lang.parser import Recognizer, recognize
from .lang.tokens import Token, TokenStream, TokenType

__all__ = [
    "__version__",
    "check_source",
    "recognize_tokens",
    "scan_source",
    "RecognizerConfig",
    "Diagnostic",
    "RecognitionResult",
    "ScanResult",
    "AgarError",
    "ConfigError",
    "LexicalError",
    "ParseError",
    "AgarLexer",
    "tokenize",
    "Recognizer",
    "recognize",
    "Token",
    "TokenStream",
    "TokenType",
]
