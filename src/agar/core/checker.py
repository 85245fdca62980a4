"""
Checking pipeline for Agar sources.

The functions here run the lexer and the recognizer and return typed results
instead of raising, so callers decide how to report failures.
"""

import logging
from typing import Optional

from agar.core.config import RecognizerConfig
from agar.core.schemas import RecognitionResult, ScanResult
from agar.lang.errors import LexicalError, ParseError
from agar.lang.lexer import AgarLexer
from agar.lang.parser import Recognizer
from agar.lang.tokens import TokenStream

logger = logging.getLogger("agar.core.checker")


def scan_source(source: str, config: Optional[RecognizerConfig] = None) -> ScanResult:
    """Tokenize a source text.

    Args:
        source: Agar source text
        config: Optional recognizer configuration

    Returns:
        ScanResult: The token stream, or the lexical error that stopped the scan
    """
    try:
        tokens = AgarLexer(config).tokenize(source)
    except LexicalError as e:
        logger.debug("Lexical analysis failed: %s", e)
        return ScanResult(diagnostic=e.diagnostic)
    return ScanResult(tokens=tokens)


def recognize_tokens(
    tokens: TokenStream, config: Optional[RecognizerConfig] = None
) -> RecognitionResult:
    """Check a token stream against the grammar.

    Args:
        tokens: Token stream produced by the lexer
        config: Optional recognizer configuration

    Returns:
        RecognitionResult: Success, or the first syntax error
    """
    try:
        Recognizer(tokens, config).recognize()
    except ParseError as e:
        logger.debug("Syntax analysis failed: %s", e)
        return RecognitionResult.failed(e.diagnostic, token_count=len(tokens))
    return RecognitionResult.succeeded(len(tokens))


def check_source(source: str, config: Optional[RecognizerConfig] = None) -> RecognitionResult:
    """Tokenize and recognize a source text.

    Args:
        source: Agar source text
        config: Optional recognizer configuration

    Returns:
        RecognitionResult: Success, or the first lexical or syntax error
    """
    scanned = scan_source(source, config)
    if not scanned.ok:
        return RecognitionResult.failed(scanned.diagnostic)
    return recognize_tokens(scanned.tokens, config)
