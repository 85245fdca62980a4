import os
import sys
from pathlib import Path

import pytest

# Ensure the 'src' directory is on sys.path so the 'agar' package can be imported
dirpath = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if dirpath not in sys.path:
    sys.path.insert(0, dirpath)

from agar.core.config import RecognizerConfig
from agar.lang.lexer import AgarLexer


@pytest.fixture
def examples_dir():
    """Directory holding the sample Agar programs."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def lexer():
    """Lexer using the default (Agar) dialect."""
    return AgarLexer()


@pytest.fixture
def english_config():
    """Configuration for the dialect that spells the conditional keyword 'if'."""
    return RecognizerConfig(conditional_keyword="if")
