"""
Recognizer configuration.

This module holds the Pydantic model for recognizer settings and the helpers
that build it from dictionaries and JSON files.
"""

import json
from pathlib import Path
from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from agar.lang.errors import ConfigError


class RecognizerConfig(BaseModel):
    """Settings shared by the lexer and the recognizer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    conditional_keyword: Literal["Agar", "if"] = Field(
        "Agar", description="Spelling of the conditional keyword"
    )
    decimal_numbers: bool = Field(
        True, description="Whether numeric literals may contain '.'"
    )
    max_nesting_depth: int = Field(
        200, ge=1, description="Deepest statement/expression nesting accepted"
    )


DEFAULT_CONFIG = RecognizerConfig()


def config_from_dict(config: Dict[str, Any]) -> RecognizerConfig:
    """
    Build a validated configuration from a dictionary.

    Args:
        config: Raw configuration values

    Returns:
        RecognizerConfig: Validated configuration

    Raises:
        ConfigError: If the configuration is invalid
    """
    try:
        return RecognizerConfig(**config)
    except ValidationError as e:
        # Convert Pydantic validation error to a more user-friendly error message
        error_messages = []
        for error in e.errors():
            location = ".".join(str(loc) for loc in error["loc"])
            message = error["msg"]
            error_messages.append(f"{location}: {message}")

        error_str = "\n".join(error_messages)
        raise ConfigError(f"Configuration validation failed:\n{error_str}")


def load_config(path: Union[str, Path]) -> RecognizerConfig:
    """Load a configuration from a JSON file.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Could not read configuration file {path}: {e}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {path} must contain a JSON object")
    return config_from_dict(data)


def merge_config(base: RecognizerConfig, **overrides: Any) -> RecognizerConfig:
    """Return a copy of ``base`` with the non-None overrides applied."""
    values = base.model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})
    return config_from_dict(values)
