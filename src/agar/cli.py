#!/usr/bin/env python3
"""
Agar CLI

A command-line interface for the Agar statement-language recognizer. It reads
source files, runs the lexer and the recognizer on each, and prints one line
per file: a success message or the first error found.
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import List, Optional

# Rich UI components
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from . import __version__
from .core.checker import check_source, scan_source
from .core.config import DEFAULT_CONFIG, RecognizerConfig, load_config, merge_config
from .core.schemas import RecognitionResult
from .lang.errors import ConfigError
from .utils.logger import get_logger

# Exit statuses
EXIT_OK = 0
EXIT_INVALID = 1  # Lexical or syntax error in an input
EXIT_USAGE = 2  # Unreadable input, bad configuration or bad arguments

# Define custom Rich theme
AGAR_THEME = Theme(
    {
        "success": "bold green",
        "danger": "bold red",
        "error": "red",
        "filename": "cyan",
        "heading": "bold blue",
        "muted": "dim white",
    }
)

logger = logging.getLogger("agar.cli")


def get_console(theme: bool = True) -> Console:
    """Create a console for CLI output.

    Args:
        theme: Whether to apply the Agar theme

    Returns:
        Console: Rich console writing to stdout
    """
    return Console(theme=AGAR_THEME if theme else None, highlight=False)


# ==================== Logging Setup ====================
def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Set up logging for the agar package.

    Handlers from a previous call are dropped so repeated calls never
    duplicate output.
    """
    package_logger = logging.getLogger("agar")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    return get_logger("agar", level)


def build_config(args: argparse.Namespace) -> RecognizerConfig:
    """Combine the optional config file with command-line overrides.

    Raises:
        ConfigError: If the config file or an override is invalid
    """
    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    return merge_config(
        config,
        conditional_keyword=args.keyword,
        decimal_numbers=False if args.integers_only else None,
    )


def read_source(path: str) -> Optional[str]:
    """Read a source file, returning None if it cannot be opened.

    A leading UTF-8 byte order mark is dropped.
    """
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read %s: %s", path, e)
        return None


def print_result(
    console: Console, result: RecognitionResult, path: str, show_path: bool
) -> None:
    """Print the one-line outcome for a file."""
    line = result.message()
    if show_path:
        line = f"{path}: {line}"
    style = "success" if result.ok else "danger"
    console.print(escape(line), style=style, soft_wrap=True)


def check_files(args: argparse.Namespace, console: Console) -> int:
    """Handle the check command.

    Args:
        args: Parsed command-line arguments
        console: Console to print results on

    Returns:
        int: Exit code (0 if every file is valid)
    """
    try:
        config = build_config(args)
    except ConfigError as e:
        console.print(escape(f"Error: {e}"), style="error", soft_wrap=True)
        return EXIT_USAGE

    exit_code = EXIT_OK
    show_path = len(args.files) > 1

    for path in args.files:
        source = read_source(path)
        if source is None:
            console.print(
                escape(f"Error: Could not open file {path}"), style="error", soft_wrap=True
            )
            exit_code = max(exit_code, EXIT_USAGE)
            continue

        logger.debug("Checking %s (%d characters)", path, len(source))
        result = check_source(source, config)

        if args.json:
            payload = {"file": path, **result.model_dump(mode="json")}
            console.out(json.dumps(payload), highlight=False)
        else:
            print_result(console, result, path, show_path)

        if not result.ok:
            exit_code = max(exit_code, EXIT_INVALID)

    return exit_code


def create_token_table(tokens) -> Table:
    """Create a table listing tokens with their positions."""
    table = Table(title="Tokens", show_header=True, header_style="heading")
    table.add_column("Line", justify="right")
    table.add_column("Column", justify="right")
    table.add_column("Type", style="filename")
    table.add_column("Text")

    for token in tokens:
        table.add_row(str(token.line), str(token.column), token.type.value, escape(token.value))

    return table


def display_tokens(args: argparse.Namespace, console: Console) -> int:
    """Handle the tokens command."""
    try:
        config = build_config(args)
    except ConfigError as e:
        console.print(escape(f"Error: {e}"), style="error", soft_wrap=True)
        return EXIT_USAGE

    source = read_source(args.file)
    if source is None:
        console.print(escape(f"Error: Could not open file {args.file}"), style="error", soft_wrap=True)
        return EXIT_USAGE

    scanned = scan_source(source, config)
    if not scanned.ok:
        console.print(escape(scanned.diagnostic.format()), style="danger", soft_wrap=True)
        return EXIT_INVALID

    console.print(create_token_table(scanned.tokens))
    return EXIT_OK


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by commands that run the lexer."""
    parser.add_argument("--config", "-c", help="Path to a JSON recognizer config file")
    parser.add_argument(
        "--keyword",
        "-k",
        choices=["Agar", "if"],
        help="Spelling of the conditional keyword (default: Agar)",
    )
    parser.add_argument(
        "--integers-only",
        action="store_true",
        help="Do not accept '.' inside numeric literals",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Enable debug logging on stderr",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="agar",
        description="Recognizer for the Agar statement language",
        epilog=f"Agar recognizer version {__version__}",
    )

    # Create subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Check command
    check_parser = subparsers.add_parser("check", help="Check source files for errors")
    check_parser.add_argument("files", nargs="+", help="Source files to check")
    check_parser.add_argument(
        "--json", action="store_true", help="Print one JSON result per file"
    )
    add_config_arguments(check_parser)

    # Tokens command
    tokens_parser = subparsers.add_parser("tokens", help="Show the tokens of a source file")
    tokens_parser.add_argument("file", help="Source file to tokenize")
    add_config_arguments(tokens_parser)

    # Version command
    subparsers.add_parser("version", help="Show Agar version")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point"""
    console = get_console()
    parser = create_parser()
    args = parser.parse_args(argv)

    # Set up logging: any verbosity enables DEBUG, otherwise WARNING
    if getattr(args, "verbose", 0) >= 1:
        setup_logging(logging.DEBUG)
    else:
        setup_logging(logging.WARNING)

    try:
        if args.command == "check":
            exit_code = check_files(args, console)
        elif args.command == "tokens":
            exit_code = display_tokens(args, console)
        elif args.command == "version":
            console.print(f"Agar recognizer version {__version__}")
            exit_code = EXIT_OK
        else:
            # If no command, show help
            parser.print_help()
            exit_code = EXIT_USAGE
    except KeyboardInterrupt:
        console.print("\nOperation cancelled by user")
        exit_code = EXIT_USAGE

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
