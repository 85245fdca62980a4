"""
Agar CLI Entry Point

This module provides the main entry point for the agar console script.
"""

from .cli import main as cli_main

def main():
    """Main entry point for the Agar CLI."""
    cli_main()

if __name__ == "__main__":
    main()
