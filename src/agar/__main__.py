"""
Entry point for running agar as a module.

Usage:
    python -m agar check program.agar
"""

from .main import main

if __name__ == "__main__":
    main()
