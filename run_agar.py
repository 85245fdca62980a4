#!/usr/bin/env python3
"""
Agar CLI Wrapper Script

This script runs the Agar CLI straight from a source checkout, without
installing the package first.
"""

import sys
from pathlib import Path

# Add the src directory to the Python path if needed
src_dir = Path(__file__).parent.absolute() / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

# Import the CLI function and run it
from agar.cli import main

if __name__ == "__main__":
    sys.argv[0] = 'agar'
    main()
