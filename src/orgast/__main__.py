#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/__main__.py
"""Entry point for running orgast as a module.

This allows the package to be executed as:
    python -m orgast [arguments]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
