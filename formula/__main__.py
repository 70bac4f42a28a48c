"""
Entry point for running formula as a module.

Usage:
    python -m formula parse "Foo(A,B)"
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
