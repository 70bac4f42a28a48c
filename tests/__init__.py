"""
Test suite for formula.

This package contains unit tests for the lexer, the parser, the term
tree, the settings and the command line interface.
"""

__version__ = "0.1.0"
