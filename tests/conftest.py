"""
Pytest configuration and fixtures for formula tests.
"""

import pytest


@pytest.fixture
def lexer():
    """Provide a Lexer instance."""
    from formula.frontend import Lexer
    return Lexer()


@pytest.fixture
def parser():
    """Provide a Parser instance."""
    from formula.frontend import Parser
    return Parser()


@pytest.fixture
def bracket_settings():
    """Settings using ';' and square brackets instead of ',' and parentheses."""
    from formula.utils import Settings
    return Settings(separator=";", lparen="[", rparen="]")
