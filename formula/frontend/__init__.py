"""
Frontend module for formula.

This module provides the lexer and the recursive descent parser that turn
formula text into a term tree.
"""

from .lexer import Lexer, Token, TokenType, TokenStream, tokenize_source
from .parser import Parser, ParseResult, ParseError, parse

__all__ = [
    # Lexer components
    "Lexer",
    "Token",
    "TokenType",
    "TokenStream",
    "tokenize_source",
    # Parser components
    "Parser",
    "ParseResult",
    "ParseError",
    "parse",
]
