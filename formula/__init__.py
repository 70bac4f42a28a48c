"""
formula - a minimal term parser

Parses formulas, either a bare atom or an operator applied to a
parenthesized, comma-separated list of sub-formulas, into an immutable term
tree and renders such trees back to text.

Example:
    >>> from formula import parse, render
    >>> term = parse("Ola(Bom,Dia(DD,MM(),AAAA))")
    >>> term.operator, term.arity
    ('Ola', 2)
    >>> render(term)
    'Ola(Bom,Dia(DD,MM(),AAAA))'

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "formula Team"

from .frontend import Parser, ParseResult, ParseError, parse
from .ir import Term, AtomTerm, CompoundTerm, render
from .utils import Settings

__all__ = [
    "__version__",
    "__author__",
    "parse",
    "render",
    "Parser",
    "ParseResult",
    "ParseError",
    "Term",
    "AtomTerm",
    "CompoundTerm",
    "Settings",
]
