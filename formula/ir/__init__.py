"""
Term tree module for formula.

This module defines the immutable term nodes produced by the parser and
the functions rendering them back to text.
"""

from .nodes import (
    Term,
    AtomTerm,
    CompoundTerm,
    compound,
    render,
    format_tree,
    depth,
)

__all__ = [
    "Term",
    "AtomTerm",
    "CompoundTerm",
    "compound",
    "render",
    "format_tree",
    "depth",
]
