"""
Configuration settings for formula.

This module contains the default syntax characters and limits used by the
lexer and the parser.
"""

import sys
from dataclasses import dataclass

# Stack frames used by the parser per nesting level (expr, comp, seq)
FRAMES_PER_LEVEL = 3


@dataclass(frozen=True)
class Settings:
    """Lexer and parser settings.

    Attributes:
        separator: Character separating arguments of a compound term
        lparen: Character opening an argument list
        rparen: Character closing an argument list
        end_marker: Internal sentinel used to split the input; must not
            appear in well-formed input
        max_depth: Maximum parenthesis nesting depth accepted by the parser
    """
    separator: str = ","
    lparen: str = "("
    rparen: str = ")"
    end_marker: str = "\0"
    max_depth: int = 200

    def __post_init__(self):
        chars = self.special_chars + (self.end_marker,)
        for ch in chars:
            if not isinstance(ch, str) or len(ch) != 1:
                raise ValueError(f"Syntax characters must be single characters, got {ch!r}")
        if len(set(chars)) != len(chars):
            raise ValueError(f"Syntax characters must be distinct, got {chars!r}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.max_depth * FRAMES_PER_LEVEL >= sys.getrecursionlimit():
            raise ValueError(
                f"max_depth {self.max_depth} exceeds the interpreter recursion limit "
                f"({sys.getrecursionlimit()})"
            )

    @property
    def special_chars(self) -> tuple:
        """The characters that always form a token of their own."""
        return (self.separator, self.lparen, self.rparen)


# Global default settings instance
DEFAULT_SETTINGS = Settings()
