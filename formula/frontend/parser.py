"""
Parser module for formula.

This module provides a recursive descent parser over the lexer's token
stream. The grammar is:

    expr  := atom | comp
    atom  := ATOM
    comp  := ATOM '(' seq ')'
    seq   := <empty> | expr (',' seq)?

An expr is a comp exactly when the token after its leading atom is '('.
Note that "A," is a valid seq, so "Foo(A,)" parses as "Foo(A)".
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..ir import Term, AtomTerm, CompoundTerm, render
from ..utils.settings import Settings, DEFAULT_SETTINGS
from .lexer import Lexer, TokenStream, TokenType

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Exception raised when the input does not match the grammar."""

    def __init__(self, message: str = "parse failed"):
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class ParseResult:
    """Result of a parse operation.

    Attributes:
        success: Whether the parse succeeded
        term: The root term (None if the parse failed)
        error_message: Error message if the parse failed
    """
    success: bool
    term: Optional[Term] = None
    error_message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success

    def render(self, settings: Optional[Settings] = None) -> Optional[str]:
        """Rendered text of the parsed term, or None if the parse failed."""
        return render(self.term, settings)


class Parser:
    """Recursive descent parser for formulas.

    The parser holds no per-parse state: each rule receives the token
    stream it works on, so one instance can be reused for any number of
    parses. Input tokens following the top-level expression are ignored.

    Recursion depth grows with the parenthesis nesting of the input; input
    nested deeper than settings.max_depth is rejected.

    Example:
        >>> parser = Parser()
        >>> result = parser.parse("Foo(A,Bar())")
        >>> result.term.arity
        2
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the parser.

        Args:
            settings: Syntax settings shared with the lexer
        """
        self._settings = settings or DEFAULT_SETTINGS
        self._lexer = Lexer(self._settings)

    @property
    def settings(self) -> Settings:
        return self._settings

    def parse(self, source: str) -> ParseResult:
        """Parse formula text.

        Args:
            source: Formula text

        Returns:
            ParseResult: The root term on success, no term on failure
        """
        try:
            term = self.parse_strict(source)
        except ParseError as e:
            logger.debug("Parse of %r failed: %s", source, e.message)
            return ParseResult(success=False, error_message=e.message)
        except RecursionError:
            # Caller frames count against the same limit as max_depth
            logger.debug("Parse of %r failed: recursion limit reached", source)
            return ParseResult(success=False, error_message="Nesting exceeds the recursion limit")
        return ParseResult(success=True, term=term)

    def parse_strict(self, source: str) -> Term:
        """Parse formula text, raising on failure.

        Raises:
            ParseError: If the text does not match the grammar
        """
        stream = self._lexer.stream(source)
        return self.parse_expr(stream)

    def parse_expr(self, stream: TokenStream, depth: int = 0) -> Term:
        """expr := atom | comp"""
        if stream.lookahead_is(TokenType.LPAR):
            return self.parse_comp(stream, depth)
        return self.parse_atom(stream)

    def parse_atom(self, stream: TokenStream) -> AtomTerm:
        """atom := ATOM"""
        if not stream.current.is_atom:
            raise ParseError(f"Expected atom, got {stream.current.type.name}")
        return AtomTerm(stream.consume().value)

    def parse_comp(self, stream: TokenStream, depth: int = 0) -> CompoundTerm:
        """comp := ATOM '(' seq ')'"""
        if not (stream.current.is_atom and stream.lookahead_is(TokenType.LPAR)):
            raise ParseError("Expected operator followed by argument list")
        if depth >= self._settings.max_depth:
            raise ParseError(f"Nesting deeper than {self._settings.max_depth} levels")

        op = stream.consume().value
        self._expect(stream, TokenType.LPAR)
        args = self.parse_seq(stream, depth + 1)
        self._expect(stream, TokenType.RPAR)
        return CompoundTerm(op, tuple(args))

    def parse_seq(self, stream: TokenStream, depth: int = 0) -> List[Term]:
        """seq := <empty> | expr (',' seq)?

        Leaves the stream positioned on the closing ')'.
        """
        seq: List[Term] = []
        while not stream.current_is(TokenType.RPAR):
            seq.append(self.parse_expr(stream, depth))
            if stream.current_is(TokenType.SEP):
                stream.advance()
            elif not stream.current_is(TokenType.RPAR):
                stream.trace("seq")
                raise ParseError(f"Expected ')' or separator, got {stream.current.type.name}")
        return seq

    def _expect(self, stream: TokenStream, token_type: TokenType) -> None:
        if not stream.current_is(token_type):
            stream.trace("expect")
            raise ParseError(f"Expected {token_type.name}, got {stream.current.type.name}")
        stream.advance()


_DEFAULT_PARSER = Parser()


def parse(text: str) -> Optional[Term]:
    """Parse formula text with the default settings.

    Args:
        text: Formula text

    Returns:
        The root term, or None if the text does not parse
    """
    return _DEFAULT_PARSER.parse(text).term
