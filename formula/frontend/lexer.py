"""
Lexer module for formula.

This module splits formula text into a stream of tokens for the parser.
Every separator and parenthesis becomes a token of its own; every maximal
run of other characters becomes one ATOM token.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from ..utils.settings import Settings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types of the formula grammar."""
    ATOM = auto()   # Any run of non-special characters
    SEP = auto()    # ,
    LPAR = auto()   # (
    RPAR = auto()   # )
    END = auto()    # End of input


@dataclass(frozen=True)
class Token:
    """Represents a token in the formula text.

    Attributes:
        type: The token type
        value: The text of the token (empty for END)
    """
    type: TokenType
    value: str = ""

    @property
    def is_atom(self) -> bool:
        return self.type is TokenType.ATOM

    def __repr__(self) -> str:
        if self.type is TokenType.ATOM:
            return f"Token(ATOM, {self.value!r})"
        return f"Token({self.type.name})"


END_TOKEN = Token(TokenType.END)


class Lexer:
    """Lexer for formula text.

    The input is split by surrounding each special character with the
    settings' end marker and splitting on that marker. An end marker that
    already occurs in the input therefore splits atoms at that point; such
    input is outside the grammar and its token sequence is unspecified.

    Example:
        >>> lexer = Lexer()
        >>> lexer.tokenize("Foo(A,B)")
        [Token(ATOM, 'Foo'), Token(LPAR), Token(ATOM, 'A'), Token(SEP), Token(ATOM, 'B'), Token(RPAR), Token(END)]
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the lexer.

        Args:
            settings: Syntax characters to use (defaults to DEFAULT_SETTINGS)
        """
        self._settings = settings or DEFAULT_SETTINGS
        self._type_map = {
            self._settings.separator: TokenType.SEP,
            self._settings.lparen: TokenType.LPAR,
            self._settings.rparen: TokenType.RPAR,
        }

    @property
    def settings(self) -> Settings:
        return self._settings

    def tokenize(self, source: str) -> List[Token]:
        """Tokenize formula text.

        Never fails: malformed structure is left for the parser to reject.

        Args:
            source: Formula text

        Returns:
            List of Token objects, always ending with exactly one END token
        """
        marker = self._settings.end_marker
        marked = source
        for ch in self._settings.special_chars:
            marked = marked.replace(ch, marker + ch + marker)

        tokens = []
        for piece in marked.split(marker):
            # Adjacent special characters leave empty pieces behind
            if not piece:
                continue
            tokens.append(Token(self._type_map.get(piece, TokenType.ATOM), piece))
        tokens.append(END_TOKEN)

        logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
        return tokens

    def stream(self, source: str) -> "TokenStream":
        """Tokenize formula text and wrap the tokens in a TokenStream."""
        return TokenStream(self.tokenize(source))


class TokenStream:
    """Cursor over a token list with one token of lookahead.

    The stream exposes the current token and the token after it. Advancing
    is monotonic; once the current token is END, further advances do
    nothing and both visible tokens stay END.
    """

    def __init__(self, tokens: List[Token]):
        tokens = list(tokens)
        if not tokens or tokens[-1].type is not TokenType.END:
            tokens.append(END_TOKEN)
        self._tokens = tokens
        self._last = len(tokens) - 1
        self._pos = 0

    @property
    def current(self) -> Token:
        return self._tokens[self._pos]

    @property
    def lookahead(self) -> Token:
        return self._tokens[min(self._pos + 1, self._last)]

    @property
    def at_end(self) -> bool:
        """True once the current token is END."""
        return self.current.type is TokenType.END

    def current_is(self, token_type: TokenType) -> bool:
        return self.current.type is token_type

    def lookahead_is(self, token_type: TokenType) -> bool:
        return self.lookahead.type is token_type

    def advance(self) -> None:
        """Move the cursor one token forward (no-op at END)."""
        if self._pos < self._last:
            self._pos += 1

    def consume(self) -> Token:
        """Return the current token and advance past it."""
        token = self.current
        self.advance()
        return token

    def trace(self, msg: str = "") -> None:
        """Log the cursor state at DEBUG level."""
        logger.debug("TRACE:%s token=%r lookahead=%r", msg, self.current, self.lookahead)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStream(pos={self._pos}, current={self.current!r}, lookahead={self.lookahead!r})"


def tokenize_source(source: str, settings: Optional[Settings] = None) -> List[Token]:
    """Convenience function to tokenize formula text.

    Args:
        source: Formula text
        settings: Optional syntax settings

    Returns:
        List of Token objects
    """
    lexer = Lexer(settings)
    return lexer.tokenize(source)
