"""
Term node definitions for formula.

A parsed formula is a tree of two node kinds: AtomTerm leaves and
CompoundTerm nodes applying an operator to an ordered tuple of arguments.
Both kinds are immutable and have a well-defined arity.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from ..utils.settings import Settings, DEFAULT_SETTINGS


class Term(ABC):
    """Base class of all term nodes."""

    __slots__ = ()

    def is_atom(self) -> bool:
        return False

    def is_compound(self) -> bool:
        return False

    @property
    @abstractmethod
    def arity(self) -> int:
        """Number of arguments (0 for atoms)."""

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class AtomTerm(Term):
    """Atom term, an opaque name with no arguments.

    Attributes:
        name: The atom text, verbatim
    """
    name: str

    def is_atom(self) -> bool:
        return True

    @property
    def arity(self) -> int:
        return 0


@dataclass(frozen=True)
class CompoundTerm(Term):
    """Operator applied to a (possibly empty) sequence of arguments.

    Attributes:
        op: The operator name
        args: Argument terms in source order
    """
    op: str
    args: Tuple[Term, ...] = ()

    def __post_init__(self):
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    def is_compound(self) -> bool:
        return True

    @property
    def operator(self) -> str:
        return self.op

    @property
    def arguments(self) -> Tuple[Term, ...]:
        return self.args

    @property
    def arity(self) -> int:
        return len(self.args)


def compound(op: str, *args: Union[Term, str]) -> CompoundTerm:
    """Build a compound term; plain string arguments become atoms.

    Example:
        >>> compound("Foo", "A", compound("Bar"))
        CompoundTerm(op='Foo', args=(AtomTerm(name='A'), CompoundTerm(op='Bar', args=())))
    """
    return CompoundTerm(op, tuple(AtomTerm(a) if isinstance(a, str) else a for a in args))


def render(term: Optional[Term], settings: Optional[Settings] = None) -> Optional[str]:
    """Render a term back to formula text.

    Args:
        term: Term to render, or None for a failed parse
        settings: Syntax characters to use (defaults to DEFAULT_SETTINGS)

    Returns:
        The formula text, or None when term is None
    """
    if term is None:
        return None
    settings = settings or DEFAULT_SETTINGS
    return "".join(_render_parts(term, settings))


def _render_parts(term: Term, settings: Settings) -> Iterator[str]:
    if isinstance(term, AtomTerm):
        yield term.name
        return
    if not isinstance(term, CompoundTerm):
        raise TypeError(f"Cannot render {type(term).__name__}")

    yield term.op
    yield settings.lparen
    for i, arg in enumerate(term.args):
        if i:
            yield settings.separator
        yield from _render_parts(arg, settings)
    yield settings.rparen


def format_tree(term: Term, indent: str = "  ") -> str:
    """Format a term as an indented tree, one node per line.

    Example:
        >>> print(format_tree(compound("Foo", "A", compound("Bar"))))
        Foo/2
          A
          Bar/0
    """
    lines = []
    _format_lines(term, indent, 0, lines)
    return "\n".join(lines)


def _format_lines(term: Term, indent: str, level: int, lines: list) -> None:
    if isinstance(term, CompoundTerm):
        lines.append(f"{indent * level}{term.op}/{term.arity}")
        for arg in term.args:
            _format_lines(arg, indent, level + 1, lines)
    else:
        lines.append(f"{indent * level}{term.name}")


def depth(term: Term) -> int:
    """Nesting depth of a term (1 for an atom or an empty compound)."""
    if isinstance(term, CompoundTerm) and term.args:
        return 1 + max(depth(arg) for arg in term.args)
    return 1

