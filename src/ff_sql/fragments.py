"""
Fragments, statements and the binder.

A Statement is an ordered, immutable sequence of Fragments. Each Fragment turns
a Context into SQL text, possibly appending bound parameters to the context on
the way. The variant set is closed:

- LiteralFragment: fixed text, never binds anything
- IdentifierFragment: delegates to personality.ident()
- ValueFragment: delegates to personality.value()
- EmbeddedFragment: a nested Statement, resolved in place
- ListFragment / KeyedFragment: composition helpers (see compose.py)

bind() maps any interpolated expression onto one of these variants.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Optional, Tuple

from .context import Context

if TYPE_CHECKING:
    from .builder import BuiltQuery
    from .personality import Personality


class Fragment(ABC):
    """Base class for everything that can appear inside a Statement."""

    __slots__ = ()

    @abstractmethod
    def resolve(self, ctx: Context) -> str:
        """
        Produce the SQL text for this fragment.

        Args:
            ctx: Resolution context for the current build

        Returns:
            SQL text (may be empty)
        """
        pass


@dataclass(frozen=True)
class LiteralFragment(Fragment):
    """Raw SQL text, inserted verbatim."""

    text: str

    def resolve(self, ctx: Context) -> str:
        return self.text


@dataclass(frozen=True)
class IdentifierFragment(Fragment):
    """An identifier (table, column, schema) formatted by the personality."""

    raw: Any

    def resolve(self, ctx: Context) -> str:
        return ctx.personality.ident(self.raw, ctx)


@dataclass(frozen=True)
class ValueFragment(Fragment):
    """A bound value formatted by the personality."""

    raw: Any

    def resolve(self, ctx: Context) -> str:
        return ctx.personality.value(self.raw, ctx)


@dataclass(frozen=True)
class EmbeddedFragment(Fragment):
    """A nested statement; children are resolved in order and space-joined."""

    statement: "Statement"

    def resolve(self, ctx: Context) -> str:
        return " ".join(fragment.resolve(ctx) for fragment in self.statement)


class Statement(Sequence):
    """
    Ordered, immutable sequence of fragments.

    Statements are normally created with sql(). They can be embedded in other
    statements, reused across builds and built with different personalities.
    Like tuples, they hash only when every value they hold is hashable.
    """

    __slots__ = ("_fragments",)

    def __init__(self, fragments: Iterable[Fragment] = ()):
        fragments = tuple(fragments)
        for fragment in fragments:
            if not isinstance(fragment, Fragment):
                raise TypeError(
                    f"Statement parts must be Fragment instances, got {type(fragment).__name__}"
                )
        self._fragments: Tuple[Fragment, ...] = fragments

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Statement(self._fragments[index])
        return self._fragments[index]

    def __len__(self) -> int:
        return len(self._fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self._fragments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Statement):
            return NotImplemented
        return self._fragments == other._fragments

    def __hash__(self) -> int:
        # like tuple: TypeError if any bound value is unhashable
        return hash(self._fragments)

    def __repr__(self) -> str:
        return f"Statement({list(self._fragments)!r})"

    @property
    def fragments(self) -> Tuple[Fragment, ...]:
        """The fragments of this statement as a tuple."""
        return self._fragments

    def build(self, personality: Optional["Personality"] = None) -> "BuiltQuery":
        """Shortcut for ff_sql.build(self, personality)."""
        from .builder import build

        return build(self, personality)


def bind(expression: Any) -> Fragment:
    """
    Turn an interpolated expression into a Fragment.

    - Fragments are used as-is
    - Statements are embedded
    - Anything else is bound as a value

    Args:
        expression: Any interpolated expression

    Returns:
        Fragment for the expression
    """
    if isinstance(expression, Fragment):
        return expression
    if isinstance(expression, Statement):
        return EmbeddedFragment(expression)
    return ValueFragment(expression)


def literal(text: str) -> LiteralFragment:
    """
    Insert text without binding or escaping it.

    The caller is responsible for the text being safe to splice into SQL.
    """
    return LiteralFragment(text)


def identifier(raw: Any) -> IdentifierFragment:
    """Force an expression to be treated as an identifier."""
    return IdentifierFragment(raw)


def value(raw: Any) -> ValueFragment:
    """Force an expression to be treated as a bound value."""
    return ValueFragment(raw)


ident = identifier
