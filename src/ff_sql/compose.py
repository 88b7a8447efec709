"""
List and mapping composition helpers.

list_() and keyed() turn a Python sequence or mapping into a single fragment
that expands to a joined SQL clause, for example:

    sql("SELECT * FROM t {}", keyed({"a": 1, "b": 2}, prefix="WHERE", join="AND"))
    -> SELECT * FROM t WHERE ?? = ? AND ?? = ?

An empty expansion resolves to an empty string, prefix and suffix included.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from .context import Context
from .fragments import Fragment, bind


class _AbsentType:
    """Type of the ABSENT sentinel."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_AbsentType, ())


# Marks a keyed() entry as unset. None is a real value (SQL NULL) and is bound.
ABSENT = _AbsentType()


class ListOptions(BaseModel):
    """Options for list_()."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    join: str = ","
    prefix: str = ""
    suffix: str = ""


class KeyedOptions(ListOptions):
    """Options for keyed(); sep goes between each identifier and its value."""

    sep: str = "="


def _wrap(joined: str, options: ListOptions) -> str:
    if joined == "":
        return ""
    return f"{options.prefix} {joined} {options.suffix}"


def _merge_options(options_class, options, overrides):
    """Validate options (model, mapping or None) plus overrides into options_class."""
    if options is None:
        return options_class(**overrides)
    if type(options) is options_class and not overrides:
        return options
    data = options.model_dump() if isinstance(options, BaseModel) else options
    if isinstance(data, Mapping):
        data = {**data, **overrides}
    # anything else is left for pydantic to reject
    return options_class.model_validate(data)


@dataclass(frozen=True)
class ListFragment(Fragment):
    """Items bound one by one and joined."""

    items: Tuple[Any, ...]
    options: ListOptions

    def resolve(self, ctx: Context) -> str:
        joined = f" {self.options.join} ".join(bind(item).resolve(ctx) for item in self.items)
        return _wrap(joined, self.options)


@dataclass(frozen=True)
class KeyedFragment(Fragment):
    """Identifier/value pairs joined; ABSENT entries are skipped."""

    entries: Tuple[Tuple[Any, Any], ...]
    options: KeyedOptions

    def resolve(self, ctx: Context) -> str:
        parts = []
        for key, val in self.entries:
            if val is ABSENT:
                continue
            # ident before value: params follow text order
            name = ctx.personality.ident(key, ctx)
            parts.append(f"{name} {self.options.sep} {bind(val).resolve(ctx)}")
        return _wrap(f" {self.options.join} ".join(parts), self.options)


def list_(
    items: Iterable[Any],
    options: Optional[Union[ListOptions, Mapping]] = None,
    **overrides: str,
) -> ListFragment:
    """
    Expand a sequence into a joined list of fragments.

    Every item goes through bind(), so plain values become placeholders while
    fragments and statements are used as they are.

    Args:
        items: Items to expand (copied at call time)
        options: ListOptions (or a mapping of its fields) to start from
        **overrides: join, prefix or suffix overriding options

    Returns:
        ListFragment for the items
    """
    return ListFragment(tuple(items), _merge_options(ListOptions, options, overrides))


def keyed(
    entries: Union[Mapping, Iterable[Tuple[Any, Any]]],
    options: Optional[Union[KeyedOptions, Mapping]] = None,
    **overrides: str,
) -> KeyedFragment:
    """
    Expand a mapping into joined "identifier sep value" pairs.

    Keys go through the personality's ident(); values go through bind().
    Entries whose value is ABSENT contribute nothing.

    Args:
        entries: Mapping or iterable of (key, value) pairs (copied at call time)
        options: KeyedOptions (or a mapping of its fields) to start from
        **overrides: join, sep, prefix or suffix overriding options

    Returns:
        KeyedFragment for the entries
    """
    if isinstance(entries, Mapping):
        pairs = tuple(entries.items())
    else:
        pairs = tuple((key, val) for key, val in entries)
    return KeyedFragment(pairs, _merge_options(KeyedOptions, options, overrides))
