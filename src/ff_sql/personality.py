"""
Personalities: how identifiers and values become SQL text.

A personality decides the placeholder syntax of the target driver and whether
identifiers are bound as parameters or quoted inline:

- default: ?? for identifiers, ? for values, both bound (node-mysql style)
- postgres: "quoted" identifiers inline, $1, $2 ... for values (asyncpg)
- mysql: `quoted` identifiers inline, %s for values (aiomysql, PyMySQL)
- sqlserver: [quoted] identifiers inline, ? for values (pyodbc, aioodbc)

Any object with ident(raw, ctx) and value(raw, ctx) methods can be passed to
build(); subclassing Personality is optional.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

import structlog

from .context import Context
from .exceptions import PersonalityError, PersonalityNotFound

logger = structlog.get_logger(__name__)


class Personality(ABC):
    """
    Abstract formatting pair for identifiers and values.

    Both methods return the text to splice into the statement. Positional
    dialects must append exactly the parameters that correspond to the
    returned placeholder, in order.
    """

    name = "abstract"

    @abstractmethod
    def ident(self, raw: Any, ctx: Context) -> str:
        """Format an identifier."""
        pass

    @abstractmethod
    def value(self, raw: Any, ctx: Context) -> str:
        """Format a value."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class DefaultPersonality(Personality):
    """Binds both identifiers (??) and values (?) as positional parameters."""

    name = "default"

    IDENT_PLACEHOLDER = "??"
    VALUE_PLACEHOLDER = "?"

    def ident(self, raw: Any, ctx: Context) -> str:
        ctx.bind_param(raw)
        return self.IDENT_PLACEHOLDER

    def value(self, raw: Any, ctx: Context) -> str:
        ctx.bind_param(raw)
        return self.VALUE_PLACEHOLDER


class QuotingPersonality(Personality):
    """
    Base for personalities that quote identifiers inline.

    Identifiers are never bound. Dotted names (schema.table) are quoted per
    part, and the closing quote character is doubled inside each part.
    """

    open_quote = '"'
    close_quote = '"'

    def quote_identifier(self, identifier: Any) -> str:
        """
        Quote an identifier.

        Args:
            identifier: Column, table or schema.table name

        Returns:
            Quoted identifier
        """
        parts = str(identifier).split(".")
        escaped = (part.replace(self.close_quote, self.close_quote * 2) for part in parts)
        return ".".join(f"{self.open_quote}{part}{self.close_quote}" for part in escaped)

    def ident(self, raw: Any, ctx: Context) -> str:
        return self.quote_identifier(raw)


class PostgresPersonality(QuotingPersonality):
    """PostgreSQL: "double quoted" identifiers and numbered $n values."""

    name = "postgres"

    def value(self, raw: Any, ctx: Context) -> str:
        return f"${ctx.bind_param(raw)}"


class MySQLPersonality(QuotingPersonality):
    """MySQL: `backtick` identifiers and %s values."""

    name = "mysql"
    open_quote = "`"
    close_quote = "`"

    def value(self, raw: Any, ctx: Context) -> str:
        ctx.bind_param(raw)
        return "%s"


class SQLServerPersonality(QuotingPersonality):
    """SQL Server: [bracketed] identifiers and ? values."""

    name = "sqlserver"
    open_quote = "["
    close_quote = "]"

    def value(self, raw: Any, ctx: Context) -> str:
        ctx.bind_param(raw)
        return "?"


_PERSONALITIES: Dict[str, type] = {
    DefaultPersonality.name: DefaultPersonality,
    PostgresPersonality.name: PostgresPersonality,
    MySQLPersonality.name: MySQLPersonality,
    SQLServerPersonality.name: SQLServerPersonality,
}


def register_personality(name: str, personality_class: type, replace: bool = False) -> None:
    """
    Register a personality class under a name.

    Args:
        name: Registry name (case-insensitive)
        personality_class: Class with ident() and value() methods
        replace: Allow overwriting an existing registration

    Raises:
        PersonalityError: If the name is taken or the class is unusable
    """
    key = name.lower()
    if not (
        callable(getattr(personality_class, "ident", None))
        and callable(getattr(personality_class, "value", None))
    ):
        raise PersonalityError(
            f"Personality {personality_class!r} must define ident() and value() methods"
        )
    if key in _PERSONALITIES and not replace:
        raise PersonalityError(f"Personality {name!r} is already registered")

    _PERSONALITIES[key] = personality_class
    logger.debug("personality_registered", name=key, cls=personality_class.__name__)


def get_personality(name: str) -> Personality:
    """
    Create a personality by registry name.

    Args:
        name: Registry name (case-insensitive)

    Returns:
        New personality instance

    Raises:
        PersonalityNotFound: If no personality is registered under name
    """
    try:
        personality_class = _PERSONALITIES[name.lower()]
    except KeyError:
        raise PersonalityNotFound(name, list(_PERSONALITIES)) from None
    return personality_class()


def available_personalities() -> List[str]:
    """Registered personality names, sorted."""
    return sorted(_PERSONALITIES)
