"""
ff-sql: Composable, parameterized SQL statements for Fenixflow applications.

Statements are built from literal text and interpolated expressions, then
resolved against a personality that decides placeholder syntax:

    from ff_sql import build, identifier, keyed, sql

    stmt = sql("SELECT * FROM {} {}", identifier("users"), keyed({"id": 7}, prefix="WHERE"))
    text, params = build(stmt, "postgres")
    # SELECT * FROM "users" WHERE "id" = $1   [7]   (whitespace squashed)

Features:
- Values are always bound, never spliced into the text
- Nested statements flatten into one text/params pair
- list_() and keyed() expand sequences and mappings
- Pluggable personalities (default, postgres, mysql, sqlserver, custom)
"""

# Version is read from package metadata (pyproject.toml is the single source of truth)
try:
    from importlib.metadata import version

    __version__ = version("ff-sql")
except Exception:
    __version__ = "1.0.0"

from .builder import BuiltQuery, build
from .compose import ABSENT, KeyedFragment, KeyedOptions, ListFragment, ListOptions, keyed, list_
from .config import SQLSettings, configure, get_settings, reset_settings
from .context import Context
from .exceptions import (
    ConfigurationError,
    FFSQLError,
    PersonalityError,
    PersonalityNotFound,
    TemplateError,
)
from .fragments import (
    EmbeddedFragment,
    Fragment,
    IdentifierFragment,
    LiteralFragment,
    Statement,
    ValueFragment,
    bind,
    ident,
    identifier,
    literal,
    value,
)
from .personality import (
    DefaultPersonality,
    MySQLPersonality,
    Personality,
    PostgresPersonality,
    QuotingPersonality,
    SQLServerPersonality,
    available_personalities,
    get_personality,
    register_personality,
)
from .template import sql

__all__ = [
    # Version
    "__version__",
    # Statements
    "sql",
    "build",
    "BuiltQuery",
    "Statement",
    "Context",
    # Fragments
    "Fragment",
    "LiteralFragment",
    "IdentifierFragment",
    "ValueFragment",
    "EmbeddedFragment",
    "ListFragment",
    "KeyedFragment",
    "bind",
    "literal",
    "identifier",
    "ident",
    "value",
    # Composition
    "list_",
    "keyed",
    "ListOptions",
    "KeyedOptions",
    "ABSENT",
    # Personalities
    "Personality",
    "DefaultPersonality",
    "QuotingPersonality",
    "PostgresPersonality",
    "MySQLPersonality",
    "SQLServerPersonality",
    "get_personality",
    "register_personality",
    "available_personalities",
    # Configuration
    "SQLSettings",
    "configure",
    "get_settings",
    "reset_settings",
    # Exceptions
    "FFSQLError",
    "TemplateError",
    "PersonalityError",
    "PersonalityNotFound",
    "ConfigurationError",
]
