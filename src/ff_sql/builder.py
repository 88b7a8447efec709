"""
Statement resolution.

build() walks a statement left to right, depth first, and returns the SQL text
together with the parameters the personality bound along the way.
"""

from typing import Any, List, NamedTuple, Optional, Union

import structlog

from .config import default_personality, get_settings
from .context import Context
from .fragments import EmbeddedFragment, Statement
from .personality import Personality, get_personality

log = structlog.get_logger(__name__)


class BuiltQuery(NamedTuple):
    """
    Result of build().

    Unpacks as (text, params), ready for cursor.execute(text, params).
    """

    text: str
    params: List[Any]


def build(
    statement: Statement,
    personality: Optional[Union[Personality, str]] = None,
    *,
    logger=None,
) -> BuiltQuery:
    """
    Resolve a statement into SQL text and bound parameters.

    Args:
        statement: Statement to resolve
        personality: Personality instance or registry name; defaults to the
            configured personality
        logger: Optional logger (structlog style) for the sql_built event

    Returns:
        BuiltQuery with the SQL text and parameters in placeholder order

    Raises:
        TypeError: If statement is not a Statement
        PersonalityNotFound: If personality is an unknown registry name
        ConfigurationError: If no personality is given and the configured
            default is unknown

    Exceptions raised by the personality propagate unchanged.
    """
    if not isinstance(statement, Statement):
        raise TypeError(f"build() expects a Statement, got {type(statement).__name__}")

    if personality is None:
        personality = default_personality()
    elif isinstance(personality, str):
        personality = get_personality(personality)

    ctx = Context(personality=personality, params=[])
    text = EmbeddedFragment(statement).resolve(ctx)

    if get_settings().log_queries:
        (logger or log).debug(
            "sql_built",
            personality=_personality_name(personality),
            fragments=len(statement),
            params=len(ctx.params),
            text=text,
        )

    return BuiltQuery(text=text, params=ctx.params)


def _personality_name(personality: Any) -> str:
    name = getattr(personality, "name", None)
    if not name or name == Personality.name:
        return type(personality).__name__
    return name
