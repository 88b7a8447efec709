"""
Configuration for ff-sql.

Settings are read from FF_SQL_* environment variables (or a .env file) on first
use. configure() overrides them programmatically:

    from ff_sql import configure
    configure(personality="postgres", log_queries=True)
"""

from functools import lru_cache
from typing import Any, Dict

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError, PersonalityNotFound
from .personality import Personality, get_personality


class SQLSettings(BaseSettings):
    """ff-sql settings."""

    model_config = SettingsConfigDict(
        env_prefix="FF_SQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Registry name of the personality build() uses when none is passed
    personality: str = "default"
    # Emit a debug event for every built statement
    log_queries: bool = False


# Values set through configure(); they take priority over the environment
_OVERRIDES: Dict[str, Any] = {}


def _load_settings(overrides: Dict[str, Any]) -> SQLSettings:
    try:
        return SQLSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid ff-sql settings: {e}") from e


@lru_cache
def get_settings() -> SQLSettings:
    """
    Get cached settings instance.

    Raises:
        ConfigurationError: If an FF_SQL_* value (or a .env entry) is invalid
    """
    return _load_settings(_OVERRIDES)


def configure(**overrides: Any) -> SQLSettings:
    """
    Override settings for the rest of the process.

    Args:
        **overrides: SQLSettings fields to change

    Returns:
        The new active settings

    Raises:
        ConfigurationError: If a field is unknown or invalid, or the personality
            is not registered
    """
    unknown = set(overrides) - set(SQLSettings.model_fields)
    if unknown:
        raise ConfigurationError(f"Unknown ff-sql settings: {', '.join(sorted(unknown))}")

    merged = {**_OVERRIDES, **overrides}
    settings = _load_settings(merged)

    try:
        get_personality(settings.personality)
    except PersonalityNotFound as e:
        raise ConfigurationError(str(e)) from e

    _OVERRIDES.update(overrides)
    get_settings.cache_clear()
    return get_settings()


def reset_settings() -> None:
    """Forget configured settings; the next access re-reads the environment."""
    _OVERRIDES.clear()
    get_settings.cache_clear()


def default_personality() -> Personality:
    """
    Personality used by build() when none is given.

    Raises:
        ConfigurationError: If the configured personality is not registered
    """
    name = get_settings().personality
    try:
        return get_personality(name)
    except PersonalityNotFound as e:
        raise ConfigurationError(str(e)) from e
