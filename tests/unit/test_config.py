"""
Unit tests for ff-sql configuration.
"""

import pytest

from ff_sql import (
    ConfigurationError,
    PostgresPersonality,
    SQLSettings,
    build,
    configure,
    get_settings,
    identifier,
    reset_settings,
    sql,
)


class TestSettings:
    """Test SQLSettings loading."""

    def test_defaults(self):
        settings = get_settings()
        assert settings.personality == "default"
        assert settings.log_queries is False

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("FF_SQL_PERSONALITY", "postgres")
        monkeypatch.setenv("FF_SQL_LOG_QUERIES", "true")
        reset_settings()

        settings = get_settings()
        assert settings.personality == "postgres"
        assert settings.log_queries is True

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("FF_SQL_PERSONALITY=mysql\n")
        reset_settings()
        assert get_settings().personality == "mysql"

    def test_direct_construction(self):
        assert SQLSettings(personality="sqlserver").personality == "sqlserver"


class TestConfigure:
    """Test configure() and its effect on build()."""

    def test_configure_personality(self, stripped):
        configure(personality="postgres")
        text, params = build(sql("SELECT {}", 1))
        assert stripped(text) == "SELECT $1"
        assert params == [1]

    def test_explicit_personality_wins(self, stripped):
        configure(personality="mysql")
        text, _ = build(sql("SELECT {}", 1), PostgresPersonality())
        assert stripped(text) == "SELECT $1"

    def test_configure_keeps_other_settings(self):
        configure(log_queries=True)
        configure(personality="mysql")
        settings = get_settings()
        assert settings.log_queries is True
        assert settings.personality == "mysql"

    def test_environment_personality_used_by_build(self, monkeypatch, stripped):
        monkeypatch.setenv("FF_SQL_PERSONALITY", "sqlserver")
        reset_settings()
        text, _ = build(sql("SELECT {} FROM {}", 1, identifier("t")))
        assert stripped(text) == "SELECT ? FROM [t]"

    def test_unknown_personality(self):
        with pytest.raises(ConfigurationError, match="oracle"):
            configure(personality="oracle")
        assert get_settings().personality == "default"

    def test_unknown_setting(self):
        with pytest.raises(ConfigurationError, match="colour"):
            configure(colour="blue")

    def test_invalid_value(self):
        with pytest.raises(ConfigurationError):
            configure(log_queries="sometimes")

    def test_unknown_personality_from_environment(self, monkeypatch):
        monkeypatch.setenv("FF_SQL_PERSONALITY", "oracle")
        reset_settings()
        with pytest.raises(ConfigurationError, match="oracle"):
            build(sql("SELECT 1"))

    def test_invalid_value_from_environment(self, monkeypatch):
        """A malformed FF_SQL_* value surfaces as ConfigurationError."""
        monkeypatch.setenv("FF_SQL_LOG_QUERIES", "sometimes")
        reset_settings()

        with pytest.raises(ConfigurationError, match="log_queries"):
            get_settings()
        with pytest.raises(ConfigurationError, match="log_queries"):
            build(sql("SELECT {}", 1), PostgresPersonality())

    def test_invalid_environment_fixed_by_configure(self, monkeypatch):
        monkeypatch.setenv("FF_SQL_LOG_QUERIES", "sometimes")
        reset_settings()

        settings = configure(log_queries=False)
        assert settings.log_queries is False
        assert get_settings() is settings

    def test_reset(self):
        configure(personality="postgres")
        reset_settings()
        assert get_settings().personality == "default"
