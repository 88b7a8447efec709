"""
Exception hierarchy for ff-sql.

All errors raised by ff-sql itself derive from FFSQLError. Errors raised by a
personality while a statement is being built are not wrapped and reach the
caller unchanged.
"""


class FFSQLError(Exception):
    """Base exception for all ff-sql errors."""

    pass


class TemplateError(FFSQLError):
    """Raised when a string template cannot be turned into a statement."""

    def __init__(self, message: str, template: str = None):
        self.template = template
        if template is not None:
            message = f"{message} (template: {template!r})"
        super().__init__(message)


class PersonalityError(FFSQLError):
    """Raised when a personality cannot be registered or resolved."""

    pass


class PersonalityNotFound(PersonalityError):
    """Raised when a personality name is not in the registry."""

    def __init__(self, name: str, available: list = None):
        self.name = name
        self.available = sorted(available or [])
        super().__init__(
            f"Unknown personality: {name!r}. Available: {', '.join(self.available) or 'none'}"
        )


class ConfigurationError(FFSQLError):
    """Raised when ff-sql settings are invalid."""

    pass
