"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error, e.g. an invalid vote field layout."""

    pass


class DependencyInjectionError(UtilError):
    """Dependency injection error."""

    pass
