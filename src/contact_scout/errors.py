"""Custom exceptions for the contact scout domain."""


class ScoutError(Exception):
    """Base exception for this project."""


class ConfigError(ScoutError):
    """Raised when runtime configuration is invalid."""


class SearchError(ScoutError):
    """Raised when the upstream map search cannot be fetched."""
