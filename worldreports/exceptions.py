"""Exception hierarchy for worldreports."""

from __future__ import annotations


class ReportsError(Exception):
    """Base error for the application."""


class ConfigurationError(ReportsError):
    """Raised when an environment setting cannot be parsed."""


class CommandDefinitionError(ReportsError, ValueError):
    """Raised when a command declares an unusable name or description."""


class UsageError(ReportsError):
    """Raised when a command receives arguments it cannot interpret."""


class QueryError(ReportsError):
    """Raised when the database rejects a report query."""


class ResourceAcquisitionError(ReportsError):
    """Raised when a database connection cannot be opened."""


class LayoutError(ReportsError, ValueError):
    """Raised when a column format cannot be measured."""


__all__ = [
    "ReportsError",
    "ConfigurationError",
    "CommandDefinitionError",
    "UsageError",
    "QueryError",
    "ResourceAcquisitionError",
    "LayoutError",
]
