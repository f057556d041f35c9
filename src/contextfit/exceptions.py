"""contextfit exception hierarchy.

Callers can catch ``ContextFitError`` for everything raised by this package,
or a specific subclass to tell failure modes apart.
"""

from __future__ import annotations


class ContextFitError(Exception):
    """Base for all contextfit exceptions."""


class ConfigError(ContextFitError, ValueError):
    """Invalid configuration values (e.g. a non-positive item threshold)."""


class ArchiveError(ContextFitError, OSError):
    """Raw data could not be written to the archive directory."""


class UnserializableValueError(ContextFitError, ValueError):
    """The value is not a finite, acyclic JSON tree."""
