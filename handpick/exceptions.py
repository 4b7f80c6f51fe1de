"""Handpick exception hierarchy.

All handpick exceptions inherit from HandpickError and support cause chaining.
"""

from __future__ import annotations

from pathlib import Path


class HandpickError(Exception):
    """Base exception for all handpick errors.

    Wraps original errors as __cause__ for proper exception chaining.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class PersistenceError(HandpickError):
    """Raised when the candidate file cannot be read or written."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause=cause)
        self.path = path


class LoadError(PersistenceError):
    """Raised when the candidate file exists but is unreadable or malformed."""

    pass


class SaveError(PersistenceError):
    """Raised when writing the candidate file fails."""

    pass


class ConfigError(HandpickError):
    """Raised when configuration values fail validation.

    Examples: unparsable TOML, a non-boolean restore flag.
    """

    pass
