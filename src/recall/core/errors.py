"""Error types raised by recall."""

from __future__ import annotations


class RecallError(Exception):
    """Base exception for all recall errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(RecallError):
    """Config file missing, unreadable, or invalid."""


class StorageError(RecallError):
    """Database open, schema, read or write failure."""


class NotFoundError(RecallError):
    """No note at the requested position."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"No note at index {index} ({count} unarchived notes)")


class EditorError(RecallError):
    """External editor could not be run or failed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Error using editor: {message}")


class OpenerError(RecallError):
    """A path or link could not be handed to the system opener."""


class ValidationError(RecallError):
    """Conflicting or malformed input."""
