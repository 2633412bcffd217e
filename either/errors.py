"""Error types raised by Either values."""

from __future__ import annotations


class EitherError(Exception):
    """Base error for Either operations."""

    def __init__(self, message: str) -> None:
        """Initialize with error message."""
        self.message = message
        super().__init__(message)


class InvalidArgumentError(EitherError, ValueError):
    """A Left or Right was constructed with an absent (None) value."""


class NoSuchElementError(EitherError, LookupError):
    """The requested side is not the active variant of the Either."""
