"""Centralized exception classes for flyer-studio.

Read paths (discovery, load, generate) report missing data as ``None`` or an
empty list. These exceptions cover the cases that must reach the caller.
"""


class FlyerStudioError(Exception):
    """Base exception for all flyer-studio errors."""

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: User-friendly error message.
            details: Additional technical details for debugging.
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class ValidationError(FlyerStudioError, ValueError):
    """Raised when input validation fails."""

    pass


class StorageError(FlyerStudioError):
    """Raised when writing to the template store fails."""

    pass
