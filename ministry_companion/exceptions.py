"""Shared exception classes for Ministry Companion."""


class MinistryError(Exception):
    """Base exception for the application."""

    pass


class ConfigurationError(MinistryError):
    """Raised when configuration is invalid or missing.

    Startup code should surface this before any view is created.
    """

    pass


class InvalidArgument(MinistryError):
    """Raised for an unrecognized feature or event variant."""

    pass


class GenerationFailed(MinistryError):
    """Raised when the provider call (or its payload) fails.

    The message is already user-facing.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseFailure(MinistryError):
    """Raised when a structured payload cannot be parsed."""

    pass


class EmptyTranscriptError(MinistryError):
    """Raised when exporting a conversation with no messages."""

    pass


__all__ = [
    "MinistryError",
    "ConfigurationError",
    "InvalidArgument",
    "GenerationFailed",
    "ParseFailure",
    "EmptyTranscriptError",
]
