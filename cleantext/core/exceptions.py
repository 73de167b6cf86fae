# cleantext/core/exceptions.py

"""Custom exception hierarchy for the CleanText filter.

This module defines the specific error types used throughout the application
to differentiate between configuration, initialization, and runtime errors.
"""


class CleanTextError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(CleanTextError):
    """Raised when word list loading or validation fails."""

    pass


class InitializationError(CleanTextError):
    """Raised when the filter engine cannot be built."""

    pass


class PipelineError(CleanTextError):
    """Raised when a filtering run fails unexpectedly."""

    pass


class ValidationError(CleanTextError):
    """Raised when input validation fails (e.g., unknown style, bad upload)."""

    pass
