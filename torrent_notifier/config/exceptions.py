"""Exceptions raised while reading the download manager settings."""

from typing import List, Optional


class ConfigReadingError(Exception):
    """
    Base exception for every failure to produce a usable configuration.

    Carries a primary message and, where helpful, a list of specific errors
    and suggestions that are formatted into the exception text.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigReadingError.

        Args:
            message: Primary error message
            errors: List of specific errors
            suggestions: List of helpful suggestions to fix the errors
        """
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with all errors and suggestions."""
        parts = [self.message]

        if self.errors:
            parts.append("\nErrors:")
            for i, error in enumerate(self.errors, 1):
                parts.append(f"  {i}. {error}")

        if self.suggestions:
            parts.append("\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"  - {suggestion}")

        return "\n".join(parts)


class ConfigIOError(ConfigReadingError):
    """The settings file could not be opened or read."""

    def __init__(
        self,
        message: str,
        cause: Optional[OSError] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.cause = cause
        super().__init__(message, suggestions=suggestions)


class ConfigParseError(ConfigReadingError):
    """The settings file is malformed or does not match the expected schema."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.field = field
        super().__init__(message, suggestions=suggestions)


class ConfigValidationError(ConfigReadingError):
    """The settings decoded fine but violate a semantic rule."""


class EnvironmentConfigError(ConfigReadingError):
    """One or more environment variables hold invalid values."""
