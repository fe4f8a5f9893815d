"""Error hierarchy for date_extractor.

Extraction itself never raises on malformed text; these errors cover the
configuration layer and the command line surface.

Usage:
    from date_extractor.errors import DateExtractorError

    try:
        settings = load_settings(path)
    except DateExtractorError as e:
        print(e.message)
"""

from __future__ import annotations


class DateExtractorError(Exception):
    """Base exception for all date_extractor errors.

    Attributes:
        code: Error code for categorization
        details: Additional error details for debugging
    """

    code: str = "DATE_EXTRACTOR_ERROR"
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None, *, details: dict | None = None) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DateExtractorError):
    """Settings file missing or unreadable."""

    code = "CONFIGURATION_ERROR"
    default_message = "Configuration could not be loaded"


class InvalidFallbackError(ConfigurationError, ValueError):
    """Fallback month/year outside the Gregorian range."""

    code = "INVALID_FALLBACK"
    default_message = "Fallback month must be 1-12 and fallback year at least 1"


__all__ = [
    "DateExtractorError",
    "ConfigurationError",
    "InvalidFallbackError",
]
