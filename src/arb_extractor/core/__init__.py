"""Core building blocks shared across the extractor."""

from .exceptions import (
    ArbExtractorError,
    ConfigurationError,
    EntryValidationError,
    ErrorCategory,
    ErrorSeverity,
    MalformedResourceFileError,
    ResourceFileError,
)

__all__ = [
    "ArbExtractorError",
    "ConfigurationError",
    "EntryValidationError",
    "ErrorCategory",
    "ErrorSeverity",
    "MalformedResourceFileError",
    "ResourceFileError",
]
