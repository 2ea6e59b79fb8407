"""
Exception classes for the ARB string extractor.

Recoverable conditions (a malformed resource file, a failed write on one
target) are absorbed inside the resource layer and only surface as log
records and a reduced write count. The classes below are what crosses a
module boundary when something does have to be raised.
"""

from __future__ import annotations

from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling strategies."""

    CONFIGURATION = "configuration"
    RESOURCE = "resource"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


class ArbExtractorError(Exception):
    """Base exception class for extractor specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        user_message: str | None = None,
        context: object | None = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.user_message: str = user_message or message
        self.context: object | None = context
        self.recoverable: bool = recoverable


class ConfigurationError(ArbExtractorError):
    """Project configuration could not be read or validated."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            recoverable=False,
            user_message=user_message,
            context=context,
        )


class ResourceFileError(ArbExtractorError):
    """Reading or persisting a resource file failed."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: object | None = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.RESOURCE,
            severity=ErrorSeverity.MEDIUM,
            user_message=user_message,
            context=context,
            recoverable=recoverable,
        )


class MalformedResourceFileError(ResourceFileError):
    """Resource file content is not a JSON object."""

    def __init__(
        self,
        message: str,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            user_message="Resource file is not a valid ARB document",
            context=context,
            recoverable=True,
        )
        self.severity = ErrorSeverity.LOW


class EntryValidationError(ArbExtractorError):
    """Batch entries failed validation before writing."""

    def __init__(
        self,
        message: str,
        blank_key_count: int = 0,
        user_message: str | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.LOW,
            recoverable=False,
            user_message=user_message,
            context=blank_key_count,
        )
        self.blank_key_count: int = blank_key_count
