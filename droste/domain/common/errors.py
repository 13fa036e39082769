#droste/domain/common/errors.py

"""
Domain-specific error types for standardized error handling.

Expected outcomes (a discarded drag, a missing settings file) are described by
DomainError values carried inside a Result. Broken geometric invariants are
raised as GeometryInvariantError instead, since they indicate a bug rather than
a condition the editor can recover from.
"""
from enum import Enum
from typing import Optional, Dict, Any


class ErrorCategory(Enum):
    """Categories of errors in the application."""
    VALIDATION = "Validation"
    CONFIGURATION = "Configuration"
    GEOMETRY = "Geometry"
    UNKNOWN = "Unknown"


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"


class DomainError:
    """
    Base class for domain-specific errors.

    This provides structured error information that can be used
    for consistent error handling, logging, and user feedback.
    """

    def __init__(self,
                 message: str,
                 category: ErrorCategory = ErrorCategory.UNKNOWN,
                 severity: ErrorSeverity = ErrorSeverity.ERROR,
                 code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None,
                 inner_error: Optional[Exception] = None):
        """
        Initialize a domain error.

        Args:
            message: Human-readable error message
            category: Error category
            severity: Error severity
            code: Optional error code for programmatic handling
            details: Optional additional error details
            inner_error: Optional original exception
        """
        self.message = message
        self.category = category
        self.severity = severity
        self.code = code
        self.details = details or {}
        self.inner_error = inner_error

    def __str__(self) -> str:
        """String representation of the error."""
        return f"{self.category.value} Error: {self.message}"


class ValidationError(DomainError):
    """Error for rejected user input, such as a drag below the minimum size."""

    def __init__(self, message: str, code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None, inner_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.WARNING,
            code=code,
            details=details,
            inner_error=inner_error
        )


class ConfigurationError(DomainError):
    """Error for configuration issues."""

    def __init__(self, message: str, code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None, inner_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.ERROR,
            code=code,
            details=details,
            inner_error=inner_error
        )


class GeometryError(DomainError):
    """Error describing a geometric operation that could not be carried out."""

    def __init__(self, message: str, code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None, inner_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.GEOMETRY,
            severity=ErrorSeverity.ERROR,
            code=code,
            details=details,
            inner_error=inner_error
        )


class GeometryInvariantError(AssertionError):
    """
    Raised when a geometric invariant of the scene is broken.

    Examples are a zero-width or zero-height rectangle used as a coordinate
    frame, or a clicked path pointing past the end of the pattern list.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_domain_error(self) -> GeometryError:
        """Describe this failure as a GeometryError, e.g. for logging."""
        return GeometryError(
            message=self.message,
            code="invariant",
            details=self.details,
            inner_error=self
        )
