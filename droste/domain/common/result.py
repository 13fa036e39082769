# droste/domain/common/result.py

"""
Result pattern implementation for error handling.

Scene operations with an expected failure path (a drag too small to keep, a
settings file that cannot be written) return a Result instead of raising.
"""
from typing import TypeVar, Generic, Optional, Union, Callable

from droste.domain.common.errors import DomainError, ErrorCategory

T = TypeVar('T')


class Result(Generic[T]):
    """
    Result type for representing success or failure of an operation.

    Attributes:
        value: The result value (if successful)
        error: Error object (if failed)
        is_success: Whether the operation was successful
        is_failure: Whether the operation failed
    """

    def __init__(self, value: Optional[T], error: Optional[Union[str, DomainError]]):
        """
        Initialize a Result object.

        Args:
            value: The result value (or None if failed)
            error: Error object or message (or None if successful)
        """
        self._value = value

        # Plain strings become uncategorized domain errors
        if isinstance(error, str):
            self._error = DomainError(message=error, category=ErrorCategory.UNKNOWN)
        else:
            self._error = error

    @classmethod
    def ok(cls, value: T) -> 'Result[T]':
        """Create a successful result with a value."""
        return cls(value, None)

    @classmethod
    def fail(cls, error: Union[str, DomainError]) -> 'Result[T]':
        """Create a failed result with an error message or DomainError."""
        return cls(None, error)

    @property
    def is_success(self) -> bool:
        """Whether the result represents a successful operation."""
        return self._error is None

    @property
    def is_failure(self) -> bool:
        """Whether the result represents a failed operation."""
        return not self.is_success

    @property
    def value(self) -> T:
        """
        Get the success value.

        Raises:
            ValueError: If the result is a failure
        """
        if self.is_failure:
            raise ValueError(f"Cannot access value of a failed result: {self._error}")
        return self._value

    @property
    def error(self) -> DomainError:
        """
        Get the error.

        Raises:
            ValueError: If the result is a success
        """
        if self.is_success:
            raise ValueError("Cannot access error of a successful result")
        return self._error

    def on_failure(self, action: Callable[[DomainError], None]) -> 'Result[T]':
        """Execute an action if the result is a failure; returns self for chaining."""
        if self.is_failure:
            action(self._error)
        return self

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.ok({self._value!r})"
        return f"Result.fail({self._error})"
