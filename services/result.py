"""
Result type for caller-facing success and failure.

balance() returns a Result instead of raising for bad input, so callers can
branch on error codes without parsing messages.

Usage:
    result = balance(players, method="smart")
    if result.success:
        show(result.value)
    else:
        print(f"Error ({result.error_code}): {result.error} {result.details}")
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    A simple result type for service method return values.

    Attributes:
        success: Whether the operation succeeded
        value: The return value if successful (None if failed)
        error: Error message if failed (None if successful)
        error_code: Error code for programmatic error handling
        details: Structured context for the failure (e.g. the actual pool size)
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None
    details: dict[str, Any] | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        """Create a successful result with an optional value."""
        return cls(success=True, value=value)

    @classmethod
    def fail(
        cls,
        error: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> "Result[T]":
        """Create a failed result with an error message, code and context."""
        return cls(success=False, error=error, error_code=code, details=details)

    def __bool__(self) -> bool:
        """Allow using Result in boolean context: if result: ..."""
        return self.success

    def unwrap(self) -> T:
        """
        Get the value, raising ValueError if the result is a failure.

        Raises:
            ValueError: If the result is a failure
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore

    def unwrap_or(self, default: T) -> T:
        """Get the value or a default if the result is a failure."""
        return self.value if self.success else default  # type: ignore

    def map(self, fn: Callable[[T], "Result"]) -> "Result":
        """
        Chain operations on successful results.

        If this result is successful, applies fn to the value and returns its result.
        If this result is a failure, returns this failure unchanged.
        """
        if not self.success:
            return self
        return fn(self.value)
