"""
Custom Exception Classes

Application-specific exception classes for error handling and reporting
throughout the hash benchmarking harness.
"""

from typing import Optional, Any, Dict


class HashBenchException(Exception):
    """Base exception class for all hashbench errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(HashBenchException):
    """Raised when there's an issue with configuration setup or validation."""
    pass


class UsageError(HashBenchException):
    """Raised when a benchmark invocation is malformed (bad algorithm or run count)."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 invalid_value: Optional[Any] = None, **kwargs):
        super().__init__(message, kwargs)
        self.field_name = field_name
        self.invalid_value = invalid_value


class HashProviderError(HashBenchException):
    """Raised when the hashing provider fails to compute a digest."""

    def __init__(self, message: str, algorithm: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.algorithm = algorithm


class TableShapeError(HashBenchException):
    """Raised when a row does not line up with the result table header."""

    def __init__(self, message: str, expected_width: Optional[int] = None,
                 actual_width: Optional[int] = None, **kwargs):
        super().__init__(message, kwargs)
        self.expected_width = expected_width
        self.actual_width = actual_width


class ResultStorageError(HashBenchException):
    """Raised when the result table cannot be written to its destination."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.path = path
