"""
Custom exceptions for the camera parameter model.
Provides consistent error reporting across loading, parsing and serialization.
"""

from typing import Dict, Iterable, Optional


# Custom exception classes
class ParameterException(Exception):
    """Base exception for camera parameter handling."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MissingEnvironmentVariableException(ParameterException):
    """Exception raised when required startup variables are not set."""

    def __init__(self, names: Iterable[str]):
        self.names = list(names)
        super().__init__(
            message=f"Missing required environment variables: {', '.join(self.names)}",
            details={"names": self.names},
        )


class DecodeException(ParameterException):
    """Exception raised when a sub-object value cannot be decoded."""

    def __init__(self, field: str, value: str, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(
            message=f"invalid {field}: {reason}",
            details={"field": field, "value": value, "reason": reason},
        )


class SerializationException(ParameterException):
    """Exception raised when a parameter set cannot be written as a control buffer."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(
            message=f"Cannot serialize {field}: {reason}",
            details={"field": field, "reason": reason},
        )
