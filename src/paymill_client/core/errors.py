"""
Exception hierarchy shared by every part of the PAYMILL client.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "ConfigError",
    "DecodeError",
    "FormatError",
    "HttpStatusError",
    "PaymillError",
    "TransportError",
    "ValidationError",
]


class PaymillError(Exception):
    """Base class for errors raised by this package."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ConfigError(PaymillError):
    """Raised when the supplied configuration is invalid."""


class ValidationError(PaymillError):
    """Raised for bad local input, before any request is sent."""


class TransportError(PaymillError):
    """Connection, timeout or other network failure."""


class HttpStatusError(PaymillError):
    """The API answered with a non-success status code."""

    def __init__(
        self,
        message: str,
        status: int,
        body: str = "",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.status = status
        self.body = body

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["status"] = self.status
        return result


class DecodeError(PaymillError):
    """A JSON payload did not have the expected shape or token type."""


class FormatError(PaymillError):
    """A structured wire string did not match its grammar."""
