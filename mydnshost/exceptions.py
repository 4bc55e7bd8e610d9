"""
Exceptions for the MyDNSHost API client.

Transport and decoding failures never surface as exceptions; they are folded
into an error envelope by the dispatcher. These classes cover programming and
configuration mistakes, plus the opt-in ``raise_for_error`` helper.
"""

from typing import Optional, Dict, Any


class MyDNSHostError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(MyDNSHostError):
    """Invalid client configuration or auth descriptor."""


class ValidationError(MyDNSHostError):
    """Invalid request arguments, such as an unsupported HTTP method."""


class APIError(MyDNSHostError):
    """Error reported by the API in a response envelope."""

    def __init__(
        self,
        message: str,
        response_data: Optional[Dict[str, Any]] = None,
        details: Optional[str] = None
    ):
        super().__init__(message, details)
        self.response_data = response_data or {}
