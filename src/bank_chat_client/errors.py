"""Exception types raised by the banking chat client."""

from __future__ import annotations


class BankChatError(Exception):
    """Base exception for the banking chat client."""


class ConfigurationError(BankChatError):
    """Raised when CLI arguments or environment settings cannot be used."""


class TransportFailure(BankChatError):
    """Raised when a backend request fails or its body is not JSON.

    The underlying exception is always chained as ``__cause__``.
    """

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url
