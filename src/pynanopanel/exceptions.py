"""Custom exceptions for pynanopanel library."""

from __future__ import annotations


class NanoleafError(Exception):
    """Base exception for all Nanoleaf errors."""


class NanoleafConnectionError(NanoleafError):
    """Exception raised for transport failures.

    Covers network/connection errors as well as failures to build the
    request URL from the configured address and the requested path.
    """


class NanoleafTimeoutError(NanoleafConnectionError):
    """Exception raised when a session-level timeout expires."""


class NanoleafHTTPStatusError(NanoleafError):
    """Exception raised when the device answers with a non-2xx status.

    Attributes:
        status: HTTP status code returned by the device.
        body: Raw response body text.
    """

    def __init__(self, message: str = "", status: int = 0, body: str = "") -> None:
        """Initialize NanoleafHTTPStatusError.

        Args:
            message: Error message.
            status: HTTP status code returned by the device.
            body: Raw response body text.
        """
        super().__init__(message)
        self.status = status
        self.body = body


class NanoleafAuthenticationError(NanoleafHTTPStatusError):
    """Exception raised when the device rejects the token (401/403)."""


class NanoleafDecodeError(NanoleafError):
    """Exception raised when a response body cannot be decoded.

    Attributes:
        body: Optional raw body text that failed to decode.
    """

    def __init__(self, message: str = "", body: str | None = None) -> None:
        """Initialize NanoleafDecodeError.

        Args:
            message: Error message.
            body: Optional raw body text that failed to decode.
        """
        super().__init__(message)
        self.body = body
