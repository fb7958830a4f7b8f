"""Structured exceptions for API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from billing_client_core.errors.models import ErrorDetail


class APIError(Exception):
    """Base exception for API errors.

    Also raised as-is for status codes outside the 2xx/4xx/5xx ranges.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        detail: "ErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.detail = detail

    @property
    def error_type(self) -> str:
        """Platform error type, or empty string if the body carried none."""
        if self.detail is None:
            return ""
        return self.detail.type

    @property
    def error_message(self) -> str:
        """Platform error message, or empty string if the body carried none."""
        if self.detail is None:
            return ""
        return self.detail.message


class ClientError(APIError):
    """4xx client errors.

    Not-found, validation and card errors all land here; tell them apart
    with ``error_type`` and ``error_message``.
    """

    pass


class ServerError(APIError):
    """5xx server errors."""

    pass


class DecodeError(APIError):
    """Response body is not valid JSON or not the expected shape."""

    pass


class TransportError(Exception):
    """No HTTP response was received (connection, timeout or DNS failure)."""

    def __init__(self, message: str, method: str | None = None, url: str | None = None):
        super().__init__(message)
        self.method = method
        self.url = url
