"""Platform error object models."""

from dataclasses import dataclass
from typing import Any

import httpx

STANDARD_FIELDS = frozenset({"type", "message", "code", "param", "decline_code", "doc_url"})


@dataclass
class ErrorDetail:
    """Error object carried in a ``{"error": {...}}`` response body.

    ``type`` and ``message`` are always strings; they default to "" when the
    body is missing them or is not JSON at all.
    """

    type: str = ""  # e.g. "invalid_request_error", "card_error"
    message: str = ""  # Human-readable explanation
    code: str | None = None  # Machine-readable code such as "resource_missing"
    param: str | None = None  # Parameter the error relates to
    decline_code: str | None = None  # Card issuer decline reason
    doc_url: str | None = None

    # Additional fields from the API
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_body(cls, body: Any) -> "ErrorDetail":
        """Build from a decoded response body.

        Args:
            body: Decoded JSON body, or anything else for a malformed body

        Returns:
            ErrorDetail; empty when the body has no usable error object
        """
        if not isinstance(body, dict):
            return cls()

        error = body.get("error")
        if isinstance(error, str):
            # Some proxies answer {"error": "message"}
            return cls(message=error)
        if not isinstance(error, dict):
            return cls()

        extensions = {k: v for k, v in error.items() if k not in STANDARD_FIELDS}

        return cls(
            type=_as_str(error.get("type")),
            message=_as_str(error.get("message")),
            code=error.get("code"),
            param=error.get("param"),
            decline_code=error.get("decline_code"),
            doc_url=error.get("doc_url"),
            extensions=extensions if extensions else None,
        )

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorDetail":
        """Parse the error object from an HTTP response, tolerating bad JSON."""
        try:
            body = response.json()
        except (ValueError, TypeError, AttributeError):
            # JSON decode errors, type errors, or missing .json() method
            return cls()
        return cls.from_body(body)

    def to_exception_message(self, status_code: int) -> str:
        """Convert the error object to an exception message."""
        lines = []

        if self.message:
            lines.append(f"HTTP {status_code}: {self.message}")
        else:
            lines.append(f"HTTP {status_code}")

        if self.type:
            lines.append(f"Error Type: {self.type}")

        if self.code:
            lines.append(f"Code: {self.code}")

        if self.param:
            lines.append(f"Param: {self.param}")

        return "\n".join(lines)


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
