"""Response normalization for billing API calls."""

from typing import Any

import httpx

from billing_client_core.errors.exceptions import (
    APIError,
    ClientError,
    DecodeError,
    ServerError,
)
from billing_client_core.errors.models import ErrorDetail


def normalize_response(response: httpx.Response) -> dict[str, Any]:
    """Decode a successful response or raise the matching APIError.

    Every status code maps to exactly one outcome:

    - 2xx: the decoded JSON object, keys untouched
    - 4xx: ClientError with the platform's error type and message
    - 5xx: ServerError
    - anything else: APIError

    A malformed error body only degrades the error detail. A malformed
    success body raises DecodeError.

    Args:
        response: HTTP response object

    Returns:
        Decoded response body

    Raises:
        APIError subclass based on status code or body shape
    """
    status_code = response.status_code

    if response.is_success:
        return _decode_success_body(response)

    detail = ErrorDetail.from_response(response)
    message = detail.to_exception_message(status_code)

    if 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    raise exc_class(
        message=message,
        status_code=status_code,
        response=response,
        detail=detail,
    )


def _decode_success_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except (ValueError, TypeError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise DecodeError(
            f"HTTP {response.status_code}: response body is not valid JSON",
            status_code=response.status_code,
            response=response,
        ) from e

    if not isinstance(body, dict):
        raise DecodeError(
            f"HTTP {response.status_code}: expected a JSON object, got {type(body).__name__}",
            status_code=response.status_code,
            response=response,
        )

    return body
