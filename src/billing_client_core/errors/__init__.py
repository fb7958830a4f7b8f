"""Error handling for billing API responses."""

from billing_client_core.errors.exceptions import (
    APIError,
    ClientError,
    DecodeError,
    ServerError,
    TransportError,
)
from billing_client_core.errors.handler import normalize_response
from billing_client_core.errors.models import ErrorDetail

__all__ = [
    "APIError",
    "ClientError",
    "DecodeError",
    "ErrorDetail",
    "ServerError",
    "TransportError",
    "normalize_response",
]
