"""Billing Client Core - synchronous access layer for a billing platform API.

This library provides:
- Per-call authentication as an explicit credential or a connected-account header set
- Default credential lookup (value → env → .env → secret file)
- Single-round-trip dispatch with typed error normalization
- Cursor pagination, exhaustive listing and fail-fast bulk deletion

Example:
    ```python
    from billing_client_core import BillingClient, HeaderSet
    from billing_client_core.resources import Plans

    with BillingClient() as client:
        plans = Plans(client)
        plans.create({"id": "gold", "name": "Gold", "amount": 2000})
        every_plan = plans.all(auth=HeaderSet.for_account("acct_123"))
    ```
"""

__version__ = "0.1.0"

from billing_client_core.auth import (  # noqa: E402
    Credential,
    DefaultCredentialProvider,
    HeaderSet,
    MissingCredentialError,
)
from billing_client_core.client import BillingClient  # noqa: E402
from billing_client_core.config import ClientSettings  # noqa: E402
from billing_client_core.errors import (  # noqa: E402
    APIError,
    ClientError,
    DecodeError,
    ServerError,
    TransportError,
)
from billing_client_core.pagination import Page  # noqa: E402

__all__ = [
    "APIError",
    "BillingClient",
    "ClientError",
    "ClientSettings",
    "Credential",
    "DecodeError",
    "DefaultCredentialProvider",
    "HeaderSet",
    "MissingCredentialError",
    "Page",
    "ServerError",
    "TransportError",
    "__version__",
]
