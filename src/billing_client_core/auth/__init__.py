"""Authentication components for the billing client.

This module provides:
- Per-call auth contexts (``Credential`` or ``HeaderSet``)
- Default credential lookup (value → env → .env → secret file)
- Resolution of a context into the secret and headers of one request

Example:
    ```python
    from billing_client_core.auth import DefaultCredentialProvider, HeaderSet

    provider = DefaultCredentialProvider()
    auth = HeaderSet.for_account("acct_123")
    ```
"""

from billing_client_core.auth.context import (
    AuthContext,
    Credential,
    HeaderSet,
    ResolvedAuth,
    resolve_auth,
)
from billing_client_core.auth.credentials import DefaultCredentialProvider
from billing_client_core.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    MissingCredentialError,
)

__all__ = [
    "AuthContext",
    "Credential",
    "CredentialError",
    "CredentialFileError",
    "DefaultCredentialProvider",
    "HeaderSet",
    "MissingCredentialError",
    "ResolvedAuth",
    "resolve_auth",
]
