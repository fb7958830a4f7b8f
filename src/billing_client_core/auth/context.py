"""Per-call authentication contexts.

A call authenticates in exactly one of two ways:

- ``Credential`` - the account owner's secret key, sent as a bearer token.
- ``HeaderSet`` - extra request headers (typically ``Stripe-Account`` to act
  on a connected account). The base call still needs a bearer secret, taken
  from the set's own credential or, failing that, from the default provider.

Example:
    ```python
    from billing_client_core.auth import Credential, HeaderSet

    client.request("GET", "plans/gold", auth=Credential("sk_test_123"))
    client.request("GET", "plans/gold", auth=HeaderSet.for_account("acct_1"))
    ```
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from billing_client_core.auth.credentials import DefaultCredentialProvider

ACCOUNT_HEADER = "Stripe-Account"


@dataclass(frozen=True)
class Credential:
    """Bearer secret of the platform account owner."""

    secret: str

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("Credential secret must be a non-empty string")

    def __repr__(self) -> str:
        return "Credential(secret='***')"


@dataclass(frozen=True)
class HeaderSet:
    """Request headers that select a sub-account context.

    Attributes:
        headers: Headers merged into the request, taking precedence over
            default headers.
        credential: Optional explicit secret for the base call. When None the
            default credential is used.
    """

    headers: Mapping[str, str]
    credential: Credential | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def for_account(cls, account_id: str, credential: Credential | None = None) -> "HeaderSet":
        """Build a header set routing the call to a connected account."""
        return cls(headers={ACCOUNT_HEADER: account_id}, credential=credential)


AuthContext = Union[Credential, HeaderSet]


@dataclass(frozen=True)
class ResolvedAuth:
    """Secret and extra headers to apply to one outgoing request."""

    secret: str = field(repr=False)
    headers: Mapping[str, str] = field(default_factory=dict)


def resolve_auth(auth: AuthContext | None, provider: "DefaultCredentialProvider") -> ResolvedAuth:
    """Resolve an optional auth context into a secret and headers.

    The default provider is consulted only when no explicit credential was
    supplied, and at most once.

    Args:
        auth: Credential, HeaderSet, or None.
        provider: Source of the default credential.

    Returns:
        ResolvedAuth for the call.

    Raises:
        MissingCredentialError: If no explicit credential was given and the
            provider has none.
        TypeError: If auth is neither a Credential nor a HeaderSet.
    """
    if auth is None:
        return ResolvedAuth(secret=provider.require_credential())

    if isinstance(auth, Credential):
        return ResolvedAuth(secret=auth.secret)

    if isinstance(auth, HeaderSet):
        if auth.credential is not None:
            secret = auth.credential.secret
        else:
            secret = provider.require_credential()
        return ResolvedAuth(secret=secret, headers=dict(auth.headers))

    raise TypeError(f"auth must be a Credential or HeaderSet, not {type(auth).__name__}")
