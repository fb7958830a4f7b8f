"""Entity-agnostic billing API client.

``BillingClient`` resolves authentication, dispatches one request per round
trip, normalizes the response envelope, and builds pagination and bulk
operations on top. Entity-specific parameter shaping lives in
``billing_client_core.resources``.

Example:
    ```python
    from billing_client_core import BillingClient, Credential

    with BillingClient() as client:
        plan = client.request("GET", "plans/gold")
        invoices = client.list_all("invoices", auth=Credential("sk_test_123"))
    ```
"""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from billing_client_core.auth.context import AuthContext, ResolvedAuth, resolve_auth
from billing_client_core.auth.credentials import DefaultCredentialProvider
from billing_client_core.config import ClientSettings
from billing_client_core.errors.exceptions import DecodeError
from billing_client_core.errors.handler import normalize_response
from billing_client_core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Page, clamp_page_size
from billing_client_core.transport.dispatcher import RequestDispatcher

logger = logging.getLogger(__name__)


def item_path(endpoint: str, *parts: str) -> str:
    """Join a resource endpoint with escaped id or sub-action segments.

    Each segment is percent-encoded whole, so "a/b" or "gold?x=1" stays a
    single path segment instead of changing the target resource.

    Raises:
        ValueError: If a segment is empty.
    """
    segments = [endpoint.rstrip("/")]
    for part in parts:
        if not part:
            raise ValueError(f"Empty path segment for {endpoint}")
        segments.append(quote(part, safe=""))
    return "/".join(segments)


class BillingClient:
    """Synchronous client for a billing platform's REST API.

    Every public method accepts an optional ``auth`` (``Credential`` or
    ``HeaderSet``). Without an explicit credential the default provider is
    read once for the whole call, including multi-request calls such as
    ``list_all`` and ``delete_all``.

    Args:
        credential_provider: Source of the default secret
            (default: DefaultCredentialProvider())
        settings: Transport settings (default: ClientSettings())
        transport: Optional httpx transport, e.g. httpx.MockTransport
        http_client: Optional pre-built httpx.Client (not closed by this client)
    """

    def __init__(
        self,
        *,
        credential_provider: DefaultCredentialProvider | None = None,
        settings: ClientSettings | None = None,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.credential_provider = credential_provider or DefaultCredentialProvider()
        self.dispatcher = RequestDispatcher(settings=settings, transport=transport, http_client=http_client)

    def __enter__(self) -> "BillingClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self.dispatcher.close()

    def resolve_auth(self, auth: AuthContext | None = None) -> ResolvedAuth:
        return resolve_auth(auth, self.credential_provider)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        auth: AuthContext | None = None,
    ) -> dict[str, Any]:
        """Send one request and return the decoded success body.

        Raises:
            MissingCredentialError: No credential could be resolved.
            TransportError: No response was received.
            APIError: The response was an error or could not be decoded.
        """
        return self._send(method, path, self.resolve_auth(auth), params)

    def _send(
        self,
        method: str,
        path: str,
        resolved: ResolvedAuth,
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        response = self.dispatcher.dispatch(method, path, resolved, params)
        return normalize_response(response)

    def fetch_page(
        self,
        path: str,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        starting_after: str | None = None,
        params: Mapping[str, Any] | None = None,
        auth: AuthContext | None = None,
    ) -> Page:
        """Fetch one page of a list endpoint.

        Args:
            path: List endpoint, e.g. "plans"
            page_size: Requested page size, capped at 100
            starting_after: Id of the last item of the previous page
            params: Extra filters sent with the list request
            auth: Optional auth context

        Returns:
            Page of items in server order
        """
        return self._fetch_page(path, self.resolve_auth(auth), page_size, starting_after, params)

    def _fetch_page(
        self,
        path: str,
        resolved: ResolvedAuth,
        page_size: int,
        starting_after: str | None,
        params: Mapping[str, Any] | None = None,
    ) -> Page:
        query = dict(params or {})
        query["limit"] = clamp_page_size(page_size)
        if starting_after is not None:
            query["starting_after"] = starting_after

        body = self._send("GET", path, resolved, query)
        page = Page.from_envelope(body)
        logger.debug(f"Fetched {len(page.items)} items from {path} (has_more={page.has_more})")
        return page

    def list_all(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        auth: AuthContext | None = None,
    ) -> list[dict[str, Any]]:
        """Walk every page of a list endpoint and return all items.

        Pages are requested with the maximum page size and concatenated in
        the order received. The first failing page aborts the whole call.

        Raises:
            DecodeError: A page ends on the cursor it was requested with.
        """
        return self._list_all(path, self.resolve_auth(auth), params)

    def _list_all(
        self,
        path: str,
        resolved: ResolvedAuth,
        params: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        cursor: str | None = None
        pages = 0

        while True:
            page = self._fetch_page(path, resolved, MAX_PAGE_SIZE, cursor, params)
            items.extend(page.items)
            pages += 1
            if not page.has_more:
                break
            if page.cursor_after == cursor:
                raise DecodeError(f"List response for {path} repeated cursor {cursor!r}; pagination cannot advance")
            cursor = page.cursor_after

        logger.debug(f"Listed {len(items)} items from {path} in {pages} page(s)")
        return items

    def delete_all(self, path: str, *, auth: AuthContext | None = None) -> None:
        """Delete every item of a resource, one request at a time.

        Listing and deleting share the same resolved auth. The first failed
        delete propagates unchanged and the remaining items are left alone.

        Raises:
            DecodeError: A listed item has no id; nothing is deleted.
        """
        resolved = self.resolve_auth(auth)
        items = self._list_all(path, resolved)

        ids = []
        for item in items:
            item_id = item.get("id") if isinstance(item, dict) else None
            if not isinstance(item_id, str) or not item_id:
                raise DecodeError(f"Cannot delete item without an id from {path}")
            ids.append(item_id)

        for item_id in ids:
            self._send("DELETE", item_path(path, item_id), resolved)

        logger.info(f"Deleted {len(ids)} items from {path}")

    def count(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        auth: AuthContext | None = None,
    ) -> int:
        """Return the total number of items behind a list endpoint.

        Raises:
            DecodeError: The response has no integer total_count.
        """
        query = dict(params or {})
        query["limit"] = 1
        query["include[]"] = "total_count"

        body = self.request("GET", path, params=query, auth=auth)
        total = body.get("total_count")
        if not isinstance(total, int) or isinstance(total, bool):
            raise DecodeError(f"Count response for {path} has no integer 'total_count'")
        return total
