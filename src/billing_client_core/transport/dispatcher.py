"""Single-request dispatch over httpx.

``RequestDispatcher`` turns a method, a resource path, a resolved auth and a
parameter mapping into exactly one HTTP round trip. It never retries and never
interprets the status code: any response the server sends back is returned to
the caller, and only failures that produce no response at all are raised.

Example:
    ```python
    from billing_client_core.auth import ResolvedAuth
    from billing_client_core.transport import RequestDispatcher

    dispatcher = RequestDispatcher()
    response = dispatcher.dispatch("GET", "plans", ResolvedAuth(secret="sk_test_123"), {"limit": 3})
    ```
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from billing_client_core.auth.context import ResolvedAuth
from billing_client_core.config import ClientSettings
from billing_client_core.errors.exceptions import TransportError
from billing_client_core.transport.encoding import encode_params

logger = logging.getLogger(__name__)

API_VERSION_HEADER = "Stripe-Version"


class RequestDispatcher:
    """Issue one authenticated request per call.

    Args:
        settings: Base URL, timeout and default headers (default: ClientSettings())
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        http_client: Optional pre-built httpx.Client; it is not closed by
            the dispatcher

    Example:
        ```python
        with RequestDispatcher(transport=httpx.MockTransport(handler)) as dispatcher:
            dispatcher.dispatch("DELETE", "plans/gold", resolved)
        ```
    """

    SUPPORTED_METHODS: frozenset[str] = frozenset(["GET", "POST", "DELETE"])

    def __init__(
        self,
        *,
        settings: ClientSettings | None = None,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        if http_client is not None:
            self._http_client = http_client
            self._owns_client = False
        else:
            self._http_client = httpx.Client(timeout=self.settings.timeout, transport=transport)
            self._owns_client = True

    def __enter__(self) -> "RequestDispatcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying httpx client if the dispatcher created it."""
        if self._owns_client:
            self._http_client.close()

    def build_url(self, path: str) -> str:
        return f"{self.settings.base_url.rstrip('/')}/{path.lstrip('/')}"

    def build_headers(self, auth: ResolvedAuth) -> httpx.Headers:
        """Merge default headers, the header set and the bearer secret.

        Header set entries override defaults. The bearer secret is applied
        last: a header set routes the call but never replaces authentication.
        """
        headers = httpx.Headers(
            {
                "Accept": "application/json",
                "User-Agent": self.settings.user_agent,
            }
        )
        if self.settings.api_version:
            headers[API_VERSION_HEADER] = self.settings.api_version

        headers.update(auth.headers)
        headers["Authorization"] = f"Bearer {auth.secret}"
        return headers

    def dispatch(
        self,
        method: str,
        path: str,
        auth: ResolvedAuth,
        params: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """Send one request and return the raw response.

        Args:
            method: GET, POST or DELETE
            path: Resource path relative to the base URL, e.g. "invoices/in_1/pay"
            auth: Resolved secret and extra headers
            params: Query parameters for GET, form body for POST/DELETE

        Returns:
            The HTTP response, whatever its status code

        Raises:
            ValueError: If the method is not supported
            TransportError: If no response was received
        """
        method = method.upper()
        if method not in self.SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = self.build_url(path)
        headers = self.build_headers(auth)
        encoded = encode_params(params)

        request_kwargs: dict[str, Any] = {"headers": headers}
        if method == "GET":
            if encoded:
                request_kwargs["params"] = encoded
        elif encoded:
            request_kwargs["data"] = encoded

        logger.debug(f"Dispatching {method} {path} ({len(encoded)} params)")

        try:
            response = self._http_client.request(method, url, **request_kwargs)
        except httpx.TransportError as e:
            raise TransportError(f"{method} {url} failed: {e}", method=method, url=url) from e

        logger.debug(f"{method} {path} returned {response.status_code}")
        return response
