"""Per-resource operation surface."""

from collections.abc import Mapping
from typing import Any

from billing_client_core.auth.context import AuthContext
from billing_client_core.client import BillingClient, item_path
from billing_client_core.pagination import DEFAULT_PAGE_SIZE, Page


class Resource:
    """CRUD, count and bulk operations bound to one resource path.

    Subclasses set ``endpoint`` and add entity-specific parameter shaping.

    Example:
        ```python
        customers = Resource(client, endpoint="customers")
        customer = customers.get("cus_123")
        everyone = customers.all()
        ```
    """

    endpoint: str = ""

    def __init__(self, client: BillingClient, endpoint: str | None = None) -> None:
        self.client = client
        if endpoint is not None:
            self.endpoint = endpoint
        if not self.endpoint:
            raise ValueError(f"{type(self).__name__} needs a resource endpoint")

    def path_for(self, *parts: str) -> str:
        """Endpoint joined with escaped segments; empty segments raise ValueError."""
        return item_path(self.endpoint, *parts)

    def get(self, resource_id: str, *, auth: AuthContext | None = None) -> dict[str, Any]:
        """Retrieve one item. A missing id raises ClientError with status 404."""
        return self.client.request("GET", self.path_for(resource_id), auth=auth)

    def list(
        self,
        starting_after: str | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
        *,
        params: Mapping[str, Any] | None = None,
        auth: AuthContext | None = None,
    ) -> Page:
        return self.client.fetch_page(
            self.endpoint,
            page_size=limit,
            starting_after=starting_after,
            params=params,
            auth=auth,
        )

    def create(self, params: Mapping[str, Any], *, auth: AuthContext | None = None) -> dict[str, Any]:
        return self.client.request("POST", self.endpoint, params=params, auth=auth)

    def update(
        self,
        resource_id: str,
        params: Mapping[str, Any],
        *,
        auth: AuthContext | None = None,
    ) -> dict[str, Any]:
        return self.client.request("POST", self.path_for(resource_id), params=params, auth=auth)

    def delete(self, resource_id: str, *, auth: AuthContext | None = None) -> dict[str, Any]:
        return self.client.request("DELETE", self.path_for(resource_id), auth=auth)

    def count(self, *, auth: AuthContext | None = None) -> int:
        return self.client.count(self.endpoint, auth=auth)

    # String annotation: ``list`` is shadowed by the method above
    def all(self, *, auth: AuthContext | None = None) -> "list[dict[str, Any]]":
        """Every item of the resource, in server order."""
        return self.client.list_all(self.endpoint, auth=auth)

    def delete_all(self, *, auth: AuthContext | None = None) -> None:
        self.client.delete_all(self.endpoint, auth=auth)
