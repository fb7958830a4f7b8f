"""Invoices resource."""

from collections.abc import Mapping
from typing import Any

from billing_client_core.auth.context import AuthContext
from billing_client_core.pagination import DEFAULT_PAGE_SIZE, Page
from billing_client_core.resources.base import Resource


class Invoices(Resource):
    """Invoices, including the upcoming-invoice preview and manual payment."""

    endpoint = "invoices"

    def create(  # type: ignore[override]
        self,
        customer_id: str,
        params: Mapping[str, Any] | None = None,
        *,
        auth: AuthContext | None = None,
    ) -> dict[str, Any]:
        """Create an invoice for a customer.

        This is not a charge: the invoice collects the customer's pending
        invoice items. ``customer`` in params, if present, wins over
        ``customer_id``.
        """
        shaped = dict(params or {})
        shaped.setdefault("customer", customer_id)
        return super().create(shaped, auth=auth)

    def upcoming(
        self,
        customer_id: str,
        params: Mapping[str, Any] | None = None,
        *,
        auth: AuthContext | None = None,
    ) -> dict[str, Any]:
        """Preview the next invoice for a customer. Nothing is created."""
        shaped = dict(params or {})
        shaped.setdefault("customer", customer_id)
        return self.client.request("GET", self.path_for("upcoming"), params=shaped, auth=auth)

    def pay(self, invoice_id: str, *, auth: AuthContext | None = None) -> dict[str, Any]:
        """Attempt payment outside the normal collection schedule."""
        return self.client.request("POST", self.path_for(invoice_id, "pay"), auth=auth)

    def list_for_customer(
        self,
        customer_id: str,
        limit: int = DEFAULT_PAGE_SIZE,
        *,
        starting_after: str | None = None,
        auth: AuthContext | None = None,
    ) -> Page:
        return self.list(starting_after, limit, params={"customer": customer_id}, auth=auth)
