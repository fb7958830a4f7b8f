"""Plans resource."""

from collections.abc import Mapping
from typing import Any

from billing_client_core.auth.context import AuthContext
from billing_client_core.resources.base import Resource

DEFAULT_CURRENCY = "USD"
DEFAULT_INTERVAL = "month"


class Plans(Resource):
    """Create, read, change, list and delete billing plans.

    ``currency`` and ``interval`` are required by the platform; ``create``
    fills them with "USD" and "month" when the caller leaves them out.
    """

    endpoint = "plans"

    def create(self, params: Mapping[str, Any], *, auth: AuthContext | None = None) -> dict[str, Any]:
        shaped = dict(params)
        shaped.setdefault("currency", DEFAULT_CURRENCY)
        shaped.setdefault("interval", DEFAULT_INTERVAL)
        return super().create(shaped, auth=auth)

    def change(
        self,
        plan_id: str,
        params: Mapping[str, Any],
        *,
        auth: AuthContext | None = None,
    ) -> dict[str, Any]:
        return self.update(plan_id, params, auth=auth)
