"""Testing utilities for billing clients.

This module provides response factories and an in-memory fake of the
billing API that plugs into ``httpx.MockTransport``.

Example:
    ```python
    import httpx

    from billing_client_core import BillingClient, Credential
    from billing_client_core.testing import FakeBillingAPI


    def test_lists_every_plan():
        api = FakeBillingAPI()
        api.seed("plans", [{"id": f"plan_{i}"} for i in range(250)])
        client = BillingClient(transport=httpx.MockTransport(api.handler))

        assert len(client.list_all("plans", auth=Credential("sk_test"))) == 250
    ```
"""

from typing import Any
from urllib.parse import parse_qsl, unquote

import httpx

API_PREFIX = "/v1/"


def create_list_response(
    items: list[dict[str, Any]],
    has_more: bool = False,
    total_count: int | None = None,
) -> httpx.Response:
    """Build a 200 list envelope response."""
    body: dict[str, Any] = {"object": "list", "data": items, "has_more": has_more}
    if total_count is not None:
        body["total_count"] = total_count
    return httpx.Response(200, json=body)


def create_error_response(status_code: int, error_type: str = "", message: str = "") -> httpx.Response:
    """Build an error envelope response."""
    return httpx.Response(status_code, json={"error": {"type": error_type, "message": message}})


def create_not_found_response(resource: str, resource_id: str) -> httpx.Response:
    return create_error_response(
        404,
        "invalid_request_error",
        f"No such {resource.rstrip('s')}: '{resource_id}'",
    )


class FakeBillingAPI:
    """In-memory billing API for ``httpx.MockTransport``.

    Items are stored per resource in server order (newest first, as seeded).
    Supports list with ``limit``/``starting_after``/``include[]=total_count``,
    retrieve, create, update and delete on ``<resource>`` and
    ``<resource>/<id>``; percent-encoded ids are decoded before lookup.
    Every request is recorded in ``requests``.

    Sub-action paths such as ``invoices/in_1/pay`` are not modelled and get a
    405, and ``invoices/upcoming`` is treated as a retrieve of the id
    "upcoming". Queue the response such calls should get with ``respond``
    (or ``fail`` for an error).
    """

    def __init__(self) -> None:
        self.store: dict[str, list[dict[str, Any]]] = {}
        self.requests: list[httpx.Request] = []
        self._canned: dict[tuple[str, str], httpx.Response] = {}
        self._next_id = 0

    def seed(self, resource: str, items: list[dict[str, Any]]) -> None:
        self.store[resource] = [dict(item) for item in items]

    def respond(self, method: str, path: str, response: httpx.Response) -> None:
        """Answer the next ``method path`` request with ``response``.

        ``path`` is relative to the API prefix, with ids unescaped.
        """
        self._canned[(method.upper(), path)] = response

    def fail(self, method: str, path: str, response: httpx.Response) -> None:
        self.respond(method, path, response)

    def requests_for(self, method: str) -> list[httpx.Request]:
        return [request for request in self.requests if request.method == method.upper()]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        raw_path = request.url.raw_path.decode("ascii").partition("?")[0]
        if raw_path.startswith(API_PREFIX):
            raw_path = raw_path[len(API_PREFIX) :]
        segments = [unquote(segment) for segment in raw_path.split("/")]
        path = "/".join(segments)

        canned = self._canned.pop((request.method, path), None)
        if canned is not None:
            return canned

        if len(segments) > 2:
            return create_error_response(405, "invalid_request_error", f"Unsupported: {request.method} {path}")

        resource = segments[0]
        resource_id = segments[1] if len(segments) == 2 else ""
        items = self.store.setdefault(resource, [])

        if not resource_id:
            if request.method == "GET":
                return self._list(items, request)
            if request.method == "POST":
                return self._create(items, request)
        elif request.method == "GET":
            return self._retrieve(resource, items, resource_id)
        elif request.method == "POST":
            return self._update(resource, items, resource_id, request)
        elif request.method == "DELETE":
            return self._delete(resource, items, resource_id)

        return create_error_response(405, "invalid_request_error", f"Unsupported: {request.method} {path}")

    def _list(self, items: list[dict[str, Any]], request: httpx.Request) -> httpx.Response:
        query = request.url.params
        limit = int(query.get("limit", "10"))
        start = 0

        starting_after = query.get("starting_after")
        if starting_after is not None:
            ids = [item["id"] for item in items]
            if starting_after not in ids:
                return create_error_response(
                    400, "invalid_request_error", f"Invalid starting_after id: {starting_after}"
                )
            start = ids.index(starting_after) + 1

        page = items[start : start + limit]
        has_more = start + limit < len(items)
        total_count = len(items) if query.get("include[]") == "total_count" else None
        return create_list_response(page, has_more=has_more, total_count=total_count)

    def _create(self, items: list[dict[str, Any]], request: httpx.Request) -> httpx.Response:
        item: dict[str, Any] = dict(parse_qsl(request.content.decode()))
        if "id" not in item:
            self._next_id += 1
            item["id"] = f"obj_{self._next_id}"
        items.insert(0, item)
        return httpx.Response(200, json=item)

    def _retrieve(self, resource: str, items: list[dict[str, Any]], resource_id: str) -> httpx.Response:
        for item in items:
            if item["id"] == resource_id:
                return httpx.Response(200, json=item)
        return create_not_found_response(resource, resource_id)

    def _update(
        self,
        resource: str,
        items: list[dict[str, Any]],
        resource_id: str,
        request: httpx.Request,
    ) -> httpx.Response:
        for item in items:
            if item["id"] == resource_id:
                item.update(parse_qsl(request.content.decode()))
                return httpx.Response(200, json=item)
        return create_not_found_response(resource, resource_id)

    def _delete(self, resource: str, items: list[dict[str, Any]], resource_id: str) -> httpx.Response:
        for index, item in enumerate(items):
            if item["id"] == resource_id:
                del items[index]
                return httpx.Response(200, json={"id": resource_id, "deleted": True})
        return create_not_found_response(resource, resource_id)


__all__ = [
    "FakeBillingAPI",
    "create_error_response",
    "create_list_response",
    "create_not_found_response",
]
