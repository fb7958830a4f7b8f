"""Cursor pagination primitives.

List endpoints answer with ``{"data": [...], "has_more": bool}``. The next
page is requested with ``starting_after=<id of the last item>``; the server
owns the ordering (newest first) and the client never reorders items.
"""

from dataclasses import dataclass, field
from typing import Any

from billing_client_core.errors.exceptions import DecodeError

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 10


def clamp_page_size(page_size: int) -> int:
    """Cap a requested page size at the platform ceiling of 100."""
    return min(page_size, MAX_PAGE_SIZE)


@dataclass(frozen=True)
class Page:
    """One page of a list endpoint.

    Attributes:
        items: Items in server order.
        has_more: Whether another page follows.
        cursor_after: Id of the last item, None exactly when items is empty.
        total_count: Total number of items, when the server included it.
    """

    items: list[dict[str, Any]] = field(default_factory=list)
    has_more: bool = False
    cursor_after: str | None = None
    total_count: int | None = None

    @classmethod
    def from_envelope(cls, body: dict[str, Any]) -> "Page":
        """Validate a list envelope and build a Page from it.

        Raises:
            DecodeError: If ``data`` or ``has_more`` is missing or mistyped, an
                item has no string ``id``, or ``has_more`` is true on an empty
                page (the cursor could not advance).
        """
        data = body.get("data")
        if not isinstance(data, list):
            raise DecodeError("List response is missing a 'data' array")

        has_more = body.get("has_more")
        if not isinstance(has_more, bool):
            raise DecodeError("List response is missing a boolean 'has_more' flag")

        cursor_after = None
        if data:
            last = data[-1]
            if not isinstance(last, dict) or not isinstance(last.get("id"), str):
                raise DecodeError("Last item of list response has no string 'id'")
            cursor_after = last["id"]
        elif has_more:
            raise DecodeError("List response has 'has_more' set on an empty page")

        total_count = body.get("total_count")
        if not isinstance(total_count, int) or isinstance(total_count, bool):
            total_count = None

        return cls(items=data, has_more=has_more, cursor_after=cursor_after, total_count=total_count)
