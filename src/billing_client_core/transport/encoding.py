"""Form/query encoding of request parameters.

The billing API takes nested parameters in bracket notation:

    {"metadata": {"order_id": "A1"}, "items": [{"price": "p_1"}]}

becomes

    metadata[order_id]=A1&items[0][price]=p_1
"""

from collections.abc import Mapping
from typing import Any


def encode_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Flatten a parameter mapping into ordered string key/value pairs.

    Booleans are sent as "true"/"false" and None values are dropped.

    Args:
        params: Possibly nested parameter mapping

    Returns:
        Flat mapping preserving the caller's key order
    """
    encoded: dict[str, str] = {}
    if params:
        for key, value in params.items():
            _flatten(str(key), value, encoded)
    return encoded


def _flatten(key: str, value: Any, out: dict[str, str]) -> None:
    if value is None:
        return

    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _flatten(f"{key}[{sub_key}]", sub_value, out)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{key}[{index}]", item, out)
    elif isinstance(value, bool):
        out[key] = "true" if value else "false"
    else:
        out[key] = str(value)
