"""Transport layer: parameter encoding and single-request dispatch.

Modules:
    encoding: Bracket-notation flattening of nested parameters
    dispatcher: One authenticated httpx round trip per call

Example:
    ```python
    from billing_client_core.transport import RequestDispatcher, encode_params

    encode_params({"metadata": {"order": "A1"}})  # {"metadata[order]": "A1"}
    ```
"""

from billing_client_core.transport.dispatcher import RequestDispatcher
from billing_client_core.transport.encoding import encode_params

__all__ = ["RequestDispatcher", "encode_params"]
