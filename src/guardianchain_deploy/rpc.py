"""JSON-RPC transport for guardianchain-deploy."""

from typing import Any, List, Optional

import requests

from .constants import RPC_REQUEST_TIMEOUT
from .exceptions import RPCError


def rpc_call(rpc_url: str, method: str, params: Optional[List[Any]] = None) -> Any:
    """
    Make a single JSON-RPC 2.0 call.

    Args:
        rpc_url: RPC endpoint URL
        method: JSON-RPC method, e.g. "eth_chainId"
        params: Positional parameters (defaults to [])

    Returns:
        The "result" member of the response (may be None, e.g. for a pending receipt)

    Raises:
        RPCError: On network errors, non-200 responses, or JSON-RPC error objects
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": method,
                "params": params if params is not None else [],
                "id": 1,
            },
            timeout=RPC_REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        raise RPCError(f"Network error during RPC call {method}: {e}") from e

    # Check for HTTP errors
    if response.status_code != 200:
        raise RPCError(f"RPC request {method} failed with status {response.status_code}")

    try:
        result = response.json()
    except ValueError as e:
        raise RPCError(f"RPC request {method} returned invalid JSON") from e

    if not isinstance(result, dict):
        raise RPCError(f"RPC response to {method} is not a JSON object")

    # Check for RPC errors
    if "error" in result:
        error = result["error"]
        if isinstance(error, dict) and "message" in error:
            raise RPCError(f"RPC error in {method}: {error['message']}")
        raise RPCError(f"RPC error in {method}: {error}")

    if "result" not in result:
        raise RPCError(f"RPC response to {method} has no result")

    return result["result"]


def to_quantity(hex_value: str) -> int:
    """Decode a JSON-RPC hex quantity ("0x1a") to an int."""
    return int(hex_value, 16)
