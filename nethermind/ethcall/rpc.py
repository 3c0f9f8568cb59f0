import json
import logging
from typing import Any

import requests

from nethermind.ethcall.exceptions import RPCError

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("ethcall").getChild("rpc")

DEFAULT_RPC = "http://localhost:8545"
DEFAULT_HEADERS = {"Content-Type": "application/json"}

# pylint: disable=raise-missing-from


def eth_call_request(to: str, data: str, block: str = "latest", request_id: int = 1) -> dict[str, Any]:
    """
    Builds the JSON-RPC envelope for a read-only ``eth_call``

    :param to: contract address
    :param data: 0x-prefixed call data
    :param block: block tag or hex block number
    :param request_id: JSON-RPC request id
    """
    return {
        "jsonrpc": "2.0",
        "method": "eth_call",
        "params": [{"to": to, "data": data}, block],
        "id": request_id,
    }


def curl_command(rpc_url: str, request: dict[str, Any]) -> str:
    """Returns a curl command that posts the request to the RPC url"""
    return (
        f"curl -X POST {rpc_url} -H \"Content-Type: application/json\" "
        f"--data '{json.dumps(request, separators=(',', ':'))}'"
    )


def post_json_rpc(rpc_url: str, request: dict[str, Any], timeout: int = 30) -> dict[str, Any]:
    """
    Posts a JSON-RPC request and returns the parsed response.

    :param rpc_url: JSON-RPC endpoint
    :param request: request envelope
    :param timeout: request timeout in seconds
    :raises RPCError: if the host cannot be reached, returns a non-JSON body, or returns a JSON-RPC error
    """
    logger.debug(f"Posting {request['method']} request to {rpc_url}")
    try:
        response = requests.post(rpc_url, json=request, headers=DEFAULT_HEADERS, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.exceptions.JSONDecodeError:
        raise RPCError(f"RPC {rpc_url} returned a non-JSON response")
    except requests.exceptions.RequestException as e:
        raise RPCError(f"Error posting {request['method']} to {rpc_url}: {e}")

    if not isinstance(payload, dict):
        raise RPCError(f"Unexpected response from {rpc_url}: {payload}")

    if payload.get("error") is not None:
        raise RPCError(f"RPC error calling {request['method']}: {payload['error']}", payload=payload)

    return payload


def eth_call(rpc_url: str, to: str, data: str, block: str = "latest") -> str:
    """
    Executes ``eth_call`` and returns the hex result field unchanged

    :raises RPCError: if the call fails or the response is missing a result
    """
    response = post_json_rpc(rpc_url, eth_call_request(to, data, block))
    result = response.get("result")
    if not isinstance(result, str):
        raise RPCError(f"Missing result in eth_call response: {response}", payload=response)
    return result
