import pytest

from nethermind.ethcall.exceptions import RPCError
from nethermind.ethcall.rpc import (
    curl_command,
    eth_call,
    eth_call_request,
    post_json_rpc,
)

CONTRACT = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"


def test_eth_call_request_envelope():
    assert eth_call_request(CONTRACT, "0x18160ddd") == {
        "jsonrpc": "2.0",
        "method": "eth_call",
        "params": [{"to": CONTRACT, "data": "0x18160ddd"}, "latest"],
        "id": 1,
    }
    assert eth_call_request(CONTRACT, "0x", block="0x10", request_id=7)["params"][1] == "0x10"


def test_curl_command():
    command = curl_command("http://localhost:8545", eth_call_request(CONTRACT, "0x18160ddd"))

    assert command == (
        'curl -X POST http://localhost:8545 -H "Content-Type: application/json" --data '
        '\'{"jsonrpc":"2.0","method":"eth_call","params":[{"to":"0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",'
        '"data":"0x18160ddd"},"latest"],"id":1}\''
    )


def test_eth_call_returns_result(mock_rpc):
    result = "0x" + (42).to_bytes(32, "big").hex()
    posted = mock_rpc({"jsonrpc": "2.0", "id": 1, "result": result})

    assert eth_call("http://rpc.test", CONTRACT, "0x18160ddd") == result
    assert posted[0]["url"] == "http://rpc.test"
    assert posted[0]["json"]["method"] == "eth_call"
    assert posted[0]["json"]["params"][0] == {"to": CONTRACT, "data": "0x18160ddd"}
    assert posted[0]["headers"] == {"Content-Type": "application/json"}


def test_json_rpc_error(mock_rpc):
    mock_rpc({"jsonrpc": "2.0", "id": 1, "error": {"code": -32000, "message": "execution reverted"}})

    with pytest.raises(RPCError) as exc:
        post_json_rpc("http://rpc.test", eth_call_request(CONTRACT, "0x"))

    assert "execution reverted" in str(exc.value)
    assert exc.value.payload["error"]["code"] == -32000


def test_missing_result(mock_rpc):
    mock_rpc({"jsonrpc": "2.0", "id": 1})

    with pytest.raises(RPCError):
        eth_call("http://rpc.test", CONTRACT, "0x")


def test_non_json_response(mock_rpc):
    mock_rpc(text="<html>Bad Gateway</html>")

    with pytest.raises(RPCError) as exc:
        post_json_rpc("http://rpc.test", eth_call_request(CONTRACT, "0x"))

    assert "non-JSON" in str(exc.value)


def test_http_error(mock_rpc):
    mock_rpc({"message": "rate limited"}, status_code=429)

    with pytest.raises(RPCError):
        post_json_rpc("http://rpc.test", eth_call_request(CONTRACT, "0x"))


def test_connection_error(mock_rpc):
    with pytest.raises(RPCError) as exc:
        post_json_rpc("http://rpc.test", eth_call_request(CONTRACT, "0x"))

    assert "http://rpc.test" in str(exc.value)
