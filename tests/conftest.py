import json
import random
from typing import Any

import pytest
import requests
from eth_utils import to_checksum_address


@pytest.fixture(name="random_address")
def fixture_random_address():
    def _generate_random_address():
        return to_checksum_address(random.randbytes(20).hex())

    return _generate_random_address


class MockResponse:
    """Minimal stand-in for requests.Response"""

    def __init__(self, payload: Any, status_code: int = 200, text: str | None = None):
        self.payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        try:
            return json.loads(self.text)
        except json.JSONDecodeError as e:
            raise requests.exceptions.JSONDecodeError(e.msg, e.doc, e.pos)


@pytest.fixture(name="mock_rpc")
def fixture_mock_rpc(monkeypatch):
    """
    Patches requests.post to return the queued responses.  Returns the list that records every posted request
    """

    posted: list[dict[str, Any]] = []
    responses: list[MockResponse] = []

    def _post(url, json=None, headers=None, timeout=None):  # pylint: disable=redefined-outer-name
        posted.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if not responses:
            raise requests.exceptions.ConnectionError(f"Could not connect to {url}")
        return responses.pop(0)

    monkeypatch.setattr(requests, "post", _post)

    def _queue(payload: Any = None, status_code: int = 200, text: str | None = None):
        responses.append(MockResponse(payload, status_code, text))
        return posted

    return _queue
