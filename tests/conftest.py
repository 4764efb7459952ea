from __future__ import annotations

import json
from typing import Any, Dict, List

import pytest
import requests

REQUIRED_ENV = {
    "GEMINI_API_KEY": "gemini-key",
    "EBAY_PROMPT": "Describe this item for eBay.",
    "EBAY_CLIENT_ID": "client-id",
    "EBAY_CLIENT_SECRET": "client-secret",
    "EBAY_REFRESH_TOKEN": "refresh-token",
}

OPTIONAL_ENV = (
    "EBAY_ENVIRONMENT",
    "GEMINI_MODEL",
    "EBAY_SCOPES",
    "EBAY_FULFILLMENT_POLICY_ID",
    "EBAY_PAYMENT_POLICY_ID",
    "EBAY_RETURN_POLICY_ID",
    "EBAY_MERCHANT_LOCATION_KEY",
)


def make_response(status_code: int, body: Any = None) -> requests.Response:
    """Build a real ``requests.Response`` with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode() if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode()
    response.encoding = "utf-8"
    return response


class RecordingTransport:
    """Stand-in for ``requests.request`` that replays queued responses."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.responses: List[requests.Response] = []

    def queue(self, status_code: int, body: Any = None) -> None:
        self.responses.append(make_response(status_code, body))

    def __call__(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            raise AssertionError(f"unexpected request: {method} {url}")
        return self.responses.pop(0)


@pytest.fixture
def env(monkeypatch):
    """Populate every required variable and clear the optional ones."""
    for name, value in REQUIRED_ENV.items():
        monkeypatch.setenv(name, value)
    for name in OPTIONAL_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def transport(monkeypatch):
    fake = RecordingTransport()
    monkeypatch.setattr(requests, "request", fake)
    return fake


@pytest.fixture
def photos(tmp_path):
    front = tmp_path / "front.jpg"
    front.write_bytes(b"\xff\xd8jpeg-bytes")
    label = tmp_path / "label.PNG"
    label.write_bytes(b"\x89PNGpng-bytes")
    return [front, label]
