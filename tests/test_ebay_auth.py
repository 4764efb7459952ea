import base64

import pytest
import requests

from ebay_draft_listing.ebay import EbayAPIError, EbayAuthClient, EbayAuthenticationError, api_base
from ebay_draft_listing.ebay.api_client import handle_response

from conftest import make_response


def make_auth(environment="sandbox", scopes=()):
    return EbayAuthClient("client-id", "client-secret", "refresh-token", environment, scopes=scopes)


@pytest.mark.parametrize(
    "environment, expected",
    [
        ("sandbox", "https://api.sandbox.ebay.com"),
        ("production", "https://api.ebay.com"),
    ],
)
def test_api_base(environment, expected):
    assert api_base(environment) == expected


def test_token_url_per_environment():
    assert make_auth("sandbox").token_url == "https://api.sandbox.ebay.com/identity/v1/oauth2/token"
    assert make_auth("production").token_url == "https://api.ebay.com/identity/v1/oauth2/token"


def test_get_access_token(transport):
    transport.queue(200, {"access_token": "v^1.1#token", "expires_in": 7200, "token_type": "User Access Token"})

    token = make_auth().get_access_token()

    assert token == "v^1.1#token"
    call = transport.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://api.sandbox.ebay.com/identity/v1/oauth2/token"
    assert call["data"] == {"grant_type": "refresh_token", "refresh_token": "refresh-token"}
    expected = base64.b64encode(b"client-id:client-secret").decode()
    assert call["headers"]["Authorization"] == f"Basic {expected}"
    assert call["headers"]["Content-Type"] == "application/x-www-form-urlencoded"


def test_scopes_are_sent_when_configured(transport):
    transport.queue(200, {"access_token": "t"})

    make_auth(scopes=("scope/a", "scope/b")).get_access_token()

    assert transport.calls[0]["data"]["scope"] == "scope/a scope/b"


@pytest.mark.parametrize("status", [400, 401, 500])
def test_non_200_includes_body(transport, status):
    transport.queue(status, {"error": "invalid_grant", "error_description": "refresh token expired"})

    with pytest.raises(EbayAuthenticationError, match=f"status {status}.*invalid_grant") as excinfo:
        make_auth().get_access_token()

    assert excinfo.value.status_code == status


def test_missing_access_token(transport):
    transport.queue(200, {"token_type": "User Access Token"})

    with pytest.raises(EbayAuthenticationError, match="access_token not found"):
        make_auth().get_access_token()


def test_unparseable_token_response(transport):
    transport.queue(200, "<html>oops</html>")

    with pytest.raises(EbayAuthenticationError, match="failed to parse response"):
        make_auth().get_access_token()


def test_transport_failure_is_wrapped(monkeypatch):
    def boom(method, url, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "request", boom)

    with pytest.raises(EbayAuthenticationError, match="connection refused"):
        make_auth().get_access_token()


def test_handle_response_empty_body():
    assert handle_response(make_response(204), ok_statuses=(200, 204)) is None


def test_handle_response_rejects_unexpected_success_code():
    with pytest.raises(EbayAPIError, match="status 202"):
        handle_response(make_response(202, {"ok": True}), ok_statuses=(200,))
