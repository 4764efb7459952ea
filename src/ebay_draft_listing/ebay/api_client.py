"""Shared HTTP plumbing for the eBay REST APIs."""
from __future__ import annotations

import logging
from typing import Any, Collection, Dict, Optional

import requests

from ..errors import DraftListingError

logger = logging.getLogger(__name__)

# eBay REST API hosts
SANDBOX_API_BASE = "https://api.sandbox.ebay.com"
PRODUCTION_API_BASE = "https://api.ebay.com"


class EbayAPIError(DraftListingError):
    """Base exception for eBay API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EbayAuthenticationError(EbayAPIError):
    """Authentication error."""
    pass


def api_base(environment: str) -> str:
    """Return the API host for ``environment`` (anything but production is sandbox)."""
    if environment == "production":
        return PRODUCTION_API_BASE
    return SANDBOX_API_BASE


def handle_response(
    response: requests.Response,
    ok_statuses: Collection[int] = (200,),
) -> Optional[Dict[str, Any]]:
    """Handle API response and errors.

    Args:
        response: requests Response object
        ok_statuses: Status codes treated as success

    Returns:
        Parsed JSON response, or ``None`` when the body is empty

    Raises:
        EbayAuthenticationError: Authentication failed
        EbayAPIError: Other API errors or a body that is not JSON
    """
    if response.status_code not in ok_statuses:
        message = f"request failed with status {response.status_code}: {response.text}"
        if response.status_code == 401:
            raise EbayAuthenticationError(message, status_code=401)
        raise EbayAPIError(message, status_code=response.status_code)

    if not response.content:
        return None

    try:
        return response.json()
    except ValueError as exc:
        raise EbayAPIError(
            f"failed to parse response: {exc}: {response.text[:200]}",
            status_code=response.status_code,
        ) from exc


def send(method: str, url: str, **kwargs: Any) -> requests.Response:
    """Issue a single request, wrapping transport failures.

    Raises:
        EbayAPIError: The request could not be sent or no response arrived
    """
    logger.debug(f"{method} {url}")
    try:
        return requests.request(method=method, url=url, **kwargs)
    except requests.RequestException as exc:
        raise EbayAPIError(f"failed to make request to {url}: {exc}") from exc


__all__ = [
    "SANDBOX_API_BASE",
    "PRODUCTION_API_BASE",
    "EbayAPIError",
    "EbayAuthenticationError",
    "api_base",
    "handle_response",
    "send",
]
