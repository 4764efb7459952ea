"""eBay OAuth 2.0 refresh-token grant."""
from __future__ import annotations

import base64
import logging
from typing import Dict, Iterable

from .api_client import EbayAPIError, EbayAuthenticationError, api_base, handle_response, send

logger = logging.getLogger(__name__)

TOKEN_PATH = "/identity/v1/oauth2/token"


class EbayAuthClient:
    """Exchanges a long-lived refresh token for a user access token.

    Tokens are not cached; every call performs one POST.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        refresh_token: str,
        environment: str = "sandbox",
        scopes: Iterable[str] = (),
    ):
        """Initialize eBay auth client.

        Args:
            client_id: eBay application client id (App ID)
            client_secret: eBay application client secret (Cert ID)
            refresh_token: User refresh token from the consent flow
            environment: ``sandbox`` or ``production``
            scopes: Optional OAuth scopes sent with the grant
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.refresh_token = refresh_token
        self.environment = environment
        self.scopes = tuple(scopes)

    @property
    def token_url(self) -> str:
        return f"{api_base(self.environment)}{TOKEN_PATH}"

    def _get_headers(self) -> Dict[str, str]:
        credentials = base64.b64encode(
            f"{self.client_id}:{self.client_secret}".encode()
        ).decode()
        return {
            "Content-Type": "application/x-www-form-urlencoded",
            "Authorization": f"Basic {credentials}",
        }

    def get_access_token(self) -> str:
        """Obtain an access token using the refresh token.

        Returns:
            Access token string

        Raises:
            EbayAuthenticationError: Token request failed or the response
                carried no access token
        """
        data = {
            "grant_type": "refresh_token",
            "refresh_token": self.refresh_token,
        }
        if self.scopes:
            data["scope"] = " ".join(self.scopes)

        logger.info("Requesting access token from eBay (%s)", self.environment)
        try:
            response = send("POST", self.token_url, headers=self._get_headers(), data=data)
            token_data = handle_response(response, ok_statuses=(200,))
        except EbayAPIError as exc:
            raise EbayAuthenticationError(
                f"token request failed: {exc}", status_code=exc.status_code
            ) from exc

        if not isinstance(token_data, dict) or not token_data.get("access_token"):
            raise EbayAuthenticationError("access_token not found in token response")

        access_token = token_data["access_token"]
        logger.debug("Access token expires in %ss", token_data.get("expires_in"))
        return access_token


__all__ = ["EbayAuthClient", "TOKEN_PATH"]
