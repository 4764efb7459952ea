"""Configuration loader for credentials and listing settings."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ConfigError
from .models import OfferTerms

DEFAULT_ENVIRONMENT = "sandbox"
ENVIRONMENTS = ("sandbox", "production")
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

# Checked in this order; the first blank one is reported.
REQUIRED_VARIABLES = (
    ("gemini_api_key", "GEMINI_API_KEY"),
    ("prompt", "EBAY_PROMPT"),
    ("ebay_client_id", "EBAY_CLIENT_ID"),
    ("ebay_client_secret", "EBAY_CLIENT_SECRET"),
    ("ebay_refresh_token", "EBAY_REFRESH_TOKEN"),
)


def _getenv(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _split_scopes(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return ()
    return tuple(s for s in raw.replace(",", " ").split() if s)


@dataclass(frozen=True)
class Config:
    """Settings read once from the environment at startup."""

    gemini_api_key: str
    prompt: str
    ebay_client_id: str
    ebay_client_secret: str
    ebay_refresh_token: str
    ebay_environment: str = DEFAULT_ENVIRONMENT
    gemini_model: str = DEFAULT_GEMINI_MODEL
    ebay_scopes: Tuple[str, ...] = ()
    fulfillment_policy_id: Optional[str] = None
    payment_policy_id: Optional[str] = None
    return_policy_id: Optional[str] = None
    merchant_location_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ConfigError: If a required variable is blank or
                ``EBAY_ENVIRONMENT`` names an unknown environment.
        """

        values = {}
        for field_name, env_name in REQUIRED_VARIABLES:
            value = _getenv(env_name)
            if value is None:
                raise ConfigError(f"{env_name} environment variable is required")
            values[field_name] = value

        environment = (_getenv("EBAY_ENVIRONMENT") or DEFAULT_ENVIRONMENT).lower()
        if environment not in ENVIRONMENTS:
            raise ConfigError(
                f"EBAY_ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)} (got {environment!r})"
            )

        return cls(
            ebay_environment=environment,
            gemini_model=_getenv("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
            ebay_scopes=_split_scopes(_getenv("EBAY_SCOPES")),
            fulfillment_policy_id=_getenv("EBAY_FULFILLMENT_POLICY_ID"),
            payment_policy_id=_getenv("EBAY_PAYMENT_POLICY_ID"),
            return_policy_id=_getenv("EBAY_RETURN_POLICY_ID"),
            merchant_location_key=_getenv("EBAY_MERCHANT_LOCATION_KEY"),
            **values,
        )

    def offer_terms(self) -> OfferTerms:
        """Build offer terms, filling in the optional policy settings."""
        return OfferTerms(
            fulfillment_policy_id=self.fulfillment_policy_id,
            payment_policy_id=self.payment_policy_id,
            return_policy_id=self.return_policy_id,
            merchant_location_key=self.merchant_location_key,
        )


__all__ = ["Config", "ConfigError", "DEFAULT_ENVIRONMENT", "ENVIRONMENTS", "DEFAULT_GEMINI_MODEL"]
