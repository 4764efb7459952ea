"""Plain records passed between the Gemini and eBay steps."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


@dataclass(frozen=True)
class ListingContent:
    """Title and description produced by the model."""

    title: str
    description: str


@dataclass
class DraftListing:
    """Everything needed to create an eBay draft listing."""

    title: str
    description: str
    photo_paths: List[Path] = field(default_factory=list)


@dataclass(frozen=True)
class OfferTerms:
    """Marketplace terms attached to every offer.

    Price, category and marketplace are fixed; policy ids and the merchant
    location key are only sent when configured.
    """

    marketplace_id: str = "EBAY_US"
    listing_format: str = "FIXED_PRICE"
    price: str = "9.99"
    currency: str = "USD"
    category_id: str = "111422"
    fulfillment_policy_id: Optional[str] = None
    payment_policy_id: Optional[str] = None
    return_policy_id: Optional[str] = None
    merchant_location_key: Optional[str] = None

    def listing_policies(self) -> Dict[str, str]:
        """Return only the policy ids that are set, keyed as eBay expects."""
        policies = {
            "fulfillmentPolicyId": self.fulfillment_policy_id,
            "paymentPolicyId": self.payment_policy_id,
            "returnPolicyId": self.return_policy_id,
        }
        return {key: value for key, value in policies.items() if value}


__all__ = ["ListingContent", "DraftListing", "OfferTerms"]
