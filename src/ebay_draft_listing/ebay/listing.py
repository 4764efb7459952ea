"""eBay Sell Inventory API client for draft listings.

A draft listing on eBay is an inventory item (keyed by SKU) plus an
unpublished offer that binds it to a marketplace, price and category.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Collection, Dict, List, Optional

from ..errors import DraftListingError
from ..models import DraftListing, OfferTerms
from ..photos import encode_photos
from .api_client import EbayAPIError, api_base, handle_response, send
from .auth import EbayAuthClient

logger = logging.getLogger(__name__)

INVENTORY_PATH = "/sell/inventory/v1"

CONDITION = "NEW"
QUANTITY = 1
CONTENT_LANGUAGE = "en-US"


def generate_sku(now: Optional[datetime] = None) -> str:
    """Return a SKU unique per second, e.g. ``DRAFT-20260131093000``."""
    now = now or datetime.now(timezone.utc)
    return f"DRAFT-{now.strftime('%Y%m%d%H%M%S')}"


class EbayListingClient:
    """Creates inventory items and offers on behalf of one seller."""

    def __init__(self, auth: EbayAuthClient, terms: Optional[OfferTerms] = None):
        self.auth = auth
        self.terms = terms or OfferTerms()
        self.base_url = f"{api_base(auth.environment)}{INVENTORY_PATH}"

    def _get_headers(self, access_token: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
            "Content-Language": CONTENT_LANGUAGE,
        }

    def _request(
        self,
        method: str,
        endpoint: str,
        access_token: str,
        payload: Dict[str, Any],
        ok_statuses: Collection[int],
    ) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}{endpoint}"
        response = send(method, url, headers=self._get_headers(access_token), json=payload)
        return handle_response(response, ok_statuses=ok_statuses)

    def build_inventory_item(self, listing: DraftListing, image_urls: List[str]) -> Dict[str, Any]:
        """Build the inventory item body; ``imageUrls`` is omitted when empty."""
        product: Dict[str, Any] = {
            "title": listing.title,
            "description": listing.description,
        }
        if image_urls:
            product["imageUrls"] = list(image_urls)

        return {
            "product": product,
            "condition": CONDITION,
            "availability": {
                "shipToLocationAvailability": {
                    "quantity": QUANTITY,
                },
            },
        }

    def build_offer(self, sku: str, listing: DraftListing) -> Dict[str, Any]:
        """Build the offer body from the configured ``OfferTerms``."""
        terms = self.terms
        offer: Dict[str, Any] = {
            "sku": sku,
            "marketplaceId": terms.marketplace_id,
            "format": terms.listing_format,
            "pricingSummary": {
                "price": {
                    "value": terms.price,
                    "currency": terms.currency,
                },
            },
            "listingPolicies": terms.listing_policies(),
            "categoryId": terms.category_id,
        }
        if listing.description:
            offer["listingDescription"] = listing.description
        if terms.merchant_location_key:
            offer["merchantLocationKey"] = terms.merchant_location_key
        return offer

    def create_inventory_item(
        self,
        access_token: str,
        sku: str,
        listing: DraftListing,
        image_urls: List[str],
    ) -> None:
        """Create or replace the inventory item for ``sku``.

        Raises:
            EbayAPIError: eBay did not answer 200 or 204
        """
        item = self.build_inventory_item(listing, image_urls)
        self._request("PUT", f"/inventory_item/{sku}", access_token, item, ok_statuses=(200, 204))
        logger.info("Created inventory item %s", sku)

    def create_offer(self, access_token: str, sku: str, listing: DraftListing) -> str:
        """Create an unpublished offer for ``sku``.

        Returns:
            The new offer id

        Raises:
            EbayAPIError: eBay did not answer 200 or 201, or omitted ``offerId``
        """
        offer = self.build_offer(sku, listing)
        result = self._request("POST", "/offer", access_token, offer, ok_statuses=(200, 201))

        offer_id = result.get("offerId") if isinstance(result, dict) else None
        if not isinstance(offer_id, str) or not offer_id:
            raise EbayAPIError("offer ID not found in response")

        logger.info("Created offer %s", offer_id)
        return offer_id

    def create_draft_listing(self, listing: DraftListing, sku: Optional[str] = None) -> str:
        """Run the full sequence: token, images, inventory item, offer.

        Partially created resources are left in place if a later step fails.

        Args:
            listing: Title, description and photo paths
            sku: SKU to use (generated when omitted)

        Returns:
            The offer id of the draft listing

        Raises:
            DraftListingError: Any step failed; the message names the step
        """
        sku = sku or generate_sku()

        access_token = self._step("get access token", self.auth.get_access_token)
        image_urls = self._step("upload images", encode_photos, listing.photo_paths)
        self._step(
            "create inventory item",
            self.create_inventory_item,
            access_token,
            sku,
            listing,
            image_urls,
        )
        return self._step("create offer", self.create_offer, access_token, sku, listing)

    @staticmethod
    def _step(name: str, func, *args):
        logger.debug("Step: %s", name)
        try:
            return func(*args)
        except EbayAPIError as exc:
            raise type(exc)(f"failed to {name}: {exc}", status_code=exc.status_code) from exc
        except DraftListingError as exc:
            raise type(exc)(f"failed to {name}: {exc}") from exc


__all__ = ["EbayListingClient", "generate_sku", "INVENTORY_PATH"]
