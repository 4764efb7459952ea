"""Draft listing orchestrator.

Handles the complete flow from local photos to an eBay draft offer.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from . import gemini_client
from .config import Config
from .ebay import EbayAuthClient, EbayListingClient, generate_sku
from .models import DraftListing

logger = logging.getLogger(__name__)


def create_draft_from_photos(
    photo_paths: Iterable[Path],
    config: Config,
    *,
    sku: Optional[str] = None,
    dry_run: bool = False,
) -> Dict[str, Any]:
    """Generate listing copy from photos and create an eBay draft listing.

    This function orchestrates the complete process:
    1. Generate title and description with Gemini
    2. Create the draft on eBay (access token, photo data URLs,
       inventory item, offer)

    Args:
        photo_paths: Photos of the item (already validated to exist)
        config: Loaded configuration
        sku: SKU for the inventory item (generated when omitted)
        dry_run: If True, skip all API calls

    Returns:
        Result dict with:
        {
            "title": str,
            "description": str,
            "sku": str,
            "offer_id": str | None (None on dry run),
            "environment": str,
        }

    Raises:
        DraftListingError: If any step fails
    """
    paths = [Path(p) for p in photo_paths]
    sku = sku or generate_sku()

    logger.info("Step 1: Generating listing content with Gemini...")
    content = gemini_client.generate_listing_content(
        paths,
        api_key=config.gemini_api_key,
        prompt=config.prompt,
        model=config.gemini_model,
        dry_run=dry_run,
    )
    logger.info("  Title: %s", content.title)

    listing = DraftListing(
        title=content.title,
        description=content.description,
        photo_paths=paths,
    )

    result: Dict[str, Any] = {
        "title": content.title,
        "description": content.description,
        "sku": sku,
        "offer_id": None,
        "environment": config.ebay_environment,
    }

    auth = EbayAuthClient(
        client_id=config.ebay_client_id,
        client_secret=config.ebay_client_secret,
        refresh_token=config.ebay_refresh_token,
        environment=config.ebay_environment,
        scopes=config.ebay_scopes,
    )
    client = EbayListingClient(auth, terms=config.offer_terms())

    if dry_run:
        logger.info("[dry-run] Would create draft listing on eBay (%s)", config.ebay_environment)
        logger.info("[dry-run]   Token URL: %s", auth.token_url)
        image_placeholders = [f"<{path.name}>" for path in paths]
        logger.info(
            "[dry-run]   PUT %s/inventory_item/%s %s",
            client.base_url,
            sku,
            client.build_inventory_item(listing, image_placeholders),
        )
        logger.info("[dry-run]   POST %s/offer %s", client.base_url, client.build_offer(sku, listing))
        return result

    logger.info("Step 2: Creating draft listing on eBay (%s)...", config.ebay_environment)
    result["offer_id"] = client.create_draft_listing(listing, sku=sku)

    logger.info("Draft listing created: offer %s (sku %s)", result["offer_id"], sku)
    return result


__all__ = ["create_draft_from_photos"]
