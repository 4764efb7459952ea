"""eBay API integration module.

This module handles:
- OAuth 2.0 refresh-token grant
- Inventory item creation (Sell Inventory API)
- Offer creation for draft listings
"""

from .api_client import EbayAPIError, EbayAuthenticationError, api_base
from .auth import EbayAuthClient
from .listing import EbayListingClient, generate_sku

__all__ = [
    "EbayAPIError",
    "EbayAuthenticationError",
    "api_base",
    "EbayAuthClient",
    "EbayListingClient",
    "generate_sku",
]
