"""Create eBay draft listings from item photos using Gemini-written copy."""

__version__ = "0.1.0"
