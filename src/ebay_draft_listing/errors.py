"""Exception hierarchy shared across the draft listing workflow."""
from __future__ import annotations


class DraftListingError(Exception):
    """Base exception for every failure surfaced to the CLI."""
    pass


class ConfigError(DraftListingError):
    """Required configuration is missing or invalid."""
    pass


class PhotoError(DraftListingError):
    """A photo could not be read or encoded."""
    pass


__all__ = ["DraftListingError", "ConfigError", "PhotoError"]
