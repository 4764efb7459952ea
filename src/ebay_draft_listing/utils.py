"""Utility helpers for the eBay draft listing CLI."""
from __future__ import annotations

import logging


def setup_logging(level: int = logging.INFO) -> None:
    """Configure global logging style for CLI use.

    Args:
        level: Logging level passed to ``logging.basicConfig``.
    """

    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )


def strip_code_fences(text: str) -> str:
    """Unwrap a response that is entirely one fenced markdown block.

    Fences appearing inside the text (e.g. within a JSON string value) are
    left alone.
    """

    text = text.strip()
    if not text.startswith("```"):
        return text

    start = text.find("\n")
    end = text.rfind("```")
    if start == -1 or end <= start:
        return text

    return text[start + 1:end].strip()


__all__ = ["setup_logging", "strip_code_fences"]
