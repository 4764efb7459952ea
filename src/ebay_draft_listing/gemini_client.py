"""Thin wrapper around Google Gemini for writing listing copy from photos.

This module isolates the model client so the rest of the workflow stays
framework-agnostic. The implementation uses the official ``google-genai``
package.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from .config import DEFAULT_GEMINI_MODEL
from .errors import DraftListingError
from .models import ListingContent
from .photos import read_photo
from .utils import strip_code_fences

logger = logging.getLogger(__name__)
# Elevate to DEBUG if GEMINI_DEBUG is set
if os.getenv("GEMINI_DEBUG"):
    logging.getLogger().setLevel(logging.DEBUG)
    logger.setLevel(logging.DEBUG)

# eBay rejects titles longer than this
MAX_TITLE_LENGTH = 80

RESPONSE_INSTRUCTIONS = (
    "Respond ONLY with a JSON object of the form "
    '{"title": "<listing title>", "description": "<listing description>"}. '
    f"The title must be at most {MAX_TITLE_LENGTH} characters."
)


class GeminiError(DraftListingError):
    """Content generation failed or returned unusable output."""
    pass


CLIENT: genai.Client | None = None


def _get_client(api_key: str) -> genai.Client:
    global CLIENT
    if CLIENT is None:
        CLIENT = genai.Client(api_key=api_key)
    return CLIENT


def _get_error_json(exc: genai_errors.APIError) -> dict:
    """Extract JSON error data from an API error (version-compatible)."""
    for attr in ["response_json", "details", "json", "data"]:
        if hasattr(exc, attr):
            data = getattr(exc, attr)
            if isinstance(data, dict) and data:
                return data
    return {}


def build_contents(photo_paths: Iterable[Path], prompt: str) -> List[Any]:
    """Assemble one inline image part per photo followed by the prompt text."""

    contents: List[Any] = []
    for path in photo_paths:
        data, mime_type = read_photo(path)
        logger.debug("Attaching %s (%s, %d bytes)", path, mime_type, len(data))
        contents.append(types.Part.from_bytes(data=data, mime_type=mime_type))
    contents.append(f"{prompt.strip()}\n\n{RESPONSE_INSTRUCTIONS}")
    return contents


def parse_listing_response(text: str | None) -> ListingContent:
    """Parse the model's JSON answer into ``ListingContent``.

    Args:
        text: Raw response text, optionally wrapped in a markdown fence.

    Returns:
        Title and description, with the title clipped to eBay's limit.

    Raises:
        GeminiError: If the text is empty, not a JSON object, or lacks a
            non-blank ``title`` or ``description``.
    """

    if not text or not text.strip():
        raise GeminiError("Gemini returned an empty response")

    body = strip_code_fences(text)
    try:
        data: Dict[str, Any] = json.loads(body)
    except json.JSONDecodeError as exc:
        raise GeminiError(f"failed to parse Gemini response as JSON: {exc}: {body[:200]}") from exc

    if not isinstance(data, dict):
        raise GeminiError(f"expected a JSON object from Gemini, got {type(data).__name__}")

    title = data.get("title")
    description = data.get("description")
    for name, value in (("title", title), ("description", description)):
        if not isinstance(value, str) or not value.strip():
            raise GeminiError(f"Gemini response is missing '{name}'")

    title = title.strip()
    if len(title) > MAX_TITLE_LENGTH:
        logger.warning("Title is %d chars, truncating to %d", len(title), MAX_TITLE_LENGTH)
        title = title[:MAX_TITLE_LENGTH].rstrip()

    return ListingContent(title=title, description=description.strip())


def generate_listing_content(
    photo_paths: Iterable[Path],
    *,
    api_key: str,
    prompt: str,
    model: str = DEFAULT_GEMINI_MODEL,
    dry_run: bool = False,
) -> ListingContent:
    """Ask Gemini for a listing title and description based on photos.

    Args:
        photo_paths: Photos of the item, sent inline with the request.
        api_key: Gemini API key.
        prompt: Seller-supplied instructions for the model.
        model: Gemini model id.
        dry_run: If ``True``, skip the API call and return placeholder copy.

    Returns:
        The generated ``ListingContent``.

    Raises:
        GeminiError: If the API call fails or the answer cannot be used.
    """

    paths = list(photo_paths)

    if dry_run:
        logger.info("[dry-run] Would send %d photo(s) to Gemini model %s", len(paths), model)
        logger.info("[dry-run] Prompt: %s", prompt)
        return ListingContent(
            title="[dry-run] Draft listing",
            description="[dry-run] Description not generated.",
        )

    contents = build_contents(paths, prompt)
    client = _get_client(api_key)

    logger.info("Calling Gemini model: %s", model)
    try:
        response = client.models.generate_content(
            model=model,
            contents=contents,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
            ),
        )
    except genai_errors.APIError as exc:
        error_data = _get_error_json(exc)
        payload = json.dumps(error_data, ensure_ascii=False) if error_data else str(exc)
        status = getattr(exc, "code", None)
        logger.debug("Gemini API error on %s: %s", model, payload)
        raise GeminiError(f"Gemini request failed with status {status}: {payload}") from exc
    except Exception as exc:
        # transport failures (httpx connect/timeout) surface here
        logger.debug("Unexpected error from Gemini model %s", model, exc_info=True)
        raise GeminiError(f"failed to reach Gemini model {model}: {exc}") from exc

    text = getattr(response, "text", None)
    logger.debug("Gemini response: %s", text)
    return parse_listing_response(text)


__all__ = [
    "GeminiError",
    "MAX_TITLE_LENGTH",
    "build_contents",
    "parse_listing_response",
    "generate_listing_content",
]
