"""Photo loading and inline data URL encoding."""
from __future__ import annotations

import base64
import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .errors import PhotoError

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/jpeg"

MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
}

PathLike = Union[str, Path]


def validate_photo_paths(photo_paths: Iterable[PathLike]) -> List[Path]:
    """Check that every photo exists before any API is called.

    Args:
        photo_paths: Paths given on the command line.

    Returns:
        The paths as ``Path`` objects, in the same order.

    Raises:
        FileNotFoundError: For the first path that is not an existing file.
    """
    paths = [Path(p) for p in photo_paths]
    for path in paths:
        if not path.is_file():
            raise FileNotFoundError(f"photo not found: {path}")
    return paths


def guess_mime_type(photo_path: PathLike) -> str:
    """Infer the MIME type from the file extension, falling back to JPEG."""
    return MIME_TYPES.get(Path(photo_path).suffix.lower(), DEFAULT_MIME_TYPE)


def read_photo(photo_path: PathLike) -> Tuple[bytes, str]:
    """Read a photo into memory.

    Returns:
        Tuple of raw bytes and inferred MIME type.

    Raises:
        PhotoError: If the file cannot be read.
    """
    path = Path(photo_path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise PhotoError(f"failed to read image {path}: {exc}") from exc
    return data, guess_mime_type(path)


def encode_data_url(data: bytes, mime_type: str) -> str:
    """Build a ``data:`` URL holding standard base64 of ``data``."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def encode_photos(photo_paths: Iterable[PathLike]) -> List[str]:
    """Encode each photo as an inline data URL, preserving order.

    Images are not hosted anywhere; the data URLs are sent as-is in the
    inventory item payload.
    """
    urls = []
    for path in photo_paths:
        data, mime_type = read_photo(path)
        logger.debug("Encoded %s (%s, %d bytes)", path, mime_type, len(data))
        urls.append(encode_data_url(data, mime_type))
    return urls


__all__ = [
    "DEFAULT_MIME_TYPE",
    "MIME_TYPES",
    "validate_photo_paths",
    "guess_mime_type",
    "read_photo",
    "encode_data_url",
    "encode_photos",
]
