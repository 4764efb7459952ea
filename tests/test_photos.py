import base64

import pytest

from ebay_draft_listing.errors import PhotoError
from ebay_draft_listing.photos import (
    encode_data_url,
    encode_photos,
    guess_mime_type,
    read_photo,
    validate_photo_paths,
)


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("item.png", "image/png"),
        ("item.jpg", "image/jpeg"),
        ("item.jpeg", "image/jpeg"),
        ("item.gif", "image/gif"),
        ("ITEM.PNG", "image/png"),
        ("item.webp", "image/jpeg"),
        ("item", "image/jpeg"),
    ],
)
def test_guess_mime_type(filename, expected):
    assert guess_mime_type(filename) == expected


def test_encode_data_url():
    url = encode_data_url(b"hello", "image/png")

    assert url == "data:image/png;base64,aGVsbG8="


def test_encode_photos_preserves_order(photos):
    urls = encode_photos(photos)

    assert len(urls) == 2
    assert urls[0].startswith("data:image/jpeg;base64,")
    assert urls[1].startswith("data:image/png;base64,")
    assert base64.b64decode(urls[0].split(",", 1)[1]) == photos[0].read_bytes()


def test_read_photo_returns_bytes_and_mime(photos):
    data, mime_type = read_photo(photos[1])

    assert data == b"\x89PNGpng-bytes"
    assert mime_type == "image/png"


def test_read_photo_wraps_os_errors(tmp_path):
    with pytest.raises(PhotoError, match="missing.jpg"):
        read_photo(tmp_path / "missing.jpg")


def test_validate_photo_paths_accepts_existing(photos):
    assert validate_photo_paths([str(p) for p in photos]) == photos


def test_validate_photo_paths_reports_first_missing(photos, tmp_path):
    missing = tmp_path / "nope.jpg"

    with pytest.raises(FileNotFoundError, match="photo not found: .*nope.jpg"):
        validate_photo_paths([photos[0], missing, tmp_path / "other.jpg"])


def test_validate_photo_paths_rejects_directories(tmp_path):
    with pytest.raises(FileNotFoundError):
        validate_photo_paths([tmp_path])
