from pathlib import Path

import pytest

from vcf_exporter.errors import ContactEncodingError, ImageLoadError
from vcf_exporter.images import load_image


def test_load_plain_path(tmp_path: Path):
    img = tmp_path / "a.jpg"
    img.write_bytes(b"\xff\xd8data")
    assert load_image(str(img)) == b"\xff\xd8data"


def test_load_file_uri(tmp_path: Path):
    img = tmp_path / "with space.jpg"
    img.write_bytes(b"\xff\xd8data")
    assert load_image(img.as_uri()) == b"\xff\xd8data"


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(ImageLoadError):
        load_image(str(tmp_path / "nope.jpg"))


def test_empty_file_raises(tmp_path: Path):
    img = tmp_path / "empty.jpg"
    img.write_bytes(b"")
    with pytest.raises(ImageLoadError):
        load_image(str(img))


def test_unsupported_scheme_is_contact_error():
    with pytest.raises(ContactEncodingError):
        load_image("content://com.android.contacts/7/photo")
