from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol
from urllib.parse import unquote, urlparse

from .errors import ImageLoadError

logger = logging.getLogger(__name__)


class ImageLoader(Protocol):
    def __call__(self, reference: str) -> bytes: ...


def _reference_to_path(reference: str) -> Path:
    parsed = urlparse(reference)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    # single letters are Windows drive prefixes, not schemes
    if parsed.scheme and len(parsed.scheme) > 1:
        raise ImageLoadError(f"Unsupported image reference scheme {parsed.scheme!r}: {reference}")
    return Path(reference)


def load_image(reference: str) -> bytes:
    """Read already-encoded image bytes from a path or ``file://`` URI."""
    path = _reference_to_path(reference)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ImageLoadError(f"Cannot read image {reference}: {exc}") from exc
    if not data:
        raise ImageLoadError(f"Image is empty: {reference}")
    logger.debug("Loaded %d byte(s) of image data from %s", len(data), path)
    return data
