# inventory_pro/models/images.py

"""Inline image payloads (``data:`` URLs) stored on products."""

import base64
import logging
import mimetypes
from pathlib import Path

logger = logging.getLogger("inventory_pro.images")

_DEFAULT_MIME = "application/octet-stream"


def encode_image_file(path: Path) -> str:
    """Read an image file and return it as a base64 ``data:`` URL.

    Raises ``OSError`` when the file cannot be read.
    """
    mime, _ = mimetypes.guess_type(path.name)
    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    logger.debug(
        "Encoded image %s (%s, %d chars)", path, mime, len(payload),
    )
    return f"data:{mime or _DEFAULT_MIME};base64,{payload}"


def encode_image_files(paths: list[Path]) -> list[str]:
    """Encode several image files, preserving their order."""
    return [encode_image_file(p) for p in paths]
