"""Validate uploaded images before they are attached to a generation request."""

from __future__ import annotations

import base64
from dataclasses import dataclass

# Media type mapping
_EXT_MEDIA_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
}

MAX_IMAGE_BYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class ImageAttachment:
    """Raw image bytes plus the declared MIME type."""

    data: bytes
    media_type: str

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("utf-8")


def get_media_type(filename: str) -> str | None:
    """Get media type from filename extension."""
    lower = filename.lower()
    for ext, mt in _EXT_MEDIA_TYPES.items():
        if lower.endswith(ext):
            return mt
    return None


def load_image_attachment(file_bytes: bytes, filename: str) -> ImageAttachment:
    """Build an ImageAttachment from an upload.

    Raises:
        ValueError: on an unsupported extension, an empty file or one over 5MB.
    """
    media_type = get_media_type(filename)
    if not media_type:
        raise ValueError(
            f"Unsupported image type: {filename}. Use PNG, JPG, JPEG, GIF or WEBP."
        )
    if not file_bytes:
        raise ValueError(f"Image file is empty: {filename}")
    if len(file_bytes) > MAX_IMAGE_BYTES:
        raise ValueError(f"Image file exceeds 5MB: {filename}")
    return ImageAttachment(data=file_bytes, media_type=media_type)
