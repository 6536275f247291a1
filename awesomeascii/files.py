"""Reading images and writing text output."""

from __future__ import annotations

import os
from pathlib import Path

from PIL import Image, UnidentifiedImageError

__all__ = ["ImageLoadError", "open_image", "write_text"]

_SUPPORTED = {"JPEG": "JPEG", "PNG": "PNG"}


class ImageLoadError(Exception):
    """Raised when an image cannot be opened or decoded."""


def open_image(path: str | os.PathLike[str]) -> Image.Image:
    """Open and decode a JPEG or PNG image."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise ImageLoadError(f"failed to open image: {exc}") from exc

    with handle:
        try:
            img = Image.open(handle)
        except (UnidentifiedImageError, OSError) as exc:
            raise ImageLoadError(f"failed to decode image config: {exc}") from exc

        fmt = img.format or "unknown"
        if fmt not in _SUPPORTED:
            img.close()
            raise ImageLoadError(f"unsupported image format: {fmt.lower()}")

        try:
            img.load()
        except (OSError, SyntaxError, ValueError) as exc:
            raise ImageLoadError(
                f"failed to decode {_SUPPORTED[fmt]} image: {exc}"
            ) from exc
    return img


def write_text(text: str, path: str | os.PathLike[str]) -> None:
    """Write text to a file, replacing what was there."""
    Path(path).write_text(text, encoding="utf-8")