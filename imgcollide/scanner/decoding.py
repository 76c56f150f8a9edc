"""
Image decoding for the scanner package.

Wraps Pillow so that every way a file can fail to become a pixel grid
(missing, unreadable, not an image, truncated) surfaces as a DecodeError.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..exceptions import DecodeError
from ..models import DecodedImage
from .dependencies import Image


def decode_image(filepath: str | Path) -> DecodedImage:
    """
    Decode an image file into a fully loaded Pillow image.

    Args:
        filepath: Path to the image file

    Returns:
        DecodedImage with the loaded image and its dimensions

    Raises:
        DecodeError: If the file cannot be opened or decoded
    """
    filepath = str(filepath)

    if not os.path.isfile(filepath):
        raise DecodeError(filepath, "File not found")

    try:
        with Image.open(filepath) as img:
            # Force load to detect truncated/corrupt images early
            img.load()
            width, height = img.size
            # Detach pixel data from the file handle before it is closed
            image = img.copy()
    except Image.UnidentifiedImageError as e:
        raise DecodeError(filepath, f"Not a valid image file: {e}") from e
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(filepath, f"Corrupt or unreadable image: {e}") from e

    return DecodedImage(image=image, width=width, height=height)


__all__ = ['decode_image']
