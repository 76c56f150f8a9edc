"""
Third-party imports shared by the scanner modules.

Pillow decodes images and imagehash computes the fingerprints. pillow-heif
adds HEIC/HEIF decoding when installed, and tqdm draws the progress bar
when installed.
"""

from __future__ import annotations

import warnings
import logging
from typing import Optional, Any

from ..user_config import get_user_config

_logger = logging.getLogger(__name__)

try:
    from PIL import Image
    import imagehash
except ImportError:
    raise ImportError(
        "imgcollide needs Pillow and imagehash.\n"
        "Install with: pip install Pillow imagehash"
    )

# HEIC/HEIF files decode only once the opener is registered
HAS_HEIF_SUPPORT = False
try:
    from pillow_heif import register_heif_opener
    register_heif_opener()
    HAS_HEIF_SUPPORT = True
    _logger.debug("pillow-heif registered, HEIC/HEIF files will be fingerprinted")
except ImportError:
    _logger.debug("pillow-heif not installed, HEIC/HEIF files will be skipped as undecodable")

# Largest image the decoder accepts, in pixels
Image.MAX_IMAGE_PIXELS = get_user_config().max_image_pixels

# Images between the limit and twice the limit only warn; they are decoded anyway
warnings.filterwarnings("ignore", category=Image.DecompressionBombWarning)

# Progress bar for hash_images_parallel(show_progress=True)
HAS_TQDM = False
_tqdm_class: Optional[Any] = None

try:
    from tqdm import tqdm as _tqdm_import
    HAS_TQDM = True
    _tqdm_class = _tqdm_import
except ImportError:
    pass


__all__ = [
    'Image',
    'imagehash',
    'HAS_HEIF_SUPPORT',
    'HAS_TQDM',
    '_tqdm_class',
]
