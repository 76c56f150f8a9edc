"""
imgcollide
==========
Near-duplicate image detection by perceptual fingerprint collision.

Features:
- DCT (pHash) or spatial fingerprints with a configurable grid size
- Parallel decoding and hashing with one hasher per worker
- Groups by fingerprint, subdivided by image dimensions
- A file that fails to decode never aborts the run
- CLI with TXT/CSV/JSON export
"""

__version__ = "1.0.0"

from .models import HashConfig, Fingerprint, ImageRecord, CollisionGroup, DecodedImage
from .exceptions import ImgCollideError, DecodeError, DirectoryReadError, ConfigError
from .config import DEFAULT_SIDE, DEFAULT_USE_DCT, DEFAULT_WORKERS
from .scanner import (
    list_files,
    decode_image,
    PerceptualHasher,
    compute_fingerprint,
    hash_images_parallel,
    build_collision_index,
    group_collisions,
)

__all__ = [
    "HashConfig",
    "Fingerprint",
    "ImageRecord",
    "CollisionGroup",
    "DecodedImage",
    "ImgCollideError",
    "DecodeError",
    "DirectoryReadError",
    "ConfigError",
    "DEFAULT_SIDE",
    "DEFAULT_USE_DCT",
    "DEFAULT_WORKERS",
    "list_files",
    "decode_image",
    "PerceptualHasher",
    "compute_fingerprint",
    "hash_images_parallel",
    "build_collision_index",
    "group_collisions",
]
