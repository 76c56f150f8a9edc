"""
Scanner package for imgcollide.

Provides image decoding, perceptual fingerprinting, parallel ingestion and
collision grouping.

Public API:
- list_files: List regular files in a directory
- decode_image: Decode a file into a Pillow image
- PerceptualHasher: Per-worker fingerprint calculator
- compute_fingerprint: Fingerprint a single image
- hash_images_parallel: Decode and fingerprint many files on a thread pool
- build_collision_index: Index records by fingerprint and dimensions
- group_collisions: Find fingerprints shared by several images
- has_heif_support: Check if HEIC/HEIF support is available
"""

from __future__ import annotations

from .file_discovery import list_files
from .decoding import decode_image
from .hashing import PerceptualHasher, compute_fingerprint
from .parallel import hash_images_parallel, process_path
from .grouping import build_collision_index, group_collisions

from .dependencies import HAS_HEIF_SUPPORT


def has_heif_support() -> bool:
    """Check if HEIC/HEIF support is available."""
    return HAS_HEIF_SUPPORT


__all__ = [
    # File discovery
    'list_files',
    # Decoding
    'decode_image',
    # Fingerprinting
    'PerceptualHasher',
    'compute_fingerprint',
    # Pipeline
    'hash_images_parallel',
    'process_path',
    # Grouping
    'build_collision_index',
    'group_collisions',
    # Feature detection
    'has_heif_support',
]
