"""
Configuration constants for imgcollide.

This module contains the built-in defaults including:
- Fingerprint grid size and DCT pre-step
- Worker pool sizing
- Decoder safety limits
"""

import os

# Edge length of the square fingerprint bit grid.
# A side of 10 produces a 100-bit fingerprint.
# Larger = finer grid, fewer collisions
DEFAULT_SIDE = 10

# Apply the low-frequency DCT pre-step before thresholding
DEFAULT_USE_DCT = True

# Default number of parallel workers for decoding and hashing
DEFAULT_WORKERS = 4
MAX_WORKERS = 32

# Increase PIL's decompression bomb limit for large images
# Default is ~89MP, we allow 500MP for high-resolution scans and panoramas
MAX_IMAGE_PIXELS = 500_000_000

# Export formats understood by utils.exporters
EXPORT_FORMATS = ('txt', 'csv', 'json')

# User configuration location (see user_config.py)
CONFIG_DIR = os.path.join(os.path.expanduser('~'), '.imgcollide')
