"""
Hashing module for the scanner package.

Provides the perceptual fingerprint computation. Two modes are supported:

- DCT (default): imagehash's pHash. The image is reduced to a 4*side square
  luminance grid, transformed with a 2-D DCT, and the top-left side x side
  low-frequency coefficients are thresholded against their median.
- Spatial: the image is reduced to a side x side luminance grid and each
  cell is thresholded against the median of the grid.

Bits are read row-major, so a fingerprint always holds side * side bits.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import scipy.fftpack

from ..models import Fingerprint, HashConfig
from .dependencies import Image, imagehash

# Oversampling before the DCT, same as imagehash.phash's highfreq_factor
HIGHFREQ_FACTOR = 4

# imagehash refuses grids smaller than this
MIN_IMAGEHASH_SIZE = 2


def dct_bits(image, side: int) -> np.ndarray:
    """
    Low-frequency DCT bits of a luminance image, computed as pHash does.

    Returns:
        Boolean array of shape (side, side)
    """
    img_size = side * HIGHFREQ_FACTOR
    pixels = np.asarray(image.resize((img_size, img_size), Image.LANCZOS))
    dct = scipy.fftpack.dct(scipy.fftpack.dct(pixels, axis=0), axis=1)
    low = dct[:side, :side]
    return low > np.median(low)


def spatial_bits(image, side: int) -> np.ndarray:
    """
    Luminance bits of an image reduced to side x side, split at the median.

    Returns:
        Boolean array of shape (side, side)
    """
    pixels = np.asarray(image.resize((side, side), Image.LANCZOS))
    return pixels > np.median(pixels)


class PerceptualHasher:
    """
    Computes fingerprints for a fixed HashConfig.

    One instance is built per worker and reused across images. It keeps no
    per-image state, so a reused hasher gives the same result as a new one.
    """

    def __init__(self, config: Optional[HashConfig] = None):
        self.config = config or HashConfig()
        if self.config.use_dct:
            self._hash_func = self._dct_hash
        else:
            self._hash_func = self._spatial_hash

    def _dct_hash(self, image) -> np.ndarray:
        if self.config.side < MIN_IMAGEHASH_SIZE:
            return dct_bits(image, self.config.side)
        return imagehash.phash(image, hash_size=self.config.side).hash

    def _spatial_hash(self, image) -> np.ndarray:
        if self.config.side < MIN_IMAGEHASH_SIZE:
            return spatial_bits(image, self.config.side)
        return imagehash.average_hash(image, hash_size=self.config.side, mean=np.median).hash

    def hash_image(self, image) -> Fingerprint:
        """
        Fingerprint a decoded Pillow image.

        Args:
            image: PIL.Image in any mode

        Returns:
            Fingerprint with config.side * config.side bits
        """
        if image.mode != 'L':
            image = image.convert('L')
        return Fingerprint.from_bits(self._hash_func(image))

    def __repr__(self) -> str:
        return f"PerceptualHasher({self.config.describe()})"


def compute_fingerprint(image, config: Optional[HashConfig] = None) -> Fingerprint:
    """
    Fingerprint a single image with a throwaway hasher.

    Args:
        image: Decoded PIL.Image
        config: Hash configuration (default: 10x10 with DCT)

    Returns:
        Fingerprint of the image
    """
    return PerceptualHasher(config).hash_image(image)


__all__ = [
    'PerceptualHasher',
    'compute_fingerprint',
    'dct_bits',
    'spatial_bits',
]
