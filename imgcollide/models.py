"""
Data models for imgcollide.

Contains dataclasses for the hash configuration, perceptual fingerprints,
per-image records and collision groups.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os

import numpy as np

from .config import DEFAULT_SIDE, DEFAULT_USE_DCT
from .exceptions import ConfigError

Dimensions = tuple[int, int]


@dataclass(frozen=True)
class HashConfig:
    """
    Tunable parameters controlling fingerprint granularity.

    Attributes:
        side: Edge length of the square bit grid (fingerprint has side*side bits)
        use_dct: Apply the low-frequency DCT pre-step before thresholding
    """
    side: int = DEFAULT_SIDE
    use_dct: bool = DEFAULT_USE_DCT

    def __post_init__(self):
        if isinstance(self.side, bool) or not isinstance(self.side, int):
            raise ConfigError(f"side must be an integer, got {self.side!r}")
        if self.side < 1:
            raise ConfigError(f"side must be >= 1, got {self.side}")

    @property
    def bit_length(self) -> int:
        """Number of bits in a fingerprint produced with this config."""
        return self.side * self.side

    def describe(self) -> str:
        mode = "dct" if self.use_dct else "spatial"
        return f"{self.side}x{self.side} {mode}"


@dataclass(frozen=True, order=True)
class Fingerprint:
    """
    Perceptual fingerprint: a side x side bit grid stored row-major.

    Equality, hashing and ordering compare (side, packed bits), so two
    fingerprints are equal only when every bit matches.
    """
    side: int
    packed: bytes

    @classmethod
    def from_bits(cls, bits) -> 'Fingerprint':
        """Build from a boolean array of shape (side, side)."""
        grid = np.asarray(bits, dtype=bool)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"Expected a square bit grid, got shape {grid.shape}")
        return cls(side=grid.shape[0], packed=np.packbits(grid.flatten()).tobytes())

    @classmethod
    def from_image_hash(cls, image_hash) -> 'Fingerprint':
        """Build from an imagehash.ImageHash."""
        return cls.from_bits(image_hash.hash)

    @property
    def bits(self) -> np.ndarray:
        """The bit grid as a boolean array of shape (side, side)."""
        flat = np.unpackbits(np.frombuffer(self.packed, dtype=np.uint8))
        return flat[:len(self)].reshape(self.side, self.side).astype(bool)

    @property
    def hex(self) -> str:
        """Hex form, identical to str() of the matching imagehash.ImageHash."""
        bit_string = ''.join('1' if b else '0' for b in self.bits.flatten())
        width = -(-len(bit_string) // 4)
        return '{:0>{width}x}'.format(int(bit_string, 2), width=width)

    def __len__(self) -> int:
        return self.side * self.side

    def __str__(self) -> str:
        return self.hex


@dataclass(frozen=True)
class ImageRecord:
    """
    A successfully decoded and fingerprinted image.

    Attributes:
        path: Path to the image file
        dimensions: (width, height) in pixels
        fingerprint: Perceptual fingerprint of the image
    """
    path: str
    dimensions: Dimensions
    fingerprint: Fingerprint

    @property
    def width(self) -> int:
        return self.dimensions[0]

    @property
    def height(self) -> int:
        return self.dimensions[1]

    @property
    def filename(self) -> str:
        """Return just the filename portion of the path."""
        return os.path.basename(self.path)

    @property
    def resolution(self) -> str:
        """Return resolution as 'WxH' string."""
        return f"{self.width}x{self.height}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'path': self.path,
            'filename': self.filename,
            'width': self.width,
            'height': self.height,
            'resolution': self.resolution,
            'fingerprint': self.fingerprint.hex,
        }


@dataclass
class CollisionGroup:
    """
    Images sharing one fingerprint, bucketed by dimensions.

    Attributes:
        fingerprint: The shared fingerprint
        buckets: Mapping of (width, height) to paths, in insertion order
    """
    fingerprint: Fingerprint
    buckets: dict[Dimensions, list[str]] = field(default_factory=dict)

    @property
    def paths(self) -> list[str]:
        """All paths in the group, bucket by bucket."""
        return [path for paths in self.buckets.values() for path in paths]

    @property
    def image_count(self) -> int:
        """Total number of images across all dimension buckets."""
        return sum(len(paths) for paths in self.buckets.values())

    @property
    def dimension_count(self) -> int:
        return len(self.buckets)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'fingerprint': self.fingerprint.hex,
            'image_count': self.image_count,
            'buckets': [
                {'width': width, 'height': height, 'paths': list(paths)}
                for (width, height), paths in self.buckets.items()
            ],
        }


@dataclass
class DecodedImage:
    """Pixel grid produced by the decoder, with its dimensions."""
    image: object
    width: int
    height: int

    @property
    def dimensions(self) -> Dimensions:
        return (self.width, self.height)
