"""
Unit tests for perceptual fingerprint computation.
"""

import pytest
import numpy as np
import imagehash
from PIL import Image

from imgcollide.models import HashConfig, Fingerprint
from imgcollide.scanner import PerceptualHasher, compute_fingerprint
from imgcollide.scanner.hashing import dct_bits, spatial_bits

from conftest import make_photo, make_checkerboard


class TestComputeFingerprint:
    """Test compute_fingerprint function."""

    def test_deterministic(self, photo):
        config = HashConfig()
        assert compute_fingerprint(photo, config) == compute_fingerprint(photo, config)

    @pytest.mark.parametrize("side", [1, 2, 8, 10, 16])
    @pytest.mark.parametrize("use_dct", [True, False])
    def test_fixed_length(self, photo, side, use_dct):
        fingerprint = compute_fingerprint(photo, HashConfig(side=side, use_dct=use_dct))
        assert len(fingerprint) == side * side
        assert fingerprint.bits.shape == (side, side)

    def test_default_config(self, photo):
        assert compute_fingerprint(photo) == compute_fingerprint(photo, HashConfig(side=10, use_dct=True))

    def test_dct_matches_phash(self, photo):
        expected = imagehash.phash(photo.convert('L'), hash_size=8)
        fingerprint = compute_fingerprint(photo, HashConfig(side=8, use_dct=True))
        assert fingerprint.hex == str(expected)
        assert np.array_equal(fingerprint.bits, expected.hash)

    def test_spatial_thresholds_against_median(self):
        img = Image.fromarray(np.array([[0, 255], [255, 0]], dtype=np.uint8), 'L')
        fingerprint = compute_fingerprint(img, HashConfig(side=2, use_dct=False))
        assert fingerprint.bits.tolist() == [[False, True], [True, False]]

    def test_configuration_sensitivity(self):
        # 8x8 blocky pattern upscaled to 16x16; the textured copy adds a
        # zero-sum +/-76 checker inside every dark 2x2 block
        rng = np.random.default_rng(7)
        bright = rng.permutation(np.array([True] * 32 + [False] * 32)).reshape(8, 8)
        block = np.ones((2, 2), dtype=int)
        base = np.kron(np.where(bright, 165, 90), block)
        texture = np.kron(~bright, block) * np.kron(np.ones((8, 8), dtype=int), [[76, -76], [-76, 76]])
        smooth = Image.fromarray(base.astype(np.uint8), 'L')
        textured = Image.fromarray((base + texture).astype(np.uint8), 'L')

        coarse = HashConfig(side=8, use_dct=False)
        fine = HashConfig(side=16, use_dct=False)

        assert len(compute_fingerprint(smooth, coarse)) == 64
        assert len(compute_fingerprint(smooth, fine)) == 256
        assert compute_fingerprint(smooth, coarse) == compute_fingerprint(textured, coarse)
        assert compute_fingerprint(smooth, fine) != compute_fingerprint(textured, fine)
        assert not np.array_equal(
            compute_fingerprint(smooth, fine).bits, compute_fingerprint(textured, fine).bits
        )

    @pytest.mark.parametrize("use_dct", [True, False])
    def test_single_cell_grid(self, photo, use_dct):
        config = HashConfig(side=1, use_dct=use_dct)
        fingerprint = compute_fingerprint(photo, config)
        assert len(fingerprint) == 1
        assert fingerprint == compute_fingerprint(photo, config)
        # one value never exceeds its own median
        assert fingerprint.bits.tolist() == [[False]]
        assert compute_fingerprint(make_checkerboard(), config) == fingerprint

    def test_identical_content_collides(self):
        a = Image.new('RGB', (64, 64), color=(128, 128, 128))
        b = Image.new('RGB', (64, 64), color=(128, 128, 128))
        assert compute_fingerprint(a) == compute_fingerprint(b)

    def test_unrelated_images_differ(self, photo):
        gray = Image.new('RGB', (120, 80), color=(128, 128, 128))
        assert compute_fingerprint(photo) != compute_fingerprint(gray)
        assert compute_fingerprint(make_checkerboard()) != compute_fingerprint(make_photo())

    @pytest.mark.parametrize("mode", ['RGB', 'RGBA', 'L', 'CMYK', 'P'])
    def test_any_mode(self, photo, mode):
        fingerprint = compute_fingerprint(photo.convert(mode))
        assert isinstance(fingerprint, Fingerprint)
        assert len(fingerprint) == 100

    def test_tiny_image(self):
        img = Image.new('L', (1, 1), color=200)
        assert len(compute_fingerprint(img, HashConfig(side=10))) == 100


class TestBitReductions:
    """Test the numpy reductions used for grids imagehash rejects."""

    def test_dct_bits_match_phash(self, photo):
        gray = photo.convert('L')
        expected = imagehash.phash(gray, hash_size=8).hash
        assert np.array_equal(dct_bits(gray, 8), expected)

    def test_spatial_bits_match_median_average_hash(self, photo):
        gray = photo.convert('L')
        expected = imagehash.average_hash(gray, hash_size=8, mean=np.median).hash
        assert np.array_equal(spatial_bits(gray, 8), expected)

    @pytest.mark.parametrize("reduce", [dct_bits, spatial_bits])
    def test_single_cell_shape(self, photo, reduce):
        bits = reduce(photo.convert('L'), 1)
        assert bits.shape == (1, 1)
        assert bits.dtype == bool


class TestPerceptualHasher:
    """Test PerceptualHasher class."""

    def test_default_config(self):
        hasher = PerceptualHasher()
        assert hasher.config == HashConfig()
        assert "10x10 dct" in repr(hasher)

    def test_reuse_matches_fresh_hasher(self, photo):
        config = HashConfig(side=12)
        hasher = PerceptualHasher(config)
        first = hasher.hash_image(photo)
        hasher.hash_image(make_checkerboard())
        hasher.hash_image(Image.new('RGB', (10, 10), 'red'))
        assert hasher.hash_image(photo) == first
        assert PerceptualHasher(config).hash_image(photo) == first

    def test_does_not_modify_image(self, photo):
        before = photo.tobytes()
        PerceptualHasher().hash_image(photo)
        assert photo.mode == 'RGB'
        assert photo.tobytes() == before
