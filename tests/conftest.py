"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

import numpy as np
from PIL import Image


@pytest.fixture(autouse=True)
def isolated_user_config(monkeypatch, tmp_path):
    """Point the user config at an empty directory and clear env overrides."""
    from imgcollide.user_config import get_user_config

    for var in ('IMGCOLLIDE_SIDE', 'IMGCOLLIDE_USE_DCT', 'IMGCOLLIDE_WORKERS', 'IMGCOLLIDE_MAX_PIXELS'):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv('IMGCOLLIDE_CONFIG_DIR', str(tmp_path / 'config'))

    config = get_user_config()
    config.reload()
    yield config
    config.reload()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


def make_photo(size=(64, 64), seed=0):
    """A noisy gradient that stands in for a real photograph."""
    rng = np.random.default_rng(seed)
    width, height = size
    x = np.linspace(0, 255, width)
    y = np.linspace(0, 255, height)[:, None]
    base = (x + y) / 2
    noise = rng.integers(-60, 60, size=(height, width))
    pixels = np.clip(base + noise, 0, 255).astype(np.uint8)
    return Image.fromarray(np.stack([pixels, pixels[::-1], pixels[:, ::-1]], axis=2), 'RGB')


def make_checkerboard(size=(64, 64), block=16):
    width, height = size
    yy, xx = np.mgrid[0:height, 0:width]
    pixels = np.where(((xx // block) + (yy // block)) % 2 == 0, 230, 20).astype(np.uint8)
    return Image.fromarray(pixels, 'L')


@pytest.fixture
def sample_images(temp_dir):
    """
    Create a set of sample images for testing.

    Returns:
        dict with paths to:
        - gray1.png, gray2.png, gray3.png (byte-identical 64x64 gray squares)
        - photo.png (unrelated 64x64 image)
        - other_photo.png (64x64 checkerboard, unrelated to the rest)
        - corrupted.png (not an image)
    """
    images = {}

    gray = Image.new('RGB', (64, 64), color=(128, 128, 128))
    for name in ('gray1', 'gray2', 'gray3'):
        path = temp_dir / f"{name}.png"
        gray.save(path, 'PNG')
        images[name] = str(path)

    path = temp_dir / "photo.png"
    make_photo(seed=1).save(path, 'PNG')
    images['photo'] = str(path)

    path = temp_dir / "other_photo.png"
    make_checkerboard().save(path, 'PNG')
    images['other_photo'] = str(path)

    path = temp_dir / "corrupted.png"
    path.write_text("not an image")
    images['corrupted'] = str(path)

    return images


@pytest.fixture
def photo():
    """In-memory photo-like image."""
    return make_photo(size=(120, 80), seed=3)
