"""Pytest fixtures for tests."""

import random
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from hubble.models import Color, HubbleConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def rng():
    """Seeded random generator for reproducible draws."""
    return random.Random(1234)


@pytest.fixture
def orange():
    """An opaque orange built from 8-bit channels."""
    return Color.from_rgb(255, 128, 0)


@pytest.fixture
def wide_gamut_red():
    """Extended-sRGB red that the hex form cannot represent."""
    return Color.extended(red=1.2, green=-0.1, blue=0.0)


@pytest.fixture
def config_path(temp_dir):
    """Path for a config file that does not exist yet."""
    return temp_dir / "config.json"


@pytest.fixture
def saved_config(config_path):
    """A config file on disk with non-default values."""
    config = HubbleConfig(fallback_color="#FF00FF", include_alpha=True, random_seed=7)
    config.save(config_path)
    return config_path
