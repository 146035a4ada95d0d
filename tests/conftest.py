"""Pytest configuration and shared fixtures."""

import copy
import os
import sys
from pathlib import Path

import numpy as np
import pytest

# Headless pygame for the rendering smoke tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from assets import AssetCache  # noqa: E402
from config import CONFIG  # noqa: E402
from frame_driver import FrameDriver  # noqa: E402

WIDTH = 800
HEIGHT = 600


class StubRng:
    """Stands in for numpy.random.Generator with fixed draws."""

    def __init__(self, value=0.0, integer=0):
        self.value = value
        self.integer = integer

    def random(self, size=None):
        if size is None:
            return self.value
        return np.full(size, self.value)

    def integers(self, low, high=None, size=None):
        return self.integer


@pytest.fixture(autouse=True)
def empty_asset_cache():
    """Every test starts without textures, so entities use their placeholders."""
    AssetCache.clear()
    yield
    AssetCache.clear()


@pytest.fixture
def quiet_config():
    """The scene configuration with all random events switched off."""
    config = copy.deepcopy(CONFIG)
    config["signals"]["spawn_chance"] = 0.0
    config["map"]["weather"]["wind_change_chance"] = 0.0
    config["map"]["weather"]["rain_chance"] = 0.0
    return config


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def driver(quiet_config, rng):
    return FrameDriver.create(quiet_config, WIDTH, HEIGHT, rng=rng)


@pytest.fixture
def world(driver):
    return driver.world
