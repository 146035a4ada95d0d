"""Tests for texture loading and the placeholder fallback."""

import logging
import os

import pygame

from assets import AssetCache, resource_path


def test_resource_path_is_relative_to_project():
    path = resource_path("assets/images/map.png")
    assert os.path.isabs(path)
    assert path.endswith(os.path.join("assets", "images", "map.png"))


def test_missing_texture_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="assets"):
        assert not AssetCache.load_texture("map_texture", "does/not/exist.png")
    assert AssetCache.get_texture("map_texture") is None
    assert "not found" in caplog.text


def test_iter_load_reports_progress():
    config = {"images": {"a": "missing/a.png", "b": "missing/b.png"}}
    assert list(AssetCache.iter_load(config)) == [0.5, 1.0]
    assert AssetCache.textures == {}


def test_iter_load_with_nothing_configured():
    assert list(AssetCache.iter_load({})) == [1.0]


def test_loads_real_image(tmp_path):
    image = tmp_path / "dot.png"
    surface = pygame.Surface((4, 4))
    surface.fill((255, 0, 0))
    pygame.image.save(surface, str(image))

    # Absolute paths pass through resource_path unchanged.
    assert AssetCache.load_texture("dot", str(image))
    assert AssetCache.get_texture("dot").get_size() == (4, 4)


def test_broken_file_falls_back(tmp_path, caplog):
    broken = tmp_path / "broken.png"
    broken.write_bytes(b"not an image")
    with caplog.at_level(logging.WARNING, logger="assets"):
        assert not AssetCache.load_texture("broken", str(broken))
    assert AssetCache.get_texture("broken") is None
