# assets.py
"""
Asset Loading Module

Loads the scene's images by logical key and caches them. A missing or broken
file is never fatal: the key simply maps to nothing and the entity asking for
it draws its procedural placeholder instead.
"""

import logging
import os
import sys

import pygame

logger = logging.getLogger(__name__)


def resource_path(relative_path):
    """
    Get the absolute path to a resource, works for both development and PyInstaller.

    When running as a bundled executable, sys._MEIPASS contains the path to the temporary folder.
    Otherwise, this returns the path relative to this file's directory.
    """
    base_path = getattr(sys, "_MEIPASS", None)
    if base_path is None:
        base_path = os.path.dirname(os.path.abspath(__file__))
    return os.path.normpath(os.path.join(base_path, relative_path))


class AssetCache:
    textures = {}

    @classmethod
    def load_texture(cls, key, path):
        """
        Loads one image into the cache.

        Returns:
            bool: True if the image was loaded, False if the placeholder will be used.
        """
        full_path = resource_path(path)
        if not os.path.exists(full_path):
            logger.warning("Texture '%s' not found at %s, using placeholder", key, full_path)
            cls.textures.pop(key, None)
            return False
        try:
            image = pygame.image.load(full_path)
        except pygame.error as e:
            logger.warning("Error loading texture '%s': %s", key, e)
            cls.textures.pop(key, None)
            return False
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        cls.textures[key] = image
        return True

    @classmethod
    def iter_load(cls, asset_config):
        """
        Loads every configured image one at a time.

        Yields:
            float: Fraction of assets processed so far, for the loading bar.
        """
        images = asset_config.get("images", {})
        total = len(images)
        if total == 0:
            logger.warning("No assets to load")
            yield 1.0
            return
        for count, (key, path) in enumerate(images.items(), start=1):
            cls.load_texture(key, path)
            yield count / total
        logger.info("Assets loaded: %d of %d textures available", len(cls.textures), total)

    @classmethod
    def load(cls, asset_config):
        for _ in cls.iter_load(asset_config):
            pass

    @classmethod
    def get_texture(cls, key):
        """Returns the cached surface for a key, or None when it is unavailable."""
        return cls.textures.get(key)

    @classmethod
    def clear(cls):
        cls.textures = {}
