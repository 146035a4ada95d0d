# states/loading.py
"""
Loading State Module

This module defines the LoadingState class, shown while the scene's textures
are loaded. One texture is loaded per frame so the progress bar can advance;
when every texture has been tried the state hands over to the SceneState.
Missing textures are not an error: the scene draws placeholders for them.
"""

import logging

import pygame

from assets import AssetCache
from config import CONFIG, DEFAULT_FONT_SIZE, TEXT_COLOR, UI_PANEL_COLOR
from draw_utils import draw_progress_bar

logger = logging.getLogger(__name__)


class LoadingState:
    def __init__(self, screen):
        """
        Initializes the LoadingState.

        Parameters:
            screen (pygame.Surface): The main display surface.
        """
        self.screen = screen
        self.font = pygame.font.SysFont(None, DEFAULT_FONT_SIZE)
        self.next_state = None
        self.progress = 0.0
        self.loader = AssetCache.iter_load(CONFIG["assets"])
        logger.info("Loading assets...")

    def handle_events(self, events):
        pass

    def update(self, dt):
        """Loads the next texture, or switches to the scene once all are done."""
        if self.next_state is not None:
            return
        try:
            self.progress = next(self.loader)
        except StopIteration:
            from states.scene import SceneState
            logger.info("Assets loaded, starting scene")
            self.next_state = SceneState(self.screen)

    def render(self, screen):
        screen.fill(UI_PANEL_COLOR)
        w, h = screen.get_size()
        label = self.font.render(f"Loading: {int(self.progress * 100)}%", True, TEXT_COLOR)
        screen.blit(label, label.get_rect(center=(w // 2, h // 2 - 30)))
        draw_progress_bar(screen, pygame.Rect(w // 4, h // 2, w // 2, 20), self.progress)

    def get_next_state(self):
        next_state = self.next_state
        self.next_state = None
        return next_state
