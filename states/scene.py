# states/scene.py
"""
Scene State Module

This module defines the SceneState class, the interactive coastline screen.
It turns pygame input into the frame driver's input operations (select an
entity, go back, toggle debug, toggle day/night, resize), advances the driver
once per frame and renders the world layer by layer: sky, map, lighthouses,
boat, signals, weather, sky overlay, then the detail panel, back button and
debug panel on top.
"""

import logging

import pygame

from config import CONFIG, FRAMES_PER_SECOND, TEXT_COLOR
from draw_utils import draw_button, draw_detail_panel
from frame_driver import FrameDriver

logger = logging.getLogger(__name__)

MAX_FRAME_TIME = 0.25  # seconds


class SceneState:
    def __init__(self, screen, driver=None):
        """
        Initializes the SceneState.

        Parameters:
            screen (pygame.Surface): The main display surface.
            driver (FrameDriver, optional): An already built scene; one is created from
                CONFIG for the current screen size if not given.
        """
        self.screen = screen
        self.next_state = None
        width, height = screen.get_size()
        self.driver = driver if driver is not None else FrameDriver.create(CONFIG, width, height)
        ui = CONFIG["ui"]
        self.font = pygame.font.SysFont("Arial", ui["font_size"])
        self.fonts = {
            "title": pygame.font.SysFont("Arial", 20),
            "label": pygame.font.SysFont("Arial", 14),
            "small": pygame.font.SysFont("Arial", 12),
        }
        self.btn_back = pygame.Rect(ui["back_button"])
        self.fps = 0.0

    @property
    def world(self):
        return self.driver.world

    def handle_events(self, events):
        """
        Processes user input events.

        - Left click on the back button (while zoomed) returns from the detail view.
        - Left click on an entity (while not zoomed) zooms into it.
        - Escape returns from the detail view; 'd' toggles the debug panel;
          't' flips between day and night.
        - Window resizes re-lay out the scene.

        Parameters:
            events (list): A list of Pygame events.
        """
        for event in events:
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.world.is_zoomed:
                    if self.btn_back.collidepoint(event.pos):
                        self.driver.back()
                else:
                    entity = self.entity_at(event.pos)
                    if entity is not None:
                        self.driver.select(entity.entity_id)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.driver.back()
                elif event.key == pygame.K_d:
                    self.driver.toggle_debug()
                elif event.key == pygame.K_t:
                    self.driver.toggle_day_night()
            elif event.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.get_surface() or self.screen
                self.driver.resize(event.w, event.h)

    def entity_at(self, pos):
        """Returns the topmost entity under a screen position; the boat is drawn above the lighthouses."""
        for entity in reversed(self.world.focusable_entities()):
            if entity.contains(pos):
                return entity
        return None

    def update(self, dt):
        """
        Advances the scene.

        Parameters:
            dt (float): Elapsed time in seconds since the last update.
        """
        if dt > 0:
            self.fps = 0.9 * self.fps + 0.1 * (1.0 / dt)
        # A stalled window (dragging, minimising) should not fast-forward the scene.
        dt = min(dt, MAX_FRAME_TIME)
        self.driver.tick(dt * FRAMES_PER_SECOND)

    def render(self, screen):
        """
        Renders the scene.

        Parameters:
            screen (pygame.Surface): The display surface.
        """
        world = self.world
        day_night = self.driver.day_night
        screen.fill(CONFIG["renderer"]["background_color"])

        day_night.draw_sky(screen, world)
        if world.coast_map is not None:
            world.coast_map.draw(screen, world)

        focused = self.driver.coordinator.focused_entity
        for entity in world.focusable_entities():
            if entity is not focused:
                entity.draw(screen, world)

        for signal in world.active_signals:
            signal.draw(screen, world.signal_layer.alpha)

        if world.coast_map is not None:
            world.coast_map.draw_weather(screen, world)
        day_night.draw_overlay(screen)

        # The focused entity and its panel sit above everything else.
        if focused is not None:
            focused.draw(screen, world)
        panel = self.driver.coordinator.panel
        if panel is not None:
            center = (screen.get_width() / 2, screen.get_height() / 2 + 40)
            draw_detail_panel(screen, panel, center, self.fonts, alpha=panel.alpha)
            draw_button(screen, self.btn_back, "< Back", self.font, color=CONFIG["ui"]["button_color"],
                        alpha=int(255 * panel.alpha))

        if world.debug:
            self.render_debug(screen)

    def render_debug(self, screen):
        lines = [
            f"FPS: {self.fps:.0f}",
            f"Entities: {self.world.entity_count()}",
            f"Time: {'Day' if self.world.is_day else 'Night'} ({self.world.day_phase:.2f})",
            f"Mouse: {pygame.mouse.get_pos()[0]},{pygame.mouse.get_pos()[1]}",
            f"View: {self.driver.coordinator.state}",
        ]
        panel = pygame.Surface((200, 20 + 20 * len(lines)), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 178))
        for i, line in enumerate(lines):
            panel.blit(self.fonts["small"].render(line, True, TEXT_COLOR), (10, 10 + i * 20))
        screen.blit(panel, (screen.get_width() - 210, 10))

    def get_next_state(self):
        """
        Retrieves the next state for the application and resets the next_state variable.

        Returns:
            Object or None: The next state instance if a transition is requested; otherwise, None.
        """
        next_state = self.next_state
        self.next_state = None
        return next_state
