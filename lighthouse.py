# lighthouse.py
"""
Lighthouse Module

Lighthouses stand on the coast at fixed screen fractions, blink their lantern
and periodically send a directional signal toward the boat. Each lighthouse
starts its signal timer at a random phase so they do not fire in step.
"""

import logging
import math

import numpy as np
import pygame

from assets import AssetCache
from draw_utils import blit_transformed, draw_alpha_circle
from entity import DetailPanel, Entity, PanelComponent
from signals import DirectionalSignal

logger = logging.getLogger(__name__)


class Lighthouse(Entity):
    def __init__(self, entity_id, name, fraction_x, fraction_y, color, config, signal_config, rng,
                 width, height):
        """
        Initializes a lighthouse.

        Parameters:
            entity_id (str): Registry id.
            name (str): Display name, e.g. "Constanta Lighthouse".
            fraction_x, fraction_y (float): Position as fractions of the screen size.
            color (tuple): Lantern and signal color.
            config (dict): CONFIG["lighthouse"].
            signal_config (dict): CONFIG["signals"].
            rng (numpy.random.Generator): Seeds the signal timer phase.
            width, height (int): Initial screen size.
        """
        super().__init__(entity_id, name)
        self.fraction_x = fraction_x
        self.fraction_y = fraction_y
        self.color = color
        self.blink_rate = config["blink_rate"]
        self.signal_rate = config["signal_rate"]
        self.signal_speed = config["signal_speed"]
        self.light_offset = config["light_offset"]
        self.signal_config = signal_config

        self.signal_timer = float(rng.integers(0, self.signal_rate))
        self.blink_timer = 0.0
        self.intensity = 1.0
        self.signals_sent = 0

        self.home_x = 0.0
        self.home_y = 0.0
        self.resize(width, height)

    # ------------------------------------------------------------------
    # Per-frame update
    # ------------------------------------------------------------------
    def update(self, delta, world):
        # Blink the light.
        self.blink_timer += delta
        if self.blink_timer >= self.blink_rate:
            self.blink_timer = 0.0
        self.intensity = self.blink_intensity(self.blink_timer / self.blink_rate)

        # Periodic signal toward the boat.
        self.signal_timer += delta
        if self.signal_timer >= self.signal_rate and not world.is_zoomed:
            signal = self.create_signal(world.tick_snapshot.boat_receiver)
            if signal is not None:
                self.signal_timer %= self.signal_rate
                world.add_signal(signal)

    @staticmethod
    def blink_intensity(phase):
        return 0.7 + math.sin(phase * math.pi * 2) * 0.3

    def light_position(self):
        t = self.transform
        return (t.x, t.y + self.light_offset * t.scale)

    def create_signal(self, boat_receiver):
        """
        Builds a directional signal from the lantern to the boat's receiver.

        Parameters:
            boat_receiver (tuple or None): Receiver position at the start of the tick.

        Returns:
            DirectionalSignal or None: None when there is no boat to aim at.
        """
        if boat_receiver is None:
            return None
        self.signals_sent += 1
        return DirectionalSignal(
            self.light_position(),
            boat_receiver,
            self.color,
            speed=self.signal_speed,
            amplitude=self.signal_config["amplitude"],
            frequency=self.signal_config["frequency"],
            segments=self.signal_config["segments"],
            source_id=self.entity_id,
        )

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def resize(self, width, height):
        self.home_x = width * self.fraction_x
        self.home_y = height * self.fraction_y
        if not self.focused:
            self.transform.x = self.home_x
            self.transform.y = self.home_y

    def on_focus_exit(self):
        super().on_focus_exit()
        # Settle on the current layout in case the window was resized while focused.
        self.transform.x = self.home_x
        self.transform.y = self.home_y

    def hit_radius(self):
        return 35 * self.transform.scale

    def contains(self, point):
        # The tower rises above its base; test the middle of it.
        t = self.transform
        return math.hypot(point[0] - t.x, point[1] - (t.y - 35 * t.scale)) <= self.hit_radius()

    # ------------------------------------------------------------------
    # Detail view
    # ------------------------------------------------------------------
    def create_detail_view(self):
        phase = np.linspace(0.0, 1.0, 60)
        intensity = 0.7 + np.sin(phase * np.pi * 2) * 0.3
        components = [
            PanelComponent("Oscillator", -60, -30, 40, 30, (255, 0, 0)),
            PanelComponent("Amplifier", 0, -30, 40, 30, (0, 255, 0)),
            PanelComponent("Antenna", 60, -30, 10, 60, (0, 0, 255)),
        ]
        return DetailPanel(
            self.name,
            "Transmitter System",
            components,
            "This lighthouse contains a signal transmitter system\n"
            "that sends precise timing signals to nearby vessels.",
            chart=("Lantern intensity", phase * self.blink_rate, intensity),
            chart_title=f"Blink cycle ({self.signals_sent} signals sent)",
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def draw(self, screen, world):
        t = self.transform
        texture = AssetCache.get_texture("lighthouse_texture")
        if texture is not None:
            sprite = pygame.transform.rotozoom(texture, 0, 0.3)
            blit_transformed(screen, sprite, t, anchor=(0.5, 1.0), alpha=self.alpha)
        else:
            self._draw_placeholder(screen)

        lx, ly = self.light_position()
        draw_alpha_circle(screen, self.color, (lx, ly), 10 * t.scale, 0.3 * self.intensity * 0.5 * self.alpha)
        draw_alpha_circle(screen, self.color, (lx, ly), 5 * t.scale, self.intensity * self.alpha)

    def _draw_placeholder(self, screen):
        t = self.transform
        s = t.scale
        layer = pygame.Surface((int(40 * s) + 2, int(75 * s) + 2), pygame.SRCALPHA)
        cx = layer.get_width() / 2
        base = layer.get_height() - 1
        pygame.draw.ellipse(layer, (0, 0, 0, 76), pygame.Rect(cx - 10 * s, base - 5 * s, 30 * s, 10 * s))
        pygame.draw.rect(layer, (255, 255, 255), pygame.Rect(cx - 10 * s, base - 60 * s, 20 * s, 60 * s))
        for i in range(4):
            pygame.draw.rect(layer, (255, 0, 0), pygame.Rect(cx - 10 * s, base - (55 - i * 15) * s, 20 * s, 5 * s))
        pygame.draw.rect(layer, (51, 51, 51), pygame.Rect(cx - 12 * s, base - 70 * s, 24 * s, 10 * s))
        layer.set_alpha(int(255 * self.alpha))
        screen.blit(layer, (t.x - cx, t.y - base))
