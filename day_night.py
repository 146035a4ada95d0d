# day_night.py
"""
Day/Night Cycle Module

Derives the time of day from the world clock and turns it into the sky
overlay, the sun and moon positions, the star field and the water reflection.
Everything here is recomputed from the phase each tick; nothing is simulated.
"""

import logging
import math

import numpy as np
import pygame

from assets import AssetCache
from draw_utils import draw_alpha_circle, draw_overlay, draw_star

logger = logging.getLogger(__name__)


def lerp_color(a, b, t):
    t = max(0.0, min(1.0, t))
    return tuple(int(round(a[i] + (b[i] - a[i]) * t)) for i in range(3))


class DayNightCycle:
    def __init__(self, width, height, config, rng):
        """
        Initializes the cycle.

        Parameters:
            width, height (int): Initial screen size.
            config (dict): CONFIG["day_night"] with durations in frames and colors.
            rng (numpy.random.Generator): Star field placement.
        """
        self.config = config
        self.rng = rng
        self.day_duration = config["day_duration"]
        self.night_duration = config["night_duration"]
        self.total_duration = self.day_duration + self.night_duration
        self.day_fraction = self.day_duration / self.total_duration
        self.transition_fraction = config["transition_duration"] / self.day_duration
        self.night_alpha = config["night_alpha"]

        self.phase_offset = 0.0
        self.phase = 0.0
        self.alpha = 1.0
        self.overlay_alpha = 0.0
        self.overlay_tint = config["night_color"]
        self.star_alpha = 0.0
        self.sun_position = (0.0, 0.0)
        self.moon_position = (0.0, 0.0)
        self.sun_visible = True
        self.moon_visible = False
        self.stars = []
        self.width = width
        self.height = height
        self.resize(width, height)

    # ------------------------------------------------------------------
    # Phase
    # ------------------------------------------------------------------
    def phase_at(self, elapsed_time):
        return ((elapsed_time + self.phase_offset) % self.total_duration) / self.total_duration

    def set_phase(self, world, phase):
        """Jumps the cycle to a given phase without touching the world clock."""
        current = world.elapsed_time % self.total_duration
        self.phase_offset = (phase * self.total_duration - current) % self.total_duration
        self.update(0, world)

    def toggle(self, world):
        """Flips between mid-day and mid-night."""
        if world.is_day:
            self.set_phase(world, (1.0 + self.day_fraction) / 2)
        else:
            self.set_phase(world, self.day_fraction / 2)

    def update(self, delta, world):
        phase = self.phase_at(world.elapsed_time)
        self.phase = phase
        world.day_phase = phase

        is_day = phase < self.day_fraction
        if is_day != world.is_day:
            world.is_day = is_day
            logger.info("Transitioning to %s", "day" if is_day else "night")

        self.overlay_alpha, self.overlay_tint = self.sky_overlay(phase)
        self.update_celestial_bodies(phase, self.width, self.height)
        self.star_alpha = 0.0 if world.is_day else self.config["star_alpha"]

        coast_map = world.coast_map
        if coast_map is not None:
            if world.is_day:
                coast_map.water.set_reflection(0.2, self.config["day_color"])
            else:
                coast_map.water.set_reflection(0.5, self.config["night_color"])

    # ------------------------------------------------------------------
    # Derived visuals
    # ------------------------------------------------------------------
    def sky_overlay(self, phase):
        """
        Computes the sky overlay opacity and tint for a phase.

        The overlay is clear through the middle of the day, ramps linearly up to
        the night opacity across the dusk window, holds it through the night and
        ramps back down across the dawn window, so it is continuous everywhere.

        Returns:
            tuple: (alpha, rgb tint)
        """
        c = self.config
        if phase >= self.day_fraction:
            return self.night_alpha, c["night_color"]

        position = phase / self.day_fraction
        window = self.transition_fraction
        if position < window:
            ramp = position / window
            return self.night_alpha * (1.0 - ramp), lerp_color(c["night_color"], c["sunrise_color"], ramp)
        if position > 1.0 - window:
            ramp = (position - (1.0 - window)) / window
            return self.night_alpha * ramp, lerp_color(c["sunset_color"], c["night_color"], ramp)
        return 0.0, c["sunrise_color"]

    def update_celestial_bodies(self, phase, width, height):
        angle = phase * math.pi * 2 - math.pi / 2
        radius = min(width, height) * 0.4

        sun_x = width / 2 + math.cos(angle) * radius
        sun_y = height * 0.5 + math.sin(angle) * radius * 0.7
        moon_x = width / 2 + math.cos(angle + math.pi) * radius
        moon_y = height * 0.5 + math.sin(angle + math.pi) * radius * 0.7

        self.sun_position = (sun_x, sun_y)
        self.moon_position = (moon_x, moon_y)
        self.sun_visible = sun_y < height * 0.8
        self.moon_visible = moon_y < height * 0.8

    def resize(self, width, height):
        self.width = width
        self.height = height
        count = int((width * height) / 2000)
        xs = self.rng.random(count) * width
        ys = self.rng.random(count) * height * 0.6
        sizes = self.rng.random(count) * 2 + 1
        brightness = 0.5 + self.rng.random(count) * 0.5
        twinkle = np.where(self.rng.random(count) < 0.3, 0.05 + self.rng.random(count) * 0.1, 0.0)
        phases = self.rng.random(count) * math.pi * 2
        self.stars = list(zip(xs, ys, sizes, brightness, twinkle, phases))
        self.update_celestial_bodies(self.phase, width, height)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def draw_sky(self, screen, world):
        """Stars, sun and moon, drawn before the map."""
        if self.star_alpha > 0:
            for x, y, size, brightness, twinkle, phase in self.stars:
                level = brightness
                if twinkle:
                    level *= 0.7 + math.sin(phase + twinkle * world.elapsed_time) * 0.3
                shade = int(255 * level * self.star_alpha * self.alpha)
                if size > 2.5:
                    draw_star(screen, (x, y), size, (shade, shade, shade))
                else:
                    pygame.draw.circle(screen, (shade, shade, shade), (int(x), int(y)), int(size))

        if self.sun_visible:
            texture = AssetCache.get_texture("sun_texture")
            if texture is not None:
                self._blit_faded(screen, texture, self.sun_position)
            else:
                draw_alpha_circle(screen, (255, 221, 0), self.sun_position, 30, 0.5 * self.alpha)
                draw_alpha_circle(screen, (255, 221, 0), self.sun_position, 20, self.alpha)
        if self.moon_visible:
            texture = AssetCache.get_texture("moon_texture")
            if texture is not None:
                self._blit_faded(screen, texture, self.moon_position)
            else:
                draw_alpha_circle(screen, (221, 221, 255), self.moon_position, 15, self.alpha)
                mx, my = self.moon_position
                for dx, dy, r in ((5, -3, 3), (-4, 5, 4), (2, 6, 2)):
                    draw_alpha_circle(screen, (204, 204, 238), (mx + dx, my + dy), r, self.alpha)

    def _blit_faded(self, screen, texture, center):
        image = texture.copy()
        image.set_alpha(int(255 * max(0.0, min(1.0, self.alpha))))
        screen.blit(image, image.get_rect(center=center))

    def draw_overlay(self, screen):
        """Tinted darkness drawn over the scene."""
        draw_overlay(screen, self.overlay_tint, self.overlay_alpha)
