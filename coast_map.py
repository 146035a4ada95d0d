# coast_map.py
"""
Coast Map Module

The static coastline, the animated sea and the weather. The terrain is either
the configured map texture stretched over the screen or a procedurally drawn
pixel-art coast; the water animates a few sine waves and a reflection overlay
whose strength follows the time of day; the weather system owns the random
wind and rain changes and their indicators.
"""

import logging
import math

import numpy as np
import pygame

from assets import AssetCache
from draw_utils import draw_dashed_line

logger = logging.getLogger(__name__)


class Terrain:
    def __init__(self, width, height, config, rng):
        self.config = config
        self.rng = rng
        self.width = width
        self.height = height
        self.coastline = []
        self.detail_pixels = []
        self.resize(width, height)

    def resize(self, width, height):
        self.width = width
        self.height = height
        w, h = width, height
        if AssetCache.get_texture("map_texture") is not None:
            self.coastline = [
                (0, h), (0, h * 0.7), (w * 0.2, h * 0.6), (w * 0.3, h * 0.5),
                (w * 0.32, h * 0.52), (w * 0.33, h * 0.75), (w * 0.35, h * 0.23),
                (w * 0.4, h * 0.3), (w * 0.45, h * 0.5), (w * 0.5, h * 0.55),
                (w, h * 0.8), (w, h),
            ]
            self.detail_pixels = []
            return
        self.coastline = [
            (0, h), (0, 0), (w * 0.2, 0), (w * 0.2, h * 0.6), (w * 0.25, h * 0.5),
            (w * 0.3, h * 0.55), (w * 0.32, h * 0.52), (w * 0.33, h * 0.75),
            (w * 0.35, h * 0.23), (w * 0.25, h * 0.2), (w * 0.2, h * 0.1),
            (w * 0.2, h), (0, h),
        ]
        # Pixel-art speckle over the land, regenerated for the new size.
        size = self.config["pixel_size"]
        xs = np.arange(0, int(w * 0.2), size)
        ys = np.arange(0, int(h), size)
        if len(xs) == 0 or len(ys) == 0:
            self.detail_pixels = []
            return
        grid_x, grid_y = np.meshgrid(xs, ys)
        chosen = self.rng.random(grid_x.shape) < 0.2
        shade = self.rng.random(grid_x.shape)
        palette = (self.config["dark_color"], self.config["base_color"], self.config["light_color"])
        self.detail_pixels = [
            (int(x), int(y), palette[0 if s < 0.3 else 1 if s < 0.7 else 2])
            for x, y, s in zip(grid_x[chosen], grid_y[chosen], shade[chosen])
        ]

    def draw(self, screen, alpha):
        w, h = self.width, self.height
        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        texture = AssetCache.get_texture("map_texture")
        if texture is not None:
            layer.blit(pygame.transform.scale(texture, (w, h)), (0, 0))
        else:
            c = self.config
            layer.fill(c["deep_water_color"])
            pygame.draw.polygon(layer, c["mid_water_color"], [(w * 0.4, 0), (w * 0.6, h), (w * 0.4, h), (w * 0.3, 0)])
            pygame.draw.polygon(layer, c["shallow_water_color"], [(w * 0.3, 0), (w * 0.4, h), (w * 0.2, h), (w * 0.2, 0)])
            pygame.draw.polygon(layer, c["base_color"], self.coastline)
            size = c["pixel_size"]
            for x, y, color in self.detail_pixels:
                layer.fill(color, pygame.Rect(x, y, size, size))
            roads = [
                [(w * 0.02, h * 0.5), (w * 0.1, h * 0.45), (w * 0.15, h * 0.4), (w * 0.2, h * 0.3), (w * 0.25, h * 0.2)],
                [(w * 0.15, h * 0.4), (w * 0.2, h * 0.5), (w * 0.25, h * 0.6)],
                [(w * 0.1, h * 0.45), (w * 0.15, h * 0.6), (w * 0.2, h * 0.8)],
            ]
            for road in roads:
                pygame.draw.lines(layer, c["road_color"], False, road, 1)
            for town in [(w * 0.02, h * 0.5), (w * 0.25, h * 0.2), (w * 0.15, h * 0.4), (w * 0.25, h * 0.6), (w * 0.2, h * 0.8)]:
                pygame.draw.circle(layer, (255, 255, 255), (int(town[0]), int(town[1])), 2)
        layer.set_alpha(int(255 * alpha))
        screen.blit(layer, (0, 0))


class Water:
    def __init__(self, width, height, config):
        self.config = config
        self.waves = []
        for i in range(3):
            self.waves.append({
                "y": 0.0,
                "amplitude": config["wave_amplitude"] * (1 + i * 0.2),
                "frequency": config["wave_speed"] * (1 - i * 0.1),
                "phase": 0.0,
                "color": config["wave_colors"][i % len(config["wave_colors"])],
            })
        self.reflection_intensity = 0.2
        self.reflection_color = (255, 255, 255)
        self.width = width
        self.height = height
        self.start_x = 0.0
        self.resize(width, height)

    def update(self, delta):
        for wave in self.waves:
            wave["phase"] += wave["frequency"] * delta * 0.01

    def set_reflection(self, intensity, color):
        self.reflection_intensity = intensity
        self.reflection_color = color

    def wave_points(self, wave):
        xs = np.arange(self.start_x, self.width + 1, 4)
        ys = wave["y"] + np.sin(xs * 0.02 + wave["phase"]) * wave["amplitude"]
        return list(zip(xs.tolist(), ys.tolist()))

    def resize(self, width, height):
        self.width = width
        self.height = height
        self.start_x = width * self.config["start_fraction"]
        for i, wave in enumerate(self.waves):
            wave["y"] = height * (0.3 + i * 0.2)

    def draw(self, screen, alpha):
        layer = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        for wave in self.waves:
            points = self.wave_points(wave)
            if len(points) > 1:
                pygame.draw.lines(layer, (*wave["color"], 77), False, points, 1)
        reflection = pygame.Rect(int(self.start_x), 0, int(self.width - self.start_x), self.height)
        layer.fill((*self.reflection_color, int(255 * self.reflection_intensity * 0.2)), reflection)
        layer.set_alpha(int(255 * alpha))
        screen.blit(layer, (0, 0))


class WeatherSystem:
    def __init__(self, width, height, config):
        self.config = config
        self.width = width
        self.height = height

    def update(self, delta, weather, rng):
        """
        Rolls this frame's random weather changes and advances rain.

        Parameters:
            delta (float): Frames elapsed.
            weather (Weather): The world's weather record, mutated in place.
            rng (numpy.random.Generator): Source of the per-frame draws.
        """
        if rng.random() < self.config["wind_change_chance"]:
            weather.wind_intensity = float(rng.random() * self.config["max_wind_intensity"])
            weather.wind_direction = float(rng.random() * math.pi * 2)
            logger.debug("Wind changed: intensity=%.2f direction=%.2f",
                         weather.wind_intensity, weather.wind_direction)

        if weather.is_raining:
            weather.rain_timer -= delta
            if weather.rain_timer <= 0:
                weather.is_raining = False
                weather.rain_timer = 0.0
                logger.info("Rain stopped")
        elif rng.random() < self.config["rain_chance"]:
            weather.is_raining = True
            weather.rain_timer = float(self.config["rain_duration"])
            logger.info("Rain started")

    def resize(self, width, height):
        self.width = width
        self.height = height

    def draw(self, screen, weather, elapsed_time, debug, alpha):
        if weather.is_raining:
            layer = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
            slant = math.cos(weather.wind_direction) * weather.wind_intensity
            count = max(1, (self.width * self.height) // 4000)
            for i in range(count):
                x = (i * 97.0 + elapsed_time * slant) % self.width
                y = (i * 53.0 + elapsed_time * 8.0) % self.height
                pygame.draw.line(layer, (200, 200, 255, int(120 * alpha)), (x, y), (x + slant, y + 8), 1)
            screen.blit(layer, (0, 0))
        if debug:
            origin = (self.width * 0.9, self.height * 0.1)
            length = 20 * weather.wind_intensity / self.config["max_wind_intensity"]
            tip = (origin[0] + math.cos(weather.wind_direction) * length,
                   origin[1] + math.sin(weather.wind_direction) * length)
            draw_dashed_line(screen, (255, 255, 255), origin, tip, dash_length=4, space_length=2)


class CoastMap:
    def __init__(self, width, height, config, rng):
        """
        Parameters:
            width, height (int): Initial screen size.
            config (dict): CONFIG["map"].
            rng (numpy.random.Generator): Weather draws and terrain speckle.
        """
        self.entity_id = "map"
        self.config = config
        self.rng = rng
        self.alpha = 1.0
        self.terrain = Terrain(width, height, config["terrain"], rng)
        self.water = Water(width, height, config["water"])
        self.weather = WeatherSystem(width, height, config["weather"])

    @property
    def coastline(self):
        return self.terrain.coastline

    def update(self, delta, world):
        self.water.update(delta)
        self.weather.update(delta, world.weather, self.rng)

    def resize(self, width, height):
        self.terrain.resize(width, height)
        self.water.resize(width, height)
        self.weather.resize(width, height)

    def draw(self, screen, world):
        self.terrain.draw(screen, self.alpha)
        self.water.draw(screen, self.alpha)

    def draw_weather(self, screen, world):
        self.weather.draw(screen, world.weather, world.elapsed_time, world.debug, self.alpha)
