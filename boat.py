# boat.py
"""
Boat Module

The research vessel patrols a cyclic route of waypoints off the coast,
bobbing on the swell, drifting with the wind and reacting with pulse rings
whenever a lighthouse signal reaches its receiver.
"""

import logging
import math

import numpy as np
import pygame

from assets import AssetCache
from draw_utils import blit_transformed, draw_alpha_circle
from entity import DetailPanel, Entity, PanelComponent
from signals import PulseSignal
from world import Transform

logger = logging.getLogger(__name__)

# Reception timing, in frames.
PULSE_INTERVAL = 30
RECEPTION_TIMEOUT = 120


def normalize_angle(angle):
    """Wraps an angle in radians into (-pi, pi]."""
    while angle > math.pi:
        angle -= 2 * math.pi
    while angle <= -math.pi:
        angle += 2 * math.pi
    return angle


class WaterParticle:
    def __init__(self, x, y, vx, vy, size, color, lifetime):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.size = size
        self.color = color
        self.lifetime = lifetime
        self.max_lifetime = lifetime

    def update(self, delta):
        self.lifetime -= delta
        self.x += self.vx * delta
        self.y += self.vy * delta
        self.size = max(0.5, self.size - 0.05 * delta)
        return self.lifetime <= 0

    @property
    def alpha(self):
        return max(0.0, self.lifetime / self.max_lifetime)


class Boat(Entity):
    def __init__(self, entity_id, config, signal_config, rng, width, height):
        """
        Initializes the boat.

        Args:
            entity_id (str): Registry id.
            config (dict): CONFIG["boat"]: start position, speed (px/frame), rotation speed,
                arrival threshold, path points as screen fractions and cosmetic parameters.
            signal_config (dict): CONFIG["signals"], for pulse size and duration.
            rng (numpy.random.Generator): Buoyancy phase and water particles.
            width, height (int): Initial screen size.

        Note:
            `position` is where path following has taken the boat. The rendered
            transform adds the buoyancy offset on top of it each frame, so the
            bobbing never feeds back into navigation.
        """
        super().__init__(entity_id, config["name"])
        self.config = config
        self.signal_config = signal_config
        self.rng = rng
        self.speed = config["speed"]
        self.rotation_speed = config["rotation_speed"]
        self.arrival_threshold = config["arrival_threshold"]

        self.width = width
        self.height = height
        start = config["start_position"]
        self.position = np.array([width * start["x"], height * start["y"]], dtype=float)
        self.velocity = np.zeros(2)
        self.heading = 0.0
        self.waypoints = self._scaled_waypoints(width, height)
        self.current_waypoint = 0

        self.buoyancy_amplitude = height * config["buoyancy_amplitude"]
        self.buoyancy_frequency = config["buoyancy_frequency"]
        self.buoyancy_phase = float(rng.random() * math.pi * 2)
        self.bob_offset = 0.0
        self.roll = 0.0

        self.is_receiving_signal = False
        self.signal_timer = 0.0
        self.pulse_timer = 0.0
        self.signals_received = 0

        self.particles = []
        self.particle_timer = 0.0

        self.transform = Transform(self.position[0], self.position[1], 1.0, 0.0)

    def _scaled_waypoints(self, width, height):
        return [np.array([width * p["x"], height * p["y"]], dtype=float) for p in self.config["path_points"]]

    # ------------------------------------------------------------------
    # Per-frame update
    # ------------------------------------------------------------------
    def update(self, delta, world):
        if not self.focused:
            self.follow_path(delta)
            self.apply_wind(delta, world.weather)
            self.apply_buoyancy(world.elapsed_time)
            self.sync_transform()
        self.update_water_particles(delta)
        self.update_signal_effects(delta, world)

    def follow_path(self, delta):
        """
        Moves toward the current waypoint, or advances to the next one if close enough.

        Parameters:
            delta (float): Frames elapsed.

        Returns:
            bool: True if the waypoint index advanced this tick.

        Note:
            At most one waypoint is consumed per call, however large delta is.
        """
        target = self.waypoints[self.current_waypoint]
        to_target = target - self.position
        distance = float(np.linalg.norm(to_target))

        if distance < self.arrival_threshold:
            self.current_waypoint = (self.current_waypoint + 1) % len(self.waypoints)
            return True

        direction = to_target / distance
        self.position = self.position + direction * self.speed * delta
        self.velocity = direction * self.speed

        target_heading = math.atan2(direction[1], direction[0])
        self.heading += normalize_angle(target_heading - self.heading) * self.rotation_speed * delta
        return False

    def apply_wind(self, delta, weather):
        if weather.wind_intensity <= 0:
            return
        drift = np.array([math.cos(weather.wind_direction), math.sin(weather.wind_direction)])
        self.position = self.position + drift * weather.wind_intensity * 0.01 * delta

    def buoyancy_at(self, elapsed_time):
        """Returns (vertical offset, roll) for a given world time."""
        t = elapsed_time * self.buoyancy_frequency + self.buoyancy_phase
        offset = math.sin(t) * self.buoyancy_amplitude + math.sin(t * 1.5) * self.buoyancy_amplitude * 0.3
        roll = math.sin(t * 1.2) * 0.03
        return offset, roll

    def apply_buoyancy(self, elapsed_time):
        self.bob_offset, self.roll = self.buoyancy_at(elapsed_time)

    def sync_transform(self):
        self.transform.x = float(self.position[0])
        self.transform.y = float(self.position[1]) + self.bob_offset
        self.transform.rotation = self.heading

    def get_velocity_vector(self):
        return self.velocity.copy()

    def receiver_point(self):
        t = self.transform
        return (t.x, t.y + self.config["receiver_offset"] * t.scale)

    # ------------------------------------------------------------------
    # Signal reception
    # ------------------------------------------------------------------
    def receive_signal(self, world):
        """Called when a lighthouse signal reaches the boat."""
        self.is_receiving_signal = True
        self.signal_timer = 0.0
        self.signals_received += 1
        self.create_signal_pulse(world)

    def create_signal_pulse(self, world):
        return world.add_signal(PulseSignal(
            self.receiver_point(),
            color=self.signal_config["pulse_color"],
            duration=self.signal_config["pulse_duration"],
            max_radius=self.signal_config["pulse_max_radius"],
            source_id=self.entity_id,
        ))

    def update_signal_effects(self, delta, world):
        if not self.is_receiving_signal:
            return
        self.signal_timer += delta
        self.pulse_timer += delta
        if self.pulse_timer > PULSE_INTERVAL:
            self.pulse_timer = 0.0
            self.create_signal_pulse(world)
        if self.signal_timer > RECEPTION_TIMEOUT:
            self.is_receiving_signal = False

    # ------------------------------------------------------------------
    # Water particles (cosmetic)
    # ------------------------------------------------------------------
    def update_water_particles(self, delta):
        self.particles = [p for p in self.particles if not p.update(delta)]
        self.particle_timer -= delta
        if self.particle_timer <= 0 and len(self.particles) < self.config["max_particles"]:
            self.particle_timer = 5 + self.rng.random() * 5
            self.create_water_particle()

    def create_water_particle(self):
        angle = self.rng.random() * math.pi * 2
        distance = 5 + self.rng.random() * 15
        speed = 0.1 + self.rng.random() * 0.2
        heading = self.heading - math.pi + (self.rng.random() - 0.5)
        colors = [(58, 142, 212), (70, 130, 180), (30, 144, 255)]
        self.particles.append(WaterParticle(
            self.transform.x + math.cos(angle) * distance,
            self.transform.y + math.sin(angle) * distance,
            math.cos(heading) * speed,
            math.sin(heading) * speed,
            3 + self.rng.random() * 5,
            colors[int(self.rng.integers(0, len(colors)))],
            30 + self.rng.random() * 60,
        ))

    # ------------------------------------------------------------------
    # Layout and focus
    # ------------------------------------------------------------------
    def resize(self, width, height):
        # A minimised window reports 0x0; keep the last real layout.
        if width <= 0 or height <= 0:
            return
        if self.width > 0 and self.height > 0:
            self.position = self.position * np.array([width / self.width, height / self.height])
        self.width = width
        self.height = height
        self.waypoints = self._scaled_waypoints(width, height)
        self.buoyancy_amplitude = height * self.config["buoyancy_amplitude"]
        if not self.focused:
            self.sync_transform()

    def focal_transform(self, width, height, origin, lift=50):
        # Level the hull for easier viewing.
        return Transform(width / 2, height / 2 - lift, 2.0, 0.0)

    def hit_radius(self):
        return self.width * self.config["width_fraction"] * 0.5 * self.transform.scale

    # ------------------------------------------------------------------
    # Detail view
    # ------------------------------------------------------------------
    def create_detail_view(self):
        frames = np.arange(0, 600, 5, dtype=float)
        t = frames * self.buoyancy_frequency + self.buoyancy_phase
        offsets = np.sin(t) * self.buoyancy_amplitude + np.sin(t * 1.5) * self.buoyancy_amplitude * 0.3
        components = [
            PanelComponent("Antenna", -60, -30, 5, 60, (0, 0, 255)),
            PanelComponent("Receiver", -20, -10, 40, 20, (0, 255, 0)),
            PanelComponent("Processor", 30, -10, 30, 30, (255, 0, 0)),
            PanelComponent("Display", 70, -10, 25, 20, (255, 255, 0)),
        ]
        return DetailPanel(
            self.name,
            "Signal Receiver System",
            components,
            "This research vessel contains a signal receiver system\n"
            "that processes timing signals from coastal lighthouses.",
            chart=("Heave (px)", frames, offsets),
            chart_title=f"Buoyancy ({self.signals_received} signals received)",
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def draw(self, screen, world):
        for p in self.particles:
            draw_alpha_circle(screen, p.color, (p.x, p.y), p.size, 0.6 * p.alpha * self.alpha)

        hull_width = self.width * self.config["width_fraction"]
        texture = AssetCache.get_texture("boat_texture")
        if texture is not None:
            scale = hull_width / max(1, texture.get_width())
            sprite = pygame.transform.rotozoom(texture, -math.degrees(self.roll), scale)
        else:
            sprite = self._placeholder_surface(hull_width)
        blit_transformed(screen, sprite, self.transform, anchor=(0.5, 0.75), alpha=self.alpha)

        if self.is_receiving_signal:
            halo_alpha = 0.5 + math.sin(self.signal_timer * 0.2) * 0.3
            draw_alpha_circle(screen, (255, 255, 255), self.receiver_point(), 10 * self.transform.scale,
                              0.2 * halo_alpha * self.alpha)

    @staticmethod
    def _placeholder_surface(boat_width):
        boat_width = max(8.0, boat_width)
        boat_height = boat_width * 0.6
        surface = pygame.Surface((int(boat_width) + 2, int(boat_height * 1.2) + 2), pygame.SRCALPHA)
        w = boat_width
        base = surface.get_height() - 2
        hull = [(0, base), (w * 0.15, base - boat_height / 3), (w * 0.85, base - boat_height / 3), (w, base)]
        pygame.draw.polygon(surface, (235, 94, 40), hull)
        pygame.draw.rect(surface, (242, 232, 220),
                         pygame.Rect(w / 6, base - boat_height / 3 - boat_height / 2, w * 2 / 3, boat_height / 2))
        window = w * 0.06
        for i in range(3):
            pygame.draw.rect(surface, (135, 206, 235),
                             pygame.Rect(w / 4 + i * w * 0.1, base - boat_height / 3 - boat_height / 4, window, window))
        return surface
