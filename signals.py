# signals.py
"""
Signal Module

Transient signal visuals exchanged between the lighthouses and the boat.

A DirectionalSignal travels from a lighthouse lantern toward the boat's
receiver as a sine-perturbed line; a PulseSignal expands and fades around a
point. Both have a single progress value in [0, 1] and are complete once it
reaches 1. The world's active-signal list owns them until then.
"""

import math
from abc import ABC, abstractmethod

from draw_utils import draw_pulse_ring, draw_sine_wave, sine_wave_points

DIRECTIONAL = "directional"
PULSE = "pulse"

# Guards against float accumulation leaving progress at 0.9999999...
COMPLETION_EPSILON = 1e-9


class Signal(ABC):
    kind = None

    def __init__(self, origin, target, color, speed, source_id=None):
        self.origin = (float(origin[0]), float(origin[1]))
        self.target = None if target is None else (float(target[0]), float(target[1]))
        self.color = color
        self.speed = speed
        self.source_id = source_id
        self.progress = 0.0
        self.released = False

    @property
    def complete(self):
        return self.progress >= 1.0

    def update(self, delta):
        """
        Advances the signal.

        Returns:
            bool: True when the signal has completed.
        """
        if self.complete:
            return True
        self.progress += self.speed * delta
        if self.progress >= 1.0 - COMPLETION_EPSILON:
            self.progress = 1.0
        return self.complete

    def release(self):
        """Drops any cached drawing state. Called once, when the signal is removed."""
        self.released = True

    @abstractmethod
    def draw(self, screen, layer_alpha=1.0):
        """Renders the signal; layer_alpha is the opacity of the whole signal layer."""


class DirectionalSignal(Signal):
    kind = DIRECTIONAL

    def __init__(self, origin, target, color, speed=0.01, amplitude=10, frequency=0.1, segments=20,
                 source_id=None):
        """
        Parameters:
            origin (tuple): Lighthouse lantern position.
            target (tuple): Boat receiver position; required.
            color (tuple): RGB color of the line.
            speed (float): Progress gained per frame.
            amplitude, frequency (float): Sine perturbation of the line.
            segments (int): Polyline resolution.
            source_id (str): Emitting lighthouse.
        """
        if target is None:
            raise ValueError("a directional signal needs a target")
        super().__init__(origin, target, color, speed, source_id)
        self.amplitude = amplitude
        self.frequency = frequency
        self.segments = segments
        dx = self.target[0] - self.origin[0]
        dy = self.target[1] - self.origin[1]
        self.path_length = math.hypot(dx, dy)
        self.angle = math.atan2(dy, dx)

    def points(self):
        return sine_wave_points(self.origin, self.angle, self.path_length * self.progress,
                                self.amplitude, self.frequency, self.segments)

    def draw(self, screen, layer_alpha=1.0):
        if self.released or self.progress <= 0:
            return
        draw_sine_wave(screen, self.color, self.points(), alpha=int(180 * layer_alpha))


class PulseSignal(Signal):
    kind = PULSE

    def __init__(self, origin, color=(255, 255, 255), duration=60, max_radius=50, source_id=None):
        super().__init__(origin, None, color, 1.0 / duration, source_id)
        self.duration = duration
        self.max_radius = max_radius

    @property
    def radius(self):
        return self.max_radius * self.progress

    @property
    def alpha(self):
        return 1.0 - self.progress

    def draw(self, screen, layer_alpha=1.0):
        if self.released:
            return
        draw_pulse_ring(screen, self.color, self.origin, self.radius, self.alpha * layer_alpha)
