# world.py
"""
World State Module

This module defines the single shared mutable record that the frame driver
advances every tick, along with the small value types that travel with it:
transforms, weather, the focus transition captured when the user zooms into an
entity, and the start-of-tick snapshot used for cross-entity reads.
"""

import logging
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)


@dataclass
class Transform:
    """Position, uniform scale and rotation (radians) of an entity's visual."""
    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    rotation: float = 0.0

    def copy(self):
        return replace(self)

    def as_dict(self):
        return {"x": self.x, "y": self.y, "scale": self.scale, "rotation": self.rotation}

    def apply(self, values):
        """Sets any of x, y, scale, rotation present in the given mapping."""
        for key, value in values.items():
            setattr(self, key, value)


@dataclass
class Weather:
    wind_intensity: float = 0.0
    wind_direction: float = 0.0
    is_raining: bool = False
    rain_timer: float = 0.0


@dataclass(frozen=True)
class FocusTransition:
    """Pre-zoom transform of the focused entity, restored exactly on exit."""
    entity_id: str
    transform: Transform


@dataclass
class VisualLayer:
    """A group of visuals faded as one, such as the in-flight signals."""
    name: str
    alpha: float = 1.0


@dataclass(frozen=True)
class TickSnapshot:
    """Cross-entity values as of the start of a tick."""
    boat_receiver: tuple = None


class WorldState:
    def __init__(self, width, height, config):
        """
        Initializes the world.

        Parameters:
            width, height (int): Current screen size in pixels.
            config (dict): The scene configuration (see config.CONFIG).

        The entity registry starts empty; the frame driver fills it once the
        map, lighthouses and boat have been built.
        """
        self.width = width
        self.height = height
        self.config = config

        self.elapsed_time = 0.0
        self.is_day = True
        self.day_phase = 0.0
        self.weather = Weather()
        self.debug = False

        self.is_zoomed = False
        self.focused_entity_id = None

        self.entities = {"map": None, "boat": None, "lighthouses": []}
        self.sky = None
        self.active_signals = []
        self.signal_layer = VisualLayer("signals")
        self.tick_snapshot = TickSnapshot()

    # ------------------------------------------------------------------
    # Entity registry
    # ------------------------------------------------------------------
    @property
    def boat(self):
        return self.entities["boat"]

    @property
    def lighthouses(self):
        return self.entities["lighthouses"]

    @property
    def coast_map(self):
        return self.entities["map"]

    def focusable_entities(self):
        """Returns every entity that can be selected, lighthouses first."""
        found = list(self.lighthouses)
        if self.boat is not None:
            found.append(self.boat)
        return found

    def visuals(self):
        """Everything with an alpha that fades when another entity takes focus."""
        found = [v for v in (self.sky, self.coast_map) if v is not None]
        found.extend(self.focusable_entities())
        found.append(self.signal_layer)
        return found

    def get_entity(self, entity_id):
        for entity in self.focusable_entities():
            if entity.entity_id == entity_id:
                return entity
        return None

    # ------------------------------------------------------------------
    # Zoom mode
    # ------------------------------------------------------------------
    def focus(self, entity_id):
        """Enters zoom mode on the given entity. Both flags change together."""
        if entity_id is None:
            raise ValueError("cannot focus without an entity id")
        self.focused_entity_id = entity_id
        self.is_zoomed = True

    def clear_focus(self):
        self.focused_entity_id = None
        self.is_zoomed = False

    # ------------------------------------------------------------------
    # Signals
    # ------------------------------------------------------------------
    def add_signal(self, signal):
        if signal is not None:
            self.active_signals.append(signal)
        return signal

    def take_snapshot(self):
        """Records the values other entities may read during this tick."""
        boat = self.boat
        receiver = boat.receiver_point() if boat is not None else None
        self.tick_snapshot = TickSnapshot(boat_receiver=receiver)
        return self.tick_snapshot

    def entity_count(self):
        return len(self.focusable_entities()) + len(self.active_signals)
