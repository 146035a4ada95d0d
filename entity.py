# entity.py
"""
Entity Module

Defines the capability set shared by every selectable scene entity (the
lighthouses and the boat): per-frame update, resize, detail view, focus hooks,
hit testing and drawing. The world and the view-transition coordinator only
ever talk to entities through this interface.
"""

import math
from abc import ABC, abstractmethod
from collections import namedtuple

from world import Transform

PanelComponent = namedtuple("PanelComponent", "name x y width height color")


class DetailPanel:
    def __init__(self, title, subsystem, components, description, chart=None, chart_title=""):
        """
        Content of the panel shown while an entity is focused.

        Parameters:
            title (str): Entity name.
            subsystem (str): Label under the schematic box.
            components (list): PanelComponent blocks, positioned relative to the schematic centre.
            description (str): Text lines separated by newlines.
            chart (tuple): Optional (label, xs, ys) series drawn with matplotlib.
            chart_title (str): Title of the chart.
        """
        self.title = title
        self.subsystem = subsystem
        self.components = components
        self.description = description
        self.chart = chart
        self.chart_title = chart_title
        self.chart_surface = None  # Rendered lazily on first draw.
        self.size = (400, 360)
        self.alpha = 0.0


class Entity(ABC):
    """Base class for lighthouses and the boat."""

    def __init__(self, entity_id, name):
        self.entity_id = entity_id
        self.name = name
        self.transform = Transform()
        self.alpha = 1.0
        self.focused = False

    @abstractmethod
    def update(self, delta, world):
        """Advances the entity's own animation. May append to world.active_signals."""

    @abstractmethod
    def resize(self, width, height):
        """Recomputes screen-fraction positions. Idempotent."""

    @abstractmethod
    def create_detail_view(self):
        """Returns the DetailPanel shown while this entity is focused."""

    @abstractmethod
    def draw(self, screen, world):
        """Renders the entity onto a pygame surface."""

    def on_focus_enter(self):
        self.focused = True

    def on_focus_exit(self):
        self.focused = False

    def focal_transform(self, width, height, origin, lift=50):
        """
        Transform this entity animates to when focused.

        Parameters:
            width, height (int): Screen size.
            origin (Transform): The pre-zoom transform captured at selection.
            lift (float): Pixels above the screen centre.
        """
        return Transform(width / 2, height / 2 - lift, origin.scale * 2, origin.rotation)

    def hit_radius(self):
        return 30 * self.transform.scale

    def contains(self, point):
        """Hit test used by the input layer to turn clicks into selections."""
        return math.hypot(point[0] - self.transform.x, point[1] - self.transform.y) <= self.hit_radius()

    def __repr__(self):
        return f"{self.__class__.__name__}({self.entity_id!r})"
