# frame_driver.py
"""
Frame Driver Module

Builds the scene and advances it one frame at a time. Each tick runs in a
fixed order: map, lighthouses, boat, signals, day/night, then the view
transition tweens. Cross-entity reads (where the lighthouses aim) use the
snapshot taken at the start of the tick.

The driver is also where input lands: selections, back-actions, toggles and
window resizes all arrive here as plain method calls.
"""

import logging

import numpy as np

from boat import Boat
from coast_map import CoastMap
from day_night import DayNightCycle
from lighthouse import Lighthouse
from signals import DIRECTIONAL
from view_transition import ViewTransitionCoordinator
from world import WorldState

logger = logging.getLogger(__name__)


class FrameDriver:
    def __init__(self, world, day_night, coordinator, rng, spawn_chance):
        """
        Parameters:
            world (WorldState): The populated world.
            day_night (DayNightCycle): Sky and phase.
            coordinator (ViewTransitionCoordinator): Detail-view transitions.
            rng (numpy.random.Generator): Source of all per-frame random draws.
            spawn_chance (float): Probability per frame of an ambient lighthouse signal.
        """
        self.world = world
        self.day_night = day_night
        self.coordinator = coordinator
        self.rng = rng
        self.spawn_chance = spawn_chance

    @classmethod
    def create(cls, config, width, height, rng=None):
        """
        Builds the world and every animator from the configuration.

        Parameters:
            config (dict): The scene configuration (see config.CONFIG).
            width, height (int): Screen size in pixels.
            rng (numpy.random.Generator): Optional seeded generator; a fresh one is used otherwise.

        Returns:
            FrameDriver: Ready to tick.
        """
        if rng is None:
            rng = np.random.default_rng()
        world = WorldState(width, height, config)

        logger.info("Creating map...")
        world.entities["map"] = CoastMap(width, height, config["map"], rng)

        logger.info("Creating lighthouses...")
        lh_config = config["lighthouse"]
        for index, pos in enumerate(lh_config["positions"]):
            world.entities["lighthouses"].append(Lighthouse(
                f"lighthouse-{index}",
                pos["name"],
                pos["x"],
                pos["y"],
                lh_config["colors"][index % len(lh_config["colors"])],
                lh_config,
                config["signals"],
                rng,
                width,
                height,
            ))

        logger.info("Creating boat...")
        world.entities["boat"] = Boat("boat", config["boat"], config["signals"], rng, width, height)

        logger.info("Initializing day/night cycle...")
        day_night = DayNightCycle(width, height, config["day_night"], rng)
        world.sky = day_night
        day_night.update(0, world)

        coordinator = ViewTransitionCoordinator(world, config["ui"])
        return cls(world, day_night, coordinator, rng, config["signals"]["spawn_chance"])

    # ------------------------------------------------------------------
    # Per-frame update
    # ------------------------------------------------------------------
    def tick(self, delta):
        """
        Advances the scene by delta frames.

        Parameters:
            delta (float): Frames elapsed since the previous tick (1.0 at a steady 60 FPS).
        """
        world = self.world
        world.elapsed_time += delta
        world.take_snapshot()

        if world.coast_map is not None:
            world.coast_map.update(delta, world)
        for lighthouse in world.lighthouses:
            lighthouse.update(delta, world)
        if world.boat is not None:
            world.boat.update(delta, world)
        self.update_signals(delta)
        self.day_night.update(delta, world)
        self.coordinator.update(delta)

    def update_signals(self, delta):
        """
        Advances every active signal, removing completed ones on the same tick,
        then rolls for an ambient signal from a random lighthouse.
        """
        world = self.world
        in_flight = world.active_signals
        world.active_signals = []
        for signal in in_flight:
            if signal.update(delta):
                signal.release()
                if signal.kind == DIRECTIONAL and world.boat is not None:
                    world.boat.receive_signal(world)
            else:
                world.active_signals.append(signal)

        if not world.is_zoomed and world.lighthouses and self.rng.random() < self.spawn_chance:
            lighthouse = world.lighthouses[int(self.rng.integers(0, len(world.lighthouses)))]
            world.add_signal(lighthouse.create_signal(world.tick_snapshot.boat_receiver))

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def select(self, entity_id):
        return self.coordinator.select(entity_id)

    def back(self):
        return self.coordinator.back()

    def toggle_debug(self):
        self.world.debug = not self.world.debug
        logger.info("Debug mode: %s", "on" if self.world.debug else "off")

    def toggle_day_night(self):
        self.day_night.toggle(self.world)

    def resize(self, width, height):
        """Re-lays out every visual for a new screen size. Safe at any time, including mid-transition."""
        world = self.world
        world.width = width
        world.height = height
        if world.coast_map is not None:
            world.coast_map.resize(width, height)
        for entity in world.focusable_entities():
            entity.resize(width, height)
        self.day_night.resize(width, height)
        self.coordinator.resize(width, height)
