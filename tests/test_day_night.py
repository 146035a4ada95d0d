"""Tests for the day/night cycle."""

import copy

import pygame
import pytest

from assets import AssetCache
from day_night import DayNightCycle, lerp_color
from world import WorldState


@pytest.fixture
def short_config(quiet_config):
    config = copy.deepcopy(quiet_config["day_night"])
    config["day_duration"] = 600
    config["night_duration"] = 200
    config["transition_duration"] = 60
    return config


@pytest.fixture
def cycle_world(quiet_config, short_config, rng):
    world = WorldState(800, 600, quiet_config)
    cycle = DayNightCycle(800, 600, short_config, rng)
    world.sky = cycle
    cycle.update(0, world)
    return cycle, world


def advance(cycle, world, ticks, delta=1.0):
    for _ in range(ticks):
        world.elapsed_time += delta
        cycle.update(delta, world)


def test_phase_wraps(cycle_world):
    cycle, _ = cycle_world
    assert cycle.phase_at(0) == 0.0
    assert cycle.phase_at(400) == pytest.approx(0.5)
    assert cycle.phase_at(800) == 0.0
    assert cycle.phase_at(1000) == pytest.approx(0.25)


def test_full_sweep_flips_twice_with_continuous_overlay(cycle_world, short_config):
    cycle, world = cycle_world
    assert world.is_day
    flips = 0
    was_day = world.is_day
    previous_alpha = cycle.overlay_alpha
    largest_jump = 0.0
    for _ in range(801):
        advance(cycle, world, 1)
        if world.is_day != was_day:
            flips += 1
            was_day = world.is_day
        largest_jump = max(largest_jump, abs(cycle.overlay_alpha - previous_alpha))
        previous_alpha = cycle.overlay_alpha
        assert 0.0 <= world.day_phase < 1.0

    assert flips == 2
    assert world.is_day
    bound = short_config["night_alpha"] / short_config["transition_duration"]
    assert largest_jump <= bound + 1e-9


def test_overlay_levels(cycle_world, short_config):
    cycle, _ = cycle_world
    night_alpha = short_config["night_alpha"]
    assert cycle.sky_overlay(0.4)[0] == 0.0
    assert cycle.sky_overlay(0.8)[0] == night_alpha
    assert cycle.sky_overlay(0.99)[0] == night_alpha
    assert 0.0 < cycle.sky_overlay(0.01)[0] < night_alpha


def test_night_turns_on_stars_and_reflection(quiet_config, short_config, rng):
    from coast_map import CoastMap
    world = WorldState(800, 600, quiet_config)
    world.entities["map"] = CoastMap(800, 600, quiet_config["map"], rng)
    cycle = DayNightCycle(800, 600, short_config, rng)
    cycle.update(0, world)
    assert cycle.star_alpha == 0.0
    assert world.coast_map.water.reflection_intensity == 0.2

    advance(cycle, world, 650)
    assert not world.is_day
    assert cycle.star_alpha == short_config["star_alpha"]
    assert world.coast_map.water.reflection_intensity == 0.5


def test_sun_and_moon_are_opposite(cycle_world):
    cycle, _ = cycle_world
    for phase in (0.0, 0.2, 0.55, 0.9):
        cycle.update_celestial_bodies(phase, 800, 600)
        sx, sy = cycle.sun_position
        mx, my = cycle.moon_position
        assert sx + mx == pytest.approx(800)
        assert sy + my == pytest.approx(600)


def test_set_phase_keeps_world_clock(cycle_world):
    cycle, world = cycle_world
    world.elapsed_time = 123.0
    cycle.set_phase(world, 0.8)
    assert world.elapsed_time == 123.0
    assert world.day_phase == pytest.approx(0.8)
    assert not world.is_day

    # The cycle carries on from the new phase.
    advance(cycle, world, 80)
    assert world.day_phase == pytest.approx(0.9)


def test_toggle_jumps_to_middle_of_other_half(cycle_world):
    cycle, world = cycle_world
    cycle.toggle(world)
    assert not world.is_day
    assert world.day_phase == pytest.approx(0.875)
    cycle.toggle(world)
    assert world.is_day
    assert world.day_phase == pytest.approx(0.375)


def test_resize_regenerates_stars(cycle_world):
    cycle, _ = cycle_world
    cycle.resize(400, 300)
    assert len(cycle.stars) == (400 * 300) // 2000
    assert all(0 <= s[0] <= 400 and 0 <= s[1] <= 180 for s in cycle.stars)


def test_lerp_color_clamps():
    assert lerp_color((0, 0, 0), (100, 200, 50), 0.5) == (50, 100, 25)
    assert lerp_color((0, 0, 0), (100, 200, 50), 2.0) == (100, 200, 50)


def test_sun_texture_fades_with_sky(cycle_world):
    cycle, world = cycle_world
    sun = pygame.Surface((20, 20))
    sun.fill((255, 255, 255))
    AssetCache.textures["sun_texture"] = sun
    assert cycle.sun_visible

    def lit(alpha):
        cycle.alpha = alpha
        screen = pygame.Surface((800, 600))
        screen.fill((0, 0, 0))
        cycle.draw_sky(screen, world)
        return int(pygame.surfarray.array3d(screen).sum())

    full = lit(1.0)
    assert 0 < lit(0.2) < full
    # The cached texture itself is left untouched.
    assert sun.get_alpha() is None
