"""Tests for the boat's navigation, buoyancy and signal reception."""

import copy
import math

import numpy as np
import pytest

from boat import PULSE_INTERVAL, RECEPTION_TIMEOUT, Boat, normalize_angle
from signals import PulseSignal
from world import WorldState


@pytest.fixture
def boat(quiet_config, rng):
    return Boat("boat", quiet_config["boat"], quiet_config["signals"], rng, 800, 600)


@pytest.fixture
def bare_world(quiet_config, boat):
    world = WorldState(800, 600, quiet_config)
    world.entities["boat"] = boat
    return world


@pytest.mark.parametrize("angle,expected", [
    (0.0, 0.0),
    (math.pi, math.pi),
    (-math.pi, math.pi),
    (3 * math.pi, math.pi),
    (2 * math.pi + 0.5, 0.5),
    (-2 * math.pi - 0.5, -0.5),
])
def test_normalize_angle(angle, expected):
    assert normalize_angle(angle) == pytest.approx(expected)


def test_starts_on_first_waypoint_and_advances(boat):
    assert boat.current_waypoint == 0
    assert boat.follow_path(1.0)
    assert boat.current_waypoint == 1


def test_moves_toward_waypoint_at_speed(boat):
    boat.follow_path(1.0)
    start = boat.position.copy()
    assert not boat.follow_path(2.0)
    assert np.linalg.norm(boat.position - start) == pytest.approx(boat.speed * 2.0)


def test_at_most_one_waypoint_per_tick(boat):
    count = len(boat.waypoints)
    previous = boat.current_waypoint
    for delta in [1.0, 1000.0, 5000.0, 0.5, 250.0] * 20:
        boat.follow_path(delta)
        assert 0 <= boat.current_waypoint < count
        assert (boat.current_waypoint - previous) % count in (0, 1)
        previous = boat.current_waypoint


def test_route_is_cyclic(boat):
    count = len(boat.waypoints)
    visited = []
    for _ in range(20000):
        if boat.follow_path(1.0):
            visited.append(boat.current_waypoint)
        if len(visited) == count + 1:
            break
    assert visited == list(range(1, count)) + [0, 1]


def test_heading_eases_toward_travel_direction(quiet_config, rng):
    config = copy.deepcopy(quiet_config["boat"])
    config["start_position"] = {"x": 0.5, "y": 0.5}
    config["path_points"] = [{"x": 0.1, "y": 0.5}, {"x": 0.9, "y": 0.5}]
    boat = Boat("boat", config, quiet_config["signals"], rng, 800, 600)

    boat.follow_path(1.0)
    # Target is due west; heading starts east, so it turns by pi * rotation_speed.
    assert boat.heading == pytest.approx(math.pi * boat.rotation_speed)


def test_bobbing_only_moves_the_rendered_transform(boat, bare_world):
    bare_world.elapsed_time = 37.0
    boat.update(1.0, bare_world)
    offset, _ = boat.buoyancy_at(37.0)
    assert boat.transform.y == pytest.approx(boat.position[1] + offset)
    assert boat.transform.x == pytest.approx(boat.position[0])
    assert abs(offset) <= boat.buoyancy_amplitude * 1.3 + 1e-9


def test_focused_boat_holds_still(boat, bare_world):
    boat.update(1.0, bare_world)
    boat.on_focus_enter()
    position = boat.position.copy()
    transform = boat.transform.copy()
    for _ in range(30):
        bare_world.elapsed_time += 1.0
        boat.update(1.0, bare_world)
    assert np.array_equal(boat.position, position)
    assert boat.transform == transform


def test_wind_drifts_position(boat, bare_world):
    boat.follow_path(1.0)  # consume the starting waypoint
    bare_world.weather.wind_intensity = 2.0
    bare_world.weather.wind_direction = math.pi / 2
    before = boat.position.copy()
    boat.apply_wind(1.0, bare_world.weather)
    assert boat.position[1] - before[1] == pytest.approx(0.02)
    assert boat.position[0] == pytest.approx(before[0])


def test_reception_pulses_then_times_out(boat, bare_world):
    boat.receive_signal(bare_world)
    assert boat.is_receiving_signal
    assert boat.signals_received == 1
    assert len(bare_world.active_signals) == 1
    assert isinstance(bare_world.active_signals[0], PulseSignal)

    for _ in range(PULSE_INTERVAL + 1):
        boat.update_signal_effects(1.0, bare_world)
    assert len(bare_world.active_signals) == 2

    for _ in range(RECEPTION_TIMEOUT):
        boat.update_signal_effects(1.0, bare_world)
    assert not boat.is_receiving_signal


def test_particle_count_is_capped(boat):
    for _ in range(2000):
        boat.update_water_particles(1.0)
        assert len(boat.particles) <= boat.config["max_particles"]


def test_resize_is_idempotent(boat):
    boat.follow_path(1.0)
    boat.follow_path(10.0)
    boat.resize(1200, 900)
    first = (boat.position.copy(), boat.transform.copy())
    boat.resize(1200, 900)
    assert np.allclose(boat.position, first[0])
    assert boat.transform == first[1]
    assert list(boat.waypoints[0]) == pytest.approx([600.0, 360.0])


def test_focal_transform_levels_the_hull(boat):
    boat.transform.rotation = 1.2
    focal = boat.focal_transform(800, 600, boat.transform.copy(), lift=50)
    assert (focal.x, focal.y, focal.scale, focal.rotation) == (400, 250, 2.0, 0.0)


def test_detail_view(boat):
    panel = boat.create_detail_view()
    assert panel.title == "Research Vessel"
    assert panel.subsystem == "Signal Receiver System"
    assert [c.name for c in panel.components] == ["Antenna", "Receiver", "Processor", "Display"]
    label, xs, ys = panel.chart
    assert len(xs) == len(ys)


def test_zero_size_resize_keeps_layout(boat):
    position = boat.position.copy()
    boat.resize(0, 0)
    boat.resize(800, 600)
    assert np.allclose(boat.position, position)
    assert boat.width == 800
