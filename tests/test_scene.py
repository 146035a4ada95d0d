"""Smoke tests for the pygame screens on a headless display."""

import pygame
import pytest

from signals import PulseSignal
from states.loading import LoadingState
from states.scene import SceneState
from view_transition import ENTERING_FOCUS, EXITING_FOCUS, NORMAL


@pytest.fixture
def screen():
    pygame.init()
    surface = pygame.display.set_mode((800, 600))
    yield surface
    pygame.quit()


@pytest.fixture
def scene(screen, driver):
    return SceneState(screen, driver)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_click_selects_entity_and_escape_goes_back(scene, world):
    lighthouse = world.get_entity("lighthouse-1")
    t = lighthouse.transform
    scene.handle_events([click((int(t.x), int(t.y - 35)))])
    assert world.focused_entity_id == "lighthouse-1"
    assert scene.driver.coordinator.state == ENTERING_FOCUS

    scene.handle_events([key(pygame.K_ESCAPE)])
    assert scene.driver.coordinator.state == EXITING_FOCUS


def test_back_button_while_zoomed(scene, world):
    scene.driver.select("boat")
    for _ in range(90):
        scene.update(1 / 60)
    scene.handle_events([click(scene.btn_back.center)])
    assert scene.driver.coordinator.state == EXITING_FOCUS


def test_click_on_empty_water_does_nothing(scene, world):
    scene.handle_events([click((790, 590))])
    assert not world.is_zoomed
    assert scene.driver.coordinator.state == NORMAL


def test_keyboard_toggles(scene, world):
    scene.handle_events([key(pygame.K_d)])
    assert world.debug
    scene.handle_events([key(pygame.K_t)])
    assert not world.is_day


def test_update_caps_stalled_frames(scene, world):
    scene.update(5.0)
    assert world.elapsed_time == pytest.approx(0.25 * 60)


def test_render_all_views(scene, screen, world):
    world.debug = True
    world.weather.is_raining = True
    scene.update(1 / 60)
    scene.render(screen)

    scene.driver.select("lighthouse-0")
    for _ in range(100):
        scene.update(1 / 60)
    scene.render(screen)
    assert scene.driver.coordinator.panel.chart_surface is not None

    scene.driver.toggle_day_night()
    scene.render(screen)


def test_resize_event(scene, world):
    scene.handle_events([pygame.event.Event(pygame.VIDEORESIZE, w=1024, h=768, size=(1024, 768))])
    assert (world.width, world.height) == (1024, 768)


def test_loading_hands_over_to_scene(screen):
    state = LoadingState(screen)
    next_state = None
    for _ in range(20):
        state.update(1 / 60)
        state.render(screen)
        next_state = state.get_next_state()
        if next_state is not None:
            break
    assert isinstance(next_state, SceneState)


def test_signals_drawn_with_layer_alpha(scene, screen, world):
    drawn = []

    class RecordingPulse(PulseSignal):
        def draw(self, screen, layer_alpha=1.0):
            drawn.append(layer_alpha)

    world.add_signal(RecordingPulse((100, 100)))
    world.signal_layer.alpha = 0.2
    scene.render(screen)
    assert drawn == [0.2]
