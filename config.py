# config.py
"""
Central Configuration Module

This module defines the constants used throughout the Coastal Signals scene.
Positions are stored as fractions of the screen size so they can be recomputed
on every resize. Durations and rates are expressed in frames at 60 FPS unless
the name says otherwise. Colors are RGB tuples.
"""

# Frame-based timing: one tick of delta 1.0 is one frame at this rate.
FRAMES_PER_SECOND = 60

# Base window resolution (width, height)
BASE_RESOLUTION = (960, 540)

# Color definitions (RGB tuples)
BG_COLOR = (135, 206, 235)        # Sky blue
UI_PANEL_COLOR = (51, 51, 51)     # Dark grey
TEXT_COLOR = (255, 255, 255)

# Default font size used throughout the application
DEFAULT_FONT_SIZE = 28

CONFIG = {
    "renderer": {
        "width": BASE_RESOLUTION[0],
        "height": BASE_RESOLUTION[1],
        "background_color": BG_COLOR,
        "fps": FRAMES_PER_SECOND,
    },

    "day_night": {
        "day_duration": 4 * 60 * 60,         # 4 minutes in frames
        "night_duration": 1 * 60 * 60,       # 1 minute in frames
        "transition_duration": 30 * 60,      # 30 seconds for sunrise/sunset
        "night_alpha": 0.7,                  # Overlay opacity at night
        "star_alpha": 0.8,
        "day_color": (135, 206, 235),
        "night_color": (12, 20, 69),
        "sunrise_color": (255, 153, 51),
        "sunset_color": (255, 99, 71),
    },

    "map": {
        "terrain": {
            "base_color": (82, 123, 88),
            "dark_color": (63, 91, 66),
            "light_color": (107, 154, 115),
            "deep_water_color": (30, 77, 140),
            "mid_water_color": (42, 109, 181),
            "shallow_water_color": (58, 142, 212),
            "road_color": (247, 211, 88),
            "pixel_size": 4,
        },
        "water": {
            "base_color": (30, 144, 255),
            "wave_colors": [(70, 130, 180), (30, 144, 255), (65, 105, 225)],
            "wave_amplitude": 3,
            "wave_speed": 0.02,
            "start_fraction": 0.3,            # Waves only over the sea side
        },
        "weather": {
            "rain_chance": 0.002,             # Chance of rain starting each frame
            "rain_duration": 30 * 60,         # 30 seconds
            "wind_change_chance": 0.001,      # Chance of wind changing each frame
            "max_wind_intensity": 5,
        },
    },

    "lighthouse": {
        "positions": [
            {"x": 0.45, "y": 0.18, "name": "Navodari Lighthouse"},
            {"x": 0.43, "y": 0.60, "name": "Constanta Lighthouse"},
            {"x": 0.38, "y": 0.86, "name": "Agigea Lighthouse"},
        ],
        "colors": [(255, 0, 0), (0, 255, 0), (0, 0, 255)],
        "blink_rate": 60,
        "signal_rate": 120,
        "signal_speed": 0.01,
        "light_offset": -65,                  # Lantern height above the base
    },

    "boat": {
        "name": "Research Vessel",
        "start_position": {"x": 0.5, "y": 0.4},
        "speed": 0.5,
        "rotation_speed": 0.02,
        "arrival_threshold": 3.0,
        "width_fraction": 0.08,               # Hull width relative to screen width
        "receiver_offset": -20,
        "buoyancy_amplitude": 0.005,          # Fraction of screen height
        "buoyancy_frequency": 0.02,
        "max_particles": 20,
        "path_points": [
            {"x": 0.5, "y": 0.4},
            {"x": 0.6, "y": 0.35},
            {"x": 0.7, "y": 0.4},
            {"x": 0.65, "y": 0.5},
            {"x": 0.55, "y": 0.45},
            {"x": 0.4, "y": 0.35},
            {"x": 0.3, "y": 0.4},
            {"x": 0.35, "y": 0.3},
        ],
    },

    "signals": {
        "spawn_chance": 0.01,                 # Ambient lighthouse signal per frame
        "amplitude": 10,
        "frequency": 0.1,
        "segments": 20,
        "pulse_duration": 60,
        "pulse_max_radius": 50,
        "pulse_color": (255, 255, 255),
    },

    "assets": {
        "images": {
            "map_texture": "assets/images/map.png",
            "boat_texture": "assets/images/boat.png",
            "lighthouse_texture": "assets/images/lighthouse.png",
            "sun_texture": "assets/images/sun.png",
            "moon_texture": "assets/images/moon.png",
        },
    },

    "ui": {
        "zoom_duration": 1.0,                 # seconds
        "fade_duration": 0.5,                 # seconds
        "panel_delay": 0.8,                   # seconds
        "faded_alpha": 0.2,
        "focal_lift": 50,                     # Focused entity sits this far above centre
        "back_button": (20, 20, 80, 30),
        "button_color": (51, 51, 51),
        "font_size": 16,
    },
}
