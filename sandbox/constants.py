#!/usr/bin/env python3
"""
Shared constants for Gravity Sandbox (world units, simulation seconds).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Physics
G = 100.0  # force scale for the softened 1/r law
DT = 0.01  # seconds of simulation time per tick
SET_LENGTH_EPSILON = 1e-5  # vectors shorter than this have no direction

# Bodies
INITIAL_MASS = 1.0  # mass while a body is still being configured
MIN_MASS = 10.0
TRAIL_MAX_POINTS = 20
TRAIL_SPACING = 10.0  # world units between recorded trail points
HUE_DRIFT_PERIOD = 10.0  # hue advances dt / HUE_DRIFT_PERIOD per step

# Camera
ZOOM_FACTOR = 1.1

# Rendering (viewport)
VIEW_WIDTH = 1920
VIEW_HEIGHT = 1080
TARGET_FPS = 60
MAX_TICKS_PER_FRAME = 50  # backlog beyond this is dropped
BACKGROUND_COLOR = (238, 238, 238)
OUTLINE_COLOR = (0, 0, 0)
HUD_TEXT_COLOR = (40, 40, 40)
PAN_SPEED_KEYS = 600  # pixels per second

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
