"""Simulation core for Gravity Sandbox: bodies, integrator, view, input and controller."""

from .camera import ViewTransform
from .controller import SimulationController, Snapshot
from .data_models import Body, World
from .interaction import InteractionFSM
from .physics import Integrator, total_momentum
from .render import draw_snapshot, hue_to_rgb, trail_marks
from .timekeeping import FixedStepAccumulator, FrameTimer
from .vector_utils import Vec2

__all__ = [
    "Body",
    "FixedStepAccumulator",
    "FrameTimer",
    "Integrator",
    "InteractionFSM",
    "SimulationController",
    "Snapshot",
    "Vec2",
    "ViewTransform",
    "World",
    "draw_snapshot",
    "hue_to_rgb",
    "total_momentum",
    "trail_marks",
]
