#!/usr/bin/env python3
"""
Pointer-driven body construction.

A body is built with three presses:
1. press places a body (zero velocity, mass 1, random hue) and shows it right away;
2. moving sets its velocity to (pointer - position), the next press locks it;
3. moving sets its mass to max(r^2, MIN_MASS) with r the pointer distance, the
   third press finalizes it and the world is re-sorted by mass, heaviest first.

The machine remembers the body under construction by its index in the world's
body list. The index is only meaningful while creation_step is 1 or 2.
"""
import logging
import random
from typing import Optional, Tuple

from .camera import ViewTransform
from .constants import INITIAL_MASS, MIN_MASS
from .data_models import Body, World
from .vector_utils import ZERO, Vec2

logger = logging.getLogger("gravity_sandbox.interaction")

IDLE = 0
SETTING_VELOCITY = 1
SETTING_MASS = 2


def mass_for_radius(r: float) -> float:
    return max(r * r, MIN_MASS)


class InteractionFSM:
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.creation_step = IDLE
        self.current_index: Optional[int] = None

    @property
    def building(self) -> bool:
        return self.creation_step != IDLE

    def reset(self) -> None:
        self.creation_step = IDLE
        self.current_index = None

    def current_body(self, world: World) -> Optional[Body]:
        """The body under construction, or None when idle."""
        if self.current_index is None:
            return None
        if not 0 <= self.current_index < len(world.bodies):
            logger.warning("stale body index %s (world has %d bodies), abandoning construction",
                           self.current_index, len(world.bodies))
            self.reset()
            return None
        return world.bodies[self.current_index]

    def on_press(self, world: World, view: ViewTransform, screen: Tuple[float, float]) -> None:
        point = view.screen_to_world(screen)

        if self.creation_step == IDLE:
            body = Body(position=point, velocity=ZERO, mass=INITIAL_MASS, hue=self.rng.random())
            self.current_index = world.add(body)
            self.creation_step = SETTING_VELOCITY
            logger.debug("body placed at (%.2f, %.2f)", point.x, point.y)
            return

        body = self.current_body(world)
        if body is None:
            return

        if self.creation_step == SETTING_VELOCITY:
            body.velocity = point - body.position
            self.creation_step = SETTING_MASS
        elif self.creation_step == SETTING_MASS:
            body.mass = mass_for_radius(point.distance_to(body.position))
            world.sort_by_mass()
            logger.debug("body finalized: mass %.2f, velocity (%.2f, %.2f)",
                         body.mass, body.velocity.x, body.velocity.y)
            self.reset()

    def on_move(self, world: World, view: ViewTransform, screen: Tuple[float, float]) -> None:
        if self.creation_step == IDLE:
            return
        body = self.current_body(world)
        if body is None:
            return
        point = view.screen_to_world(screen)
        if self.creation_step == SETTING_VELOCITY:
            body.velocity = point - body.position
        elif self.creation_step == SETTING_MASS:
            body.mass = mass_for_radius(point.distance_to(body.position))
