#!/usr/bin/env python3
"""
Data models for Gravity Sandbox.

This module defines the Body and World types shared between physics, interaction,
and rendering.

Units and usage
- position is in world units, velocity in world units per simulation second.
- hue is an HSB hue in [0, 1); it drifts with simulation time and wraps.
- trail stores recent positions, oldest first; it is mutated by the integrator.
- Access to Body and World instances is coordinated by SimulationController using a lock.
"""
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List

from .constants import DT, INITIAL_MASS, TRAIL_MAX_POINTS, TRAIL_SPACING
from .vector_utils import Vec2


@dataclass
class Body:
    """
    A gravitating point mass.

    Fields:
    - position: 2D position in world units
    - velocity: 2D velocity in world units per second
    - mass: 1 while the body is being configured, at least MIN_MASS once finalized
    - hue: HSB hue in [0, 1)
    - trail: Deque of recent positions for drawing the color-shifting streak
    """
    position: Vec2
    velocity: Vec2 = Vec2(0.0, 0.0)
    mass: float = INITIAL_MASS
    hue: float = 0.0
    trail: Deque[Vec2] = field(default_factory=lambda: deque(maxlen=TRAIL_MAX_POINTS))

    @property
    def diameter(self) -> float:
        """Drawn diameter in world units."""
        return 2.0 * math.sqrt(self.mass)

    def record_trail(self) -> None:
        """Append the current position if the trail is empty or the body moved far enough."""
        if not self.trail or self.trail[-1].distance_to(self.position) > TRAIL_SPACING:
            self.trail.append(self.position)

    def copy(self) -> "Body":
        return Body(
            position=self.position,
            velocity=self.velocity,
            mass=self.mass,
            hue=self.hue,
            trail=deque(self.trail, maxlen=TRAIL_MAX_POINTS),
        )


@dataclass
class World:
    """Ordered bodies plus the simulation clock."""
    bodies: List[Body] = field(default_factory=list)
    t: float = 0.0
    dt: float = DT

    def __post_init__(self):
        if not self.dt > 0:
            raise ValueError(f"dt must be positive, got {self.dt!r}")

    def __len__(self) -> int:
        return len(self.bodies)

    def add(self, body: Body) -> int:
        """Append a body and return its index."""
        self.bodies.append(body)
        return len(self.bodies) - 1

    def sort_by_mass(self) -> None:
        self.bodies.sort(key=lambda b: b.mass, reverse=True)

    def clear(self) -> None:
        self.bodies.clear()
        self.t = 0.0
