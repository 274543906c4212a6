#!/usr/bin/env python3
"""
Core Physics Engine for Gravity Sandbox

Responsibilities
- Compute pairwise gravitational forces with the sandbox's softened 1/r law.
- Advance body states using semi-implicit (symplectic) Euler.
- Maintain each body's trail and hue drift, and the world clock.
- Provide a small read-only diagnostic (total momentum) for the status line.

Force law
- The force on body a due to body b points from a towards b with magnitude
      |F_ab| = G * m_a * m_b / r
  The denominator is r, not r^2, which keeps nearby bodies from producing runaway
  accelerations. The sum runs over every body including a itself; the self term
  (and any exactly coincident pair) has no direction and contributes zero.

Numerical notes
- All forces are computed from the pre-step positions before any body moves, so
  every body advances against the same snapshot.
- Per body: record trail point, position += v*dt, velocity += (F/m)*dt, hue drifts.
- Complexity: O(N^2) direct summation per step.
- NaN/inf from pathological configurations are not clamped.

Threading
- This module is pure compute and stateless. It is used by a controller that
  guards shared data with a lock.
"""
from typing import List, Sequence

from .constants import G, HUE_DRIFT_PERIOD
from .data_models import Body, World
from .vector_utils import ZERO, Vec2


class Integrator:
    """
    Semi-implicit Euler stepper for the sandbox's n-body world.

    The force law constant is kept on the instance so tests and tools can build
    an integrator with a different coupling; the app always uses G = 100.
    """

    def __init__(self, gravitational_constant: float = G):
        self.gravitational_constant = float(gravitational_constant)

    def pair_force(self, a: Body, b: Body) -> Vec2:
        """Force on ``a`` due to ``b``."""
        offset = b.position - a.position
        r = offset.length()
        if r == 0.0:
            return ZERO
        return offset.set_length(self.gravitational_constant * a.mass * b.mass / r)

    def net_forces(self, bodies: Sequence[Body]) -> List[Vec2]:
        """
        Total force on every body, same order as ``bodies``.

        Reads positions only, so it can be evaluated for the whole population
        before any position is written.
        """
        forces = []
        for a in bodies:
            fx, fy = 0.0, 0.0
            for b in bodies:
                f = self.pair_force(a, b)
                fx += f.x
                fy += f.y
            forces.append(Vec2(fx, fy))
        return forces

    def step(self, world: World) -> None:
        """
        Advance ``world`` by one time step of ``world.dt``.

        Args:
            world: World whose bodies are integrated in place; its clock advances by dt.
        """
        dt = world.dt
        bodies = world.bodies
        forces = self.net_forces(bodies)

        for body, force in zip(bodies, forces):
            body.record_trail()
            body.position = body.position + body.velocity * dt
            body.velocity = body.velocity + force / body.mass * dt
            body.hue = (body.hue + dt / HUE_DRIFT_PERIOD) % 1.0

        world.t += dt


def total_momentum(bodies: Sequence[Body]) -> Vec2:
    """Sum of m * v over all bodies."""
    px, py = 0.0, 0.0
    for b in bodies:
        px += b.mass * b.velocity.x
        py += b.mass * b.velocity.y
    return Vec2(px, py)

