#!/usr/bin/env python3
"""
Simulation controller: the shared state between the viewport thread (pygame) and
the controls thread (Dear PyGui).

The controller owns the World and the ViewTransform, forwards pointer input to the
InteractionFSM, advances the world on tick(), and hands out detached snapshots for
drawing. Every public operation runs under one re-entrant lock, so ticks, pointer
events and button callbacks are serialized and a frame never sees a body
mid-update.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from .camera import ViewTransform
from .constants import DT, VIEW_HEIGHT, VIEW_WIDTH
from .data_models import Body, World
from .interaction import InteractionFSM
from .physics import Integrator, total_momentum

logger = logging.getLogger("gravity_sandbox.controller")


@dataclass(frozen=True)
class Snapshot:
    """Everything a frame needs, copied out of the live simulation."""
    bodies: Tuple[Body, ...]
    view: ViewTransform
    t: float
    dt: float
    paused: bool
    creation_step: int

    @property
    def time_text(self) -> str:
        return "t = %.3f" % self.t

    @property
    def status_text(self) -> str:
        """One-line HUD status: clock, body count, total momentum and run state."""
        if self.creation_step != 0:
            state = "Building body"
        elif self.paused:
            state = "Paused"
        else:
            state = "Running"
        p = total_momentum(self.bodies)
        return (f"{self.time_text}  |  bodies: {len(self.bodies)}  |  "
                f"p = ({p.x:.1f}, {p.y:.1f})  |  {state}")


class SimulationController:
    def __init__(self, viewport_size: Tuple[int, int] = (VIEW_WIDTH, VIEW_HEIGHT),
                 dt: float = DT, seed: Optional[int] = None):
        self.lock = threading.RLock()
        self.running = True  # app running
        self.paused = False  # simulation frozen
        self.world = World(dt=dt)
        self.view = ViewTransform(viewport_size)
        self.view.pan_center()
        self.fsm = InteractionFSM(seed)
        self.physics = Integrator()
        self.reset_count = 0  # bumped on every reset so the tick source can drop its backlog

    @property
    def creation_step(self) -> int:
        return self.fsm.creation_step

    # -----------------------
    # Clock
    # -----------------------

    def tick(self) -> bool:
        """Advance one step unless paused or a body is being built. Returns True if it advanced."""
        with self.lock:
            if self.paused or self.fsm.building:
                return False
            self.physics.step(self.world)
            return True

    def step_once(self) -> bool:
        """Advance one step even while paused; still refused during body construction."""
        with self.lock:
            if self.fsm.building:
                return False
            self.physics.step(self.world)
            return True

    def pause(self) -> None:
        with self.lock:
            if not self.paused:
                logger.info("simulation paused at t=%.3f", self.world.t)
            self.paused = True

    def resume(self) -> None:
        with self.lock:
            if self.paused:
                logger.info("simulation resumed at t=%.3f", self.world.t)
            self.paused = False

    def toggle_pause(self) -> bool:
        with self.lock:
            if self.paused:
                self.resume()
            else:
                self.pause()
            return self.paused

    def reset(self) -> None:
        """Drop all bodies, rewind the clock and re-center the view. The paused flag is kept."""
        with self.lock:
            self.world.clear()
            self.fsm.reset()
            self.view.pan_center()
            self.reset_count += 1
            logger.info("simulation reset")

    # -----------------------
    # Input
    # -----------------------

    def on_pointer_press(self, x: float, y: float) -> None:
        with self.lock:
            self.fsm.on_press(self.world, self.view, (x, y))

    def on_pointer_move(self, x: float, y: float) -> None:
        with self.lock:
            self.fsm.on_move(self.world, self.view, (x, y))

    def on_wheel(self, sign: int) -> None:
        with self.lock:
            self.view.zoom(sign)

    def pan(self, dx_pixels: float, dy_pixels: float) -> None:
        with self.lock:
            self.view.pan_pixels(dx_pixels, dy_pixels)

    def set_viewport_size(self, w: int, h: int) -> None:
        with self.lock:
            self.view.set_viewport_size(w, h)

    # -----------------------
    # Output
    # -----------------------

    def snapshot(self) -> Snapshot:
        with self.lock:
            return Snapshot(
                bodies=tuple(b.copy() for b in self.world.bodies),
                view=self.view.copy(),
                t=self.world.t,
                dt=self.world.dt,
                paused=self.paused,
                creation_step=self.fsm.creation_step,
            )

    def status_text(self) -> str:
        return self.snapshot().status_text
