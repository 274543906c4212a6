#!/usr/bin/env python3
"""
Gravity Sandbox application entry point and UI/renderer coordination.

What this module does
- Starts two event loops: a Pygame viewport thread and the Dear PyGui controls
  (running on the main thread).
- Maintains a shared SimulationController that owns the bodies, the clock and the
  view; all access is guarded by a re-entrant lock for thread-safety.
- Builds bodies from mouse input: press to place, press to set velocity, press to
  set mass. Bodies then attract each other and leave color-shifting trails.

Threading model
- PygameRenderer runs in a background thread and performs: input handling for the
  viewport, fixed-rate ticking (period dt) and drawing. Each of these goes through
  controller methods that take the lock.
- The UI class runs in the main thread via Dear PyGui. Its buttons call pause,
  resume, reset and step on the controller; the time field is refreshed on a
  periodic frame callback.

Controls (viewport)
- Left click x3: place body, set velocity, set mass
- Right/Middle-drag or arrow keys: pan | Wheel: zoom
- Space: pause/resume | R: reset

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python gravity_sandbox.py`
"""
import logging
import math
import threading
from typing import Optional, Tuple

# GUI and Rendering libs
import pygame
from pygame import gfxdraw
import dearpygui.dearpygui as dpg

from sandbox.constants import (
    BACKGROUND_COLOR,
    DT,
    HUD_TEXT_COLOR,
    MAX_TICKS_PER_FRAME,
    OUTLINE_COLOR,
    PAN_SPEED_KEYS,
    SAFE_COORD_LIMIT,
    TARGET_FPS,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from sandbox.controller import SimulationController
from sandbox.render import draw_snapshot, hue_to_rgb
from sandbox.timekeeping import FixedStepAccumulator, FrameTimer

logger = logging.getLogger("gravity_sandbox")

# ============================================================
# Drawing helpers
# ============================================================

_cached_font = None


def draw_text(surface, text, x, y, color):
    global _cached_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        _cached_font = pygame.font.SysFont("consolas", 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(pt[0]), int(pt[1])
    except (ValueError, OverflowError):
        # NaN or infinity from a blown-up body
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


def _safe_radius(diameter: float) -> Optional[int]:
    if not math.isfinite(diameter):
        return None
    return max(0, min(SAFE_COORD_LIMIT, int(diameter / 2)))


class PygameSurface:
    """
    Draw surface handed to sandbox.render.draw_snapshot.
    Points that cannot be represented as pixel coordinates are skipped.
    """
    def __init__(self, surf):
        self.surf = surf
        self.status_text = ""

    def fill_circle(self, center, diameter, hue):
        c = _safe_point(center)
        r = _safe_radius(diameter)
        if c is None or r is None:
            return
        gfxdraw.filled_circle(self.surf, c[0], c[1], r, hue_to_rgb(hue))

    def draw_circle(self, center, diameter, rgb=OUTLINE_COLOR):
        c = _safe_point(center)
        r = _safe_radius(diameter)
        if c is None or r is None:
            return
        gfxdraw.aacircle(self.surf, c[0], c[1], r, rgb)

    def draw_line(self, start, end, rgb=OUTLINE_COLOR):
        start_s = _safe_point(start)
        end_s = _safe_point(end)
        if start_s is None or end_s is None:
            return
        pygame.draw.line(self.surf, rgb, start_s, end_s, 1)

    def set_status_text(self, text):
        self.status_text = text


# ============================================================
# Pygame Renderer Thread
# ============================================================

class PygameRenderer(threading.Thread):
    """
    Pygame loop: forwards pointer input, ticks the simulation at a fixed rate and
    draws bodies, trails and velocity lines.
    """
    def __init__(self, sim: SimulationController):
        super().__init__(daemon=True)
        self.sim = sim
        self.surface: Optional[PygameSurface] = None
        self.clock = None
        self.ticker = FixedStepAccumulator(step=sim.world.dt, max_substeps=MAX_TICKS_PER_FRAME)
        self.dragging_background = False
        self.drag_start_screen = (0, 0)
        self.status_text = "t = 0.000"
        self.seen_resets = sim.reset_count
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption("Gravity Sandbox - Viewport")
        w, h = self.sim.view.viewport_size
        self.surface = PygameSurface(pygame.display.set_mode((w, h), pygame.RESIZABLE))
        self.clock = pygame.time.Clock()
        logger.info("viewport started at %dx%d", w, h)

        timer = FrameTimer()
        while self.running and self.sim.running:
            real_dt = timer.tick()

            # Input handling
            self.handle_events(real_dt)

            # Fixed-rate ticks
            self.advance(real_dt)

            # Draw
            self.draw()

            # Limit FPS
            self.clock.tick(TARGET_FPS)

        pygame.quit()
        logger.info("viewport closed")

    def advance(self, real_dt):
        """Run the ticks due for this frame; a reset since the last frame drops the backlog."""
        if self.sim.reset_count != self.seen_resets:
            self.seen_resets = self.sim.reset_count
            self.ticker.clear()
        self.ticker.accrue(real_dt)
        ticks = self.ticker.consume()
        for _ in range(ticks):
            self.sim.tick()
        return ticks

    def handle_events(self, real_dt):
        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT]:
            self.sim.pan(PAN_SPEED_KEYS * real_dt, 0)
        if keys[pygame.K_RIGHT]:
            self.sim.pan(-PAN_SPEED_KEYS * real_dt, 0)
        if keys[pygame.K_UP]:
            self.sim.pan(0, PAN_SPEED_KEYS * real_dt)
        if keys[pygame.K_DOWN]:
            self.sim.pan(0, -PAN_SPEED_KEYS * real_dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.sim.running = False
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = PygameSurface(pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE))
                self.sim.set_viewport_size(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    self.sim.toggle_pause()
                elif event.key == pygame.K_r:
                    self.sim.reset()

            elif event.type == pygame.MOUSEWHEEL:
                if event.y:
                    self.sim.on_wheel(1 if event.y > 0 else -1)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:  # left click builds bodies
                    self.sim.on_pointer_press(*event.pos)
                elif event.button in (2, 3):  # middle/right pan
                    self.dragging_background = True
                    self.drag_start_screen = event.pos

            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button in (2, 3):
                    self.dragging_background = False

            elif event.type == pygame.MOUSEMOTION:
                mouse = event.pos
                if self.dragging_background:
                    dx = mouse[0] - self.drag_start_screen[0]
                    dy = mouse[1] - self.drag_start_screen[1]
                    self.sim.pan(dx, dy)
                    self.drag_start_screen = mouse
                # drags are not construction input
                if not any(event.buttons):
                    self.sim.on_pointer_move(*mouse)

    def draw(self):
        surf = self.surface.surf
        surf.fill(BACKGROUND_COLOR)

        # Copy state under the lock; drawing works on the copy
        snapshot = self.sim.snapshot()
        draw_snapshot(snapshot, self.surface)
        self.status_text = self.surface.status_text

        # HUD text
        draw_text(surf, "Left click x3: place / velocity / mass | Right/Middle-drag: pan | Wheel: zoom | Space: Pause | R: Reset",
                  10, 10, HUD_TEXT_COLOR)
        draw_text(surf, snapshot.status_text, 10, 30, HUD_TEXT_COLOR)

        pygame.display.flip()


# ============================================================
# Dear PyGui UI
# ============================================================

class UI:
    """
    Dear PyGui interface: simulation controls and the clock readout.
    """
    def __init__(self, sim: SimulationController, renderer: PygameRenderer):
        self.sim = sim
        self.renderer = renderer

        self.time_field_id = None
        self.status_msg_id = None

        self._build_ui()
        self._schedule_sync()

    def _schedule_sync(self):
        """Reschedule the periodic sync callback using frame callbacks (approx ~10Hz)."""
        current = dpg.get_frame_count()
        # schedule next sync ~ every 6 frames (~100ms at 60 FPS)
        dpg.set_frame_callback(current + 6, self._sync_ui_with_sim)

    # -----------------------
    # UI Construction
    # -----------------------

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title='Gravity Sandbox - Controls', width=260, height=320)

        with dpg.window(label="Controls", width=240, height=300, pos=(10, 10), tag="main_window"):
            dpg.add_button(label="Pause", width=200, callback=self._pause)
            dpg.add_button(label="Resume", width=200, callback=self._resume)
            dpg.add_button(label="Reset", width=200, callback=self._reset)
            dpg.add_button(label="Step", width=200, callback=self._step_once)
            dpg.add_separator()
            self.time_field_id = dpg.add_input_text(default_value="t = 0.000", readonly=True, width=200)
            self.status_msg_id = dpg.add_text("", color=(180, 220, 180), wrap=220)

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    # -----------------------
    # UI Callbacks
    # -----------------------

    def _set_status(self, msg: str, color=(180, 220, 180)):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def _pause(self):
        self.sim.pause()
        self._set_status("Simulation paused.")

    def _resume(self):
        self.sim.resume()
        self._set_status("Simulation running.")

    def toggle_play(self):
        paused = self.sim.toggle_pause()
        self._set_status("Simulation paused." if paused else "Simulation running.")

    def _reset(self):
        self.sim.reset()
        self._set_status("Reset: all bodies removed.")

    def _step_once(self):
        if self.sim.step_once():
            self._set_status("Stepped one tick.")
        else:
            self._set_status("Finish the body under construction first.", color=(255, 120, 120))

    def _sync_ui_with_sim(self):
        """Periodic UI update of the clock readout."""
        dpg.set_value(self.time_field_id, self.renderer.status_text)
        # Reschedule next sync
        self._schedule_sync()


# ============================================================
# Application Entry
# ============================================================

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    sim = SimulationController(viewport_size=(VIEW_WIDTH, VIEW_HEIGHT), dt=DT)

    renderer = PygameRenderer(sim)

    # Start Pygame renderer thread
    renderer.start()

    ui = UI(sim, renderer)

    # Keyboard shortcut in UI window to toggle play/pause (Space)
    with dpg.handler_registry():
        def key_press(sender, app_data):
            if app_data == dpg.mvKey_Spacebar:
                ui.toggle_play()
        dpg.add_key_press_handler(callback=key_press)

    # Run Dear PyGui event loop
    try:
        dpg.start_dearpygui()
    finally:
        # Stop simulation and renderer
        sim.running = False
        renderer.running = False
        renderer.join(timeout=2.0)
        dpg.destroy_context()


if __name__ == "__main__":
    main()
