#!/usr/bin/env python3
"""
Utilities for driving fixed-period simulation ticks from a variable frame rate.

The viewport loop measures real frame time with FrameTimer and feeds it to a
FixedStepAccumulator, which reports how many dt-sized ticks are due.
"""
import logging
import math
import time
from dataclasses import dataclass, field

logger = logging.getLogger("gravity_sandbox.timekeeping")


@dataclass
class FrameTimer:
    """Real seconds elapsed between successive frames."""

    last_time: float = field(default_factory=time.perf_counter)

    def tick(self) -> float:
        now = time.perf_counter()
        elapsed = max(0.0, now - self.last_time)
        self.last_time = now
        return elapsed


@dataclass
class FixedStepAccumulator:
    """Accumulates real time and reports how many whole ticks of ``step`` are due."""

    step: float
    max_substeps: int
    value: float = 0.0

    def __post_init__(self):
        if self.step <= 0.0:
            raise ValueError(f"step must be positive, got {self.step!r}")

    def accrue(self, delta: float) -> None:
        if delta > 0.0:
            self.value += delta

    def clear(self) -> None:
        self.value = 0.0

    def consume(self) -> int:
        due = math.floor(self.value / self.step)
        if due <= 0:
            return 0
        if due > self.max_substeps:
            logger.warning("dropping %d ticks of backlog", due - self.max_substeps)
            self.value = 0.0
            return self.max_substeps
        self.value -= due * self.step
        return due
