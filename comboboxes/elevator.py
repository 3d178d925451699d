"""Moving platforms that travel back and forth between two points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from comboboxes.collision_groups import ELEVATOR, CollisionGroups
from comboboxes.geometry import Vec2

ELEVATOR_DEPTH = -0.7
PROBE_COUNT = 6


@dataclass
class LoopMotion:
    """Travel start to end and back once per ``period`` seconds."""

    period: float
    current: float = 0.0

    def __post_init__(self) -> None:
        if self.period <= 0.0:
            raise ValueError(f"period must be positive: {self.period}")

    def phase(self) -> float:
        """Position in the cycle: 0..1 going out, 1..2 coming back."""
        return math.fmod(self.current / (self.period * 0.5), 2.0)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass
class Elevator:
    """A platform moving between ``start`` and ``end`` in world units."""

    start: Vec2
    end: Vec2
    motion: LoopMotion

    WIDTH: ClassVar[float] = 100.0
    HEIGHT: ClassVar[float] = 10.0
    DETECT_RANGE: ClassVar[float] = HEIGHT * 0.7
    INTERACT_RANGE: ClassVar[float] = HEIGHT * 0.51

    collision_groups: ClassVar[CollisionGroups] = ELEVATOR
    depth: ClassVar[float] = ELEVATOR_DEPTH

    def size(self) -> Vec2:
        """Platform size: lying flat when it travels vertically, upright otherwise."""
        direction = (self.end - self.start).normalize()
        if abs(direction.dot(Vec2(0.0, 1.0))) > 0.8:
            return Vec2(self.WIDTH, self.HEIGHT)
        return Vec2(self.HEIGHT, self.WIDTH)

    def step(self, dt: float, anything_below: bool, interacts: bool) -> Vec2:
        """Advance the motion by ``dt`` seconds and return the new position.

        On the way back the platform stops when something is below it, and
        backs off when that something is pressed against it.
        """
        motion = self.motion
        motion.current += dt
        if motion.phase() > 1.0 and anything_below:
            motion.current -= dt
            if interacts:
                motion.current -= dt
        return self.position()

    def position(self) -> Vec2:
        """Where the platform is at the motion's current time."""
        t = self.motion.phase()
        t = t if t < 1.0 else 2.0 - t
        t = _clamp((t - 0.5) * 1.2 + 0.5, 0.0, 1.0)
        t = t * t * (3.0 - 2.0 * t)
        return self.start * (1.0 - t) + self.end * t