"""Boxes that can be merged, buffed, redirected and split apart again."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Optional, Union

from comboboxes.color import Color
from comboboxes.geometry import Vec2

GRAVITY_FORCE = 9.8 * 100.0


@dataclass(frozen=True)
class Standard:
    """A plain box; only boxes of the same group merge."""

    group: int


@dataclass(frozen=True)
class Buff:
    """Multiplies the weight of the box it is merged into."""

    factor: float


@dataclass(frozen=True)
class Undo:
    """Splits a merged box back into its parts."""


@dataclass(frozen=True)
class Direction:
    """Gives the box it is merged into its own gravity direction."""

    direction: Vec2


@dataclass(frozen=True)
class Gravity:
    """Once given a direction, turns the whole scene's gravity."""


@dataclass(frozen=True)
class Lamp:
    """A glowing box; lamps of the same colour merge."""

    color: Color


BoxType = Union[Standard, Buff, Undo, Direction, Gravity, Lamp]

_CARRIERS = (Standard, Lamp)


class AnimationPhase(enum.Enum):
    NORMAL = "normal"
    SPAWNING = "spawning"
    DESPAWNING = "despawning"
    DESPAWNED = "despawned"


def _evaluate_bezier(a: Vec2, b: Vec2, t: float) -> float:
    return (
        a.x * (1.0 - t) ** 3
        + 3.0 * a.y * (1.0 - t) ** 2 * t
        + 3.0 * b.x * (1.0 - t) * t * t
        + b.y * t * t * t
    )


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass(frozen=True)
class ComboboxState:
    """Where a box is in its spawn/despawn life cycle."""

    phase: AnimationPhase = AnimationPhase.SPAWNING
    time: float = 0.0

    SPAWN_TIME: ClassVar[float] = 0.25
    DESPAWN_TIME: ClassVar[float] = 0.25

    @classmethod
    def normal(cls) -> ComboboxState:
        return cls(AnimationPhase.NORMAL)

    @classmethod
    def spawning(cls, time: float = 0.0) -> ComboboxState:
        return cls(AnimationPhase.SPAWNING, time)

    @classmethod
    def despawning(cls, time: float = 0.0) -> ComboboxState:
        return cls(AnimationPhase.DESPAWNING, time)

    @classmethod
    def despawned(cls) -> ComboboxState:
        return cls(AnimationPhase.DESPAWNED)

    def _curve(self, time: float, overshoot: float) -> float:
        a = Vec2(0.0, 1.0)
        b = Vec2(overshoot, 1.0)
        progress = _clamp(time / self.SPAWN_TIME, 0.01, 1.0)
        if self.phase is AnimationPhase.DESPAWNING:
            progress = 1.0 - progress
        return _evaluate_bezier(a, b, progress)

    def scale(self) -> float:
        """The display scale, overshooting slightly while spawning."""
        if self.phase is AnimationPhase.NORMAL:
            return 1.0
        if self.phase is AnimationPhase.DESPAWNED:
            return 0.01
        return self._curve(self.time, 1.35)

    def scale_ahead(self, ahead: float) -> float:
        """The scale ``ahead`` seconds later, on a curve without overshoot."""
        if self.phase is AnimationPhase.NORMAL:
            return 1.0
        if self.phase is AnimationPhase.DESPAWNED:
            return 0.01
        return self._curve(self.time + ahead, 1.0)

    def advance(self, dt: float) -> ComboboxState:
        """The state after ``dt`` seconds of animation."""
        if self.phase is AnimationPhase.SPAWNING:
            time = self.time + dt
            if time >= self.SPAWN_TIME:
                return ComboboxState.normal()
            return ComboboxState.spawning(time)
        if self.phase is AnimationPhase.DESPAWNING:
            time = self.time + dt
            if time >= self.DESPAWN_TIME:
                return ComboboxState.despawned()
            return ComboboxState.despawning(time)
        return self


def _shared_gravity(first: Combobox, second: Combobox) -> Optional[Vec2]:
    if (
        first.local_gravity is not None
        and second.local_gravity is not None
        and first.local_gravity == second.local_gravity
    ):
        return first.local_gravity
    return None


@dataclass(frozen=True)
class Combobox:
    """A box with a weight, a kind, and the boxes it was built from."""

    weight: float
    box_type: BoxType
    combined_from: tuple[tuple[Combobox, Vec2], ...] = field(default=())
    local_gravity: Optional[Vec2] = None

    DEFAULT_SIZE: ClassVar[float] = 50.0

    def world_size(self) -> float:
        """Side length in world units; area grows with weight."""
        return self.weight**0.5 * self.DEFAULT_SIZE

    @staticmethod
    def merge(
        first: Combobox, first_pos: Vec2, second: Combobox, second_pos: Vec2
    ) -> Optional[list[tuple[Combobox, Vec2]]]:
        """What two touching boxes turn into, or None if they do not combine."""
        first_size = first.world_size()
        second_size = second.world_size()
        center = (first_pos * first_size + second_pos * second_size) / (
            first_size + second_size
        )
        first_offset = first_pos - center
        second_offset = second_pos - center
        a, b = first.box_type, second.box_type

        if isinstance(a, Standard) and isinstance(b, Standard):
            if a.group != b.group:
                return None
            big_box = Combobox(
                weight=first.weight + second.weight,
                box_type=a,
                combined_from=((first, first_offset), (second, second_offset)),
                local_gravity=_shared_gravity(first, second),
            )
            return [(big_box, center)]

        if isinstance(a, Lamp) and isinstance(b, Lamp):
            if a.color != b.color:
                return None
            big_box = Combobox(
                weight=first.weight + second.weight,
                box_type=Lamp(a.color),
                combined_from=((first, first_offset), (second, second_offset)),
                local_gravity=_shared_gravity(first, second),
            )
            return [(big_box, center)]

        if isinstance(a, Buff) and isinstance(b, _CARRIERS):
            buffed = Combobox(
                weight=second.weight * a.factor,
                box_type=b,
                combined_from=(
                    (first, Vec2(0.0, 0.0)),
                    (second, second_pos - first_pos),
                ),
                local_gravity=second.local_gravity,
            )
            return [(buffed, second_pos)]

        if isinstance(a, Direction) and isinstance(b, _CARRIERS):
            directed = Combobox(
                weight=second.weight,
                box_type=b,
                combined_from=(
                    (first, first_pos - second_pos),
                    (second, Vec2(0.0, 0.0)),
                ),
                local_gravity=a.direction,
            )
            return [(directed, second_pos)]

        if isinstance(a, Gravity) and isinstance(b, Direction):
            gravity_box = Combobox(
                weight=first.weight,
                box_type=a,
                combined_from=(
                    (first, Vec2(0.0, 0.0)),
                    (second, second_pos - first_pos),
                ),
                local_gravity=b.direction,
            )
            return [(gravity_box, first_pos)]

        if isinstance(a, Undo):
            if not second.combined_from:
                return None
            return [
                (part, _scatter(offset, second_pos))
                for part, offset in second.combined_from
            ]

        if (
            isinstance(b, Undo)
            or (isinstance(a, _CARRIERS) and isinstance(b, (Buff, Direction)))
            or (isinstance(a, Direction) and isinstance(b, Gravity))
        ):
            return Combobox.merge(second, second_pos, first, first_pos)

        return None


def _scatter(offset: Vec2, origin: Vec2) -> Vec2:
    push = offset.normalize() * 10.0 if offset.length() > 5.0 else Vec2(0.0, 0.0)
    return offset * 1.1 + origin + push


def boxes_touch(
    first: Combobox, first_pos: Vec2, second: Combobox, second_pos: Vec2
) -> bool:
    """Whether two boxes are close enough to try merging."""
    gap = (first_pos - second_pos).abs().max_element()
    return gap < (first.world_size() + second.world_size()) * 0.52


def global_gravity(boxes: Iterable[tuple[Combobox, ComboboxState]]) -> Vec2:
    """Scene gravity: down, unless a settled gravity box points elsewhere."""
    gravity = Vec2(0.0, -1.0) * GRAVITY_FORCE
    for combobox, state in boxes:
        if (
            isinstance(combobox.box_type, Gravity)
            and state.phase is AnimationPhase.NORMAL
            and combobox.local_gravity is not None
        ):
            gravity = combobox.local_gravity * GRAVITY_FORCE
    return gravity