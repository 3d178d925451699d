"""Two-dimensional vectors, rectangles and the camera-follow maths."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, axis: int) -> float:
        if axis == 0:
            return self.x
        if axis == 1:
            return self.y
        raise IndexError(f"Vec2 axis out of range: {axis}")

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vec2, Number]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Vec2, Number]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Return the unit vector in this direction; a zero vector has none."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec2(self.x / length, self.y / length)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def perp(self) -> Vec2:
        """The vector rotated a quarter turn counter-clockwise."""
        return Vec2(-self.y, self.x)

    def abs(self) -> Vec2:
        return Vec2(abs(self.x), abs(self.y))

    def max_element(self) -> float:
        return max(self.x, self.y)

    def min(self, other: Vec2) -> Vec2:
        return Vec2(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: Vec2) -> Vec2:
        return Vec2(max(self.x, other.x), max(self.y, other.y))


Vec2.ZERO = Vec2(0.0, 0.0)  # type: ignore[attr-defined]
Vec2.ONE = Vec2(1.0, 1.0)  # type: ignore[attr-defined]
Vec2.X = Vec2(1.0, 0.0)  # type: ignore[attr-defined]
Vec2.Y = Vec2(0.0, 1.0)  # type: ignore[attr-defined]
Vec2.NEG_Y = Vec2(0.0, -1.0)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its lower-left and upper-right corners."""

    min: Vec2
    max: Vec2

    @property
    def half_size(self) -> Vec2:
        return (self.max - self.min) * 0.5

    @property
    def center(self) -> Vec2:
        return (self.min + self.max) * 0.5


def clamp_to_rect(pos: Vec2, view_half_size: Vec2, rect: Rect) -> Vec2:
    """Keep a view of the given half size inside ``rect``.

    On an axis where the view is larger than the rectangle, the view is
    centred on the rectangle instead.
    """

    def axis(i: int) -> float:
        low = rect.min[i] + view_half_size[i]
        high = rect.max[i] - view_half_size[i]
        if low >= high:
            return (rect.min[i] + rect.max[i]) * 0.5
        return min(max(pos[i], low), high)

    return Vec2(axis(0), axis(1))


def zoom_factor(view_rect: Rect, view_range: float) -> float:
    """Per-frame scale multiplier easing the camera towards ``view_range``.

    The shorter half-side of the current view is compared with the wanted
    range; the result is applied to the camera scale each frame.
    """
    view_size = view_rect.half_size
    if view_size.x > view_size.y:
        zoom = view_range / view_size.y
    else:
        zoom = view_range / view_size.x
    return zoom**0.05


def follow_position(camera_pos: Vec2, player_pos: Vec2) -> Vec2:
    """Move the camera five percent of the way towards the player."""
    return player_pos * 0.05 + camera_pos * 0.95