"""Level construction on a cell grid, plus hint and finish-arrow animation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

from comboboxes.appearance import BoxAppearance, box_appearance
from comboboxes.audio import BackgroundMusic, SoundAction
from comboboxes.collision_groups import WALL, CollisionGroups
from comboboxes.color import Color
from comboboxes.combobox import Combobox
from comboboxes.elevator import Elevator, LoopMotion
from comboboxes.geometry import Rect, Vec2
from comboboxes.lights import AmbientLight
from comboboxes.player import PlayerIndex

BACKGROUND_DEPTH = -0.9
WALL_DEPTH = -0.4
ELEVATOR_DEPTH = -0.7
DOOR_DEPTH = -0.6
HINT_DEPTH = -0.3
PLAYER_DEPTH = -0.2
BOX_DEPTH = -0.1

CELL_SIZE = 50.0

PHYSICS_MAX_DT = 1.0 / 30.0
WALL_COLOR = Color.rgb(0.1, 0.1, 0.1)
BACKGROUND_SIZE = 10000.0


@dataclass
class SceneBoundaries:
    """Where the camera may go and how much it must show, in world units."""

    rect: Optional[Rect] = None
    view_range: Optional[float] = None


@dataclass(frozen=True)
class Wall:
    """A fixed rectangular block."""

    center: Vec2
    size: Vec2
    depth: float = WALL_DEPTH
    collision_groups: CollisionGroups = WALL

    @property
    def half_extents(self) -> Vec2:
        return self.size * 0.5


@dataclass(frozen=True)
class Hint:
    """A picture that fades in when a player comes near."""

    position: Vec2
    image: str
    size: Vec2 = Vec2(325.0, 100.0)
    depth: float = HINT_DEPTH


@dataclass(frozen=True)
class SpawnPoint:
    position: Vec2
    index: PlayerIndex


@dataclass(frozen=True)
class FinishPoint:
    """The level exit with its bobbing arrow."""

    position: Vec2
    image: str = "images/finish.png"
    size: Vec2 = Vec2(200.0, 200.0)
    arrow_image: str = "images/finish-arrow.png"
    arrow_size: Vec2 = Vec2(50.0, 50.0)
    depth: float = WALL_DEPTH


@dataclass
class PlacedBox:
    combobox: Combobox
    position: Vec2
    appearance: BoxAppearance


@dataclass
class SceneBuilder:
    """Collects the objects of a level, with coordinates given in cells."""

    background_music: BackgroundMusic = field(default_factory=BackgroundMusic)
    ambient_light: AmbientLight = field(default_factory=AmbientLight)
    boundaries: SceneBoundaries = field(default_factory=SceneBoundaries)
    background_color: Optional[Color] = None
    wall_color: Color = WALL_COLOR
    walls: list[Wall] = field(default_factory=list)
    hints: list[Hint] = field(default_factory=list)
    boxes: list[PlacedBox] = field(default_factory=list)
    elevators: list[Elevator] = field(default_factory=list)
    spawn_points: list[SpawnPoint] = field(default_factory=list)
    finish_points: list[FinishPoint] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.ambient_light.color = Color.WHITE * 30.0

    def set_boundaries(self, left: float, right: float, bottom: float, top: float) -> None:
        if left > right:
            raise ValueError(f"left {left} is right of right {right}")
        if bottom > top:
            raise ValueError(f"bottom {bottom} is above top {top}")
        self.boundaries.rect = Rect(
            Vec2(left, bottom) * CELL_SIZE, Vec2(right, top) * CELL_SIZE
        )

    def set_min_view_range(self, view_range: float) -> None:
        self.boundaries.view_range = view_range * CELL_SIZE

    def set_ambient_light(self, color: Color) -> None:
        self.ambient_light.color = color

    def set_background_color(self, color: Color) -> None:
        self.background_color = color

    def set_audio(self, name: str) -> list[SoundAction]:
        return self.background_music.set(name)

    def spawn_hint(self, x: float, y: float, hint: str) -> Hint:
        placed = Hint(Vec2(x, y) * CELL_SIZE, hint)
        self.hints.append(placed)
        return placed

    def spawn_wall_from_to(
        self, left: float, right: float, bottom: float, top: float
    ) -> Wall:
        start = Vec2(left, bottom) * CELL_SIZE
        end = Vec2(right, top) * CELL_SIZE
        wall = Wall(center=(start + end) * 0.5, size=start.max(end) - start.min(end))
        self.walls.append(wall)
        return wall

    def spawn_box(self, combobox: Combobox, x: float, y: float) -> PlacedBox:
        placed = PlacedBox(combobox, Vec2(x, y) * CELL_SIZE, box_appearance(combobox))
        self.boxes.append(placed)
        return placed

    def spawn_elevator(
        self,
        start_x: float,
        start_y: float,
        end_x: float,
        end_y: float,
        motion: LoopMotion,
    ) -> Elevator:
        elevator = Elevator(
            Vec2(start_x, start_y) * CELL_SIZE, Vec2(end_x, end_y) * CELL_SIZE, motion
        )
        self.elevators.append(elevator)
        return elevator

    def set_spawn_point(self, x: float, y: float, index: PlayerIndex) -> SpawnPoint:
        point = SpawnPoint(Vec2(x, y) * CELL_SIZE, index)
        self.spawn_points.append(point)
        return point

    def set_finish_point(self, x: float, y: float) -> FinishPoint:
        point = FinishPoint(Vec2(x, y) * CELL_SIZE)
        self.finish_points.append(point)
        return point


def hint_opacity(hint_position: Vec2, player_positions: Iterable[Vec2]) -> float:
    """Full within 100 units of the nearest player, fading out beyond."""
    opacity = 0.0
    for player in player_positions:
        distance = (hint_position - player).length()
        x = max((distance - 100.0) / 80.0, 0.0)
        opacity = max(opacity, math.exp(-x * x) - 0.005)
    return opacity


def finish_arrow_offset(seconds: float) -> float:
    """Vertical bob of the finish arrow, between -15 and 15 units."""
    wave = (math.sin(seconds * 4.0) + 1.0) * 0.5
    return (wave**1.2 * 2.0 - 1.0) * 15.0