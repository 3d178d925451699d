"""Player robots: colour choice, seat index and movement physics."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Optional

from comboboxes.combobox import GRAVITY_FORCE

MAX_PLAYERS_NUM = 2
_COLOR_COUNT = 7


@dataclass(frozen=True)
class PlayerType:
    """Which robot colour a player uses; ``None`` means no robot."""

    color: Optional[int] = None

    def image_index(self) -> int:
        return 0 if self.color is None else self.color

    @classmethod
    def from_image_index(cls, index: int) -> PlayerType:
        if index < 0:
            raise ValueError(f"image index must not be negative: {index}")
        return cls(None) if index == 0 else cls(index)

    def preview_image(self) -> str:
        return f"images/robot-preview-{self.image_index()}.png"

    def states_image(self) -> str:
        return f"images/robot-states-{self.image_index()}.png"

    def next(self, banned: Iterable[PlayerType]) -> PlayerType:
        """The following choice that nobody else has taken."""
        return self._switch(banned, 1)

    def prev(self, banned: Iterable[PlayerType]) -> PlayerType:
        """The preceding choice that nobody else has taken."""
        return self._switch(banned, -1)

    def _switch(self, banned: Iterable[PlayerType], step: int) -> PlayerType:
        taken = {player_type.image_index() for player_type in banned}
        index = self.image_index()
        for _ in range(_COLOR_COUNT):
            index = (index + step) % _COLOR_COUNT
            if index not in taken:
                return PlayerType.from_image_index(index)
        raise ValueError("every player type is banned")


@dataclass(frozen=True)
class PlayerIndex:
    """A player's seat: the only player, or one of two."""

    seat: Optional[int] = None

    @classmethod
    def single_player(cls) -> PlayerIndex:
        return cls(None)

    @classmethod
    def two_players(cls, seat: int) -> PlayerIndex:
        if seat not in range(MAX_PLAYERS_NUM):
            raise ValueError(f"seat out of range: {seat}")
        return cls(seat)

    @property
    def is_single(self) -> bool:
        return self.seat is None

    def number_of_players(self) -> int:
        return 1 if self.seat is None else 2

    def unwrap_index(self) -> int:
        return 0 if self.seat is None else self.seat


def _default_player_types() -> list[PlayerType]:
    return [PlayerType(1), PlayerType(None)]


@dataclass
class PlayersSettings:
    """The robot chosen for each seat."""

    player_type: list[PlayerType] = field(default_factory=_default_player_types)

    def __post_init__(self) -> None:
        if len(self.player_type) != MAX_PLAYERS_NUM:
            raise ValueError(f"expected {MAX_PLAYERS_NUM} player types")


@dataclass
class Player:
    """A robot's size and movement limits."""

    width: float = 54.0
    height: float = 90.0
    max_speed: float = 160.0
    max_acceleration: float = 1800.0
    jump_height: float = 110.0
    is_moving: bool = False
    ungrab_time: float = 0.0
    index: PlayerIndex = field(default_factory=PlayerIndex.single_player)

    GRAB_DELAY: ClassVar[float] = 0.2
    GRAB_ACCELERATION_FACTOR: ClassVar[float] = 0.3

    def jump_velocity(self) -> float:
        """Take-off speed that reaches ``jump_height`` under normal gravity."""
        return math.sqrt(2.0 * self.jump_height * GRAVITY_FORCE)

    def movement_delta(
        self,
        target_velocity: float,
        current_velocity: float,
        dt: float,
        grabbing: bool,
    ) -> float:
        """Signed velocity change along the walking axis for one frame.

        Acceleration is capped, boosted when far from the target speed and
        reduced while dragging a box.
        """
        delta = target_velocity - current_velocity
        boost = min(
            max(max(abs(delta) - self.max_speed, 0.0) / self.max_speed, 0.0), 2.0
        )
        acceleration = self.max_acceleration
        if grabbing and abs(target_velocity) >= 0.1:
            acceleration *= self.GRAB_ACCELERATION_FACTOR
        change = min(abs(delta), acceleration * dt * (1.0 + boost))
        return math.copysign(change, delta)