"""Collision group bits for walls, boxes, players and elevators."""

from __future__ import annotations

from dataclasses import dataclass

WALL_BIT = 1 << 0
COMBOBOX_BIT = 1 << 1
PLAYER_BIT = 1 << 2
ELEVATOR_BIT = 1 << 3

WALL_FILTER = COMBOBOX_BIT | PLAYER_BIT
COMBOBOX_FILTER = WALL_BIT | PLAYER_BIT | ELEVATOR_BIT | COMBOBOX_BIT
PLAYER_FILTER = WALL_BIT | COMBOBOX_BIT | ELEVATOR_BIT | PLAYER_BIT
ELEVATOR_FILTER = PLAYER_BIT | COMBOBOX_BIT


@dataclass(frozen=True)
class CollisionGroups:
    """Which groups an object belongs to and which groups it collides with."""

    memberships: int
    filters: int

    def interacts_with(self, other: CollisionGroups) -> bool:
        """Both sides must accept each other's memberships."""
        return bool(self.memberships & other.filters) and bool(
            other.memberships & self.filters
        )


WALL = CollisionGroups(WALL_BIT, WALL_FILTER)
COMBOBOX = CollisionGroups(COMBOBOX_BIT, COMBOBOX_FILTER)
PLAYER = CollisionGroups(PLAYER_BIT, PLAYER_FILTER)
ELEVATOR = CollisionGroups(ELEVATOR_BIT, ELEVATOR_FILTER)
NONE = CollisionGroups(0, 0)