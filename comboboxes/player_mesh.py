"""Sprite-sheet quads and colliders for each robot pose and rotation."""

from __future__ import annotations

from dataclasses import dataclass, field

from comboboxes.geometry import Vec2
from comboboxes.player import Player

NUM_STATES = 5
NUM_ROTATIONS = 4
INITIAL_STATE = 2

_CORNERS = (
    ((-1.0, -1.0), (0.0, 1.0)),
    ((-1.0, 1.0), (0.0, 0.0)),
    ((1.0, 1.0), (1.0, 0.0)),
    ((1.0, -1.0), (1.0, 1.0)),
)
_INDICES = (0, 2, 1, 0, 3, 2)


@dataclass(frozen=True)
class QuadMesh:
    """A textured rectangle of two triangles."""

    positions: tuple[tuple[float, float, float], ...]
    normals: tuple[tuple[float, float, float], ...]
    uvs: tuple[tuple[float, float], ...]
    indices: tuple[int, ...] = _INDICES


def _rotate(x: float, y: float, quarter_turns: int) -> tuple[float, float]:
    for _ in range(quarter_turns):
        x, y = -y, x
    return x, y


def create_quad(half_size: Vec2, state: int, num_states: int, rotation: int) -> QuadMesh:
    """A quad showing frame ``state`` of a horizontal strip of ``num_states``.

    The quad is turned ``rotation`` quarter turns counter-clockwise.
    """
    if num_states <= 0:
        raise ValueError("num_states must be positive")
    positions = []
    uvs = []
    for (sx, sy), (u, v) in _CORNERS:
        x, y = _rotate(sx * half_size.x, sy * half_size.y, rotation)
        positions.append((x, y, 0.0))
        u = min(max(u, 0.01), 0.99)
        uvs.append(((u + state) / num_states, v))
    normals = tuple((0.0, 0.0, 1.0) for _ in _CORNERS)
    return QuadMesh(tuple(positions), normals, tuple(uvs))


def collider_half_extents(player: Player, rotation: int) -> Vec2:
    """Half extents of the player's box collider, slightly narrower than the sprite."""
    narrow = player.width * 0.5 * 0.9
    tall = player.height * 0.5
    if rotation % 2 == 0:
        return Vec2(narrow, tall)
    return Vec2(tall, narrow)


@dataclass
class PlayerRectState:
    """Every pose/rotation combination and which one is shown."""

    current_state: int = 0
    current_rotation: int = 0
    states: list[list[tuple[Vec2, QuadMesh]]] = field(default_factory=list)

    @classmethod
    def for_player(cls, player: Player) -> PlayerRectState:
        half_size = Vec2(player.width, player.height) * 0.5
        states = [
            [
                (
                    collider_half_extents(player, rotation),
                    create_quad(half_size, state, NUM_STATES, rotation),
                )
                for rotation in range(NUM_ROTATIONS)
            ]
            for state in range(NUM_STATES)
        ]
        return cls(current_state=INITIAL_STATE, current_rotation=0, states=states)

    def current(self) -> tuple[Vec2, QuadMesh]:
        """Collider half extents and mesh for the current pose."""
        return self.states[self.current_state][self.current_rotation]