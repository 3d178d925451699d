import math

import pytest

from comboboxes.collision_groups import WALL
from comboboxes.color import Color
from comboboxes.combobox import Combobox, Standard
from comboboxes.elevator import LoopMotion
from comboboxes.geometry import Rect, Vec2
from comboboxes.player import PlayerIndex
from comboboxes.scene import (
    CELL_SIZE,
    SceneBuilder,
    finish_arrow_offset,
    hint_opacity,
)


def test_one_cell_is_fifty_world_units():
    builder = SceneBuilder()
    builder.set_min_view_range(1)
    assert builder.boundaries.view_range == 50.0


def test_constructor_resets_ambient_light():
    builder = SceneBuilder()
    assert builder.ambient_light.color == Color.WHITE * 30.0


def test_set_ambient_light():
    builder = SceneBuilder()
    builder.set_ambient_light(Color.BLACK)
    assert builder.ambient_light.color == Color.BLACK


def test_set_boundaries_scales_by_cell():
    builder = SceneBuilder()
    builder.set_boundaries(-2, 4, 0, 3)
    assert builder.boundaries.rect == Rect(Vec2(-2, 0) * CELL_SIZE, Vec2(4, 3) * CELL_SIZE)


def test_set_boundaries_rejects_inverted():
    builder = SceneBuilder()
    with pytest.raises(ValueError):
        builder.set_boundaries(5, 1, 0, 3)
    with pytest.raises(ValueError):
        builder.set_boundaries(0, 1, 4, 3)


def test_min_view_range():
    builder = SceneBuilder()
    builder.set_min_view_range(6)
    assert builder.boundaries.view_range == 6 * CELL_SIZE


def test_set_audio_changes_track():
    builder = SceneBuilder()
    actions = builder.set_audio("audio/level.ogg")
    assert builder.background_music.track == "audio/level.ogg"
    assert actions[-1].path == "audio/level.ogg"


def test_wall_from_to():
    builder = SceneBuilder()
    wall = builder.spawn_wall_from_to(2, -2, 1, 3)
    assert wall.center == Vec2(0.0, 2.0) * CELL_SIZE
    assert wall.size == Vec2(4.0, 2.0) * CELL_SIZE
    assert wall.half_extents == wall.size * 0.5
    assert wall.collision_groups == WALL
    assert builder.walls == [wall]


def test_spawn_box_position_and_appearance():
    builder = SceneBuilder()
    combobox = Combobox(1.0, Standard(1))
    placed = builder.spawn_box(combobox, 3, 4)
    assert placed.position == Vec2(3, 4) * CELL_SIZE
    assert placed.appearance.size == combobox.world_size()
    assert builder.boxes == [placed]


def test_spawn_elevator_scales_points():
    builder = SceneBuilder()
    elevator = builder.spawn_elevator(1, 0, 1, 4, LoopMotion(3.0))
    assert elevator.start == Vec2(1, 0) * CELL_SIZE
    assert elevator.end == Vec2(1, 4) * CELL_SIZE
    assert elevator.position() == elevator.start


def test_points_and_hints():
    builder = SceneBuilder()
    spawn = builder.set_spawn_point(1, 2, PlayerIndex.two_players(1))
    finish = builder.set_finish_point(5, 6)
    hint = builder.spawn_hint(0, 1, "images/hint.png")
    assert spawn.position == Vec2(1, 2) * CELL_SIZE
    assert spawn.index.unwrap_index() == 1
    assert finish.position == Vec2(5, 6) * CELL_SIZE
    assert finish.image == "images/finish.png"
    assert hint.image == "images/hint.png"
    assert hint.position == Vec2(0, 1) * CELL_SIZE


def test_hint_opacity_without_players():
    assert hint_opacity(Vec2(0.0, 0.0), []) == 0.0


def test_hint_opacity_near_player():
    assert hint_opacity(Vec2(0.0, 0.0), [Vec2(30.0, 40.0)]) == pytest.approx(0.995)


def test_hint_opacity_decreases_with_distance():
    near = hint_opacity(Vec2(0.0, 0.0), [Vec2(150.0, 0.0)])
    far = hint_opacity(Vec2(0.0, 0.0), [Vec2(300.0, 0.0)])
    assert near > far
    both = hint_opacity(Vec2(0.0, 0.0), [Vec2(300.0, 0.0), Vec2(150.0, 0.0)])
    assert both == near


def test_finish_arrow_offset_bounds_and_period():
    for i in range(50):
        s = i * 0.07
        value = finish_arrow_offset(s)
        assert -15.0 <= value <= 15.0
        assert finish_arrow_offset(s + math.pi / 2) == pytest.approx(value)
    assert finish_arrow_offset(math.pi / 8) == pytest.approx(15.0)