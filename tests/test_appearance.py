import pytest

from comboboxes.appearance import (
    BOX_IMAGE,
    box_appearance,
    box_color,
    box_point_light,
    overlay_image,
)
from comboboxes.color import Color
from comboboxes.combobox import (
    AnimationPhase,
    Buff,
    Combobox,
    Direction,
    Gravity,
    Lamp,
    Standard,
    Undo,
)
from comboboxes.geometry import Vec2
from comboboxes.material import MaterialFlags


@pytest.mark.parametrize(
    "box_type, rgb",
    [
        (Standard(1), (103, 245, 124)),
        (Standard(2), (242, 176, 90)),
        (Standard(7), (90, 176, 242)),
        (Buff(3.0), (50, 91, 227)),
        (Undo(), (141, 50, 227)),
        (Gravity(), (232, 67, 56)),
        (Direction(Vec2(1.0, 0.0)), (29, 196, 91)),
    ],
)
def test_box_color(box_type, rgb):
    assert box_color(box_type) == Color.rgb_u8(*rgb)


def test_lamp_color_is_brightened():
    red = Color.rgb(1.0, 0.0, 0.0)
    assert box_color(Lamp(red)) == red * 2.5


@pytest.mark.parametrize(
    "box_type, image",
    [
        (Undo(), "images/overlay-undo.png"),
        (Gravity(), "images/overlay-gravity.png"),
        (Direction(Vec2(0.0, 1.0)), "images/overlay-up.png"),
        (Direction(Vec2(0.0, -1.0)), "images/overlay-down.png"),
        (Direction(Vec2(-1.0, 0.0)), "images/overlay-left.png"),
        (Direction(Vec2(1.0, 0.0)), "images/overlay-right.png"),
        (Buff(3.0), "images/overlay-x3.png"),
        (Buff(9.0), "images/overlay-x9.png"),
        (Buff(2.0), "images/overlay-x2.png"),
        (Buff(4.0), "images/overlay-x4.png"),
        (Buff(5.0), "images/overlay-x4.png"),
        (Standard(1), None),
    ],
)
def test_overlay_image(box_type, image):
    assert overlay_image(box_type) == image


def test_lamp_light_scales_with_size():
    red = Color.rgb(1.0, 0.0, 0.0)
    lamp = Combobox(4.0, Lamp(red))
    light = box_point_light(lamp)
    assert light.radius == pytest.approx(lamp.world_size() * 3.5)
    assert light.color == red


def test_plain_box_has_no_light():
    assert box_point_light(Combobox(1.0, Standard(1))).radius == 0.0


def test_box_appearance_for_undo():
    box = Combobox(1.0, Undo())
    look = box_appearance(box)
    assert look.material.texture == BOX_IMAGE
    assert look.material.overlay == "images/overlay-undo.png"
    assert look.material.color == box_color(Undo())
    assert MaterialFlags.OVERLAY in look.material.flags
    assert look.state.phase is AnimationPhase.SPAWNING
    assert look.half_extents == Vec2(box.world_size() * 0.5, box.world_size() * 0.5)


def test_box_appearance_without_overlay():
    look = box_appearance(Combobox(1.0, Standard(1)))
    assert look.material.overlay is None
    assert look.material.flags == MaterialFlags.TEXTURE
    assert look.collision_groups.memberships == 0