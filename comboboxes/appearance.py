"""How each kind of box looks: tint, overlay picture and light."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from comboboxes.collision_groups import NONE, CollisionGroups
from comboboxes.color import Color
from comboboxes.combobox import (
    BoxType,
    Buff,
    Combobox,
    ComboboxState,
    Direction,
    Gravity,
    Lamp,
    Standard,
    Undo,
)
from comboboxes.geometry import Vec2
from comboboxes.lights import PointLight2d
from comboboxes.material import ColorMaterialCustom, material_from_texture_and_emissive

BOX_IMAGE = "images/box-default-2.png"
BOX_DEPTH = -0.1
INITIAL_SCALE = 0.01
BOX_FRICTION = 0.9


def box_color(box_type: BoxType) -> Color:
    """The tint for a kind of box."""
    if isinstance(box_type, Standard):
        if box_type.group == 1:
            return Color.rgb_u8(103, 245, 124)
        if box_type.group == 2:
            return Color.rgb_u8(242, 176, 90)
        return Color.rgb_u8(90, 176, 242)
    if isinstance(box_type, Buff):
        return Color.rgb_u8(50, 91, 227)
    if isinstance(box_type, Undo):
        return Color.rgb_u8(141, 50, 227)
    if isinstance(box_type, Gravity):
        return Color.rgb_u8(232, 67, 56)
    if isinstance(box_type, Direction):
        return Color.rgb_u8(29, 196, 91)
    if isinstance(box_type, Lamp):
        return box_type.color * 2.5
    raise TypeError(f"unknown box type: {box_type!r}")


def _buff_overlay(factor: float) -> str:
    for value, name in ((3.0, "x3"), (9.0, "x9"), (2.0, "x2")):
        if abs(factor - value) < 0.1:
            return f"images/overlay-{name}.png"
    return "images/overlay-x4.png"


def _direction_overlay(direction: Vec2) -> str:
    if direction.y > 0.5:
        return "images/overlay-up.png"
    if direction.y < -0.5:
        return "images/overlay-down.png"
    if direction.x < -0.5:
        return "images/overlay-left.png"
    return "images/overlay-right.png"


def overlay_image(box_type: BoxType) -> Optional[str]:
    """The picture drawn over a box, if its kind has one."""
    if isinstance(box_type, Undo):
        return "images/overlay-undo.png"
    if isinstance(box_type, Direction):
        return _direction_overlay(box_type.direction)
    if isinstance(box_type, Buff):
        return _buff_overlay(box_type.factor)
    if isinstance(box_type, Gravity):
        return "images/overlay-gravity.png"
    return None


def box_point_light(combobox: Combobox) -> PointLight2d:
    """Lamps shine over three and a half box sizes; other boxes are dark."""
    if isinstance(combobox.box_type, Lamp):
        return PointLight2d(
            radius=combobox.world_size() * 3.5, color=combobox.box_type.color
        )
    return PointLight2d()


@dataclass
class BoxAppearance:
    """Everything needed to put a freshly spawned box on screen."""

    material: ColorMaterialCustom
    point_light: PointLight2d
    size: float
    half_extents: Vec2
    depth: float
    scale: float
    state: ComboboxState
    collision_groups: CollisionGroups
    friction: float


def box_appearance(combobox: Combobox) -> BoxAppearance:
    """Material, light and starting state of a newly spawned box."""
    material = material_from_texture_and_emissive(
        BOX_IMAGE, None, overlay_image(combobox.box_type)
    )
    material.color = box_color(combobox.box_type)
    size = combobox.world_size()
    return BoxAppearance(
        material=material,
        point_light=box_point_light(combobox),
        size=size,
        half_extents=Vec2(size * 0.5, size * 0.5),
        depth=BOX_DEPTH,
        scale=INITIAL_SCALE,
        state=ComboboxState.spawning(0.0),
        collision_groups=NONE,
        friction=BOX_FRICTION,
    )