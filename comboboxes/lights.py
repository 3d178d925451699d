"""Point lights and the uniform block that carries them to materials."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from comboboxes.color import Color

Vec4 = Tuple[float, float, float, float]
Vec3 = Tuple[float, float, float]

MAX_LIGHTS = 16
_ZERO4: Vec4 = (0.0, 0.0, 0.0, 0.0)


@dataclass
class PointLight2d:
    """A round light source; lights with a tiny radius are ignored."""

    radius: float = 0.0
    color: Color = field(default_factory=lambda: Color.WHITE)


@dataclass
class AmbientLight:
    """Light applied evenly to the whole scene."""

    color: Color = field(default_factory=lambda: Color.WHITE * 30.0)


@dataclass
class PointLightsUniform:
    """Up to sixteen lights plus the ambient colour, in linear space."""

    lights_num: int = 0
    positions: list = field(default_factory=lambda: [_ZERO4] * MAX_LIGHTS)
    colors: list = field(default_factory=lambda: [_ZERO4] * MAX_LIGHTS)
    ambient: Vec4 = (30.0, 30.0, 30.0, 1.0)

    def add(self, light: PointLight2d, position: Vec3) -> None:
        if self.lights_num >= MAX_LIGHTS:
            raise ValueError(f"at most {MAX_LIGHTS} point lights are supported")
        x, y, z = position
        self.positions[self.lights_num] = (float(x), float(y), float(z), light.radius)
        self.colors[self.lights_num] = light.color.as_linear_rgba()
        self.lights_num += 1

    def copy(self) -> PointLightsUniform:
        return copy.deepcopy(self)


def build_lights_uniform(
    ambient: AmbientLight, lights: Iterable[tuple[PointLight2d, Vec3]]
) -> PointLightsUniform:
    """Collect lights given as ``(light, position)`` pairs into a uniform."""
    uniform = PointLightsUniform(ambient=ambient.color.as_linear_rgba())
    for light, position in lights:
        if light.radius < 0.01:
            continue
        uniform.add(light, position)
    return uniform


def update_lights(
    materials: Iterable,
    ambient: AmbientLight,
    lights: Iterable[tuple[PointLight2d, Vec3]],
    ambient_changed: bool,
) -> bool:
    """Give every material a fresh copy of the scene's lights.

    Nothing happens when the ambient light is bright and unchanged, since
    point lights make no visible difference then. Returns whether the
    materials were updated.
    """
    r, g, b, _ = ambient.color.as_rgba()
    if math.sqrt(r * r + g * g + b * b) > 10.0 and not ambient_changed:
        return False

    uniform = build_lights_uniform(ambient, lights)
    for material in materials:
        if material is not None:
            material.lights = uniform.copy()
    return True