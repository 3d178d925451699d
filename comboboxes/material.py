"""The tinted, textured, lit material used for scene sprites."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from comboboxes.color import Color
from comboboxes.lights import PointLightsUniform

# HDR render target used by the material pipeline.
TARGET_FORMAT = "rg11b10float"


class MaterialFlags(enum.IntFlag):
    """Which optional textures a material carries; must match the shader."""

    NONE = 0
    TEXTURE = 1 << 0
    EMISSIVE = 1 << 1
    OVERLAY = 1 << 2
    UNINITIALIZED = 0xFFFF


@dataclass
class ColorMaterialCustomUniform:
    """The data a material hands to the shader."""

    color: tuple[float, float, float, float]
    flags: int
    lights: PointLightsUniform


@dataclass
class ColorMaterialCustom:
    """A colour tint with optional base, emissive and overlay textures."""

    color: Color = field(default_factory=lambda: Color.WHITE)
    lights: PointLightsUniform = field(default_factory=PointLightsUniform)
    texture: Optional[str] = None
    emissive: Optional[str] = None
    overlay: Optional[str] = None

    @classmethod
    def from_color(cls, color: Color) -> ColorMaterialCustom:
        return cls(color=color)

    @classmethod
    def from_texture(cls, texture: str) -> ColorMaterialCustom:
        return cls(texture=texture)

    @property
    def flags(self) -> MaterialFlags:
        flags = MaterialFlags.NONE
        if self.texture is not None:
            flags |= MaterialFlags.TEXTURE
        if self.emissive is not None:
            flags |= MaterialFlags.EMISSIVE
        if self.overlay is not None:
            flags |= MaterialFlags.OVERLAY
        return flags

    def as_uniform(self) -> ColorMaterialCustomUniform:
        return ColorMaterialCustomUniform(
            color=self.color.as_linear_rgba(),
            flags=int(self.flags),
            lights=self.lights.copy(),
        )


def material_from_texture_and_emissive(
    texture: str, emissive: Optional[str], overlay: Optional[str]
) -> ColorMaterialCustom:
    """Build a material from a base texture and optional extra layers."""
    return ColorMaterialCustom(texture=texture, emissive=emissive, overlay=overlay)