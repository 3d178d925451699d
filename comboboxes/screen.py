"""Full-screen quad geometry and sampler settings for post-processing passes."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class ScreenVertex:
    """One vertex of the screen quad."""

    position: tuple[float, float, float]


class FilterMode(enum.Enum):
    NEAREST = "nearest"
    LINEAR = "linear"


class AddressMode(enum.Enum):
    CLAMP_TO_EDGE = "clamp_to_edge"
    REPEAT = "repeat"
    MIRROR_REPEAT = "mirror_repeat"


@dataclass(frozen=True)
class SamplerDescriptor:
    """How a texture is sampled."""

    label: str
    mag_filter: FilterMode
    min_filter: FilterMode
    address_mode_u: AddressMode = AddressMode.CLAMP_TO_EDGE
    address_mode_v: AddressMode = AddressMode.CLAMP_TO_EDGE
    address_mode_w: AddressMode = AddressMode.CLAMP_TO_EDGE


def default_quad() -> tuple[ScreenVertex, ...]:
    """Two triangles covering the unit square."""
    corners = [
        (0.0, 0.0),
        (0.0, 1.0),
        (1.0, 1.0),
        (0.0, 0.0),
        (1.0, 0.0),
        (1.0, 1.0),
    ]
    return tuple(ScreenVertex((x, y, 0.0)) for x, y in corners)


def default_sampler() -> SamplerDescriptor:
    return SamplerDescriptor("default_sampler", FilterMode.NEAREST, FilterMode.NEAREST)


def linear_sampler() -> SamplerDescriptor:
    return SamplerDescriptor("linear_sampler", FilterMode.LINEAR, FilterMode.LINEAR)