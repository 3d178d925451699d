"""Colours stored in sRGB space with conversion to linear values."""

from __future__ import annotations

from dataclasses import dataclass


def _srgb_to_linear(value: float) -> float:
    if value <= 0.04045:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


@dataclass(frozen=True)
class Color:
    """An sRGB colour with alpha; components may exceed 1.0 for HDR."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> Color:
        return cls(float(r), float(g), float(b), 1.0)

    @classmethod
    def rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        return cls(float(r), float(g), float(b), float(a))

    @classmethod
    def rgb_u8(cls, r: int, g: int, b: int) -> Color:
        for component in (r, g, b):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range: {component}")
        return cls(r / 255.0, g / 255.0, b / 255.0, 1.0)

    def __mul__(self, factor: float) -> Color:
        """Scale the colour channels, leaving alpha alone."""
        return Color(self.r * factor, self.g * factor, self.b * factor, self.a)

    __rmul__ = __mul__

    def as_rgba(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def as_linear_rgba(self) -> tuple[float, float, float, float]:
        return (
            _srgb_to_linear(self.r),
            _srgb_to_linear(self.g),
            _srgb_to_linear(self.b),
            self.a,
        )


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)  # type: ignore[attr-defined]
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)  # type: ignore[attr-defined]