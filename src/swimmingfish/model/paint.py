"""
Paint state shared by every draw call of a frame.

``PaintState`` is an immutable value. Host setters return a new state, and the
composer resolves it into a concrete ``ResolvedPaint`` per draw call, so the
torso's higher alpha can never leak into the appendages.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Protocol

from swimmingfish import config


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be within 0-255, got {value}.")


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


@dataclass(frozen=True)
class Color:
    """RGBA colour, 0-255 per channel."""
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_channel(name, getattr(self, name))

    def with_alpha(self, alpha: int) -> Color:
        return replace(self, a=alpha)

    def to_tuple(self) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a


class ColorFilter(Protocol):
    """Transforms the colour of every drawn pixel."""
    def apply(self, color: Color) -> Color: ...


@dataclass(frozen=True)
class TintFilter:
    """Source-in tint: replaces RGB, keeps the drawn alpha."""
    tint: Color

    def apply(self, color: Color) -> Color:
        return Color(self.tint.r, self.tint.g, self.tint.b, color.a)


@dataclass(frozen=True)
class LightingFilter:
    """Per-channel ``c * multiply / 255 + add`` on RGB, clamped to 0-255."""
    multiply: Color
    add: Color = Color(0, 0, 0, 0)

    def apply(self, color: Color) -> Color:
        return Color(
            _clamp_channel(color.r * self.multiply.r / 255.0 + self.add.r),
            _clamp_channel(color.g * self.multiply.g / 255.0 + self.add.g),
            _clamp_channel(color.b * self.multiply.b / 255.0 + self.add.b),
            color.a,
        )


@dataclass(frozen=True)
class ResolvedPaint:
    """Final fill colour handed to a rendering surface."""
    color: Color

    @property
    def alpha(self) -> int:
        return self.color.a


@dataclass(frozen=True)
class PaintState:
    color: Color = Color(*config.FISH_COLOR)
    alpha: int = config.OTHER_ALPHA
    body_alpha: int = config.BODY_ALPHA
    color_filter: Optional[ColorFilter] = None

    def __post_init__(self) -> None:
        _check_channel("alpha", self.alpha)
        _check_channel("body_alpha", self.body_alpha)

    def with_alpha(self, alpha: int) -> PaintState:
        """Host override of the appendage alpha. The torso keeps ``body_alpha``."""
        return replace(self, alpha=alpha)

    def with_color_filter(self, color_filter: Optional[ColorFilter]) -> PaintState:
        return replace(self, color_filter=color_filter)

    def appendage_paint(self) -> ResolvedPaint:
        return self._resolve(self.alpha)

    def body_paint(self) -> ResolvedPaint:
        return self._resolve(self.body_alpha)

    def _resolve(self, alpha: int) -> ResolvedPaint:
        color = self.color.with_alpha(alpha)
        if self.color_filter is not None:
            color = self.color_filter.apply(color)
        return ResolvedPaint(color)
