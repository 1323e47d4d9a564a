"""Rendering surface contract and an in-memory implementation."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from swimmingfish.model.geometry_primitives import Path, Point
from swimmingfish.model.paint import ResolvedPaint


@runtime_checkable
class RenderSurface(Protocol):
    """Immediate-mode 2D surface the fish is drawn onto."""
    def fill_circle(self, center: Point, radius: float, paint: ResolvedPaint) -> None: ...
    def fill_path(self, path: Path, paint: ResolvedPaint) -> None: ...


class RecordingSurface:
    """
    Surface that records every fill call instead of rasterising it.

    Useful for headless diagnostics and for asserting on draw order.
    """
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def fill_circle(self, center: Point, radius: float, paint: ResolvedPaint) -> None:
        self.calls.append(("circle", (center, radius, paint)))

    def fill_path(self, path: Path, paint: ResolvedPaint) -> None:
        self.calls.append(("path", (path, paint)))

    def clear(self) -> None:
        self.calls.clear()

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.calls]
