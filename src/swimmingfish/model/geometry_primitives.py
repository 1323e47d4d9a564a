"""
Geometric primitives for the fish outline: points and path descriptors.

Every shape is described by a fresh, immutable ``Path`` value. Builder methods
return a new ``Path`` instead of mutating a shared buffer, so a path handed to a
surface can never change behind its back.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A point in screen space (positive y points down)."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class QuadTo:
    """Quadratic Bezier segment from the current point to ``end``."""
    control: Point
    end: Point


PathOp = Union[MoveTo, LineTo, QuadTo]


@dataclass(frozen=True)
class Path:
    """
    An ordered, immutable sequence of path operations.

    The outline is implicitly closed when filled: the last point connects back
    to the first ``MoveTo``.

    Raises:
        ValueError: If the first operation is not a ``MoveTo``.
    """
    ops: tuple[PathOp, ...] = ()

    def __post_init__(self) -> None:
        if self.ops and not isinstance(self.ops[0], MoveTo):
            raise ValueError(f"A path must start with MoveTo, got {type(self.ops[0]).__name__}.")

    @classmethod
    def starting_at(cls, point: Point) -> Path:
        return cls((MoveTo(point),))

    def move_to(self, point: Point) -> Path:
        return Path(self.ops + (MoveTo(point),))

    def line_to(self, point: Point) -> Path:
        return Path(self.ops + (LineTo(point),))

    def quad_to(self, control: Point, end: Point) -> Path:
        return Path(self.ops + (QuadTo(control, end),))

    def __len__(self) -> int:
        return len(self.ops)

    def vertices(self) -> npt.NDArray[np.float64]:
        """
        All points referenced by the path, control points included.

        Returns:
            An array of shape (N, 2). The convex hull of these points contains
            the filled outline, which makes it usable for bounds checks.
        """
        pts: list[Point] = []
        for op in self.ops:
            if isinstance(op, QuadTo):
                pts.extend((op.control, op.end))
            else:
                pts.append(op.point)
        if not pts:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([(p.x, p.y) for p in pts], dtype=np.float64)
