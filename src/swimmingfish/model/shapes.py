"""Draw commands emitted by the shape builders, one per fill call."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Union

import numpy as np

from swimmingfish.model.geometry_primitives import Path, Point
from swimmingfish.model.paint import ResolvedPaint

if TYPE_CHECKING:
    import numpy.typing as npt


class ShapeKind(StrEnum):
    HEAD = "head"
    FIN = "fin"
    SEGMENT_CIRCLE = "segment-circle"
    SEGMENT = "segment"
    LOBE = "lobe"
    BODY = "body"


@dataclass(frozen=True)
class FillCircle:
    kind: ShapeKind
    center: Point
    radius: float
    paint: ResolvedPaint

    def bounds(self) -> npt.NDArray[np.float64]:
        """(2, 2) array of [[xmin, ymin], [xmax, ymax]]."""
        c = self.center.to_array()
        return np.vstack([c - self.radius, c + self.radius])


@dataclass(frozen=True)
class FillPath:
    kind: ShapeKind
    path: Path
    paint: ResolvedPaint

    def bounds(self) -> npt.NDArray[np.float64]:
        pts = self.path.vertices()
        return np.vstack([pts.min(axis=0), pts.max(axis=0)])


DrawCommand = Union[FillCircle, FillPath]
