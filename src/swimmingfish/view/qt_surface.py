from __future__ import annotations

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath

from swimmingfish.controller.composer import InvalidSurfaceError
from swimmingfish.model.geometry_primitives import LineTo, MoveTo, Path, Point, QuadTo
from swimmingfish.model.paint import ResolvedPaint


def to_qcolor(paint: ResolvedPaint) -> QColor:
    return QColor(*paint.color.to_tuple())


def to_qpainter_path(path: Path) -> QPainterPath:
    """Replay a path descriptor into a new ``QPainterPath``."""
    qpath = QPainterPath()
    # Android paths fill with the non-zero winding rule; Qt defaults to odd-even
    qpath.setFillRule(Qt.FillRule.WindingFill)
    for op in path.ops:
        if isinstance(op, MoveTo):
            qpath.moveTo(op.point.x, op.point.y)
        elif isinstance(op, LineTo):
            qpath.lineTo(op.point.x, op.point.y)
        elif isinstance(op, QuadTo):
            qpath.quadTo(op.control.x, op.control.y, op.end.x, op.end.y)
        else:
            raise TypeError(f"Unknown path operation: {op!r}")
    return qpath


class QPainterSurface:
    """Adapts an active ``QPainter`` to the rendering surface contract."""

    def __init__(self, painter: QPainter) -> None:
        if painter is None or not painter.isActive():
            raise InvalidSurfaceError("QPainterSurface needs an active QPainter.")
        self._painter = painter
        self._painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self._painter.setPen(Qt.PenStyle.NoPen)

    def fill_circle(self, center: Point, radius: float, paint: ResolvedPaint) -> None:
        self._painter.setBrush(QBrush(to_qcolor(paint)))
        self._painter.drawEllipse(QPointF(center.x, center.y), radius, radius)

    def fill_path(self, path: Path, paint: ResolvedPaint) -> None:
        self._painter.fillPath(to_qpainter_path(path), QBrush(to_qcolor(paint)))
