"""
Frame Export
============
Rasterises frames off-screen and writes them as PNG files.

Why is this file needed?
------------------------
The animation is a pure function of the phase, so a whole period can be
sampled without a window or a running clock (e.g. for GIF assembly or for
checking the drawing in CI).
"""
from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtGui import QColor, QImage, QPainter

from swimmingfish import config
from swimmingfish.controller.composer import FrameComposer
from swimmingfish.controller.phase_driver import phase_at
from swimmingfish.view.qt_surface import QPainterSurface

logger = logging.getLogger(__name__)


def render_to_image(
    phase: float,
    composer: FrameComposer | None = None,
    background: tuple[int, int, int, int] = config.BACKGROUND_COLOR,
) -> QImage:
    """
    Render one frame into a new image of the fish's intrinsic size.

    Args:
        phase: Animation phase in degrees.
        composer: Composer to draw with; a default fish if omitted.
        background: RGBA fill of the image before drawing.

    Returns:
        An ARGB32 premultiplied image.
    """
    composer = composer or FrameComposer()
    plan = composer.plan
    image = QImage(plan.intrinsic_width(), plan.intrinsic_height(), QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(QColor(*background))

    painter = QPainter(image)
    try:
        composer.render_frame(QPainterSurface(painter), phase)
    finally:
        painter.end()
    return image


def export_frames(
    directory: str | Path,
    frame_count: int = config.DEFAULT_EXPORT_FRAMES,
    composer: FrameComposer | None = None,
    duration_ms: float = config.ANIMATION_DURATION_MS,
) -> list[Path]:
    """
    Write ``frame_count`` evenly spaced frames of one period as PNG files.

    Files are named ``frame_0000.png``, ``frame_0001.png``, ...

    Raises:
        ValueError: If ``frame_count`` is not positive.
        OSError: If a frame cannot be written.
    """
    if frame_count <= 0:
        raise ValueError(f"Frame count must be positive, got {frame_count}.")

    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    composer = composer or FrameComposer()

    written: list[Path] = []
    step_ms = duration_ms / frame_count
    for i in range(frame_count):
        phase = phase_at(i * step_ms, duration_ms)
        target = out_dir / f"frame_{i:04d}.png"
        if not render_to_image(phase, composer).save(str(target)):
            raise OSError(f"Could not write frame to {target}")
        written.append(target)

    logger.info(f"Exported {len(written)} frames to {out_dir}")
    return written
