"""
Application Initialization
==========================
Parses the command line, sets up logging and either opens the window or
exports frames headlessly.

Why is this file needed?
------------------------
It acts as the composition root. It:
1. Configures logging before anything else logs.
2. Builds the body plan from the requested head radius.
3. Creates the Qt application object the chosen mode needs.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from swimmingfish import config
from swimmingfish.logging_config import setup_logging
from swimmingfish.model.body_plan import BodyPlan

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="swimmingfish", description="Procedurally animated swimming fish.")
    parser.add_argument("--head-radius", type=float, default=config.DEFAULT_HEAD_RADIUS,
                        help="Head radius in pixels; every other proportion derives from it")
    parser.add_argument("--debug", action="store_true", help="Log every rendered frame")
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    parser.add_argument("--export", type=str, default=None, metavar="DIR",
                        help="Write PNG frames of one period to DIR instead of opening a window")
    parser.add_argument("--frames", type=int, default=config.DEFAULT_EXPORT_FRAMES,
                        help="Number of frames to export")
    return parser.parse_args(argv)


def _run_export(plan: BodyPlan, directory: str, frame_count: int) -> int:
    # No window is ever shown; do not require a display
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtGui import QGuiApplication

    from swimmingfish.controller.composer import FrameComposer
    from swimmingfish.view.export import export_frames

    # QImage painting needs a GUI application instance alive for the whole export
    app = QGuiApplication.instance() or QGuiApplication(sys.argv[:1])
    try:
        export_frames(directory, frame_count, FrameComposer(plan))
    except (OSError, ValueError) as e:
        logger.error(f"Export failed: {e}")
        return 1
    return 0


def _run_window(plan: BodyPlan) -> int:
    from PySide6.QtWidgets import QApplication

    from swimmingfish.view.main_window import MainWindow

    app = QApplication(sys.argv[:1])
    app.setApplicationName(config.VISIBLE_APP_NAME)

    window = MainWindow(plan)
    window.show()
    return app.exec()


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    try:
        plan = BodyPlan.from_head_radius(args.head_radius)
    except ValueError as e:
        logger.error(str(e))
        return 2

    if args.export:
        return _run_export(plan, args.export, args.frames)
    return _run_window(plan)


if __name__ == "__main__":
    sys.exit(main())
