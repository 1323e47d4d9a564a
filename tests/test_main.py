"""Tests for the command line entry point and logging setup."""

import logging

import pytest

from swimmingfish.logging_config import setup_logging
from swimmingfish.main import main


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("swimmingfish")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestSetupLogging:
    def test_does_not_stack_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("swimmingfish").handlers) == 1

    def test_optional_file_handler(self, tmp_path):
        log_file = tmp_path / "fish.log"
        setup_logging(level=logging.DEBUG, log_file=str(log_file))
        logger = logging.getLogger("swimmingfish")
        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG

        for handler in logger.handlers:
            handler.flush()
        assert "Logging initialized" in log_file.read_text(encoding="utf-8")


class TestMain:
    def test_invalid_head_radius(self):
        assert main(["--head-radius", "-3", "--export", "unused"]) == 2

    def test_export_mode(self, qapp, tmp_path):
        out = tmp_path / "out"
        assert main(["--export", str(out), "--frames", "3", "--head-radius", "20"]) == 0
        assert sorted(p.name for p in out.iterdir()) == ["frame_0000.png", "frame_0001.png", "frame_0002.png"]

    def test_export_rejects_zero_frames(self, qapp, tmp_path):
        assert main(["--export", str(tmp_path), "--frames", "0"]) == 1
