"""
Logging Configuration
Sets up the package logger for the fish renderer.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'swimmingfish' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO).
            Per-frame geometry is only reported at DEBUG.
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("swimmingfish")
    logger.setLevel(level)

    # Re-running the bootstrap (tests, repeated CLI calls) must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized (level=%s).", logging.getLevelName(level))
