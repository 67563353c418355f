"""Logging configuration for VocabTrainer."""
import logging
import logging.handlers
from pathlib import Path

from core.config import Settings

# Marks the handlers installed here so a repeated setup replaces them.
_OWNED = "_vocabtrainer_handler"


def setup_logging(settings: Settings) -> None:
    """Set up logging configuration.

    Safe to call more than once: handlers from a previous call are
    removed before the new ones are attached.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if getattr(handler, _OWNED, False):
            root_logger.removeHandler(handler)
            handler.close()

    root_logger.setLevel(settings.logging.level)

    formatter = logging.Formatter(settings.logging.format)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    setattr(console_handler, _OWNED, True)
    root_logger.addHandler(console_handler)

    # File handler if log file is specified
    if settings.logging.file:
        Path(settings.logging.file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            settings.logging.file,
            maxBytes=1024 * 1024,  # 1MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        setattr(file_handler, _OWNED, True)
        root_logger.addHandler(file_handler)

    # Set logging levels for third-party libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logging.info("Logging configured (level=%s)", settings.logging.level)
