"""Logging helpers."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILENAME = "amenity_images.log"
# HTTP client libraries log every request at INFO/DEBUG.
NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def configure_logging(
    level: str,
    log_dir: Optional[Path] = None,
    *,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> Optional[Path]:
    """Configure root logging for CLI runs and return the log file path, if any.

    ``log_dir`` must already exist (see ``Settings.ensure_directories``); when it
    is ``None`` only the console handler is installed. Loggers named in ``quiet``
    are capped at WARNING unless ``level`` is DEBUG.
    """
    resolved = getattr(logging, level.upper(), logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file = log_dir / LOG_FILENAME if log_dir is not None else None
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=resolved, format=LOG_FORMAT, handlers=handlers, force=True)

    if resolved > logging.DEBUG:
        for name in quiet:
            logging.getLogger(name).setLevel(logging.WARNING)
    return log_file
