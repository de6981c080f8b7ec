"""Logging setup utilities."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TextIO


def configure_logging(
    *,
    level: str | int = logging.INFO,
    log_path: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the ``lazutils`` logger; repeated calls do not duplicate handlers."""

    logger = logging.getLogger("lazutils")
    logger.setLevel(level)

    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    if not has_stream:
        stream_handler = logging.StreamHandler(stream=stream or sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_path and os.path.abspath(log_path) not in existing_files:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging"]
