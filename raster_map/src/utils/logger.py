"""Logging wrapper supporting optional file output."""

from __future__ import annotations

import logging
from pathlib import Path


def get_logger(name: str, file_path: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Return configured logger, attaching a ``file_path`` handler if provided.

    Handlers are attached once per logger name so repeated calls from the same
    module never duplicate output.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        if file_path:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(file_path, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    logger.setLevel(level)
    return logger
