from __future__ import annotations

import logging
import logging.config
import os
import sys
from typing import Optional


def _log_level(default: str) -> str:
    return os.getenv("LOG_LEVEL", default).upper()


def _log_destination(default: str) -> str:
    return os.getenv("LOG_DESTINATION", default).lower()


def _log_file_path() -> Optional[str]:
    return os.getenv("LOG_FILE")


def configure_logging(
    default_level: str = "INFO",
    default_destination: str = "stdout",
    level: Optional[str] = None,
) -> None:
    """Configure the root logger from LOG_LEVEL / LOG_DESTINATION / LOG_FILE.

    ``level`` wins over LOG_LEVEL; the defaults apply only when the
    environment leaves a setting unset. The CLI passes ``stderr`` so log
    lines never interleave with the menu on stdout.
    """
    resolved_level = level.upper() if level else _log_level(default_level)
    destination = _log_destination(default_destination)
    handlers = {}

    if destination == "file":
        log_file = _log_file_path()
        if not log_file:
            raise RuntimeError("LOG_FILE is required when LOG_DESTINATION=file")
        handlers["default"] = {
            "class": "logging.FileHandler",
            "level": resolved_level,
            "filename": log_file,
            "formatter": "standard",
        }
    else:
        stream = sys.stdout if destination == "stdout" else sys.stderr
        handlers["default"] = {
            "class": "logging.StreamHandler",
            "level": resolved_level,
            "stream": stream,
            "formatter": "standard",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": handlers,
            "root": {"handlers": ["default"], "level": resolved_level},
        }
    )
