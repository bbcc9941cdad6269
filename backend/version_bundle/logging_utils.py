"""Logging setup shared by the endpoint, resolvers and the admin app."""

from __future__ import annotations

import logging
import os
from typing import Final, Mapping, Optional

LOGGER_NAME: Final[str] = "version_bundle"
PRIMARY_LEVEL_ENV: Final[str] = "VERSION_BUNDLE_LOG_LEVEL"
FALLBACK_LEVEL_ENV: Final[str] = "LOG_LEVEL"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


def parse_log_level(raw: Optional[str], default: int = logging.INFO) -> int:
    """Translate ``"debug"``, ``"20"`` and friends into a logging level."""
    candidate = (raw or "").strip()
    if not candidate:
        return default
    if candidate.isdigit():
        return int(candidate)
    level = logging.getLevelName(candidate.upper())
    return level if isinstance(level, int) else default


def resolve_log_level(environ: Optional[Mapping[str, str]] = None) -> int:
    """Return the level configured in the environment, preferring our own variable."""
    env = os.environ if environ is None else environ
    return parse_log_level(env.get(PRIMARY_LEVEL_ENV) or env.get(FALLBACK_LEVEL_ENV))


def configure_logging(level: Optional[int] = None) -> logging.Logger:
    """Attach a stdout handler to the package logger once and apply the level."""
    logger = logging.getLogger(LOGGER_NAME)
    effective = resolve_log_level() if level is None else level

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    for handler in logger.handlers:
        handler.setLevel(effective)
    logger.setLevel(effective)
    return logger


def get_logger(child: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or one of its children."""
    base = configure_logging()
    return base.getChild(child) if child else base
