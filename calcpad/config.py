"""Runtime settings for calcpad.

Defaults live here as module constants; environment variables override them.
Bad values are ignored with a warning rather than stopping the CLI.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from calcpad.formatter import DEFAULT_PRECISION

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
MAX_PRECISION = 15  # beyond this, float noise shows up again

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Formatter and logging configuration."""

    precision: int = DEFAULT_PRECISION
    log_level: str = DEFAULT_LOG_LEVEL


def _read_precision(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_PRECISION
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring CALCPAD_PRECISION=%r: not an integer", raw)
        return DEFAULT_PRECISION
    if not 0 <= value <= MAX_PRECISION:
        logger.warning("Ignoring CALCPAD_PRECISION=%d: must be 0-%d", value, MAX_PRECISION)
        return DEFAULT_PRECISION
    return value


def _read_log_level(raw: Optional[str]) -> str:
    if raw is None or not raw.strip():
        return DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        logger.warning("Ignoring CALCPAD_LOG_LEVEL=%r", raw)
        return DEFAULT_LOG_LEVEL
    return level


def load_settings(env: Optional[dict[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        env: Mapping to read instead of os.environ (for tests).
    """
    env = os.environ if env is None else env
    return Settings(
        precision=_read_precision(env.get("CALCPAD_PRECISION")),
        log_level=_read_log_level(env.get("CALCPAD_LOG_LEVEL")),
    )
