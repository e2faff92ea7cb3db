"""Root logger setup for the catalog app.

``CINEDEX_LOG_LEVEL`` (a level name or number) beats everything else. Failing
that, a truthy ``CINEDEX_DEBUG_LOGGING`` or ``CINEDEX_DEBUG`` forces DEBUG.
The settings dialog toggle only applies when neither is set.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_VAR = "CINEDEX_LOG_LEVEL"
DEBUG_VARS = ("CINEDEX_DEBUG_LOGGING", "CINEDEX_DEBUG")
# font cache scans and image plugins flood DEBUG output
QUIET_LOGGERS = ("matplotlib", "PIL")


def _parse_level(raw: Union[int, str, None], default: int = logging.INFO) -> int:
    if isinstance(raw, int):
        return raw
    text = (raw or "").strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper()) if text else None
    return level if isinstance(level, int) else default


def _flag_set(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in {"1", "true", "yes", "on"}


def _env_level() -> Optional[int]:
    explicit = os.getenv(LEVEL_VAR)
    if explicit:
        return _parse_level(explicit)
    return logging.DEBUG if any(_flag_set(name) for name in DEBUG_VARS) else None


def _set_levels(level: int) -> int:
    logging.getLogger().setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    return level


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    """Install the console handler once and return the effective level."""
    env = _env_level()
    level = env if env is not None else _parse_level(default_level)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    return _set_levels(level)


def apply_gui_preferences(debug_enabled: bool) -> int:
    env = _env_level()
    if env is None:
        env = logging.DEBUG if debug_enabled else logging.INFO
    return _set_levels(env)


def level_name(level: int) -> str:
    return logging.getLevelName(level)


def env_forces_debug() -> bool:
    env = _env_level()
    return env is not None and env <= logging.DEBUG
