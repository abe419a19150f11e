from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

ENV_THEME = "IGCV_GUI_THEME"
ENV_START_PAGE = "IGCV_GUI_START_PAGE"
ENV_WINDOW_SIZE = "IGCV_GUI_WINDOW_SIZE"
ENV_LOG_LEVEL = "IGCV_GUI_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MIN_WINDOW_SIZE = (640, 480)


def parse_window_size(raw: Optional[str]) -> Optional[Tuple[int, int]]:
    """Parse ``WIDTHxHEIGHT``; returns None for anything malformed or too small."""
    text = str(raw or "").strip().lower()
    if not text:
        return None
    parts = text.split("x")
    if len(parts) != 2:
        return None
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if width < MIN_WINDOW_SIZE[0] or height < MIN_WINDOW_SIZE[1]:
        return None
    return width, height


def normalize_log_level(raw: Optional[str]) -> Optional[str]:
    level = str(raw or "").strip().upper()
    return level if level in LOG_LEVELS else None


@dataclass(frozen=True)
class AppConfig:
    theme_name: str = "Fraunhofer CI"
    start_page: str = ""
    window_width: int = 1280
    window_height: int = 800
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        values = {}

        theme = str(env.get(ENV_THEME, "") or "").strip()
        if theme:
            values["theme_name"] = theme

        start_page = str(env.get(ENV_START_PAGE, "") or "").strip()
        if start_page:
            values["start_page"] = start_page

        raw_size = env.get(ENV_WINDOW_SIZE)
        size = parse_window_size(raw_size)
        if size is not None:
            values["window_width"], values["window_height"] = size
        elif raw_size:
            logger.warning("Ignoring malformed %s=%r", ENV_WINDOW_SIZE, raw_size)

        raw_level = env.get(ENV_LOG_LEVEL)
        level = normalize_log_level(raw_level)
        if level is not None:
            values["log_level"] = level
        elif raw_level:
            logger.warning("Ignoring unknown %s=%r", ENV_LOG_LEVEL, raw_level)

        return cls(**values)

    def with_overrides(self, theme_name=None, start_page=None, log_level=None) -> "AppConfig":
        """Apply command-line values; None (or an invalid log level) keeps the current value."""
        changes = {}
        if theme_name:
            changes["theme_name"] = str(theme_name)
        if start_page:
            changes["start_page"] = str(start_page)
        level = normalize_log_level(log_level)
        if level is not None:
            changes["log_level"] = level
        return replace(self, **changes)

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.window_width, self.window_height
