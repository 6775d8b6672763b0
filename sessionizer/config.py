"""Global configuration management.

Config is loaded at module import time and available globally via:
    from sessionizer.config import config

There is no config file; the few knobs come from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from sessionizer.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_ROOTS,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    ENV_ROOTS,
)
from sessionizer.runtime.binaries import resolve_tmux_binary


@dataclass(frozen=True)
class LoggingConfig:
    level: str
    _configured_path: str | None = None

    @property
    def path(self) -> Path:
        """Log file path (resolved lazily so a missing home only matters when logging starts)."""
        if self._configured_path:
            return Path(self._configured_path).expanduser()
        state_home = os.getenv("XDG_STATE_HOME")
        base = Path(state_home) if state_home else Path.home() / ".local" / "state"
        return base / "sessionizer" / "sessionizer.log"


@dataclass(frozen=True)
class Config:
    """Runtime configuration.

    Attributes:
        roots: Parent directory names, relative to home, scanned for projects
        tmux_binary: tmux executable used for every session command
        logging: Log level and destination
    """

    roots: tuple[str, ...]
    tmux_binary: str
    logging: LoggingConfig


def _parse_roots(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_ROOTS
    roots = tuple(part.strip() for part in raw.split(",") if part.strip())
    return roots or DEFAULT_ROOTS


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Build a Config from environment variables."""
    env = os.environ if environ is None else environ
    level = (env.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()
    return Config(
        roots=_parse_roots(env.get(ENV_ROOTS)),
        tmux_binary=resolve_tmux_binary(env),
        logging=LoggingConfig(level=level, _configured_path=env.get(ENV_LOG_FILE) or None),
    )


config = load_config()
