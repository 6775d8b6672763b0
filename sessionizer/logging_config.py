"""Sessionizer logging configuration.

The picker owns the terminal while it runs, so logs never go to stderr:
they are written to a single file (default:
`$XDG_STATE_HOME/sessionizer/sessionizer.log`). Set
`SESSIONIZER_LOG_LEVEL=DEBUG` to see the tmux commands that were issued.
"""

from __future__ import annotations

import logging
from typing import Optional

from sessionizer.config import LoggingConfig, config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, settings: Optional[LoggingConfig] = None) -> None:
    """Configure Sessionizer logging.

    Args:
        level: Optional override for `SESSIONIZER_LOG_LEVEL`.
        settings: Logging settings to use instead of the global config.
    """
    settings = settings or config.logging
    resolved_level = (level or settings.level).upper()

    root = logging.getLogger("sessionizer")
    for existing in list(root.handlers):
        existing.close()
        root.removeHandler(existing)
    root.propagate = False
    level_value = logging.getLevelName(resolved_level)
    root.setLevel(level_value if isinstance(level_value, int) else logging.WARNING)

    try:
        path = settings.path
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8", delay=True)
    except (OSError, RuntimeError):
        # No writable log location (or no home directory): run without logs.
        handler = logging.NullHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
