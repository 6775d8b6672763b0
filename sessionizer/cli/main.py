"""sessionizer: pick a project directory and jump into its tmux session."""

from __future__ import annotations

import logging
import sys

from sessionizer.cli.tui.app import SelectorError, run_selector
from sessionizer.cli.tui.theme import EVERFOREST
from sessionizer.config import Config, config
from sessionizer.constants import EXIT_ERROR, EXIT_NO_SELECTION, EXIT_OK
from sessionizer.core.collector import CollectorError, collect_directories, resolve_home
from sessionizer.core.models import Entry, build_entries
from sessionizer.core.tmux_session import SessionLaunchError, attach_or_create_session
from sessionizer.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _fail(message: str) -> int:
    logger.error(message)
    sys.stderr.write(f"sessionizer: {message}\n")
    return EXIT_ERROR


def load_entries(cfg: Config) -> list[Entry]:
    """Collect every project directory under the configured roots."""
    home = resolve_home()
    directories = collect_directories(cfg.roots, home)
    entries = build_entries(directories, home)
    logger.debug("Loaded %d entries from %s", len(entries), ", ".join(cfg.roots))
    return entries


def run(cfg: Config | None = None) -> int:
    """Run the picker and launcher; return the process exit code."""
    cfg = cfg or config
    setup_logging(cfg.logging.level, cfg.logging)

    try:
        entries = load_entries(cfg)
    except CollectorError as exc:
        return _fail(str(exc))

    try:
        choice = run_selector(entries, EVERFOREST)
    except SelectorError as exc:
        return _fail(str(exc))
    except Exception as exc:  # Driver failures before the app loop starts
        logger.exception("Picker crashed")
        return _fail(f"error running picker: {exc}")

    if not choice:
        logger.info("No project selected")
        return EXIT_NO_SELECTION

    try:
        session_name = attach_or_create_session(choice, tmux_binary=cfg.tmux_binary)
    except SessionLaunchError as exc:
        return _fail(str(exc))

    logger.info("Attached to %s", session_name)
    return EXIT_OK


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
