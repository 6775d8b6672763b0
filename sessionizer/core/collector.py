"""Discover project directories under the configured parents in $HOME."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)


class CollectorError(RuntimeError):
    """Base error for directory collection."""


class HomeDirectoryError(CollectorError):
    """The user's home directory could not be resolved."""


class DirectoryReadError(CollectorError):
    """A configured parent directory could not be listed."""

    def __init__(self, parent: str, path: Path, reason: str) -> None:
        super().__init__(f"cannot read {path}: {reason}")
        self.parent = parent
        self.path = path


def resolve_home() -> Path:
    """Return the home directory from $HOME or raise HomeDirectoryError."""
    home = os.environ.get("HOME", "").strip()
    if not home:
        raise HomeDirectoryError("cannot resolve home directory: $HOME is not defined")
    return Path(home)


def collect_directories(parents: Sequence[str], home: Path | None = None) -> dict[str, list[Path]]:
    """List the immediate children of each parent directory.

    Children are returned sorted by name; files are included, filtering
    happens when entries are built. Any unreadable parent aborts the whole
    collection.

    Args:
        parents: Directory names relative to home (e.g. "dev", ".config")
        home: Home directory override; resolved from the environment when omitted

    Returns:
        Mapping of parent name to its children, in the order parents were given.
    """
    base = home if home is not None else resolve_home()
    collected: dict[str, list[Path]] = {}
    for parent in parents:
        parent_path = base / parent
        try:
            children = sorted(parent_path.iterdir(), key=lambda child: child.name)
        except OSError as exc:
            raise DirectoryReadError(parent, parent_path, exc.strerror or str(exc)) from exc
        logger.debug("Collected %d entries from %s", len(children), parent_path)
        collected.setdefault(parent, []).extend(children)
    return collected
