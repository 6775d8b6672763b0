"""Selectable project entries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence


@dataclass(frozen=True)
class Entry:
    """One project directory offered by the picker.

    Attributes:
        title: Directory name (primary label)
        category: Parent it was found under, relative to home (e.g. "dev")
        path: Absolute path of the directory
    """

    title: str
    category: str
    path: str

    @property
    def description(self) -> str:
        """Secondary label shown under the title."""
        return self.category

    @property
    def filter_value(self) -> str:
        """String typed filter text is matched against."""
        return self.title


def build_entries(directories: Mapping[str, Sequence[Path]], home: Path) -> list[Entry]:
    """Turn collected children into entries, dropping anything that is not a directory."""
    entries: list[Entry] = []
    for category, children in directories.items():
        for child in children:
            if not child.is_dir():
                continue
            entries.append(Entry(title=child.name, category=category, path=str(home / category / child.name)))
    return entries
