"""Case-insensitive substring/fuzzy matching for the picker filter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from sessionizer.core.models import Entry


@dataclass(frozen=True)
class EntryMatch:
    """A visible entry: its index in the full list and the matched character positions."""

    index: int
    positions: tuple[int, ...] = ()


def match_positions(query: str, candidate: str) -> tuple[int, ...] | None:
    """Positions in candidate matched by query, or None when it does not match.

    A contiguous substring wins; otherwise the characters of query must
    appear in order (fuzzy).
    """
    if not query:
        return ()
    needle = query.lower()
    haystack = candidate.lower()

    start = haystack.find(needle)
    if start >= 0:
        return tuple(range(start, start + len(needle)))

    positions: list[int] = []
    cursor = 0
    for char in needle:
        found = haystack.find(char, cursor)
        if found < 0:
            return None
        positions.append(found)
        cursor = found + 1
    return tuple(positions)


def filter_entries(entries: Sequence[Entry], query: str) -> list[EntryMatch]:
    """Visible subset for query, in original order. Never touches entries."""
    matches: list[EntryMatch] = []
    for index, entry in enumerate(entries):
        positions = match_positions(query, entry.filter_value)
        if positions is not None:
            matches.append(EntryMatch(index=index, positions=positions))
    return matches
