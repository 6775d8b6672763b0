"""Picker state model and reducer.

The app turns key presses, filter edits and terminal resizes into intents;
`reduce_state` is the only place state changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, TypedDict, cast

from sessionizer.cli.tui.filtering import EntryMatch, filter_entries
from sessionizer.cli.tui.theme import frame_size
from sessionizer.core.models import Entry

logger = logging.getLogger(__name__)


class SelectorPhase(str, Enum):
    """Lifecycle of the picker."""

    BROWSING = "browsing"
    TERMINAL = "terminal"


@dataclass
class SelectorState:
    """Everything the picker renders from."""

    entries: tuple[Entry, ...]
    phase: SelectorPhase = SelectorPhase.BROWSING
    filtering: bool = True  # Filter input is open from the start
    filter_text: str = ""
    matches: list[EntryMatch] = field(default_factory=list)
    cursor: int = 0  # Index into matches
    choice: str | None = None
    list_size: tuple[int, int] = (0, 0)

    @classmethod
    def initial(cls, entries: Sequence[Entry]) -> SelectorState:
        state = cls(entries=tuple(entries))
        state.matches = filter_entries(state.entries, "")
        return state

    @property
    def visible(self) -> list[Entry]:
        return [self.entries[m.index] for m in self.matches]

    @property
    def selected_match(self) -> EntryMatch | None:
        if not self.matches:
            return None
        return self.matches[self.cursor]

    @property
    def selected_entry(self) -> Entry | None:
        match = self.selected_match
        return self.entries[match.index] if match else None

    @property
    def dimmed(self) -> bool:
        """Rows are dimmed while the filter is open but still empty."""
        return self.filtering and not self.filter_text

    @property
    def is_terminal(self) -> bool:
        return self.phase is SelectorPhase.TERMINAL


class IntentType(str, Enum):
    """Intent identifiers for reducer-driven state updates."""

    SET_FILTER = "set_filter"
    CLEAR_FILTER = "clear_filter"
    MOVE_CURSOR = "move_cursor"
    JUMP = "jump"
    CONFIRM = "confirm"
    QUIT = "quit"
    RESIZE = "resize"


class IntentPayload(TypedDict, total=False):
    text: str
    delta: int
    index: int
    width: int
    height: int


@dataclass(frozen=True)
class Intent:
    """State transition request."""

    type: IntentType
    payload: IntentPayload = field(default_factory=lambda: cast(IntentPayload, {}))


def _apply_filter(state: SelectorState, text: str) -> None:
    state.filter_text = text
    state.matches = filter_entries(state.entries, text)
    state.cursor = 0


def reduce_state(state: SelectorState, intent: Intent) -> None:
    """Apply an intent to state in place."""
    if state.is_terminal:
        logger.debug("Ignoring %s after picker finished", intent.type.value)
        return

    t = intent.type
    p = intent.payload

    if t is IntentType.SET_FILTER:
        _apply_filter(state, p.get("text", ""))
        return

    if t is IntentType.CLEAR_FILTER:
        _apply_filter(state, "")
        return

    if t is IntentType.MOVE_CURSOR:
        if not state.matches:
            return
        target = state.cursor + p.get("delta", 0)
        state.cursor = min(max(target, 0), len(state.matches) - 1)
        return

    if t is IntentType.JUMP:
        if not state.matches:
            return
        index = p.get("index", 0)
        if index < 0:
            index = len(state.matches) + index
        state.cursor = min(max(index, 0), len(state.matches) - 1)
        return

    if t is IntentType.CONFIRM:
        entry = state.selected_entry
        if entry is None:
            return
        state.choice = entry.path
        state.phase = SelectorPhase.TERMINAL
        return

    if t is IntentType.QUIT:
        state.choice = None
        state.phase = SelectorPhase.TERMINAL
        return

    if t is IntentType.RESIZE:
        state.list_size = frame_size(p.get("width", 0), p.get("height", 0))
        return
