"""Full-screen project picker.

The filter input has focus from the start, so typing narrows the list
immediately. Enter opens the highlighted project; escape clears the
filter (or quits when it is already empty); ctrl+c quits.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Resize
from textual.widgets import Input, Label

from sessionizer.cli.tui.state import Intent, IntentType, SelectorState, reduce_state
from sessionizer.cli.tui.theme import EVERFOREST, SELECTOR_CSS, SelectorTheme, css_variables
from sessionizer.cli.tui.widgets.entry_row import EntryRow
from sessionizer.core.models import Entry

logger = logging.getLogger(__name__)

APP_TITLE = "Sessionizer"
FILTER_PROMPT = "Filter: "
HINTS = "↑/↓ move  enter open  esc clear/quit  ctrl+c quit"
ROW_HEIGHT = 3  # Two text lines plus spacing


class SelectorError(RuntimeError):
    """The picker crashed (Textual reports handler errors through its return code)."""


class SessionizerApp(App[Optional[str]]):
    """Filterable list of projects. Exits with the chosen path or None."""

    CSS = SELECTOR_CSS

    BINDINGS = [
        Binding("up", "cursor(-1)", "Up", show=False, priority=True),
        Binding("ctrl+p", "cursor(-1)", "Up", show=False, priority=True),
        Binding("down", "cursor(1)", "Down", show=False, priority=True),
        Binding("ctrl+n", "cursor(1)", "Down", show=False, priority=True),
        Binding("pageup", "page(-1)", "Page up", show=False, priority=True),
        Binding("pagedown", "page(1)", "Page down", show=False, priority=True),
        Binding("enter", "confirm", "Open", priority=True),
        Binding("escape", "escape", "Clear / Quit", priority=True),
        Binding("ctrl+c", "quit_selector", "Quit", priority=True),
    ]

    def __init__(self, entries: Sequence[Entry], selector_theme: SelectorTheme = EVERFOREST, **kwargs: object) -> None:
        self.selector_theme = selector_theme
        super().__init__(**kwargs)  # type: ignore[arg-type]
        self.state = SelectorState.initial(entries)
        self._rows: list[EntryRow] = []

    def get_css_variables(self) -> dict[str, str]:
        variables = super().get_css_variables()
        variables.update(css_variables(self.selector_theme))
        return variables

    def compose(self) -> ComposeResult:
        with Vertical(id="frame"):
            yield Label(APP_TITLE, id="title")
            with Horizontal(id="filter-row"):
                yield Label(FILTER_PROMPT, id="filter-prompt")
                yield Input(id="filter")
            with VerticalScroll(id="entries"):
                for index, entry in enumerate(self.state.entries):
                    yield EntryRow(entry, index, self.selector_theme)
            yield Label("", id="status")
            yield Label(HINTS, id="hints")

    def on_mount(self) -> None:
        self._rows = list(self.query(EntryRow))
        self.query_one("#filter", Input).focus()
        self._apply_size(self.size.width, self.size.height)
        self._refresh_rows()

    # --- State plumbing ---

    def apply_intent(self, intent: Intent) -> None:
        reduce_state(self.state, intent)
        if self.state.is_terminal:
            logger.debug("Picker finished with choice=%s", self.state.choice)
            self.exit(self.state.choice)
            return
        self._refresh_rows()

    def _refresh_rows(self) -> None:
        visible = {match.index: match for match in self.state.matches}
        selected = self.state.selected_match
        selected_row: EntryRow | None = None
        for row in self._rows:
            match = visible.get(row.entry_index)
            row.display = match is not None
            row.positions = match.positions if match else ()
            row.dimmed = self.state.dimmed
            row.selected = selected is not None and row.entry_index == selected.index
            if row.selected:
                selected_row = row
        if selected_row is not None:
            self.query_one("#entries", VerticalScroll).scroll_to_widget(selected_row, animate=False)
        self.query_one("#status", Label).update(self.status_text())

    def status_text(self) -> str:
        total = len(self.state.entries)
        if not total:
            return "No items."
        noun = "item" if total == 1 else "items"
        if self.state.filter_text:
            return f"{len(self.state.matches)} of {total} {noun}"
        return f"{total} {noun}"

    def _apply_size(self, width: int, height: int) -> None:
        reduce_state(self.state, Intent(IntentType.RESIZE, {"width": width, "height": height}))
        list_width, list_height = self.state.list_size
        # Resize can arrive before compose has mounted the frame.
        for frame in self.query("#frame").results(Vertical):
            frame.styles.width = list_width
            frame.styles.height = list_height

    # --- Events ---

    def on_resize(self, event: Resize) -> None:
        self._apply_size(event.size.width, event.size.height)

    def on_input_changed(self, event: Input.Changed) -> None:
        self.apply_intent(Intent(IntentType.SET_FILTER, {"text": event.value}))

    def on_entry_row_pressed(self, message: EntryRow.Pressed) -> None:
        for position, match in enumerate(self.state.matches):
            if match.index == message.row.entry_index:
                self.apply_intent(Intent(IntentType.JUMP, {"index": position}))
                return

    # --- Actions ---

    def action_cursor(self, delta: int) -> None:
        self.apply_intent(Intent(IntentType.MOVE_CURSOR, {"delta": delta}))

    def action_page(self, direction: int) -> None:
        _, list_height = self.state.list_size
        page = max(1, list_height // ROW_HEIGHT)
        self.apply_intent(Intent(IntentType.MOVE_CURSOR, {"delta": direction * page}))

    def action_confirm(self) -> None:
        self.apply_intent(Intent(IntentType.CONFIRM))

    def action_escape(self) -> None:
        if not self.state.filter_text:
            self.action_quit_selector()
            return
        self.apply_intent(Intent(IntentType.CLEAR_FILTER))
        self.query_one("#filter", Input).value = ""

    def action_quit_selector(self) -> None:
        self.apply_intent(Intent(IntentType.QUIT))


def run_selector(
    entries: Sequence[Entry],
    selector_theme: SelectorTheme = EVERFOREST,
    *,
    headless: bool = False,
) -> str | None:
    """Take over the terminal until the user picks a project or quits.

    Returns:
        The chosen path, or None when the user quit.

    Raises:
        SelectorError: If the app stopped on an error instead of a pick or quit.
    """
    app = SessionizerApp(entries, selector_theme)
    choice = app.run(headless=headless)
    if app.return_code:
        raise SelectorError(f"picker exited with code {app.return_code}")
    return choice
