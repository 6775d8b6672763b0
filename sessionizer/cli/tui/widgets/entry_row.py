"""Two-line project row: title on top, category below."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.events import Click
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget

from sessionizer.cli.tui.theme import SelectorTheme
from sessionizer.core.models import Entry

_BORDER = "│ "  # │
_GUTTER = "  "


class EntryRow(Widget):
    """One entry of the picker list.

    The highlighted row gets a left border; every other row is drawn
    normal, or dimmed while the filter is open and empty.
    """

    class Pressed(Message):
        """Posted when a row is clicked."""

        def __init__(self, row: EntryRow) -> None:
            super().__init__()
            self.row = row

    DEFAULT_CSS = """
    EntryRow {
        width: 100%;
        height: 2;
        margin-bottom: 1;
    }
    """

    selected = reactive(False)
    dimmed = reactive(False)
    positions: reactive[tuple[int, ...]] = reactive(())

    def __init__(self, entry: Entry, index: int, theme: SelectorTheme, **kwargs: object) -> None:
        super().__init__(**kwargs)  # type: ignore[arg-type]
        self.entry = entry
        self.entry_index = index
        self.selector_theme = theme

    def _styles(self) -> tuple[Style, Style]:
        if self.selected:
            return self.selector_theme.selected_title, self.selector_theme.selected_desc
        if self.dimmed:
            return self.selector_theme.dimmed_title, self.selector_theme.dimmed_desc
        return self.selector_theme.normal_title, self.selector_theme.normal_desc

    def render_title(self) -> Text:
        title_style, _ = self._styles()
        title = Text(self.entry.title, style=title_style)
        for pos in self.positions:
            if pos < len(self.entry.title):
                title.stylize(self.selector_theme.filter_match, pos, pos + 1)
        return title

    def render(self) -> Text:
        _, desc_style = self._styles()
        gutter = Text(_BORDER, style=self.selector_theme.selected_border) if self.selected else Text(_GUTTER)

        line = Text()
        line.append_text(gutter)
        line.append_text(self.render_title())
        line.append("\n")
        line.append_text(gutter)
        line.append(self.entry.description, style=desc_style)
        return line

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(self.Pressed(self))
