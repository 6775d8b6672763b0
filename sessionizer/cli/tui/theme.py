"""Colors and styling for the picker.

Everforest palette. The theme is built once at startup and handed to the
app and its rows; nothing mutates it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style

# Everforest (dark) palette
FOREGROUND = "#d3c6aa"
FOREGROUND_DIM = "#9da9a0"
GREEN = "#a7c080"
BLUE = "#7fbbb3"
RED = "#e67e80"
GREY_GREEN = "#7a8478"
GREY_BLUE = "#5c6a72"
BG_DARK = "#272e33"

# Outer frame margin around the whole picker (rows, columns)
FRAME_MARGIN_VERTICAL = 1
FRAME_MARGIN_HORIZONTAL = 2


@dataclass(frozen=True)
class SelectorTheme:
    """Styles for every row state plus the surrounding chrome."""

    normal_title: Style
    normal_desc: Style
    selected_title: Style
    selected_desc: Style
    selected_border: Style
    dimmed_title: Style
    dimmed_desc: Style
    filter_match: Style
    title_fg: str
    title_bg: str
    prompt: str
    filter_text: str
    cursor: str
    status: str


EVERFOREST = SelectorTheme(
    normal_title=Style(color=FOREGROUND),
    normal_desc=Style(color=FOREGROUND_DIM),
    selected_title=Style(color=GREEN),
    selected_desc=Style(color=BLUE),
    selected_border=Style(color=GREEN),
    dimmed_title=Style(color=GREY_GREEN),
    dimmed_desc=Style(color=GREY_BLUE),
    filter_match=Style(color=RED, underline=True),
    title_fg=BG_DARK,
    title_bg=GREEN,
    prompt=GREEN,
    filter_text=FOREGROUND,
    cursor=GREEN,
    status=FOREGROUND_DIM,
)


def frame_size(width: int, height: int) -> tuple[int, int]:
    """Space left for the list once the frame margin is removed."""
    return (
        max(0, width - 2 * FRAME_MARGIN_HORIZONTAL),
        max(0, height - 2 * FRAME_MARGIN_VERTICAL),
    )


def css_variables(theme: SelectorTheme) -> dict[str, str]:
    """Textual CSS variables consumed by SELECTOR_CSS."""
    return {
        "sessionizer-title-fg": theme.title_fg,
        "sessionizer-title-bg": theme.title_bg,
        "sessionizer-prompt": theme.prompt,
        "sessionizer-filter-text": theme.filter_text,
        "sessionizer-cursor": theme.cursor,
        "sessionizer-status": theme.status,
    }


SELECTOR_CSS = f"""
#frame {{
    margin: {FRAME_MARGIN_VERTICAL} {FRAME_MARGIN_HORIZONTAL};
}}
#title {{
    color: $sessionizer-title-fg;
    background: $sessionizer-title-bg;
    text-style: bold;
    padding: 0 1;
    margin-bottom: 1;
}}
#filter-row {{
    height: 1;
}}
#filter-prompt {{
    color: $sessionizer-prompt;
    width: auto;
}}
#filter {{
    border: none;
    height: 1;
    padding: 0;
    background: transparent;
    color: $sessionizer-filter-text;
}}
#filter > .input--cursor {{
    background: $sessionizer-cursor;
    color: $sessionizer-title-fg;
}}
#entries {{
    height: 1fr;
    margin-top: 1;
    scrollbar-size-vertical: 1;
}}
#status, #hints {{
    color: $sessionizer-status;
    height: 1;
}}
"""
