"""Frame composition for the browser view.

``build_frame`` turns a ``BrowserState`` into screen rows without touching the
state. ``render_frame`` measures the terminal and writes those rows.

Layout, inside a one-cell margin::

    ┌Current Directory────────────┐
    │/path/to/dir                 │
    └─────────────────────────────┘
    ┌Files─────────┐┌Preview──────┐
    │> a.txt       ││first line   │
    │  /sub        ││             │
    └──────────────┘└─────────────┘
    ┌─────────────────────────────┐
    │q: Quit | j: Down | ...      │
    └─────────────────────────────┘
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from .ansi import clip_ansi_line, display_width, fit_ansi_line, wrap_ansi_text
from .listing import entry_label, is_directory
from .preview import (
    DEFAULT_SYNTAX_STYLE,
    highlight_preview,
    preview_is_file_content,
    sanitize_terminal_text,
)
from .state import BrowserState
from .ui_theme import DEFAULT_THEME, UITheme

FRAME_MARGIN = 1
HEADER_ROWS = 3
FOOTER_ROWS = 3
HEADER_TITLE = "Current Directory"
FILES_TITLE = "Files"
PREVIEW_TITLE = "Preview"
KEY_LEGEND = "q: Quit | j: Down | k: Up | l: Enter | h: Back"
HIGHLIGHT_SYMBOL = "> "


@dataclass(frozen=True)
class RenderOptions:
    """Appearance settings; ``syntax_style=None`` disables highlighting."""

    theme: UITheme = DEFAULT_THEME
    syntax_style: str | None = DEFAULT_SYNTAX_STYLE


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def box_rows(title: str, body: list[str], width: int, height: int, theme: UITheme) -> list[str]:
    """Draw a bordered box of exactly ``width`` x ``height`` cells.

    ``body`` rows are clipped or padded to the inner width; missing rows are
    blank. Boxes too small for a border are drawn as blank cells.
    """
    if width <= 0 or height <= 0:
        return [""] * max(0, height)
    if width < 2 or height < 2:
        return [" " * width for _ in range(height)]

    inner = width - 2
    title_text = clip_ansi_line(title, inner)
    top = (
        _styled("┌", theme.border, theme)
        + _styled(title_text, theme.title, theme)
        + _styled("─" * (inner - display_width(title_text)) + "┐", theme.border, theme)
    )
    left = _styled("│", theme.border, theme)
    right = _styled("│", theme.border, theme)
    rows = [top]
    for row in range(height - 2):
        content = body[row] if row < len(body) else ""
        rows.append(f"{left}{fit_ansi_line(content, inner)}{right}")
    rows.append(_styled("└" + "─" * inner + "┘", theme.border, theme))
    return rows


def entry_scroll_start(selected: int, total: int, rows: int) -> int:
    """Return the first visible entry index that keeps ``selected`` on screen."""
    if rows <= 0 or total <= rows:
        return 0
    return max(0, min(selected - rows + 1, total - rows))


def entry_rows(state: BrowserState, rows: int, width: int, theme: UITheme) -> list[str]:
    """Render the visible slice of the entry list."""
    if rows <= 0 or width <= 0:
        return []
    start = entry_scroll_start(state.selected, len(state.entries), rows)
    pad = " " * len(HIGHLIGHT_SYMBOL)
    out: list[str] = []
    for idx in range(start, min(len(state.entries), start + rows)):
        path = state.entries[idx]
        is_dir = is_directory(path)
        label = sanitize_terminal_text(entry_label(path, is_dir))
        colour = theme.entry_dir if is_dir else theme.entry_file
        if idx == state.selected:
            text = clip_ansi_line(HIGHLIGHT_SYMBOL + label, width)
            text += " " * max(0, width - display_width(text))
            out.append(_styled(text, theme.selected + colour, theme))
            continue
        out.append(pad + _styled(label, colour, theme))
    return out


def preview_rows(state: BrowserState, rows: int, width: int, options: RenderOptions) -> list[str]:
    """Render the word-wrapped preview, cut to ``rows`` rows."""
    if rows <= 0 or width <= 0 or not state.preview:
        return []
    text = sanitize_terminal_text(state.preview)
    selected = state.selected_entry()
    if options.syntax_style and selected is not None and preview_is_file_content(selected, state.preview):
        text = highlight_preview(text, selected, options.syntax_style)
    return wrap_ansi_text(text, width)[:rows]


def build_frame(state: BrowserState, width: int, height: int, options: RenderOptions) -> list[str]:
    """Compose one full frame as ``height`` rows no wider than ``width``."""
    theme = options.theme
    inner_width = width - 2 * FRAME_MARGIN
    inner_height = height - 2 * FRAME_MARGIN
    if inner_width <= 0 or inner_height <= 0:
        return [""] * max(0, height)

    header_height = min(HEADER_ROWS, inner_height)
    footer_height = min(FOOTER_ROWS, inner_height - header_height)
    body_height = inner_height - header_height - footer_height
    left_width = inner_width // 2
    right_width = inner_width - left_width

    path_text = _styled(sanitize_terminal_text(str(state.current_path)), theme.header_text, theme)
    header = box_rows(HEADER_TITLE, [path_text], inner_width, header_height, theme)
    files = box_rows(
        FILES_TITLE,
        entry_rows(state, body_height - 2, left_width - 2, theme),
        left_width,
        body_height,
        theme,
    )
    preview = box_rows(
        PREVIEW_TITLE,
        preview_rows(state, body_height - 2, right_width - 2, options),
        right_width,
        body_height,
        theme,
    )
    footer = box_rows("", [_styled(KEY_LEGEND, theme.footer_text, theme)], inner_width, footer_height, theme)

    margin = " " * FRAME_MARGIN
    frame = [""] * FRAME_MARGIN
    frame.extend(f"{margin}{row}" for row in header)
    frame.extend(f"{margin}{left}{right}" for left, right in zip(files, preview))
    frame.extend(f"{margin}{row}" for row in footer)
    frame.extend([""] * FRAME_MARGIN)
    return frame


def render_frame(
    state: BrowserState,
    options: RenderOptions,
    stdout_fd: int,
    get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size,
) -> None:
    """Draw ``state`` to ``stdout_fd`` sized to the current terminal."""
    size = get_terminal_size((80, 24))
    rows = build_frame(state, size.columns, size.lines, options)
    payload = "\033[H\033[J" + "\r\n".join(rows)
    os.write(stdout_fd, payload.encode("utf-8", errors="replace"))


__all__ = [
    "FRAME_MARGIN",
    "HEADER_TITLE",
    "FILES_TITLE",
    "PREVIEW_TITLE",
    "KEY_LEGEND",
    "HIGHLIGHT_SYMBOL",
    "RenderOptions",
    "box_rows",
    "entry_scroll_start",
    "entry_rows",
    "preview_rows",
    "build_frame",
    "render_frame",
]
