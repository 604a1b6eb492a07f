"""ANSI-aware text measurement and line shaping utilities.

Provides clipping, padding, and word wrapping that preserve escape sequences.
These helpers keep pane borders aligned when color codes and wide chars are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
SGR_RESET = "\033[0m"
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies, ignoring escapes."""
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            w = min(w, max_cols - col)
            out.append(" " * w)
            col += w
            i += 1
            continue
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip or pad ``text`` so it fills exactly ``width`` columns.

    A reset is appended after styled text so padding and later cells are
    drawn unstyled.
    """
    if width <= 0:
        return ""
    clipped = clip_ansi_line(text, width)
    pad = " " * max(0, width - display_width(clipped))
    if "\x1b" in clipped:
        return f"{clipped}{SGR_RESET}{pad}"
    return f"{clipped}{pad}"


def wrap_ansi_words(text: str, width: int) -> list[str]:
    """Word-wrap one styled line into rows of at most ``width`` columns.

    Rows break after the last space that fits; the space itself is dropped.
    Words longer than ``width`` are split mid-word. The most recent SGR
    sequence is replayed at the start of each continuation row.
    """
    if width <= 0 or not text:
        return [""]

    rows: list[str] = []
    chunk: list[str] = []
    widths: list[int] = []
    col = 0
    break_at: int | None = None
    break_sgr = ""
    active_sgr = ""
    i = 0
    n = len(text)

    def start_row(carry: list[str], carry_widths: list[int], sgr: str) -> None:
        nonlocal chunk, widths, col, break_at
        prefix = [sgr] if sgr and sgr != SGR_RESET else []
        chunk = prefix + carry
        widths = [0] * len(prefix) + carry_widths
        col = sum(carry_widths)
        break_at = None

    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                seq = match.group(0)
                chunk.append(seq)
                widths.append(0)
                if seq.endswith("m"):
                    active_sgr = seq
                i = match.end()
                continue

        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            ch = " " * w
        if col + w > width and col > 0:
            if ch.isspace():
                rows.append("".join(chunk))
                start_row([], [], active_sgr)
                i += 1
                continue
            if break_at is not None:
                carry = chunk[break_at + 1 :]
                carry_widths = widths[break_at + 1 :]
                rows.append("".join(chunk[:break_at]))
                start_row(carry, carry_widths, break_sgr)
            else:
                rows.append("".join(chunk))
                start_row([], [], active_sgr)
        chunk.append(ch)
        widths.append(w)
        if ch.isspace():
            break_at = len(chunk) - 1
            break_sgr = active_sgr
        col += w
        i += 1

    rows.append("".join(chunk))
    return rows


def wrap_ansi_text(text: str, width: int) -> list[str]:
    """Word-wrap every ``\\n``-separated line of ``text``."""
    rows: list[str] = []
    for line in text.split("\n"):
        rows.extend(wrap_ansi_words(line, width))
    return rows


__all__ = [
    "ANSI_ESCAPE_RE",
    "SGR_RESET",
    "TAB_STOP",
    "char_display_width",
    "display_width",
    "clip_ansi_line",
    "fit_ansi_line",
    "wrap_ansi_words",
    "wrap_ansi_text",
]
