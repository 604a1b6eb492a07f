"""Preview text for the selected entry.

Builds the plain preview string stored in browser state and, separately,
the colourized form drawn by the renderer. Pygments handles highlighting;
terminal control bytes are escaped before anything reaches the screen.
"""

from __future__ import annotations

import itertools
import logging
import re
from pathlib import Path

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .listing import is_directory, is_regular_file

logger = logging.getLogger(__name__)

PREVIEW_LINE_LIMIT = 20
UNREADABLE_PREVIEW = "Unable to read file content."
DIRECTORY_PREVIEW = "Directory selected. Press 'l' to enter."
DEFAULT_SYNTAX_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_FORMATTERS: dict[str, Terminal256Formatter] = {}


def read_leading_lines(path: Path, limit: int = PREVIEW_LINE_LIMIT) -> list[str]:
    """Read at most ``limit`` lines from ``path`` as UTF-8.

    Lines split on ``\\n`` only and lose one trailing ``\\r``. A BOM is
    dropped. Each line is decoded on its own, so bytes past the last
    returned line never affect the result. Decoding and I/O errors propagate.
    """
    with path.open("rb") as handle:
        raw_lines = list(itertools.islice(handle, limit))
    lines: list[str] = []
    for idx, raw in enumerate(raw_lines):
        line = raw.decode("utf-8-sig" if idx == 0 else "utf-8")
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        lines.append(line)
    return lines


def build_preview(path: Path) -> str:
    """Return the preview string for one entry.

    Regular files show their leading lines, directories show the enter hint,
    and anything else (including entries that vanished since listing) shows
    nothing.
    """
    if is_regular_file(path):
        try:
            return "\n".join(read_leading_lines(path))
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug(f"Preview read failed for {path}: {exc}")
            return UNREADABLE_PREVIEW
    if is_directory(path):
        return DIRECTORY_PREVIEW
    return ""


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def normalize_style(style: str | None) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    if not style:
        return DEFAULT_SYNTAX_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_SYNTAX_STYLE
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def highlight_preview(text: str, path: Path, style: str = DEFAULT_SYNTAX_STYLE) -> str:
    """Colourize preview ``text`` using a lexer picked from ``path``'s name.

    Leading and trailing blank lines are preserved so highlighted output keeps
    the same row count as ``text``.
    """
    if not text:
        return text
    try:
        lexer = get_lexer_for_filename(path.name, text, stripnl=False, ensurenl=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False, ensurenl=False)
    rendered = pygments_highlight(text, lexer, _formatter_for_style(normalize_style(style)))
    if rendered.endswith("\n") and not text.endswith("\n"):
        rendered = rendered[:-1]
    return rendered


def preview_is_file_content(path: Path | None, preview: str) -> bool:
    """Return whether ``preview`` holds file text rather than a placeholder."""
    if path is None or not preview:
        return False
    if preview in {UNREADABLE_PREVIEW, DIRECTORY_PREVIEW}:
        return False
    return is_regular_file(path)


__all__ = [
    "PREVIEW_LINE_LIMIT",
    "UNREADABLE_PREVIEW",
    "DIRECTORY_PREVIEW",
    "DEFAULT_SYNTAX_STYLE",
    "read_leading_lines",
    "build_preview",
    "sanitize_terminal_text",
    "normalize_style",
    "highlight_preview",
    "preview_is_file_content",
]
