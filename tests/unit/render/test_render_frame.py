"""Tests for frame composition.

Checks layout regions, entry labels and selection marking, scrolling,
preview wrapping, and that rendering leaves browser state untouched.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from unittest import mock

from dirpeek.ansi import ANSI_ESCAPE_RE, display_width
from dirpeek.preview import DIRECTORY_PREVIEW
from dirpeek.render import (
    FILES_TITLE,
    HEADER_TITLE,
    KEY_LEGEND,
    PREVIEW_TITLE,
    RenderOptions,
    box_rows,
    build_frame,
    entry_scroll_start,
    render_frame,
)
from dirpeek.state import BrowserState
from dirpeek.ui_theme import DEFAULT_THEME, PLAIN_THEME

PLAIN_OPTIONS = RenderOptions(theme=PLAIN_THEME, syntax_style=None)


def _plain(rows: list[str]) -> list[str]:
    return [ANSI_ESCAPE_RE.sub("", row) for row in rows]


class _TreeFixture:
    def __init__(self, tmp: str) -> None:
        self.root = Path(tmp).absolute()
        self.note = self.root / "a.txt"
        self.note.write_text("alpha\nbeta\n", encoding="utf-8")
        self.sub = self.root / "sub"
        self.sub.mkdir()

    def state(self, **overrides) -> BrowserState:
        state = BrowserState(current_path=self.root, entries=[self.note, self.sub])
        return replace(state, **overrides)


class BoxRowsTests(unittest.TestCase):
    def test_box_has_title_border_and_padded_body(self) -> None:
        rows = box_rows("Files", ["x"], 10, 4, PLAIN_THEME)

        self.assertEqual(
            rows,
            [
                "┌Files───┐",
                "│x       │",
                "│        │",
                "└────────┘",
            ],
        )

    def test_tiny_boxes_are_blank(self) -> None:
        self.assertEqual(box_rows("T", [], 1, 2, PLAIN_THEME), [" ", " "])
        self.assertEqual(box_rows("T", [], 0, 2, PLAIN_THEME), ["", ""])


class BuildFrameTests(unittest.TestCase):
    def test_frame_regions_and_labels(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fixture = _TreeFixture(tmp)
            rows = _plain(build_frame(fixture.state(), 80, 16, PLAIN_OPTIONS))

        self.assertEqual(len(rows), 16)
        self.assertEqual(rows[0], "")
        self.assertTrue(rows[1].startswith(f" ┌{HEADER_TITLE}"))
        self.assertIn(str(fixture.root), rows[2])
        self.assertTrue(rows[4].startswith(f" ┌{FILES_TITLE}"))
        self.assertIn(f"┌{PREVIEW_TITLE}", rows[4])
        self.assertIn("│> a.txt", rows[5])
        self.assertIn("│  /sub", rows[6])
        self.assertIn(KEY_LEGEND, rows[-3])
        self.assertEqual(rows[-1], "")

    def test_rows_fit_terminal_width(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fixture = _TreeFixture(tmp)
            state = fixture.state(preview="word " * 80)
            for width, height in ((80, 24), (33, 10), (12, 7), (4, 4), (2, 2)):
                rows = build_frame(state, width, height, PLAIN_OPTIONS)
                self.assertEqual(len(rows), height)
                for row in rows:
                    self.assertLessEqual(display_width(row), width)

    def test_rendering_does_not_mutate_state(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fixture = _TreeFixture(tmp)
            fixture.note.write_text("def main():\n    return 1\n", encoding="utf-8")
            state = fixture.state(preview="def main():\n    return 1")
            snapshot = replace(state, entries=list(state.entries))

            build_frame(state, 60, 20, RenderOptions())

        self.assertEqual(state, snapshot)

    def test_preview_is_wrapped_inside_preview_pane(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fixture = _TreeFixture(tmp)
            state = fixture.state(selected=1, preview=DIRECTORY_PREVIEW)
            rows = _plain(build_frame(state, 40, 16, PLAIN_OPTIONS))

        body = "\n".join(rows)
        self.assertNotIn(DIRECTORY_PREVIEW, body)
        self.assertIn("│Directory ", body)
        self.assertIn("│selected. Press ", body)
        self.assertIn("│'l' to enter. ", body)

    def test_file_preview_is_highlighted_when_style_enabled(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fixture = _TreeFixture(tmp)
            script = fixture.root / "tool.py"
            script.write_text("import os\n", encoding="utf-8")
            state = BrowserState(current_path=fixture.root, entries=[script], preview="import os")

            coloured = build_frame(state, 60, 12, RenderOptions(theme=DEFAULT_THEME))
            plain = build_frame(state, 60, 12, PLAIN_OPTIONS)

        self.assertTrue(any("\x1b[" in row and "import" in row for row in coloured))
        self.assertEqual(_plain(coloured), plain)

    def test_selection_stays_visible_when_scrolling(self) -> None:
        root = Path("/virtual-root")
        entries = [root / f"f{idx:02d}" for idx in range(30)]
        state = BrowserState(current_path=root, entries=entries, selected=27)

        rows = _plain(build_frame(state, 60, 14, PLAIN_OPTIONS))

        self.assertTrue(any("│> f27" in row for row in rows))
        self.assertFalse(any("f00" in row for row in rows))

    def test_empty_listing_renders_without_entries(self) -> None:
        state = BrowserState(current_path=Path("/tmp"), entries=[])

        rows = _plain(build_frame(state, 50, 12, PLAIN_OPTIONS))

        self.assertFalse(any(">" in row for row in rows))

    def test_entry_scroll_start(self) -> None:
        self.assertEqual(entry_scroll_start(0, 5, 10), 0)
        self.assertEqual(entry_scroll_start(3, 30, 5), 0)
        self.assertEqual(entry_scroll_start(12, 30, 5), 8)
        self.assertEqual(entry_scroll_start(29, 30, 5), 25)
        self.assertEqual(entry_scroll_start(0, 30, 0), 0)


class RenderFrameTests(unittest.TestCase):
    def test_render_frame_writes_homed_frame_to_fd(self) -> None:
        state = BrowserState(current_path=Path("/tmp"), entries=[])
        size = os.terminal_size((40, 10))

        with mock.patch("dirpeek.render.os.write") as write_mock:
            render_frame(state, PLAIN_OPTIONS, 7, get_terminal_size=lambda _fallback: size)

        fd, payload = write_mock.call_args.args
        self.assertEqual(fd, 7)
        text = payload.decode("utf-8")
        self.assertTrue(text.startswith("\033[H\033[J"))
        self.assertEqual(text.count("\r\n"), 9)
        self.assertIn(HEADER_TITLE, text)


if __name__ == "__main__":
    unittest.main()
