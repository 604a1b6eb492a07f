"""Tests for raw key decoding from a file descriptor."""

from __future__ import annotations

import os
import unittest

from dirpeek.input import read_key


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.read_fd, self.write_fd = os.pipe()
        self.addCleanup(self._close)

    def _close(self) -> None:
        for fd in (self.read_fd, self.write_fd):
            try:
                os.close(fd)
            except OSError:
                pass

    def _feed(self, data: bytes) -> None:
        os.write(self.write_fd, data)

    def test_printable_keys_decode_to_themselves(self) -> None:
        self._feed(b"jkq")
        self.assertEqual([read_key(self.read_fd) for _ in range(3)], ["j", "k", "q"])

    def test_multibyte_utf8_key(self) -> None:
        self._feed("é".encode("utf-8"))
        self.assertEqual(read_key(self.read_fd), "é")

    def test_arrow_sequences_are_consumed_whole(self) -> None:
        self._feed(b"\x1b[A\x1b[Bl")
        self.assertEqual(read_key(self.read_fd), "UP")
        self.assertEqual(read_key(self.read_fd), "DOWN")
        self.assertEqual(read_key(self.read_fd), "l")

    def test_mouse_reports_do_not_leak_letter_keys(self) -> None:
        self._feed(b"\x1b[<0;12;5M\x1b[<0;12;5mh")
        self.assertEqual(read_key(self.read_fd), "MOUSE")
        self.assertEqual(read_key(self.read_fd), "MOUSE")
        self.assertEqual(read_key(self.read_fd), "h")

    def test_lone_escape(self) -> None:
        self._feed(b"\x1b")
        self.assertEqual(read_key(self.read_fd), "ESC")

    def test_control_keys(self) -> None:
        self._feed(b"\r\x7f\x03")
        self.assertEqual(
            [read_key(self.read_fd) for _ in range(3)],
            ["ENTER", "BACKSPACE", "CTRL_C"],
        )

    def test_end_of_input_returns_empty_token(self) -> None:
        os.close(self.write_fd)
        self.assertEqual(read_key(self.read_fd), "")


if __name__ == "__main__":
    unittest.main()
