"""Terminal control helpers for the browser session.

Owns raw-mode lifecycle, alternate-screen switching, mouse capture and
cursor visibility. Everything acquired in ``enable_tui_mode`` is released in
``disable_tui_mode``; ``raw_mode`` guarantees the release on every exit path.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

from .errors import TerminalSetupError

logger = logging.getLogger(__name__)

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l\x1b[?1000h\x1b[?1006h"
LEAVE_TUI_SEQUENCE = b"\x1b[?1000l\x1b[?1006l\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Manage terminal mode transitions for one stdin/stdout pair."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalSetupError(f"stdin is not a terminal: {exc}") from exc
        self._active = False

    @property
    def active(self) -> bool:
        """Whether raw alternate-screen mode is currently entered."""
        return self._active

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with mouse capture enabled."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self._active = True
        # Enter alternate screen, hide cursor, and enable SGR mouse reporting.
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)
        logger.debug("Entered raw alternate-screen mode")

    def disable_tui_mode(self) -> None:
        """Restore the saved tty attributes and the main screen buffer."""
        try:
            # Disable mouse reporting, show cursor, and restore the main screen buffer.
            os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
            self._active = False
            logger.debug("Restored terminal mode")

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()


__all__ = [
    "ENTER_TUI_SEQUENCE",
    "LEAVE_TUI_SEQUENCE",
    "TerminalController",
]
