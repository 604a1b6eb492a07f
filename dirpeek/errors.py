"""Exception hierarchy for dirpeek.

Listing and terminal failures are raised as ``BrowserError`` subclasses so
the CLI can restore the terminal and report them uniformly.
"""

from __future__ import annotations

from pathlib import Path


class BrowserError(Exception):
    """Base exception for all dirpeek errors."""

    pass


class DirectoryListingError(BrowserError):
    """Raised when a directory cannot be listed."""

    def __init__(self, path: Path, reason: OSError) -> None:
        detail = reason.strerror or str(reason)
        super().__init__(f"cannot list {path}: {detail}")
        self.path = path


class TerminalSetupError(BrowserError):
    """Raised when stdin is not a terminal that can enter raw mode."""

    pass
