"""Browser state and the navigation operations that mutate it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .listing import is_directory, list_directory
from .preview import build_preview

logger = logging.getLogger(__name__)


@dataclass
class BrowserState:
    """Current directory, its entries, the selection, and the preview text.

    ``entries`` keep filesystem iteration order. ``selected`` indexes into
    ``entries`` and is only meaningful while ``entries`` is non-empty.
    """

    current_path: Path
    entries: list[Path] = field(default_factory=list)
    selected: int = 0
    preview: str = ""

    @classmethod
    def from_directory(cls, path: Path) -> "BrowserState":
        """Build the initial state; listing failures propagate."""
        current_path = path.absolute()
        entries = list_directory(current_path)
        logger.info(f"Browsing {current_path} ({len(entries)} entries)")
        return cls(current_path=current_path, entries=entries)

    def selected_entry(self) -> Path | None:
        """Return the selected entry, or ``None`` when nothing is selectable."""
        if 0 <= self.selected < len(self.entries):
            return self.entries[self.selected]
        return None

    def move_up(self) -> None:
        if self.selected > 0:
            self.selected -= 1

    def move_down(self) -> None:
        if self.entries and self.selected < len(self.entries) - 1:
            self.selected += 1

    def enter_directory(self) -> None:
        """Descend into the selected entry when it is a directory."""
        target = self.selected_entry()
        if target is None or not is_directory(target):
            return
        self._change_directory(target)

    def go_up(self) -> None:
        """Move to the parent directory; no-op at the filesystem root."""
        parent = self.current_path.parent
        if parent == self.current_path:
            return
        self._change_directory(parent)

    def update_preview(self) -> None:
        self.preview = ""
        target = self.selected_entry()
        if target is None:
            return
        self.preview = build_preview(target)

    def _change_directory(self, target: Path) -> None:
        # List before assigning so a failed listing leaves state untouched.
        entries = list_directory(target)
        self.current_path = target
        self.entries = entries
        self.selected = 0
        logger.info(f"Changed directory to {target} ({len(entries)} entries)")


__all__ = ["BrowserState"]
