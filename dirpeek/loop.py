"""Main interactive event loop for the browser.

Renders a frame, blocks for one key, applies it to the state, and repeats
until quit. Rendering and key reading are injected so the loop runs without
a real terminal in tests.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .state import BrowserState
from .terminal import TerminalController

logger = logging.getLogger(__name__)

QUIT_KEY = "q"
END_OF_INPUT = ""

KEY_ACTIONS: dict[str, Callable[[BrowserState], None]] = {
    "j": BrowserState.move_down,
    "k": BrowserState.move_up,
    "l": BrowserState.enter_directory,
    "h": BrowserState.go_up,
}


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    read_key: Callable[[], str]
    render: Callable[[BrowserState], None]


def handle_key(state: BrowserState, key: str) -> bool:
    """Apply one key to ``state``; return ``False`` when the loop should stop.

    Navigation keys refresh the preview after moving. Unbound keys leave the
    state alone. Listing errors from enter/go-up propagate.
    """
    if key == QUIT_KEY:
        logger.info("Quit requested")
        return False
    if key == END_OF_INPUT:
        logger.info("Input closed; quitting")
        return False
    action = KEY_ACTIONS.get(key)
    if action is None:
        return True
    action(state)
    state.update_preview()
    return True


def run_main_loop(state: BrowserState, terminal: TerminalController, callbacks: RuntimeLoopCallbacks) -> None:
    """Run the browse loop inside the terminal's raw-mode scope."""
    with terminal.raw_mode():
        while True:
            callbacks.render(state)
            if not handle_key(state, callbacks.read_key()):
                return


__all__ = [
    "QUIT_KEY",
    "KEY_ACTIONS",
    "RuntimeLoopCallbacks",
    "handle_key",
    "run_main_loop",
]
