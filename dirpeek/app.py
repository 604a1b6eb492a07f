"""Runtime composition layer for dirpeek.

Builds the initial state, the terminal controller and loop callbacks, then
starts the loop. Startup listing errors surface before the terminal is
touched; anything raised later escapes only after the terminal is restored.
"""

from __future__ import annotations

import logging
import sys
from functools import partial
from pathlib import Path

from .config import Settings, load_settings
from .input import read_key
from .logs import configure_logging
from .loop import RuntimeLoopCallbacks, run_main_loop
from .render import RenderOptions, render_frame
from .state import BrowserState
from .terminal import TerminalController
from .ui_theme import resolve_theme

logger = logging.getLogger(__name__)


def render_options_for(settings: Settings) -> RenderOptions:
    """Translate settings into renderer options."""
    highlighting = settings.syntax_highlighting and not settings.no_color
    return RenderOptions(
        theme=resolve_theme(settings.theme, no_color=settings.no_color),
        syntax_style=settings.syntax_style if highlighting else None,
    )


def run_browser(
    start_path: Path | None = None,
    *,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
    settings: Settings | None = None,
) -> BrowserState:
    """Browse from ``start_path`` (default: cwd) until quit; return final state."""
    if settings is None:
        settings = load_settings()
    configure_logging(settings.log_level)
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if stdout_fd is None:
        stdout_fd = sys.stdout.fileno()

    state = BrowserState.from_directory(start_path if start_path is not None else Path.cwd())
    terminal = TerminalController(stdin_fd, stdout_fd)
    options = render_options_for(settings)
    callbacks = RuntimeLoopCallbacks(
        read_key=partial(read_key, stdin_fd),
        render=partial(render_frame, options=options, stdout_fd=stdout_fd),
    )
    try:
        run_main_loop(state, terminal, callbacks)
    except Exception:
        logger.exception(f"Browser session ended with an error in {state.current_path}")
        raise
    return state


__all__ = ["render_options_for", "run_browser"]
