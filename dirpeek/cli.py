"""Command-line front door for dirpeek.

Starts browsing in the current working directory. Filesystem and terminal
failures end the session with the terminal restored, a one-line message on
stderr and exit status 1.
"""

from __future__ import annotations

import argparse

from .app import run_browser
from .errors import BrowserError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirpeek",
        description=(
            "Browse the current directory in the terminal. "
            "Keys: q quit, j down, k up, l enter directory, h parent directory."
        ),
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the browser until the user quits."""
    build_parser().parse_args(argv)
    try:
        run_browser()
    except (BrowserError, OSError) as exc:
        raise SystemExit(f"dirpeek: {exc}") from exc


if __name__ == "__main__":
    main()
