"""Directory listing in filesystem-reported order.

Entries are returned exactly as ``os.scandir`` yields them. No sorting,
filtering, or stat calls happen here.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import DirectoryListingError

logger = logging.getLogger(__name__)


def list_directory(directory: Path) -> list[Path]:
    """Return child paths of ``directory`` in iteration order.

    Raises ``DirectoryListingError`` chained to the underlying ``OSError``
    when the directory cannot be opened or read.
    """
    try:
        with os.scandir(directory) as entries:
            children = [directory / entry.name for entry in entries]
    except OSError as exc:
        logger.warning(f"Listing failed for {directory}: {exc}")
        raise DirectoryListingError(directory, exc) from exc
    return children


def is_directory(path: Path) -> bool:
    """Return whether ``path`` is a directory, treating stat errors as ``False``."""
    try:
        return path.is_dir()
    except OSError:
        return False


def is_regular_file(path: Path) -> bool:
    """Return whether ``path`` is a regular file, treating stat errors as ``False``."""
    try:
        return path.is_file()
    except OSError:
        return False


def entry_label(path: Path, is_dir: bool | None = None) -> str:
    """Display label for one entry; directories get a leading ``/``."""
    name = path.name or str(path)
    if is_dir is None:
        is_dir = is_directory(path)
    if is_dir:
        return f"/{name}"
    return name


__all__ = [
    "list_directory",
    "is_directory",
    "is_regular_file",
    "entry_label",
]
