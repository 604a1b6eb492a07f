"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (borders, header, entries, footer). Syntax
highlighting style for previewed files remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    title: str
    header_text: str
    entry_dir: str
    entry_file: str
    selected: str
    footer_text: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="",
    title="",
    header_text="\033[33m",
    entry_dir="\033[34m",
    entry_file="",
    selected="\033[1;100m",
    footer_text="\033[37m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    header_text="\033[38;5;229m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    selected="\033[1;48;5;24m",
    footer_text="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    header_text="",
    entry_dir="",
    entry_file="",
    selected="",
    footer_text="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "normalize_theme_name",
    "resolve_theme",
]
