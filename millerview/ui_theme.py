"""UI theme definitions and selection helpers.

A theme is a small ANSI palette. The navigator only ever sees the styling
table derived from it: semantic label -> SGR prefix.
"""

from __future__ import annotations

from dataclasses import dataclass

STYLE_SELECTED = "Selected"
STYLE_DIRECTORY = "Directory"
STYLE_FILE = "File"

StyleTable = dict[str, str]


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by pane renderers."""

    name: str
    selected: str
    directory: str
    file: str
    reset: str

    def style_table(self) -> StyleTable:
        return {
            STYLE_SELECTED: self.selected,
            STYLE_DIRECTORY: self.directory,
            STYLE_FILE: self.file,
        }


DEFAULT_THEME = UITheme(
    name="default",
    selected="\033[7m",
    directory="\033[1;34m",
    file="",
    reset="\033[0m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    selected="\033[7m",
    directory="\033[1;38;5;45m",
    file="\033[38;5;252m",
    reset="\033[0m",
)

PLAIN_THEME = UITheme(
    name="plain",
    selected="",
    directory="",
    file="",
    reset="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


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
    "STYLE_DIRECTORY",
    "STYLE_FILE",
    "STYLE_SELECTED",
    "StyleTable",
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
