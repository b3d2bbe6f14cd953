"""Colour themes for the clock and status line."""

from __future__ import annotations

from pomoterm.models import Theme, ThemeName

THEMES: dict[ThemeName, Theme] = {
    ThemeName.BLUE: Theme(primary="#60a5fa", dim="#93c5fd"),
    ThemeName.PURPLE: Theme(primary="#c084fc", dim="#e9d5ff"),
    ThemeName.GREEN: Theme(primary="#4ade80", dim="#86efac"),
    ThemeName.RED: Theme(primary="#f87171", dim="#fecaca"),
    ThemeName.ORANGE: Theme(primary="#fbbf24", dim="#fde047"),
    ThemeName.CYAN: Theme(primary="#22d3ee", dim="#67e8f9"),
}

THEME_ORDER: list[ThemeName] = list(ThemeName)


def get_theme(name: ThemeName | str) -> Theme:
    """Return the colour pair for ``name``, falling back to blue."""
    try:
        return THEMES[ThemeName(name)]
    except ValueError:
        return THEMES[ThemeName.BLUE]


def cycle_theme(name: ThemeName, step: int) -> ThemeName:
    """Move ``step`` places through the theme list, wrapping at both ends."""
    index = THEME_ORDER.index(name)
    return THEME_ORDER[(index + step) % len(THEME_ORDER)]
