"""Theme modes and the pure resolution of the effective theme."""

from enum import StrEnum
from typing import Optional


class ThemeMode(StrEnum):
    """User-selected theme mode, persisted between sessions."""

    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"


class EffectiveTheme(StrEnum):
    """The light/dark value actually applied to the application."""

    LIGHT = "light"
    DARK = "dark"


THEME_CYCLE: tuple[ThemeMode, ...] = (ThemeMode.SYSTEM, ThemeMode.LIGHT, ThemeMode.DARK)


def parse_theme_mode(value: object) -> Optional[ThemeMode]:
    """Return the ThemeMode for one of the three literal strings, else None."""
    if not isinstance(value, str):
        return None
    try:
        return ThemeMode(value)
    except ValueError:
        return None


def resolve_effective(mode: ThemeMode, os_preference: EffectiveTheme) -> EffectiveTheme:
    """Derive the effective theme from the user mode and the OS preference."""
    if mode == ThemeMode.SYSTEM:
        return os_preference
    return EffectiveTheme(mode.value)
