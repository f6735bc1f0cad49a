"""Domain layer - Pure entities for books and theme modes."""

from .book import Book, BookDraft, MIN_PUBLICATION_YEAR
from .theme_mode import (
    THEME_CYCLE,
    EffectiveTheme,
    ThemeMode,
    parse_theme_mode,
    resolve_effective,
)

__all__ = [
    "Book",
    "BookDraft",
    "MIN_PUBLICATION_YEAR",
    "EffectiveTheme",
    "ThemeMode",
    "THEME_CYCLE",
    "parse_theme_mode",
    "resolve_effective",
]
