"""Persisted theme preference backed by QSettings."""

from typing import Optional

from loguru import logger
from PySide6.QtCore import QSettings

from book_catalog.core import ThemeMode, parse_theme_mode


class ThemePreferenceStore:
    """Reads and writes the user's theme mode.

    The store never raises: unreadable or unrecognised values read as
    ThemeMode.SYSTEM, and a failed write keeps the value in memory for
    the rest of the session.
    """

    DEFAULT_KEY = "appearance/theme"

    def __init__(self, settings: QSettings, key: str = DEFAULT_KEY):
        if settings is None:
            raise ValueError("QSettings must not be None")
        self._settings = settings
        self._key = key
        self._unsaved: Optional[ThemeMode] = None

    def get_preference(self) -> ThemeMode:
        """Return the stored mode, or ThemeMode.SYSTEM if absent or invalid."""
        if self._unsaved is not None:
            return self._unsaved

        status = self._settings.status()
        if status != QSettings.Status.NoError:
            logger.warning("Could not read theme preference ({}); using default", status)
            return ThemeMode.SYSTEM

        stored = self._settings.value(self._key)
        mode = parse_theme_mode(stored)
        if mode is None:
            if stored is not None:
                logger.warning("Ignoring unrecognised theme preference {!r}", stored)
            return ThemeMode.SYSTEM
        return mode

    def set_preference(self, mode: ThemeMode) -> None:
        """Persist ``mode`` synchronously."""
        mode = ThemeMode(mode)
        self._settings.setValue(self._key, mode.value)
        self._settings.sync()

        status = self._settings.status()
        if status != QSettings.Status.NoError:
            logger.warning("Could not save theme preference ({}); keeping it for this session", status)
            self._unsaved = mode
        else:
            self._unsaved = None
