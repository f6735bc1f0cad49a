"""Theme Resolver - Derives and applies the effective light/dark theme."""

from typing import Optional

from loguru import logger
from PySide6.QtCore import QObject, Signal

from book_catalog.core import (
    THEME_CYCLE,
    EffectiveTheme,
    ThemeMode,
    parse_theme_mode,
    resolve_effective,
)
from book_catalog.services.cycling import next_element
from book_catalog.services.os_color_scheme import ColorSchemeSubscription, OsColorSchemeWatcher
from book_catalog.services.theme_preference_store import ThemePreferenceStore

# Applied until the first OS observation so the first paint is consistent
PRE_HYDRATION_THEME = EffectiveTheme.LIGHT


def cycle_mode(mode: object) -> ThemeMode:
    """Return the mode after ``mode`` in system -> light -> dark order.

    Values outside the known modes yield the first mode, ThemeMode.SYSTEM.
    """
    return next_element(THEME_CYCLE, parse_theme_mode(mode))


class ThemeResolver(QObject):
    """Tracks the user's theme mode and the OS preference.

    The effective theme is always recomputed from (mode, OS preference)
    and handed to the applier whenever either input changes.

    Signals:
        mode_changed: Emitted with the new mode value when the user selection changes.
        effective_changed: Emitted with the new effective value when it changes.
    """

    mode_changed = Signal(str)
    effective_changed = Signal(str)

    def __init__(
        self,
        preference_store: ThemePreferenceStore,
        os_watcher: OsColorSchemeWatcher,
        applier,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)

        if preference_store is None:
            raise ValueError("ThemePreferenceStore must not be None")
        if os_watcher is None:
            raise ValueError("OsColorSchemeWatcher must not be None")
        if applier is None:
            raise ValueError("Theme applier must not be None")

        self._store = preference_store
        self._os_watcher = os_watcher
        self._applier = applier

        self._mode = preference_store.get_preference()
        self._os_preference: Optional[EffectiveTheme] = None
        self._subscription: Optional[ColorSchemeSubscription] = None
        self._last_effective: Optional[EffectiveTheme] = None

    @property
    def mode(self) -> ThemeMode:
        return self._mode

    @property
    def os_preference(self) -> Optional[EffectiveTheme]:
        """Last observed OS preference, None before start()."""
        return self._os_preference

    @property
    def is_hydrated(self) -> bool:
        return self._os_preference is not None

    @property
    def effective(self) -> EffectiveTheme:
        if self._os_preference is None:
            return PRE_HYDRATION_THEME
        return resolve_effective(self._mode, self._os_preference)

    @property
    def is_running(self) -> bool:
        return self._subscription is not None

    def start(self) -> None:
        """Observe the OS preference, subscribe to changes and apply the theme."""
        if self._subscription is not None:
            return
        self._os_preference = self._os_watcher.current()
        self._subscription = self._os_watcher.subscribe(self._on_os_preference_changed)
        logger.debug("Theme resolver started (mode={}, os={})", self._mode, self._os_preference)
        self._reapply()

    def stop(self) -> None:
        """Release the OS preference subscription."""
        if self._subscription is None:
            return
        self._subscription.cancel()
        self._subscription = None

    def get_preference(self) -> ThemeMode:
        return self._store.get_preference()

    def set_preference(self, mode: ThemeMode) -> None:
        """Persist a new mode and reapply the effective theme.

        Raises:
            ValueError: If ``mode`` is not one of the known theme modes.
        """
        mode = ThemeMode(mode)
        self._store.set_preference(mode)
        if mode != self._mode:
            self._mode = mode
            self.mode_changed.emit(mode.value)
        self._reapply()

    def cycle(self) -> ThemeMode:
        """Advance to the next mode and return it."""
        next_mode = cycle_mode(self._mode)
        self.set_preference(next_mode)
        return next_mode

    def _on_os_preference_changed(self, preference: EffectiveTheme) -> None:
        if preference == self._os_preference:
            return
        self._os_preference = preference
        self._reapply()

    def _reapply(self) -> None:
        effective = self.effective
        self._applier.apply(effective)
        if effective != self._last_effective:
            self._last_effective = effective
            self.effective_changed.emit(effective.value)
