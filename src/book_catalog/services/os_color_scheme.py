"""Observation of the operating system's light/dark preference."""

from typing import Callable

from loguru import logger
from PySide6.QtCore import Qt

from book_catalog.core import EffectiveTheme


def _to_effective(scheme) -> EffectiveTheme:
    if scheme == Qt.ColorScheme.Dark:
        return EffectiveTheme.DARK
    return EffectiveTheme.LIGHT


class ColorSchemeSubscription:
    """Handle for an active OS preference subscription.

    The owner must call cancel() (or use the handle as a context manager)
    when its UI scope is torn down. After cancellation no further
    notifications are delivered. A cancelled subscription cannot be
    restarted; subscribe again instead.
    """

    def __init__(self, signal, slot: Callable):
        self._signal = signal
        self._slot = slot
        self._active = True
        self._signal.connect(self._slot)

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._signal.disconnect(self._slot)

    def __enter__(self) -> "ColorSchemeSubscription":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cancel()


class OsColorSchemeWatcher:
    """Reports the OS color scheme from a QStyleHints instance.

    Args:
        style_hints: Object exposing colorScheme() and a colorSchemeChanged
            signal, normally QGuiApplication.styleHints().
    """

    def __init__(self, style_hints):
        if style_hints is None:
            raise ValueError("Style hints must not be None")
        self._style_hints = style_hints

    def current(self) -> EffectiveTheme:
        """Return the current OS preference; an unknown scheme reads as light."""
        return _to_effective(self._style_hints.colorScheme())

    def subscribe(self, callback: Callable[[EffectiveTheme], None]) -> ColorSchemeSubscription:
        """Deliver every subsequent OS preference change to ``callback``."""
        subscription = None

        def relay(scheme) -> None:
            if subscription is not None and not subscription.active:
                return
            preference = _to_effective(scheme)
            logger.debug("OS color scheme changed to {}", preference)
            callback(preference)

        subscription = ColorSchemeSubscription(self._style_hints.colorSchemeChanged, relay)
        return subscription
