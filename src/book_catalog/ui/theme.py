"""Theme presentation - palettes, the theme applier and the toggle button."""

from typing import Optional

from loguru import logger
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication, QToolButton

from book_catalog.core import EffectiveTheme, ThemeMode

EFFECTIVE_THEME_PROPERTY = "effectiveTheme"

# (window, base, alt base, text, button, highlight, placeholder)
_PALETTE_COLORS = {
    EffectiveTheme.LIGHT: ("#fafafa", "#ffffff", "#f4f4f5", "#000000", "#f4f4f5", "#2563eb", "#71717a"),
    EffectiveTheme.DARK: ("#000000", "#18181b", "#27272a", "#fafafa", "#27272a", "#60a5fa", "#a1a1aa"),
}


def build_palette(effective: EffectiveTheme) -> QPalette:
    """Return the application palette for a light or dark theme."""
    window, base, alt_base, text, button, highlight, placeholder = _PALETTE_COLORS[effective]
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(window))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(text))
    palette.setColor(QPalette.ColorRole.Base, QColor(base))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(alt_base))
    palette.setColor(QPalette.ColorRole.Text, QColor(text))
    palette.setColor(QPalette.ColorRole.Button, QColor(button))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor(text))
    palette.setColor(QPalette.ColorRole.ToolTipBase, QColor(base))
    palette.setColor(QPalette.ColorRole.ToolTipText, QColor(text))
    palette.setColor(QPalette.ColorRole.Highlight, QColor(highlight))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor("#ffffff"))
    palette.setColor(QPalette.ColorRole.PlaceholderText, QColor(placeholder))
    return palette


class PaletteThemeApplier:
    """Makes the effective theme visible by switching the application palette.

    The effective value is also exposed as the ``effectiveTheme`` property
    of the application so widgets and tests can read a single flag.
    Applying the value that is already applied does nothing.
    """

    def __init__(self, app: Optional[QApplication] = None):
        self._app = app or QApplication.instance()
        if self._app is None:
            raise ValueError("A QApplication is required to apply themes")
        self._applied: Optional[EffectiveTheme] = None

    @property
    def applied(self) -> Optional[EffectiveTheme]:
        return self._applied

    def apply(self, effective: EffectiveTheme) -> None:
        effective = EffectiveTheme(effective)
        if effective == self._applied:
            return
        self._app.setPalette(build_palette(effective))
        self._app.setProperty(EFFECTIVE_THEME_PROPERTY, effective.value)
        self._applied = effective
        logger.info("Applied {} theme", effective)


def theme_label(mode: ThemeMode, effective: EffectiveTheme) -> str:
    """Return the toggle label for a mode, e.g. "System (Dark)"."""
    if mode == ThemeMode.SYSTEM:
        return f"System ({'Dark' if effective == EffectiveTheme.DARK else 'Light'})"
    return "Dark" if mode == ThemeMode.DARK else "Light"


class ThemeToggleButton(QToolButton):
    """Toolbar button that cycles system -> light -> dark."""

    def __init__(self, theme_resolver, parent=None):
        super().__init__(parent)
        if theme_resolver is None:
            raise ValueError("ThemeResolver must not be None")
        self._resolver = theme_resolver

        self.clicked.connect(self._on_clicked)
        self._resolver.mode_changed.connect(self._refresh_label)
        self._resolver.effective_changed.connect(self._refresh_label)
        self._refresh_label()

    def _on_clicked(self):
        self._resolver.cycle()

    def _refresh_label(self, *_):
        label = theme_label(self._resolver.mode, self._resolver.effective)
        self.setText(label)
        self.setToolTip(f"Theme: {label}")
        self.setAccessibleName(f"Theme: {label}")
