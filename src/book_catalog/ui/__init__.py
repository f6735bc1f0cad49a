"""UI layer - PySide6 presentation components."""

from .book_form_screen import BookFormScreen
from .book_list_screen import BookCard, BookListScreen
from .main_window import MainWindow
from .missing_book_screen import MissingBookScreen
from .theme import PaletteThemeApplier, ThemeToggleButton
from .toast_container import ToastContainer

__all__ = [
    "BookCard",
    "BookFormScreen",
    "BookListScreen",
    "MainWindow",
    "MissingBookScreen",
    "PaletteThemeApplier",
    "ThemeToggleButton",
    "ToastContainer",
]
