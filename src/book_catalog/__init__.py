"""
Book Catalog - A desktop client for a book catalog REST service.

This package provides a desktop application for managing books with:
- Listing books in library order (leading articles ignored)
- Creating, editing and deleting books
- Light, dark and system-following themes
- Toast notifications for completed and failed actions
"""

__version__ = "0.1.0"

# Make key components available at package level
from book_catalog.core import Book, BookDraft, EffectiveTheme, ThemeMode
from book_catalog.services import BookApiClient, ThemeResolver, compare_titles

__all__ = [
    "Book",
    "BookDraft",
    "EffectiveTheme",
    "ThemeMode",
    "BookApiClient",
    "ThemeResolver",
    "compare_titles",
]
