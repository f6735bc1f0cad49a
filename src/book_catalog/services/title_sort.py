"""Library-style title ordering.

Titles are sorted the way libraries and bookstores shelve them: a single
leading article ("The", "A", "An") is ignored, comparison is case- and
accent-insensitive, and embedded numbers compare by value so that
"Book 2" comes before "Book 10".
"""

import unicodedata
from functools import cmp_to_key
from typing import Iterable, List, Optional

from PySide6.QtCore import QCollator, QLocale, Qt

from book_catalog.core import Book

LEADING_ARTICLES = ("the ", "a ", "an ")


def sort_title(title: str) -> str:
    """Return the key used for ordering: trimmed, minus one leading article."""
    trimmed = title.strip()
    lowered = trimmed.lower()
    for article in LEADING_ARTICLES:
        if lowered == article.rstrip():
            return ""
        if lowered.startswith(article):
            return trimmed[len(article):].strip()
    return trimmed


def _fold(text: str) -> str:
    """Drop accents and case so only base letters take part in collation."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def _collation_locale() -> QLocale:
    locale = QLocale.system()
    # The C locale collates by code point and ignores numeric mode
    if locale.language() == QLocale.Language.C:
        return QLocale(QLocale.Language.English, QLocale.Country.UnitedStates)
    return locale


def make_title_collator(locale: Optional[QLocale] = None) -> QCollator:
    """Build a case-insensitive, numeric-aware collator for ``locale``."""
    collator = QCollator(locale if locale is not None else _collation_locale())
    collator.setCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)
    collator.setNumericMode(True)
    return collator


def compare_titles(title_a: str, title_b: str, collator: Optional[QCollator] = None) -> int:
    """Compare two titles for sorting.

    Args:
        title_a: First title.
        title_b: Second title.
        collator: Collator to use; defaults to one for the current system locale.

    Returns:
        -1, 0 or 1, usable as a total-order comparator.
    """
    key_a = _fold(sort_title(title_a))
    key_b = _fold(sort_title(title_b))
    if key_a == key_b:
        return 0
    if collator is None:
        collator = make_title_collator()
    result = collator.compare(key_a, key_b)
    return (result > 0) - (result < 0)


title_sort_key = cmp_to_key(compare_titles)


def sort_books(books: Iterable[Book], collator: Optional[QCollator] = None) -> List[Book]:
    """Return books ordered by title; books with equal keys keep their order.

    One collator is used for the whole sort, built for the system locale
    unless ``collator`` is given.
    """
    if collator is None:
        collator = make_title_collator()
    key = cmp_to_key(lambda a, b: compare_titles(a, b, collator))
    return sorted(books, key=lambda book: key(book.title))
