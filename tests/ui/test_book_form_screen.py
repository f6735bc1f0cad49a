#!/usr/bin/env python3
"""
Tests for BookFormScreen - validates create/edit modes and local validation.
"""

from PySide6.QtWidgets import QApplication

from book_catalog.core import Book, BookDraft
from book_catalog.ui import BookFormScreen


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


BOOK = Book(id=5, title="Dune", author="Frank Herbert", isbn="978-0441013593", publication_year=1965)


def test_create_mode_by_default():
    ensure_qt_app()

    form = BookFormScreen()

    assert form.book_id is None
    assert form.submit_button.text() == "Create Book"
    assert form.title_edit.text() == ""


def test_load_book_switches_to_edit_mode():
    ensure_qt_app()

    form = BookFormScreen()
    form.load_book(BOOK)

    assert form.book_id == 5
    assert form.submit_button.text() == "Update Book"
    assert form.draft() == BOOK.to_draft()


def test_valid_submit_emits_draft():
    ensure_qt_app()

    form = BookFormScreen()
    submitted = []
    form.submitted.connect(submitted.append)
    form.title_edit.setText("  Dune ")
    form.author_edit.setText("Frank Herbert")
    form.isbn_edit.setText("978-0441013593")
    form.year_spin.setValue(1965)

    form.submit_button.click()

    assert submitted == [
        BookDraft(title="Dune", author="Frank Herbert", isbn="978-0441013593", publication_year=1965)
    ]
    assert form.error_label.isHidden()


def test_missing_fields_block_submit():
    ensure_qt_app()

    form = BookFormScreen()
    submitted = []
    form.submitted.connect(submitted.append)
    form.title_edit.setText("Dune")

    form.submit_button.click()

    assert submitted == []
    assert not form.error_label.isHidden()
    assert "Author is required" in form.error_label.text()


def test_saving_disables_submit():
    ensure_qt_app()

    form = BookFormScreen()
    form.set_saving(True)
    assert not form.submit_button.isEnabled()
    assert form.submit_button.text() == "Saving..."

    form.set_saving(False)
    assert form.submit_button.isEnabled()
    assert form.submit_button.text() == "Create Book"


def test_cancel_emits_signal():
    ensure_qt_app()

    form = BookFormScreen()
    cancelled = []
    form.cancelled.connect(lambda: cancelled.append(True))

    form.cancel_button.click()

    assert cancelled == [True]
