#!/usr/bin/env python3
"""
Tests for CatalogCoordinator - validates list, form and delete flows and error routing.
"""

from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QLocale

from book_catalog.coordinators import CatalogCoordinator, user_message
from book_catalog.coordinators.catalog_coordinator import DELETE_FAILED_MESSAGE
from book_catalog.core import Book, BookDraft
from book_catalog.services import (
    BookApiError,
    BookNotFoundError,
    BookValidationError,
    ConfigurationError,
    ToastCenter,
)
from book_catalog.ui import BookFormScreen, BookListScreen, MissingBookScreen


def make_book(book_id, title):
    return Book(id=book_id, title=title, author="Author", isbn=str(book_id), publication_year=2000)


DRAFT = BookDraft(title="Dune", author="Frank Herbert", isbn="978", publication_year=1965)


@pytest.fixture
def parts(qt_app, immediate_runner):
    """Real screens, mocked window and client."""
    main_window = MagicMock()
    api_client = MagicMock()
    api_client.list_books.return_value = []
    return {
        "main_window": main_window,
        "list_screen": BookListScreen(),
        "form_screen": BookFormScreen(),
        "missing_screen": MissingBookScreen(),
        "api_client": api_client,
        "request_runner": immediate_runner,
        "toast_center": ToastCenter(duration_ms=0),
    }


@pytest.fixture
def coordinator(parts):
    return CatalogCoordinator(**parts)


def toast_messages(parts, kind):
    return [toast.message for toast in parts["toast_center"].toasts if toast.kind == kind]


@pytest.mark.parametrize("missing, message", [
    ("main_window", "MainWindow must not be None"),
    ("api_client", "BookApiClient must not be None"),
    ("toast_center", "ToastCenter must not be None"),
])
def test_fails_fast_on_missing_collaborator(parts, missing, message):
    parts[missing] = None
    with pytest.raises(ValueError, match=message):
        CatalogCoordinator(**parts)


class TestListing:
    def test_books_are_shown_in_title_order(self, coordinator, parts):
        parts["api_client"].list_books.return_value = [
            make_book(1, "The Great Gatsby"),
            make_book(2, "1984"),
            make_book(3, "A Tale of Two Cities"),
        ]

        coordinator.show_library()

        parts["main_window"].show_list.assert_called_once()
        assert [book.id for book in parts["list_screen"].books] == [2, 1, 3]

    def test_books_display_under_c_locale(self, coordinator, parts, monkeypatch):
        monkeypatch.setattr(QLocale, "system", staticmethod(lambda: QLocale.c()))
        parts["api_client"].list_books.return_value = [make_book(1, "Book 10"), make_book(2, "Book 2")]

        coordinator.load_books()

        screen = parts["list_screen"]
        assert [book.id for book in screen.books] == [2, 1]
        assert screen.loading_label.isHidden()

    def test_read_failure_degrades_to_error_display(self, coordinator, parts):
        parts["api_client"].list_books.side_effect = BookApiError("API request failed: 500", 500)

        coordinator.load_books()

        screen = parts["list_screen"]
        assert screen.books == []
        assert not screen.error_label.isHidden()
        assert "Failed to load books" in screen.error_label.text()
        parts["main_window"].show_error.assert_not_called()

    def test_configuration_error_is_loud(self, coordinator, parts):
        parts["api_client"].list_books.side_effect = ConfigurationError("LOCAL_DN environment variable is not set")

        coordinator.load_books()

        parts["main_window"].show_error.assert_called_once_with(
            "Configuration Error", "LOCAL_DN environment variable is not set"
        )
        assert "LOCAL_DN" in parts["list_screen"].error_label.text()


class TestEditing:
    def test_open_create_form_resets_form(self, coordinator, parts):
        parts["form_screen"].load_book(make_book(1, "Old"))

        coordinator.open_create_form()

        assert parts["form_screen"].book_id is None
        parts["main_window"].show_form.assert_called_once()

    def test_open_edit_form_loads_fresh_copy(self, coordinator, parts):
        parts["api_client"].get_book.return_value = make_book(4, "Dune")

        coordinator.open_edit_form(4)

        parts["api_client"].get_book.assert_called_once_with(4)
        assert parts["form_screen"].book_id == 4
        parts["main_window"].show_form.assert_called_once()

    def test_missing_book_routes_to_missing_page(self, coordinator, parts):
        parts["api_client"].get_book.side_effect = BookNotFoundError("Book not found", 404)

        coordinator.open_edit_form(42)

        parts["main_window"].show_missing.assert_called_once()
        parts["main_window"].show_form.assert_not_called()
        assert "#42" in parts["missing_screen"].message_label.text()

    def test_generic_read_failure_returns_to_list(self, coordinator, parts):
        parts["api_client"].get_book.side_effect = BookApiError("Could not reach the book service")

        coordinator.open_edit_form(42)

        parts["main_window"].show_missing.assert_not_called()
        parts["main_window"].show_list.assert_called_once()
        assert not parts["list_screen"].error_label.isHidden()


class TestSaving:
    def test_create_success_reports_and_refetches(self, coordinator, parts):
        parts["api_client"].create_book.return_value = make_book(9, "Dune")

        coordinator.save_book(DRAFT)

        parts["api_client"].create_book.assert_called_once_with(DRAFT)
        parts["api_client"].list_books.assert_called_once()
        assert toast_messages(parts, "success") == ["Book created successfully"]
        assert parts["form_screen"].submit_button.isEnabled()

    def test_update_uses_form_book_id(self, coordinator, parts):
        parts["form_screen"].load_book(make_book(3, "Dune"))
        parts["api_client"].update_book.return_value = make_book(3, "Dune")

        coordinator.save_book(DRAFT)

        parts["api_client"].update_book.assert_called_once_with(3, DRAFT)
        assert toast_messages(parts, "success") == ["Book updated successfully"]

    def test_validation_error_shown_verbatim(self, coordinator, parts):
        parts["api_client"].create_book.side_effect = BookValidationError("ISBN already exists", 400)

        coordinator.save_book(DRAFT)

        form = parts["form_screen"]
        assert form.error_label.text() == "ISBN already exists"
        assert form.submit_button.isEnabled()
        assert toast_messages(parts, "error") == ["ISBN already exists"]
        parts["api_client"].list_books.assert_not_called()

    def test_generic_error_uses_fallback(self, coordinator, parts):
        parts["form_screen"].load_book(make_book(3, "Dune"))
        parts["api_client"].update_book.side_effect = BookApiError("API request failed: 503", 503)

        coordinator.save_book(DRAFT)

        assert parts["form_screen"].error_label.text() == "Failed to update book"


class TestDeleting:
    def test_delete_success_reports_title_and_refetches(self, coordinator, parts):
        parts["api_client"].list_books.return_value = [make_book(1, "Dune")]
        coordinator.load_books()

        coordinator.delete_book(1)

        parts["api_client"].delete_book.assert_called_once_with(1)
        assert toast_messages(parts, "success") == ['"Dune" has been deleted']
        assert parts["api_client"].list_books.call_count == 2

    def test_delete_failure_re_enables_card(self, coordinator, parts):
        parts["api_client"].list_books.return_value = [make_book(1, "Dune")]
        parts["api_client"].delete_book.side_effect = BookApiError("boom", 500)
        coordinator.load_books()

        coordinator.delete_book(1)

        assert parts["list_screen"].card_for(1).delete_button.isEnabled()
        assert toast_messages(parts, "error") == [DELETE_FAILED_MESSAGE]

    def test_delete_of_missing_book_refreshes_list(self, coordinator, parts):
        parts["api_client"].delete_book.side_effect = BookNotFoundError("Book not found", 404)

        coordinator.delete_book(1)

        assert toast_messages(parts, "warning") == ["This book no longer exists"]
        parts["api_client"].list_books.assert_called_once()


class TestUserMessage:
    def test_validation_is_verbatim(self):
        assert user_message(BookValidationError("Bad ISBN"), "fallback") == "Bad ISBN"

    def test_not_found_is_distinct(self):
        assert user_message(BookNotFoundError("x", 404), "fallback") == "Book not found"

    def test_generic_uses_fallback(self):
        assert user_message(BookApiError("socket closed"), "Failed to create book") == "Failed to create book"
