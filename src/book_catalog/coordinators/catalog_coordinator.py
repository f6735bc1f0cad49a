"""Catalog Coordinator - Orchestrates listing, editing and deleting books."""

from typing import List, Optional

from loguru import logger
from PySide6.QtCore import QObject, Slot

from book_catalog.core import Book, BookDraft
from book_catalog.services import (
    BookApiClient,
    BookCatalogError,
    BookNotFoundError,
    BookValidationError,
    ConfigurationError,
    RequestRunner,
    ToastCenter,
    sort_books,
)
from book_catalog.ui import BookFormScreen, BookListScreen, MainWindow, MissingBookScreen

DELETE_FAILED_MESSAGE = "Failed to delete book. Please try again."


def user_message(error: BookCatalogError, fallback: str) -> str:
    """Return the text shown to the user for ``error``.

    Validation and configuration messages are shown verbatim; anything
    else gets the generic ``fallback``.
    """
    if isinstance(error, (BookValidationError, ConfigurationError)):
        return str(error)
    if isinstance(error, BookNotFoundError):
        return "Book not found"
    return fallback


class CatalogCoordinator(QObject):
    """Manages the book list, the book form and their backend requests.

    Responsibilities:
    - Load and display books sorted by title
    - Open the form for new and existing books
    - Create, update and delete books, then re-fetch the list
    - Route not-found books to the missing-book page
    - Report failures inline and as toasts while keeping the UI interactive
    """

    def __init__(
        self,
        main_window: MainWindow,
        list_screen: BookListScreen,
        form_screen: BookFormScreen,
        missing_screen: MissingBookScreen,
        api_client: BookApiClient,
        request_runner: RequestRunner,
        toast_center: ToastCenter,
    ):
        super().__init__()

        if main_window is None:
            raise ValueError("MainWindow must not be None")
        if list_screen is None:
            raise ValueError("BookListScreen must not be None")
        if form_screen is None:
            raise ValueError("BookFormScreen must not be None")
        if missing_screen is None:
            raise ValueError("MissingBookScreen must not be None")
        if api_client is None:
            raise ValueError("BookApiClient must not be None")
        if request_runner is None:
            raise ValueError("RequestRunner must not be None")
        if toast_center is None:
            raise ValueError("ToastCenter must not be None")

        self.main_window = main_window
        self.list_screen = list_screen
        self.form_screen = form_screen
        self.missing_screen = missing_screen
        self.api_client = api_client
        self.request_runner = request_runner
        self.toast_center = toast_center

        self._pending_delete_id: Optional[int] = None
        self._pending_delete_title = ""
        self._pending_edit_id: Optional[int] = None
        self._saving_update = False

        # Wire screen signals
        self.main_window.create_requested.connect(self.open_create_form)
        self.main_window.refresh_requested.connect(self.load_books)
        self.list_screen.create_requested.connect(self.open_create_form)
        self.list_screen.edit_requested.connect(self.open_edit_form)
        self.list_screen.delete_requested.connect(self.delete_book)
        self.form_screen.submitted.connect(self.save_book)
        self.form_screen.cancelled.connect(self.show_library)
        self.missing_screen.back_requested.connect(self.show_library)

    def show_library(self):
        """Display the book list and reload it."""
        self.main_window.show_list()
        self.load_books()

    @Slot()
    def load_books(self):
        self.list_screen.set_loading(True)
        self.request_runner.submit(
            self.api_client.list_books,
            self._on_books_loaded,
            self._on_books_failed,
            description="list books",
        )

    @Slot()
    def open_create_form(self):
        self.form_screen.load_book(None)
        self.main_window.show_form()

    @Slot(int)
    def open_edit_form(self, book_id: int):
        """Fetch the latest copy of a book and show it in the form."""
        self._pending_edit_id = book_id
        self.request_runner.submit(
            lambda: self.api_client.get_book(book_id),
            self._on_book_loaded,
            self._on_book_load_failed,
            description=f"get book {book_id}",
        )

    @Slot(object)
    def save_book(self, draft: BookDraft):
        """Create or replace a book depending on the form's mode."""
        book_id = self.form_screen.book_id
        self._saving_update = book_id is not None
        self.form_screen.set_saving(True)

        if book_id is None:
            request = lambda: self.api_client.create_book(draft)
        else:
            request = lambda: self.api_client.update_book(book_id, draft)

        self.request_runner.submit(
            request,
            self._on_book_saved,
            self._on_save_failed,
            description="update book" if self._saving_update else "create book",
        )

    @Slot(int)
    def delete_book(self, book_id: int):
        """Delete a confirmed book; its card stays disabled until the call ends."""
        if self._pending_delete_id is not None:
            return
        book = self.list_screen.book_by_id(book_id)
        self._pending_delete_id = book_id
        self._pending_delete_title = book.title if book else ""
        self.list_screen.set_delete_in_progress(book_id, True)
        self.request_runner.submit(
            lambda: self.api_client.delete_book(book_id),
            self._on_book_deleted,
            self._on_delete_failed,
            description=f"delete book {book_id}",
        )

    @Slot(object)
    def _on_books_loaded(self, books: List[Book]):
        self.list_screen.clear_error()
        self.list_screen.display_books(sort_books(books))

    @Slot(object)
    def _on_books_failed(self, error: BookCatalogError):
        logger.warning("Loading books failed: {}", error)
        self.list_screen.clear_error()
        self.list_screen.display_books([])
        self.list_screen.show_error(user_message(error, f"Failed to load books: {error}"))
        self._report_configuration_error(error)

    @Slot(object)
    def _on_book_loaded(self, book: Book):
        self._pending_edit_id = None
        self.form_screen.load_book(book)
        self.main_window.show_form()

    @Slot(object)
    def _on_book_load_failed(self, error: BookCatalogError):
        book_id = self._pending_edit_id
        self._pending_edit_id = None

        if isinstance(error, BookNotFoundError):
            self.missing_screen.set_book_id(book_id)
            self.main_window.show_missing()
            return

        logger.warning("Loading book {} failed: {}", book_id, error)
        self.main_window.show_list()
        self.list_screen.show_error(user_message(error, f"Failed to load book: {error}"))
        self._report_configuration_error(error)

    @Slot(object)
    def _on_book_saved(self, book: Book):
        self.form_screen.set_saving(False)
        verb = "updated" if self._saving_update else "created"
        logger.info("Book {} {}", book.id, verb)
        self.toast_center.show_success(f"Book {verb} successfully")
        self.show_library()

    @Slot(object)
    def _on_save_failed(self, error: BookCatalogError):
        self.form_screen.set_saving(False)
        verb = "update" if self._saving_update else "create"
        message = user_message(error, f"Failed to {verb} book")
        self.form_screen.show_error(message)
        self.toast_center.show_error(message)
        self._report_configuration_error(error)

    @Slot(object)
    def _on_book_deleted(self, _result):
        title = self._pending_delete_title
        self._pending_delete_id = None
        self._pending_delete_title = ""
        if title:
            self.toast_center.show_success(f'"{title}" has been deleted')
        else:
            self.toast_center.show_success("Book has been deleted")
        self.load_books()

    @Slot(object)
    def _on_delete_failed(self, error: BookCatalogError):
        book_id = self._pending_delete_id
        self._pending_delete_id = None
        self._pending_delete_title = ""
        if book_id is not None:
            self.list_screen.set_delete_in_progress(book_id, False)

        if isinstance(error, BookNotFoundError):
            self.toast_center.show_warning("This book no longer exists")
            self.load_books()
            return

        logger.warning("Deleting book failed: {}", error)
        self.toast_center.show_error(
            str(error) if isinstance(error, ConfigurationError) else DELETE_FAILED_MESSAGE
        )
        self._report_configuration_error(error)

    def _report_configuration_error(self, error: BookCatalogError):
        if isinstance(error, ConfigurationError):
            logger.error("Configuration error: {}", error)
            self.main_window.show_error("Configuration Error", str(error))
