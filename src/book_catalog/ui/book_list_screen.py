"""Book list screen - Grid of book cards with edit and delete actions."""

import html
from typing import Dict, List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from book_catalog.core import Book

GRID_COLUMNS = 3


class BookCard(QFrame):
    """A single book card showing title, author, ISBN, year and actions.

    Signals:
        edit_requested: Emitted with the book id when Edit is clicked.
        delete_clicked: Emitted with the book id when Delete is clicked.
    """

    edit_requested = Signal(int)
    delete_clicked = Signal(int)

    def __init__(self, book: Book, parent=None):
        super().__init__(parent)
        self.book = book
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(6)

        self.title_label = QLabel(self.book.title)
        self.title_label.setTextFormat(Qt.TextFormat.PlainText)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet("font-size: 18px; font-weight: 600;")
        layout.addWidget(self.title_label)

        self.detail_labels: Dict[str, QLabel] = {}
        for caption, value in (
            ("Author", self.book.author),
            ("ISBN", self.book.isbn),
            ("Year", str(self.book.publication_year)),
        ):
            # Backend text is escaped; only the caption is markup
            label = QLabel(f"<b>{caption}:</b> {html.escape(value)}")
            label.setTextFormat(Qt.TextFormat.RichText)
            self.detail_labels[caption] = label
            layout.addWidget(label)

        buttons = QHBoxLayout()
        self.edit_button = QPushButton("Edit")
        self.edit_button.clicked.connect(lambda: self.edit_requested.emit(self.book.id))
        self.delete_button = QPushButton("Delete")
        self.delete_button.setAccessibleName(f"Delete {self.book.title}")
        self.delete_button.clicked.connect(lambda: self.delete_clicked.emit(self.book.id))
        buttons.addWidget(self.edit_button)
        buttons.addWidget(self.delete_button)
        layout.addLayout(buttons)

    def set_deleting(self, deleting: bool):
        """Disable the card's actions while a delete is in flight."""
        self.delete_button.setEnabled(not deleting)
        self.edit_button.setEnabled(not deleting)
        self.delete_button.setText("Deleting..." if deleting else "Delete")


class BookListScreen(QWidget):
    """Displays all books in a 3-column grid.

    Signals:
        create_requested: Emitted when the user asks to add a book.
        edit_requested: Emitted with a book id when the user opens a book.
        delete_requested: Emitted with a book id once deletion is confirmed.
    """

    create_requested = Signal()
    edit_requested = Signal(int)
    delete_requested = Signal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._books: List[Book] = []
        self._cards: Dict[int, BookCard] = {}
        self._setup_ui()

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(20, 20, 20, 20)

        header = QHBoxLayout()
        title_label = QLabel("Books")
        title_label.setStyleSheet("font-size: 24px; font-weight: bold; padding-bottom: 10px;")
        header.addWidget(title_label)
        header.addStretch()
        add_button = QPushButton("Add New Book")
        add_button.clicked.connect(self.create_requested)
        header.addWidget(add_button)
        main_layout.addLayout(header)

        self.error_label = QLabel()
        self.error_label.setTextFormat(Qt.TextFormat.PlainText)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(
            "background-color: #fee2e2; color: #991b1b; border-radius: 6px; padding: 8px;"
        )
        self.error_label.hide()
        main_layout.addWidget(self.error_label)

        self.loading_label = QLabel("Loading books...")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.loading_label.hide()
        main_layout.addWidget(self.loading_label)

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setFrameShape(QFrame.Shape.NoFrame)

        self.grid_container = QWidget()
        self.grid_layout = QGridLayout(self.grid_container)
        self.grid_layout.setSpacing(16)
        self.grid_layout.setContentsMargins(0, 0, 0, 0)
        scroll_area.setWidget(self.grid_container)
        main_layout.addWidget(scroll_area)

        # Empty state (hidden when books are present)
        self.empty_state = QWidget()
        empty_layout = QVBoxLayout(self.empty_state)
        empty_label = QLabel("No books found.")
        empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        empty_label.setStyleSheet("font-size: 18px; padding-top: 60px;")
        create_first = QPushButton("Create your first book")
        create_first.setFlat(True)
        create_first.clicked.connect(self.create_requested)
        empty_layout.addWidget(empty_label)
        empty_layout.addWidget(create_first, alignment=Qt.AlignmentFlag.AlignCenter)
        self.empty_state.hide()
        self.grid_layout.addWidget(self.empty_state, 0, 0, 1, GRID_COLUMNS)

    @property
    def books(self) -> List[Book]:
        return list(self._books)

    def book_by_id(self, book_id: int) -> Optional[Book]:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def card_for(self, book_id: int) -> Optional[BookCard]:
        return self._cards.get(book_id)

    def set_loading(self, loading: bool):
        self.loading_label.setVisible(loading)

    def display_books(self, books: List[Book]):
        """Display the given books in order.

        Args:
            books: Books to show, already sorted.
        """
        self._books = list(books)
        self._clear_grid()
        self.set_loading(False)

        # No empty state while an error explains the missing books
        if not books:
            self.empty_state.setVisible(self.error_label.isHidden())
            return

        self.empty_state.hide()
        for idx, book in enumerate(books):
            card = BookCard(book)
            card.edit_requested.connect(self.edit_requested.emit)
            card.delete_clicked.connect(self._on_delete_clicked)
            self._cards[book.id] = card
            self.grid_layout.addWidget(card, idx // GRID_COLUMNS, idx % GRID_COLUMNS)

    def show_error(self, message: str):
        self.error_label.setText(message)
        self.error_label.show()
        if not self._books:
            self.empty_state.hide()

    def clear_error(self):
        self.error_label.clear()
        self.error_label.hide()

    def set_delete_in_progress(self, book_id: int, in_progress: bool):
        card = self._cards.get(book_id)
        if card is not None:
            card.set_deleting(in_progress)

    def _clear_grid(self):
        """Remove all cards from the grid."""
        for card in self._cards.values():
            self.grid_layout.removeWidget(card)
            card.deleteLater()
        self._cards.clear()

    def _on_delete_clicked(self, book_id: int):
        """Ask for confirmation before emitting delete_requested."""
        book = self.book_by_id(book_id)
        title = f'"{book.title}"' if book else "this book"

        reply = QMessageBox.question(
            self,
            "Delete Book",
            f"Are you sure you want to delete {title}? This action cannot be undone.",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )

        if reply == QMessageBox.StandardButton.Yes:
            self.delete_requested.emit(book_id)
