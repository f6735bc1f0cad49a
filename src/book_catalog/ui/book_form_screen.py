"""Book form screen - Create and edit a single book."""

from datetime import date
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from book_catalog.core import MIN_PUBLICATION_YEAR, Book, BookDraft


class BookFormScreen(QWidget):
    """Form for creating a new book or replacing an existing one.

    Signals:
        submitted: Emitted with a valid BookDraft when the user saves.
        cancelled: Emitted when the user leaves the form without saving.
    """

    submitted = Signal(object)
    cancelled = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._book: Optional[Book] = None
        self._saving = False
        self._setup_ui()
        self.load_book(None)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)

        self.heading_label = QLabel()
        self.heading_label.setStyleSheet("font-size: 24px; font-weight: bold; padding-bottom: 10px;")
        layout.addWidget(self.heading_label)

        self.error_label = QLabel()
        self.error_label.setTextFormat(Qt.TextFormat.PlainText)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(
            "background-color: #fee2e2; color: #991b1b; border-radius: 6px; padding: 8px;"
        )
        self.error_label.hide()
        layout.addWidget(self.error_label)

        form = QFormLayout()
        self.title_edit = QLineEdit()
        self.author_edit = QLineEdit()
        self.isbn_edit = QLineEdit()
        self.year_spin = QSpinBox()
        self.year_spin.setRange(MIN_PUBLICATION_YEAR, date.today().year + 1)
        form.addRow("Title *", self.title_edit)
        form.addRow("Author *", self.author_edit)
        form.addRow("ISBN *", self.isbn_edit)
        form.addRow("Publication Year *", self.year_spin)
        layout.addLayout(form)

        buttons = QHBoxLayout()
        self.submit_button = QPushButton()
        self.submit_button.setDefault(True)
        self.submit_button.clicked.connect(self._on_submit)
        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.cancelled)
        buttons.addWidget(self.submit_button, 1)
        buttons.addWidget(self.cancel_button)
        layout.addLayout(buttons)
        layout.addStretch()

    @property
    def book_id(self) -> Optional[int]:
        """Id of the book being edited, None in create mode."""
        return self._book.id if self._book is not None else None

    @property
    def is_editing(self) -> bool:
        return self._book is not None

    def load_book(self, book: Optional[Book]):
        """Reset the form for ``book``, or for a new book when None."""
        self._book = book
        self.clear_error()
        self.set_saving(False)

        self.heading_label.setText("Edit Book" if book else "Add New Book")
        self.title_edit.setText(book.title if book else "")
        self.author_edit.setText(book.author if book else "")
        self.isbn_edit.setText(book.isbn if book else "")
        self.year_spin.setValue(book.publication_year if book else date.today().year)

    def draft(self) -> BookDraft:
        """Return the current field values as a draft."""
        return BookDraft(
            title=self.title_edit.text().strip(),
            author=self.author_edit.text().strip(),
            isbn=self.isbn_edit.text().strip(),
            publication_year=self.year_spin.value(),
        )

    def set_saving(self, saving: bool):
        self._saving = saving
        self.submit_button.setEnabled(not saving)
        if saving:
            self.submit_button.setText("Saving...")
        else:
            self.submit_button.setText("Update Book" if self.is_editing else "Create Book")

    def show_error(self, message: str):
        self.error_label.setText(message)
        self.error_label.show()

    def clear_error(self):
        self.error_label.clear()
        self.error_label.hide()

    def _on_submit(self):
        if self._saving:
            return
        draft = self.draft()
        problems = draft.validate()
        if problems:
            self.show_error("\n".join(problems))
            return
        self.clear_error()
        self.submitted.emit(draft)
