"""Presentation for a book that no longer exists on the server."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget


class MissingBookScreen(QWidget):
    """Shown instead of the form when the requested book is not found."""

    back_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.addStretch()

        heading = QLabel("Book not found")
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        heading.setStyleSheet("font-size: 24px; font-weight: bold;")
        layout.addWidget(heading)

        self.message_label = QLabel()
        self.message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        back_button = QPushButton("Back to Books")
        back_button.clicked.connect(self.back_requested)
        layout.addWidget(back_button, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addStretch()

        self.set_book_id(None)

    def set_book_id(self, book_id):
        if book_id is None:
            self.message_label.setText("The book you are looking for does not exist.")
        else:
            self.message_label.setText(f"Book #{book_id} does not exist or has been deleted.")
