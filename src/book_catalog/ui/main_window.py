"""Main Window - Application shell with toolbar, pages and toasts."""

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow,
    QMessageBox,
    QSizePolicy,
    QStackedWidget,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from book_catalog.ui.book_form_screen import BookFormScreen
from book_catalog.ui.book_list_screen import BookListScreen
from book_catalog.ui.missing_book_screen import MissingBookScreen


class MainWindow(QMainWindow):
    """Provides the application shell and switches between the catalog pages."""

    # Signals emitted from toolbar actions
    create_requested = Signal()
    refresh_requested = Signal()

    def __init__(
        self,
        list_screen: BookListScreen,
        form_screen: BookFormScreen,
        missing_screen: MissingBookScreen,
        toast_container: QWidget,
    ):
        super().__init__()
        self.setWindowTitle("Book Catalog")
        self.setGeometry(100, 100, 1100, 760)

        self.list_screen = list_screen
        self.form_screen = form_screen
        self.missing_screen = missing_screen
        self.toast_container = toast_container

        self._setup_ui()
        self._create_toolbar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)

        self.pages = QStackedWidget()
        self.pages.addWidget(self.list_screen)
        self.pages.addWidget(self.form_screen)
        self.pages.addWidget(self.missing_screen)
        layout.addWidget(self.pages, 1)
        layout.addWidget(self.toast_container)

    def _create_toolbar(self):
        self.toolbar = QToolBar("Main")
        self.toolbar.setMovable(False)
        self.addToolBar(self.toolbar)

        new_action = QAction("&Add New Book", self)
        new_action.setShortcut("Ctrl+N")
        new_action.triggered.connect(self.create_requested)
        self.toolbar.addAction(new_action)

        refresh_action = QAction("&Refresh", self)
        refresh_action.setShortcut("F5")
        refresh_action.triggered.connect(self.refresh_requested)
        self.toolbar.addAction(refresh_action)

        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        self.toolbar.addWidget(spacer)

    def set_theme_toggle(self, toggle: QWidget):
        """Place the theme toggle at the right end of the toolbar."""
        self.toolbar.addWidget(toggle)

    def show_list(self):
        self.pages.setCurrentWidget(self.list_screen)

    def show_form(self):
        self.pages.setCurrentWidget(self.form_screen)

    def show_missing(self):
        self.pages.setCurrentWidget(self.missing_screen)

    def current_page(self) -> QWidget:
        return self.pages.currentWidget()

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)
