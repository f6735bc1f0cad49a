"""Main entry point for the book catalog application."""

import sys

from loguru import logger
from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication, QMessageBox

from book_catalog.coordinators import CatalogCoordinator
from book_catalog.services import (
    BookApiClient,
    ConfigurationError,
    OsColorSchemeWatcher,
    SettingsManager,
    ThemePreferenceStore,
    ThemeResolver,
    ThreadPoolRequestRunner,
    ToastCenter,
)
from book_catalog.ui import (
    BookFormScreen,
    BookListScreen,
    MainWindow,
    MissingBookScreen,
    PaletteThemeApplier,
    ThemeToggleButton,
    ToastContainer,
)

LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with a stderr sink at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Book Catalog")
    app.setOrganizationName("Acme")

    # 2. Configuration (the caller identity must be present before anything else)
    settings = SettingsManager()
    configure_logging(settings.get_log_level())
    try:
        settings.get_caller_identity()
    except ConfigurationError as e:
        logger.error("Configuration error: {}", e)
        QMessageBox.critical(None, "Configuration Error", str(e))
        return 1

    # 3. Theme (applied before the first window is shown)
    theme_resolver = ThemeResolver(
        preference_store=ThemePreferenceStore(QSettings()),
        os_watcher=OsColorSchemeWatcher(app.styleHints()),
        applier=PaletteThemeApplier(app),
    )
    theme_resolver.start()

    # 4. Initialize Infrastructure
    api_client = BookApiClient(settings.get_api_base_url(), settings.get_caller_identity)
    request_runner = ThreadPoolRequestRunner()
    toast_center = ToastCenter()

    # 5. Construct UI
    list_screen = BookListScreen()
    form_screen = BookFormScreen()
    missing_screen = MissingBookScreen()
    main_window = MainWindow(list_screen, form_screen, missing_screen, ToastContainer(toast_center))
    main_window.set_theme_toggle(ThemeToggleButton(theme_resolver))

    # 6. Instantiate Coordinator (Dependency Injection)
    coordinator = CatalogCoordinator(
        main_window=main_window,
        list_screen=list_screen,
        form_screen=form_screen,
        missing_screen=missing_screen,
        api_client=api_client,
        request_runner=request_runner,
        toast_center=toast_center,
    )

    # 7. Teardown releases the OS preference subscription and the HTTP client
    app.aboutToQuit.connect(theme_resolver.stop)
    app.aboutToQuit.connect(api_client.close)

    # 8. Show UI and start event loop
    logger.info("Using book service at {}", settings.get_api_base_url())
    main_window.show()
    coordinator.show_library()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
