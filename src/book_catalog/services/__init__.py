"""Services layer - business logic and external integrations."""

from book_catalog.services.errors import (
    BookApiError,
    BookCatalogError,
    BookNotFoundError,
    BookValidationError,
    ConfigurationError,
)
from book_catalog.services.settings_manager import SettingsManager
from book_catalog.services.title_sort import compare_titles, sort_books, sort_title, title_sort_key
from book_catalog.services.cycling import next_element, previous_element
from book_catalog.services.theme_preference_store import ThemePreferenceStore
from book_catalog.services.os_color_scheme import ColorSchemeSubscription, OsColorSchemeWatcher
from book_catalog.services.theme_resolver import ThemeResolver, cycle_mode

# Backend access
from book_catalog.services.book_api_client import BookApiClient
from book_catalog.services.api_workers import BookRequestWorker, RequestRunner, ThreadPoolRequestRunner, WorkerSignals

# Notifications
from book_catalog.services.toast_center import Toast, ToastCenter

__all__ = [
	"BookApiClient",
	"BookApiError",
	"BookCatalogError",
	"BookNotFoundError",
	"BookValidationError",
	"ConfigurationError",
	"SettingsManager",
	"compare_titles",
	"sort_books",
	"sort_title",
	"title_sort_key",
	"next_element",
	"previous_element",
	"ThemePreferenceStore",
	"ColorSchemeSubscription",
	"OsColorSchemeWatcher",
	"ThemeResolver",
	"cycle_mode",
	"BookRequestWorker",
	"RequestRunner",
	"ThreadPoolRequestRunner",
	"WorkerSignals",
	"Toast",
	"ToastCenter",
]
