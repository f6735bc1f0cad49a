"""Error taxonomy for the catalog client."""

from typing import Optional


class BookCatalogError(Exception):
    """Base class for all catalog errors surfaced to the UI."""


class ConfigurationError(BookCatalogError):
    """Required configuration is missing; raised before any request is sent."""


class BookApiError(BookCatalogError):
    """The book service failed or could not be reached.

    Attributes:
        status_code: HTTP status of the failed response, None for transport
            failures and malformed responses without a usable status.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class BookNotFoundError(BookApiError):
    """The requested book does not exist (HTTP 404)."""


class BookValidationError(BookApiError):
    """The backend rejected a write; the message is meant for the user verbatim."""
