"""HTTP client for the book catalog REST backend."""

from typing import Any, Callable, List, Optional

import httpx
from loguru import logger

from book_catalog.core import Book, BookDraft
from book_catalog.services.errors import (
    BookApiError,
    BookNotFoundError,
    BookValidationError,
)

BOOKS_API_PATH = "/api/v1/books"
IDENTITY_HEADER = "x-dn"
DEFAULT_TIMEOUT = 10.0

VALIDATION_STATUSES = (400, 422)


def _extract_message(response: httpx.Response) -> Optional[str]:
    """Pull a human-readable message out of an error response body."""
    try:
        body: Any = response.json()
    except ValueError:
        text = response.text.strip()
        return text or None

    if isinstance(body, str):
        return body.strip() or None
    if not isinstance(body, dict):
        return None

    for key in ("message", "error", "detail"):
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()

    errors = body.get("errors")
    if isinstance(errors, list):
        messages = []
        for item in errors:
            if isinstance(item, str):
                messages.append(item)
            elif isinstance(item, dict):
                text = item.get("message") or item.get("defaultMessage")
                if text:
                    messages.append(str(text))
        if messages:
            return "; ".join(messages)
    return None


class BookApiClient:
    """
    Issues CRUD requests against ``/api/v1/books``.

    Every request carries the caller identity header. The identity is
    resolved before the request is built, so a missing identity raises
    ConfigurationError without any network activity. Non-2xx responses
    raise BookApiError subclasses carrying the HTTP status.
    """

    def __init__(
        self,
        base_url: str,
        identity_provider: Callable[[], str],
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            base_url: Backend root, e.g. http://localhost:8080.
            identity_provider: Returns the caller identity or raises ConfigurationError.
            transport: Optional httpx transport (used by tests).
            timeout: Per-request timeout in seconds.
        """
        if identity_provider is None:
            raise ValueError("Identity provider must not be None")
        self._identity_provider = identity_provider
        self._client = httpx.Client(base_url=base_url, transport=transport, timeout=timeout)

    def list_books(self) -> List[Book]:
        response = self._request("GET", BOOKS_API_PATH)
        payload = self._decode(response)
        if not isinstance(payload, list):
            raise BookApiError(
                "Unexpected response from the book service: expected a list of books",
                status_code=response.status_code,
            )
        return [self._to_book(item, response) for item in payload]

    def get_book(self, book_id: int) -> Book:
        response = self._request("GET", f"{BOOKS_API_PATH}/{book_id}")
        return self._to_book(self._decode(response), response)

    def create_book(self, draft: BookDraft) -> Book:
        response = self._request("POST", BOOKS_API_PATH, json=draft.to_json())
        return self._to_book(self._decode(response), response)

    def update_book(self, book_id: int, draft: BookDraft) -> Book:
        """Replace all writable fields of the book with ``draft``."""
        response = self._request("PUT", f"{BOOKS_API_PATH}/{book_id}", json=draft.to_json())
        return self._to_book(self._decode(response), response)

    def delete_book(self, book_id: int) -> None:
        self._request("DELETE", f"{BOOKS_API_PATH}/{book_id}")

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "BookApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _request(self, method: str, path: str, json: Any = None) -> httpx.Response:
        headers = {IDENTITY_HEADER: self._identity_provider()}

        try:
            response = self._client.request(method, path, headers=headers, json=json)
        except httpx.TransportError as e:
            logger.warning("{} {} failed: {}", method, path, e)
            raise BookApiError(f"Could not reach the book service: {e}") from e

        if response.is_success:
            return response

        logger.warning("{} {} returned {}", method, path, response.status_code)
        raise self._error_for(response)

    @staticmethod
    def _error_for(response: httpx.Response) -> BookApiError:
        status = response.status_code
        if status == 404:
            return BookNotFoundError(_extract_message(response) or "Book not found", status_code=status)
        if status in VALIDATION_STATUSES:
            return BookValidationError(
                _extract_message(response) or "The book was rejected by the server",
                status_code=status,
            )
        return BookApiError(
            f"API request failed: {status} {response.reason_phrase}".strip(),
            status_code=status,
        )

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise BookApiError(
                f"Unexpected response from the book service: {e}",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _to_book(payload: Any, response: httpx.Response) -> Book:
        try:
            return Book.from_json(payload)
        except ValueError as e:
            raise BookApiError(
                f"Unexpected response from the book service: {e}",
                status_code=response.status_code,
            ) from e
