"""Unit tests for BookApiClient."""

import json

import httpx
import pytest

from book_catalog.core import BookDraft
from book_catalog.services import (
    BookApiClient,
    BookApiError,
    BookNotFoundError,
    BookValidationError,
    ConfigurationError,
)

BOOK = {
    "id": 1,
    "title": "Dune",
    "author": "Frank Herbert",
    "isbn": "978-0441013593",
    "publicationYear": 1965,
}

DRAFT = BookDraft(title="Dune", author="Frank Herbert", isbn="978-0441013593", publication_year=1965)


def make_client(handler, identity="CN=Tester"):
    return BookApiClient(
        "http://books.test",
        lambda: identity,
        transport=httpx.MockTransport(handler),
    )


def test_list_books_sends_identity_header():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[BOOK])

    books = make_client(handler).list_books()

    assert [book.title for book in books] == ["Dune"]
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/api/v1/books"
    assert seen[0].headers["x-dn"] == "CN=Tester"


def test_missing_identity_fails_before_any_request():
    calls = []

    def identity():
        raise ConfigurationError("LOCAL_DN environment variable is not set")

    client = BookApiClient(
        "http://books.test",
        identity,
        transport=httpx.MockTransport(lambda request: calls.append(request)),
    )

    with pytest.raises(ConfigurationError):
        client.list_books()
    assert calls == []


def test_create_book_posts_json_body():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(201, json=BOOK)

    book = make_client(handler).create_book(DRAFT)

    assert book.id == 1
    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == {
        "title": "Dune",
        "author": "Frank Herbert",
        "isbn": "978-0441013593",
        "publicationYear": 1965,
    }


def test_update_book_puts_full_record():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={**BOOK, "title": "Dune Messiah"})

    book = make_client(handler).update_book(1, DRAFT)

    assert seen[0].method == "PUT"
    assert seen[0].url.path == "/api/v1/books/1"
    assert book.title == "Dune Messiah"


def test_delete_book_accepts_no_content():
    client = make_client(lambda request: httpx.Response(204))
    assert client.delete_book(1) is None


def test_not_found_is_distinct_error():
    client = make_client(lambda request: httpx.Response(404, json={"error": "Book not found"}))

    with pytest.raises(BookNotFoundError) as exc_info:
        client.get_book(99)
    assert exc_info.value.status_code == 404


@pytest.mark.parametrize("body, expected", [
    ({"message": "ISBN already exists"}, "ISBN already exists"),
    ({"detail": "Publication year is out of range"}, "Publication year is out of range"),
    ({"errors": [{"defaultMessage": "title must not be blank"}, "isbn is invalid"]},
     "title must not be blank; isbn is invalid"),
])
def test_validation_message_is_verbatim(body, expected):
    client = make_client(lambda request: httpx.Response(400, json=body))

    with pytest.raises(BookValidationError) as exc_info:
        client.create_book(DRAFT)
    assert str(exc_info.value) == expected
    assert exc_info.value.status_code == 400


def test_validation_without_message_uses_generic_text():
    client = make_client(lambda request: httpx.Response(422, content=b""))

    with pytest.raises(BookValidationError, match="rejected"):
        client.create_book(DRAFT)


def test_server_error_carries_status():
    client = make_client(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(BookApiError) as exc_info:
        client.list_books()
    assert type(exc_info.value) is BookApiError
    assert exc_info.value.status_code == 500
    assert "500" in str(exc_info.value)


def test_transport_failure_is_generic_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(BookApiError) as exc_info:
        make_client(handler).list_books()
    assert type(exc_info.value) is BookApiError
    assert exc_info.value.status_code is None


def test_malformed_book_is_reported():
    client = make_client(lambda request: httpx.Response(200, json={"id": 1}))

    with pytest.raises(BookApiError, match="Unexpected response"):
        client.get_book(1)


def test_non_list_response_is_reported():
    client = make_client(lambda request: httpx.Response(200, json={"books": []}))

    with pytest.raises(BookApiError, match="expected a list"):
        client.list_books()


def test_deleted_book_is_not_found_afterwards(fake_backend):
    book_id = fake_backend.add("The Hobbit")["id"]
    client = make_client(fake_backend.handler)

    client.delete_book(book_id)

    with pytest.raises(BookNotFoundError):
        client.get_book(book_id)


def test_client_closes_as_context_manager(fake_backend):
    with make_client(fake_backend.handler) as client:
        assert client.list_books() == []
