"""Shared test setup: headless Qt and a synchronous request runner."""

import json
import os

import httpx
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from book_catalog.services import BookCatalogError, RequestRunner  # noqa: E402


class ImmediateRequestRunner(RequestRunner):
    """Runs requests inline so coordinator tests need no event loop."""

    def __init__(self):
        self.descriptions = []

    def submit(self, request, on_result, on_error, description="request"):
        self.descriptions.append(description)
        try:
            result = request()
        except BookCatalogError as e:
            on_error(e)
        else:
            on_result(result)


@pytest.fixture
def qt_app():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def immediate_runner():
    return ImmediateRequestRunner()


class FakeBookBackend:
    """In-memory stand-in for the /api/v1/books service, served via httpx.MockTransport."""

    def __init__(self):
        self.books = {}
        self.next_id = 1
        self.requests = []

    def add(self, title, author="Author", isbn="978-0000000000", year=2000):
        book_id = self.next_id
        self.next_id += 1
        self.books[book_id] = {
            "id": book_id,
            "title": title,
            "author": author,
            "isbn": isbn,
            "publicationYear": year,
            "createdAt": "2024-01-01T10:00:00Z",
            "createdBy": "CN=Test",
            "updatedAt": "2024-01-01T10:00:00Z",
            "updatedBy": "CN=Test",
        }
        return self.books[book_id]

    def handler(self, request):
        self.requests.append(request)
        parts = request.url.path.rstrip("/").split("/")
        book_id = int(parts[-1]) if parts[-1].isdigit() else None

        if request.method == "GET" and book_id is None:
            return httpx.Response(200, json=list(self.books.values()))
        if request.method == "POST":
            body = json.loads(request.content)
            if not body.get("title"):
                return httpx.Response(400, json={"message": "Title is required"})
            created = self.add(body["title"], body["author"], body["isbn"], body["publicationYear"])
            return httpx.Response(201, json=created)

        if book_id not in self.books:
            return httpx.Response(404, json={"error": "Book not found"})
        if request.method == "GET":
            return httpx.Response(200, json=self.books[book_id])
        if request.method == "PUT":
            body = json.loads(request.content)
            self.books[book_id].update(body)
            return httpx.Response(200, json=self.books[book_id])
        if request.method == "DELETE":
            del self.books[book_id]
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture
def fake_backend():
    return FakeBookBackend()
