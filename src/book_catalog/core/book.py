"""Domain entities for catalog books."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List, Optional

MIN_PUBLICATION_YEAR = 1000


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(str(value))


@dataclass(frozen=True)
class Book:
    """A book record as returned by the catalog backend.

    The UI holds an immutable snapshot per fetch; audit fields are
    managed by the backend and are read-only here.

    Attributes:
        id: Backend-assigned identifier, immutable after creation.
        title: Book title.
        author: Author name.
        isbn: ISBN as entered by the user.
        publication_year: Year of publication.
        created_at: Creation timestamp, if reported.
        created_by: Identity that created the record.
        updated_at: Last update timestamp, if reported.
        updated_by: Identity that last updated the record.
    """

    id: int
    title: str
    author: str
    isbn: str
    publication_year: int
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None

    @classmethod
    def from_json(cls, payload: dict) -> "Book":
        """Build a Book from the backend JSON shape.

        Raises:
            ValueError: If a required field is missing or has the wrong type.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a book object, got {type(payload).__name__}")
        try:
            return cls(
                id=int(payload["id"]),
                title=str(payload["title"]),
                author=str(payload["author"]),
                isbn=str(payload["isbn"]),
                publication_year=int(payload["publicationYear"]),
                created_at=_parse_timestamp(payload.get("createdAt")),
                created_by=payload.get("createdBy"),
                updated_at=_parse_timestamp(payload.get("updatedAt")),
                updated_by=payload.get("updatedBy"),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed book payload: missing or invalid {e}") from e

    def to_draft(self) -> "BookDraft":
        """Return the writable fields of this book as a draft."""
        return BookDraft(
            title=self.title,
            author=self.author,
            isbn=self.isbn,
            publication_year=self.publication_year,
        )


@dataclass(frozen=True)
class BookDraft:
    """The fields a client sends when creating or replacing a book."""

    title: str
    author: str
    isbn: str
    publication_year: int

    def to_json(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "publicationYear": self.publication_year,
        }

    def validate(self, current_year: Optional[int] = None) -> List[str]:
        """Return a list of human-readable problems, empty when valid.

        Args:
            current_year: Reference year for the upper bound; defaults to today.
        """
        if current_year is None:
            current_year = date.today().year
        max_year = current_year + 1

        problems = []
        for label, value in (("Title", self.title), ("Author", self.author), ("ISBN", self.isbn)):
            if not value or not value.strip():
                problems.append(f"{label} is required")
        if not MIN_PUBLICATION_YEAR <= self.publication_year <= max_year:
            problems.append(
                f"Publication year must be between {MIN_PUBLICATION_YEAR} and {max_year}"
            )
        return problems
