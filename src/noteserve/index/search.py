"""In-memory substring search over note records."""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence

from noteserve.models import NoteRecord

WILDCARD = "*"


class SearchError(Exception):
    """Base class for search failures."""


class InvalidQuery(SearchError):
    """Raised when the query is not a string."""


class NotReady(SearchError):
    """Raised when searching an index that has not been built."""


def _fold(value: str, case_sensitive: bool) -> str:
    return value if case_sensitive else value.casefold()


def matches(record: NoteRecord, query: str, *, case_sensitive: bool = False) -> bool:
    """Return True if ``query`` occurs in the title, a single tag or the content."""
    needle = _fold(query, case_sensitive)
    if needle in _fold(record.title, case_sensitive):
        return True
    if any(needle in _fold(tag, case_sensitive) for tag in record.tags):
        return True
    return needle in _fold(record.content, case_sensitive)


class SearchIndex:
    """Immutable, ordered collection of note records.

    An index created without records is *not built*: searching it raises
    :class:`NotReady`, which lets callers tell "nothing loaded" apart from
    "no matches".
    """

    def __init__(
        self, records: Iterable[NoteRecord] | None = None, *, case_sensitive: bool = False
    ) -> None:
        self._records: tuple[NoteRecord, ...] | None = (
            tuple(records) if records is not None else None
        )
        self.case_sensitive = case_sensitive

    @classmethod
    def from_records(
        cls, records: Iterable[NoteRecord], *, case_sensitive: bool = False
    ) -> "SearchIndex":
        return cls(records, case_sensitive=case_sensitive)

    @property
    def is_ready(self) -> bool:
        return self._records is not None

    @property
    def records(self) -> Sequence[NoteRecord]:
        if self._records is None:
            raise NotReady("Search index has not been built")
        return self._records

    def __len__(self) -> int:
        return len(self._records) if self._records is not None else 0

    def search(self, query: Any) -> List[NoteRecord]:
        """Return the records matching ``query`` in index order.

        The empty string is treated as :data:`WILDCARD`. Whitespace-only
        queries are matched literally.
        """
        records = self.records
        if not isinstance(query, str):
            raise InvalidQuery(f"Query must be a string, got {type(query).__name__}")

        if query == "":
            query = WILDCARD
        if query == WILDCARD:
            return list(records)

        return [
            record
            for record in records
            if matches(record, query, case_sensitive=self.case_sensitive)
        ]
