"""Iterator — walk a collection without exposing how it stores its items."""

from collections.abc import Iterator
from typing import Any

from pydantic import TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

_TITLES = TypeAdapter(list[str])


class BookShelf:
    def __init__(self) -> None:
        self._books: list[str] = []

    def add(self, title: str) -> None:
        self._books.append(title)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[str]:
        yield from self._books


class IteratorDemonstration:
    info = PatternInfo(
        pattern_id="iterator",
        title="Iterator",
        category="behavioral",
        summary="Traverse a bookshelf in insertion order through the iterator protocol.",
    )

    def sample_payload(self) -> list[str]:
        return ["Design Patterns", "Refactoring"]

    def parse_arguments(self, arguments: list[str]) -> list[str]:
        return list(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        shelf = BookShelf()
        for title in _TITLES.validate_python(payload):
            shelf.add(title)
        return [f"Book {n}: {title}" for n, title in enumerate(shelf, start=1)]
