from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass

from .analyzer import Analyzer
from .indexer import InvertedIndex


# =========================
# Query results
# =========================
@dataclass(frozen=True)
class Found:
    term: str  # as the caller typed it
    document_ids: tuple[Hashable, ...]

    @property
    def found(self) -> bool:
        return True

    def describe(self) -> str:
        return f"Found: {self.term} in documents: {list(self.document_ids)}"


@dataclass(frozen=True)
class NotFound:
    term: str

    @property
    def found(self) -> bool:
        return False

    @property
    def document_ids(self) -> tuple[Hashable, ...]:
        return ()

    def describe(self) -> str:
        return f"Not Found: {self.term}"


SearchResult = Found | NotFound


# =========================
# Searcher (exact term lookup)
# =========================
class Searcher:
    """
    Exact-term lookup over an InvertedIndex.

    The search term goes through the same normalization as indexing, so
    lookups are case-insensitive. A miss is a NotFound value, not an error.
    """

    def __init__(self, index: InvertedIndex, analyzer: Analyzer | None = None) -> None:
        self.index = index
        self.analyzer = analyzer or Analyzer()

    def find(self, search_term: str) -> SearchResult:
        entry = self.index.get_posting(self.analyzer.normalize(search_term))
        if entry is None:
            return NotFound(search_term)
        return Found(search_term, entry.document_ids)

    def find_many(self, terms: Iterable[str]) -> list[SearchResult]:
        return [self.find(t) for t in terms]


def find(index: InvertedIndex, search_term: str) -> SearchResult:
    return Searcher(index).find(search_term)
