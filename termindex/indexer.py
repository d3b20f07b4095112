from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from .analyzer import Analyzer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostingEntry:
    """
    One term's postings across the corpus.

    document_frequency:
        number of *distinct* documents containing the term
        (not the number of occurrences)

    document_ids:
        ids of those documents, first-seen order, no repeats
    """

    term: str
    document_frequency: int
    document_ids: tuple[Hashable, ...]


class TermNotFound(KeyError):
    """Positional lookup of a term that is not in the index."""


@dataclass(frozen=True)
class InvertedIndex:
    """
    Immutable inverted index snapshot.

    postings:
        term -> PostingEntry, in first-insertion order of the terms

    doc_ids:
        ids of every indexed document (first-seen order), including
        documents that contributed no terms
    """

    postings: Mapping[str, PostingEntry] = field(default_factory=dict)
    doc_ids: tuple[Hashable, ...] = ()
    _positions: dict[str, int] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        postings = dict(self.postings)
        for term, entry in postings.items():
            if entry.term != term:
                raise ValueError(f"posting for {entry.term!r} stored under {term!r}")
            if entry.document_frequency != len(entry.document_ids):
                raise ValueError(
                    f"{term!r}: document_frequency {entry.document_frequency} "
                    f"!= {len(entry.document_ids)} document ids"
                )
            if len(set(entry.document_ids)) != len(entry.document_ids):
                raise ValueError(f"{term!r}: repeated document ids {entry.document_ids!r}")
        object.__setattr__(self, "postings", MappingProxyType(postings))
        object.__setattr__(self, "doc_ids", tuple(self.doc_ids))
        object.__setattr__(
            self, "_positions", {term: i for i, term in enumerate(postings)}
        )

    def get_posting(self, term: str) -> PostingEntry | None:
        return self.postings.get(term)

    def find_position(self, term: str) -> int:
        """
        Return the zero-based slot of `term` in enumeration order.

        Raises TermNotFound when the term is absent; callers check
        membership first, so reaching it means a logic error upstream.
        """
        try:
            return self._positions[term]
        except KeyError:
            raise TermNotFound(term) from None

    def terms(self) -> list[str]:
        return list(self.postings)

    def vocabulary_size(self) -> int:
        return len(self.postings)

    def __contains__(self, term: object) -> bool:
        return term in self.postings

    def __len__(self) -> int:
        return len(self.postings)

    def __iter__(self) -> Iterator[PostingEntry]:
        return iter(self.postings.values())


class IndexWriter:
    """
    Mutable builder; call `commit()` to freeze into an InvertedIndex.

    `add_posting` is the low-level primitive: a repeated (term, doc) pair is
    recorded twice. `commit()` always removes repeated ids from every posting
    and recomputes the document frequency, so the committed index holds each
    document at most once per term whichever way it was filled.
    """

    def __init__(self, analyzer: Analyzer | None = None) -> None:
        self.analyzer = analyzer or Analyzer()

        # term -> [doc_id, ...]; dict order is first-seen term order
        self._postings: dict[str, list[Hashable]] = {}
        # used as an ordered set
        self._doc_ids: dict[Hashable, None] = {}
        self._committed = False

    def _check_open(self) -> None:
        if self._committed:
            raise RuntimeError("IndexWriter already committed; start a new writer")

    def add_posting(self, term: str, document_id: Hashable) -> None:
        self._check_open()
        self._doc_ids.setdefault(document_id, None)

        ids = self._postings.get(term)
        if ids is None:
            logger.debug("index item %r does not exist, creating new item", term)
            self._postings[term] = [document_id]
        else:
            logger.debug("index item %r already exists, updating existing item", term)
            ids.append(document_id)

    def add(self, document_id: Hashable, text: str) -> None:
        """Tokenize `text` and add one posting per distinct term."""
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        self._check_open()
        self._doc_ids.setdefault(document_id, None)
        for term in self.analyzer.tokenize(text):
            self.add_posting(term, document_id)

    def add_terms(self, document_id: Hashable, terms: Iterable[str]) -> None:
        """
        Add already-tokenized terms as given: no normalization and no
        de-duplication happen here.
        """
        if isinstance(terms, str):
            raise TypeError("terms must be an iterable of str, not a single str")
        self._check_open()
        self._doc_ids.setdefault(document_id, None)
        for term in terms:
            if not isinstance(term, str):
                raise TypeError(f"term must be str, got {type(term).__name__}")
            self.add_posting(term, document_id)

    def commit(self) -> InvertedIndex:
        """De-dup each posting list, then freeze."""
        self._check_open()
        entries: dict[str, PostingEntry] = {}
        for term, ids in self._postings.items():
            unique = tuple(dict.fromkeys(ids))
            if len(unique) != len(ids):
                logger.debug(
                    "dropped %d repeated document ids for %r", len(ids) - len(unique), term
                )
            entries[term] = PostingEntry(
                term=term, document_frequency=len(unique), document_ids=unique
            )
        self._committed = True

        idx = InvertedIndex(postings=entries, doc_ids=tuple(self._doc_ids))
        logger.info(
            "Committed index: %d docs, vocabulary size %d",
            len(idx.doc_ids),
            idx.vocabulary_size(),
        )
        return idx


def build_index(texts: Iterable[str], analyzer: Analyzer | None = None) -> InvertedIndex:
    """Index raw texts; each document's id is its zero-based position."""
    w = IndexWriter(analyzer)
    for position, text in enumerate(texts):
        w.add(position, text)
    return w.commit()


def build_index_with_ids(docs: Mapping[Hashable, Sequence[str]]) -> InvertedIndex:
    """
    Index pre-tokenized documents keyed by caller-supplied ids.

    Terms are taken verbatim; repeated terms within one document are
    collapsed by the commit step.
    """
    w = IndexWriter()
    for doc_id, terms in docs.items():
        w.add_terms(doc_id, terms)
    return w.commit()
