from __future__ import annotations

import argparse
import logging
from pathlib import Path

from termindex.analyzer import Analyzer
from termindex.config import get_settings
from termindex.corpus import load_docs_from_dir
from termindex.indexer import InvertedIndex, build_index, build_index_with_ids
from termindex.logs import configure_logging
from termindex.searcher import Searcher

logger = logging.getLogger(__name__)


def build_index_from_dir(directory: str | Path, *, by_name: bool = False) -> InvertedIndex:
    """
    Index all .txt files in a directory (non-recursive).

    Document ids are the files' positions in name order, or the file stems
    when `by_name` is set.
    """
    docs = load_docs_from_dir(directory)
    if not docs:
        raise SystemExit(f"No .txt files found in: {directory}")
    logger.info("Indexing %d documents from %s", len(docs), directory)

    if by_name:
        az = Analyzer()
        return build_index_with_ids({stem: az.tokenize(text) for stem, text in docs})
    return build_index(text for _, text in docs)


def cmd_search(args: argparse.Namespace) -> None:
    idx = build_index_from_dir(args.directory, by_name=args.by_name)
    s = Searcher(idx)
    for result in s.find_many(args.terms):
        print(result.describe())


def cmd_postings(args: argparse.Namespace) -> None:
    idx = build_index_from_dir(args.directory, by_name=args.by_name)
    for entry in idx:
        ids = " ".join(str(d) for d in entry.document_ids)
        print(f"{entry.term}\t{entry.document_frequency}\t{ids}")
    print(f"Indexed {len(idx.doc_ids)} docs, vocabulary size: {idx.vocabulary_size()}")


def make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="termindex",
        description="Build an in-memory inverted index and look up terms",
    )
    p.add_argument("--log-level", default=None, help="Logging level (default: TERMINDEX_LOG_LEVEL or INFO)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_search = sub.add_parser("search", help="Index a directory and look up terms")
    p_search.add_argument("directory", help="Folder containing .txt files")
    p_search.add_argument("terms", nargs="+", help="Terms to look up (case-insensitive)")
    p_search.add_argument("--by-name", action="store_true", help="Use file stems as document ids")
    p_search.set_defaults(func=cmd_search)

    p_post = sub.add_parser("postings", help="Print every posting in first-seen order")
    p_post.add_argument("directory", help="Folder containing .txt files")
    p_post.add_argument("--by-name", action="store_true", help="Use file stems as document ids")
    p_post.set_defaults(func=cmd_postings)

    return p


def main(argv: list[str] | None = None) -> None:
    parser = make_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)
    args.func(args)


if __name__ == "__main__":
    main()
