from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

# separators are ASCII tab, newline, form feed, carriage return and space only;
# NBSP, \v, U+2028 and the like stay inside tokens
_TOKEN = re.compile(r"[^\t\n\f\r ]+")


class Analyzer:
    """
    Whitespace tokenizer with lowercase normalization.

    `tokenize()` returns each term once per text, in first-occurrence order,
    so a document's terms behave like an insertion-ordered set.
    No punctuation stripping and no stemming are applied.
    """

    def normalize(self, token: str) -> str:
        # per character: str.lower() turns a word-final capital sigma into "ς"
        return "".join(ch.lower() for ch in token)

    def iter_tokens(self, text: str) -> Iterator[str]:
        """Yield normalized tokens in order, duplicates included."""
        for m in _TOKEN.finditer(text):
            yield self.normalize(m.group())

    @staticmethod
    def dedupe(terms: Iterable[str]) -> list[str]:
        """Drop repeated terms, keeping the first occurrence of each."""
        return list(dict.fromkeys(terms))

    def tokenize(self, text: str) -> list[str]:
        if not text:
            return []
        return self.dedupe(self.iter_tokens(text))


_DEFAULT = Analyzer()


def tokenize(text: str) -> list[str]:
    return _DEFAULT.tokenize(text)
