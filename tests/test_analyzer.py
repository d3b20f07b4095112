from __future__ import annotations

import pytest

from termindex.analyzer import Analyzer, tokenize


@pytest.fixture(scope="module")
def az() -> Analyzer:
    return Analyzer()


def test_empty_and_whitespace(az: Analyzer) -> None:
    assert az.tokenize("") == []
    assert az.tokenize("   \t\n  ") == []
    assert tokenize("") == []


def test_lowercase_and_dedupe_keeps_first_occurrence(az: Analyzer) -> None:
    doc = "new home sales top forecasts NEW"
    assert az.tokenize(doc) == ["new", "home", "sales", "top", "forecasts"]


def test_whitespace_runs_are_single_separators(az: Analyzer) -> None:
    assert az.tokenize("  alpha\t\tbeta \n\n gamma  ") == ["alpha", "beta", "gamma"]


def test_punctuation_is_kept(az: Analyzer) -> None:
    # no punctuation stripping: "sales," and "sales" are different terms
    assert az.tokenize("Sales, sales.") == ["sales,", "sales."]


def test_case_variants_tokenize_identically(az: Analyzer) -> None:
    variants = ["Home Sales Rise", "home sales rise", "HOME SALES RISE", "hOmE sAlEs RiSe"]
    outs = [az.tokenize(v) for v in variants]
    assert all(o == outs[0] for o in outs)


def test_never_returns_a_term_twice(az: Analyzer) -> None:
    words = (
        "new HOme sales top forecasts home sales rise in July "
        "increase in home SALES in July new home sales rise July"
    )
    toks = az.tokenize(words)
    assert len(toks) == len(set(toks))
    assert toks == [
        "new", "home", "sales", "top", "forecasts",
        "rise", "in", "july", "increase",
    ]


def test_iter_tokens_keeps_repeats(az: Analyzer) -> None:
    assert list(az.iter_tokens("a B a b")) == ["a", "b", "a", "b"]


def test_dedupe_preserves_order() -> None:
    assert Analyzer.dedupe(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_final_sigma_lowercases_the_same_in_every_case(az: Analyzer) -> None:
    assert az.tokenize("ΟΔΟΣ") == az.tokenize("οδοσ") == ["οδοσ"]
    assert az.normalize("Σ") == "σ"


def test_only_ascii_whitespace_separates_tokens(az: Analyzer) -> None:
    assert az.tokenize("home\xa0sales") == ["home\xa0sales"]
    assert az.tokenize("home\vsales rise") == ["home\vsales", "rise"]
    assert az.tokenize("a\fb\rc") == ["a", "b", "c"]
