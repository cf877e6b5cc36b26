"""Unit tests for the alias and synonym regex compiler."""

from __future__ import annotations

import re

import pytest
from fakes import FakeMagicWords

from wiki_siteconfig.config.models import AliasMatch
from wiki_siteconfig.derivation.matchers import (
    FULL_TEXT_FLAGS,
    ParameterizedAliasMatcher,
    case_bucketed_pattern,
    compile_case_bucketed,
    quote_title,
    single_bucket_pattern,
    start_to_end_pattern,
)
from wiki_siteconfig.services import MagicWord, MagicWordArray


def test_buckets_split_by_case_sensitivity() -> None:
    """Insensitive synonyms go in the ``(?i:...)`` group, sensitive ones after it."""
    words = [
        MagicWord("blabla_id", ("blabla_synonym1",), True),
        MagicWord("blabla_id", ("blabla_synonym2",), False),
    ]
    pattern = case_bucketed_pattern(words)
    assert pattern == "(?i:blabla_synonym2)|blabla_synonym1", (
        f"unexpected bucketed pattern {pattern!r}"
    )


def test_empty_insensitive_bucket_uses_never_matching_group() -> None:
    pattern = case_bucketed_pattern([MagicWord("blabla", ("blabla_synonym",), True)])
    assert pattern == "(?i:(?!))|blabla_synonym", f"unexpected pattern {pattern!r}"


def test_empty_sensitive_bucket_never_matches_empty_text() -> None:
    """Without sensitive synonyms the second alternative must not match ``''``."""
    matcher = compile_case_bucketed([MagicWord("redirect", ("#REDIRECT",), False)])
    assert matcher.pattern == "(?i:\\#REDIRECT)|(?!)"
    assert matcher.fullmatch("") is None, "empty text should not match"
    assert matcher.match("#redirect [[Target]]") is not None


def test_bucket_order_follows_words_and_synonyms() -> None:
    """Several words concatenate in source order and duplicates are kept."""
    words = [
        MagicWord("a", ("one", "two"), False),
        MagicWord("b", ("Three",), True),
        MagicWord("c", ("two", "four"), False),
    ]
    assert case_bucketed_pattern(words) == "(?i:one|two|two|four)|Three"


def test_bucketed_matcher_respects_case_per_bucket() -> None:
    matcher = compile_case_bucketed(
        [MagicWord("notoc", ("__NOTOC__",), True), MagicWord("toc", ("__TOC__",), False)]
    )
    assert matcher.flags == FULL_TEXT_FLAGS
    assert matcher.fullmatch("__toc__") is not None, "insensitive synonym ignores case"
    assert matcher.fullmatch("__NOTOC__") is not None
    assert matcher.fullmatch("__notoc__") is None, "sensitive synonym keeps case"


def test_synonyms_are_regex_escaped() -> None:
    matcher = compile_case_bucketed([MagicWord("x", ("a.b+",), True)])
    assert matcher.fullmatch("a.b+") is not None
    assert matcher.fullmatch("axbb") is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Bla bla", "Bla[ _]bla"),
        ("Bla_alias", "Bla[ _]alias"),
        ("Special_Special", "Special[ _]Special"),
        ("A.B", "A\\.B"),
    ],
)
def test_quote_title(text: str, expected: str) -> None:
    assert quote_title(text) == expected


def test_single_bucket_dedupes_after_quoting_only() -> None:
    """``Bla bla`` and ``Bla_bla`` collapse; differently cased names do not."""
    pattern = single_bucket_pattern(["Bla bla", "Bla_bla", "bla bla", None, ""])
    assert pattern == "(?i:Bla[ _]bla|bla[ _]bla)", f"unexpected pattern {pattern!r}"
    assert re.fullmatch(pattern, "BLA_BLA") is not None


def test_single_bucket_is_stable_under_duplicate_reordering() -> None:
    first = single_bucket_pattern(["Category", "Kategorie", "Category"])
    second = single_bucket_pattern(["Category", "Category", "Kategorie"])
    assert first == second == "(?i:Category|Kategorie)"


def test_parameterized_matcher_extracts_value() -> None:
    matcher = ParameterizedAliasMatcher(
        [("test", MagicWord("blabla_id", ("blabla_alias:$1",), True))]
    )
    assert matcher("blabla_alias:blabla") == AliasMatch(key="test", value="blabla")
    assert matcher("Blabla_alias:blabla") is None, "case-sensitive synonym"


def test_parameterized_matcher_honours_insensitive_words() -> None:
    matcher = ParameterizedAliasMatcher(
        [
            ("img_width", MagicWord("img_width", ("$1px",), False)),
            ("img_upright", MagicWord("img_upright", ("upright=$1", "upright $1"), False)),
            ("img_thumb", MagicWord("img_thumb", ("thumb",), False)),
        ]
    )
    assert matcher("220PX") == AliasMatch("img_width", "220")
    assert matcher("Upright 0.5") == AliasMatch("img_upright", "0.5")
    assert matcher("thumb") is None, "synonyms without a placeholder carry no value"


def test_start_to_end_pattern() -> None:
    matcher = start_to_end_pattern(MagicWord("notoc", ("__NOTOC__", "__KEININHALTSVERZEICHNIS__"), False))
    assert matcher.pattern == "^(?:__NOTOC__|__KEININHALTSVERZEICHNIS__)$"
    assert matcher.search("__notoc__") is not None
    assert matcher.search("x__NOTOC__") is None


def test_word_array_resolves_through_its_factory() -> None:
    factory = FakeMagicWords(
        words={
            "notoc": MagicWord("notoc", ("__NOTOC__",), False),
            "toc": MagicWord("toc", ("__TOC__",), True),
        }
    )
    array = MagicWordArray(("toc", "gone", "notoc"), factory)
    assert [word_id for word_id, _ in array.items()] == ["toc", "notoc"], "unknown ids are skipped"
    assert [word.synonyms for word in array.words()] == [("__TOC__",), ("__NOTOC__",)]
    assert factory.lookups == ["toc", "gone", "notoc", "toc", "gone", "notoc"]
