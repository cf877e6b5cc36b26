"""Compile synonym and alias sets into case-aware regular expressions.

Three shapes are produced:

* case-bucketed alternations, ``(?i:<insensitive>)|<sensitive>``, for the
  redirect and behaviour-switch matchers;
* single-bucket title alternations, ``(?i:a|b|c)``, where spaces and
  underscores inside each alias match either character;
* parameterized alias matchers that pull the ``$1`` argument out of a
  synonym such as ``upright=$1``.

Examples
--------
>>> from wiki_siteconfig.derivation.matchers import quote_title
>>> quote_title("Bla bla_alias")
'Bla[ _]bla[ _]alias'
"""

from __future__ import annotations

import re
import typing as typ

from wiki_siteconfig._constants import (
    NEVER_MATCH,
    TITLE_PLACEHOLDER,
    TITLE_SEPARATOR_CLASS,
)
from wiki_siteconfig.config.helpers import _dedupe
from wiki_siteconfig.config.models import AliasMatch, CompiledMatcher

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from wiki_siteconfig.services import MagicWord

FULL_TEXT_FLAGS = re.UNICODE | re.DOTALL
_SEPARATOR_RE = re.compile(r"[ _]")


def _alternation(parts: cabc.Sequence[str]) -> str:
    return "|".join(parts) if parts else NEVER_MATCH


def case_bucketed_pattern(words: cabc.Iterable[MagicWord]) -> str:
    """Join the synonyms of ``words`` into insensitive and sensitive buckets.

    Synonyms keep their upstream order within each bucket and words are
    visited in the order given. An empty bucket is rendered as ``(?!)`` so
    the group stays present but can never match.

    Examples
    --------
    >>> from wiki_siteconfig.services import MagicWord
    >>> case_bucketed_pattern([MagicWord("notoc", ("__NOTOC__",), True)])
    '(?i:(?!))|__NOTOC__'
    """
    insensitive: list[str] = []
    sensitive: list[str] = []
    for word in words:
        bucket = sensitive if word.case_sensitive else insensitive
        bucket.extend(re.escape(synonym) for synonym in word.synonyms)
    return f"(?i:{_alternation(insensitive)})|{_alternation(sensitive)}"


def compile_case_bucketed(words: cabc.Iterable[MagicWord]) -> CompiledMatcher:
    """Return the case-bucketed alternation ready for full-text matching."""
    return CompiledMatcher(case_bucketed_pattern(words), FULL_TEXT_FLAGS)


def quote_title(text: str) -> str:
    """Escape ``text`` for a regex, letting spaces and underscores match either."""
    pieces = _SEPARATOR_RE.split(text)
    return TITLE_SEPARATOR_CLASS.join(re.escape(piece) for piece in pieces)


def quoted_aliases(names: cabc.Iterable[str | None]) -> list[str]:
    """Quote each non-empty name and drop exact duplicates after quoting."""
    return _dedupe(quote_title(name) for name in names if name)


def single_bucket_pattern(names: cabc.Iterable[str | None]) -> str:
    """Return ``(?i:a|b|c)`` matching any of ``names`` case-insensitively."""
    return f"(?i:{_alternation(quoted_aliases(names))})"


def start_to_end_pattern(word: MagicWord) -> CompiledMatcher:
    """Match a whole string against any synonym of ``word``."""
    body = _alternation([re.escape(synonym) for synonym in word.synonyms])
    flags = re.UNICODE if word.case_sensitive else re.UNICODE | re.IGNORECASE
    return CompiledMatcher(f"^(?:{body})$", flags)


def _parameterized_regex(synonym: str, case_sensitive: bool) -> re.Pattern[str] | None:
    """Compile ``synonym`` with its single placeholder as a ``value`` group."""
    if synonym.count(TITLE_PLACEHOLDER) != 1:
        return None
    head, tail = synonym.split(TITLE_PLACEHOLDER)
    pattern = f"{re.escape(head)}(?P<value>.*?){re.escape(tail)}"
    flags = re.UNICODE if case_sensitive else re.UNICODE | re.IGNORECASE
    return re.compile(pattern, flags)


class ParameterizedAliasMatcher:
    """Stateless callable mapping text to the magic word it spells, if any.

    Parameters
    ----------
    words : Iterable[tuple[str, MagicWord]]
        Pairs of the key to report and the magic word whose synonyms are
        tried, in priority order.

    Examples
    --------
    >>> from wiki_siteconfig.services import MagicWord
    >>> word = MagicWord("img_width", ("$1px",), True)
    >>> matcher = ParameterizedAliasMatcher([("img_width", word)])
    >>> matcher("220px")
    AliasMatch(key='img_width', value='220')
    >>> matcher("thumb") is None
    True
    """

    __slots__ = ("_patterns",)

    def __init__(self, words: cabc.Iterable[tuple[str, MagicWord]]) -> None:
        patterns: list[tuple[str, re.Pattern[str]]] = []
        for key, word in words:
            for synonym in word.synonyms:
                regex = _parameterized_regex(synonym, word.case_sensitive)
                if regex is not None:
                    patterns.append((key, regex))
        self._patterns = tuple(patterns)

    def __call__(self, text: str) -> AliasMatch | None:
        for key, regex in self._patterns:
            found = regex.fullmatch(text)
            if found is not None:
                return AliasMatch(key=key, value=found.group("value"))
        return None


__all__ = [
    "FULL_TEXT_FLAGS",
    "ParameterizedAliasMatcher",
    "case_bucketed_pattern",
    "compile_case_bucketed",
    "quote_title",
    "quoted_aliases",
    "single_bucket_pattern",
    "start_to_end_pattern",
]
