"""Read-only capability interfaces for the upstream wiki services.

The facade never talks to a host framework directly. Each concern it consumes
(content language rules, namespace metadata, magic words, special pages, the
interwiki table, language names, user option defaults, language conversion
and parser hooks) is a narrow :class:`typing.Protocol`, so deployments plug in
adapters and tests plug in fakes or ``mocker.Mock(spec=...)`` objects.

Services signal an unresolvable language code, magic-word id or alias by
raising :class:`~wiki_siteconfig.config.UpstreamResolutionError` (or, for the
converter factory, by returning ``None``).
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from wiki_siteconfig.config.models import UpstreamResolutionError

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class MagicWord:
    """Synonyms recognised for one magic-word id.

    Attributes
    ----------
    id : str
        Magic-word identifier, e.g. ``"redirect"``.
    synonyms : tuple[str, ...]
        Literal spellings in upstream order; duplicates are kept.
    case_sensitive : bool
        Whether the synonyms must match with their exact case.
    """

    id: str
    synonyms: tuple[str, ...]
    case_sensitive: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "synonyms", tuple(self.synonyms))


class MagicWordFactory(typ.Protocol):
    def get(self, word_id: str) -> MagicWord: ...

    def variable_ids(self) -> list[str]: ...

    def double_underscore_ids(self) -> list[str]: ...


@dc.dataclass(frozen=True, slots=True)
class MagicWordArray:
    """An ordered list of magic-word ids resolved lazily through a factory.

    Ids the factory cannot resolve are skipped.
    """

    ids: tuple[str, ...]
    factory: MagicWordFactory

    def items(self) -> list[tuple[str, MagicWord]]:
        """Return ``(id, word)`` pairs for every resolvable id, in order."""
        resolved: list[tuple[str, MagicWord]] = []
        for word_id in self.ids:
            try:
                resolved.append((word_id, self.factory.get(word_id)))
            except UpstreamResolutionError as exc:
                logger.debug("Skipping unknown magic word %r: %s", word_id, exc)
        return resolved

    def words(self) -> list[MagicWord]:
        """Return the resolvable magic words, in order."""
        return [word for _, word in self.items()]


class ContentLanguage(typ.Protocol):
    def ns_index(self, name: str) -> int | None: ...

    def ns_text(self, ns: int) -> str: ...

    def formatted_ns_text(self, ns: int) -> str: ...

    def ucfirst(self, text: str) -> str: ...

    def is_rtl(self) -> bool: ...

    def link_trail(self) -> str: ...

    def link_prefix_extension(self) -> bool: ...

    def link_prefix_charset(self) -> str: ...

    def magic_words(self) -> dict[str, list[typ.Any]]: ...

    def special_page_aliases(self) -> dict[str, list[str]]: ...

    def namespace_aliases(self) -> dict[str, int]: ...


class NamespaceInfo(typ.Protocol):
    def canonical_index(self, name: str) -> int | None: ...

    def canonical_name(self, ns: int) -> str | None: ...

    def has_subpages(self, ns: int) -> bool: ...

    def is_capitalized(self, ns: int) -> bool: ...

    def is_talk(self, ns: int) -> bool: ...


class SpecialPageRegistry(typ.Protocol):
    def resolve_alias(self, alias: str) -> tuple[str | None, str | None]: ...

    def local_name_for(self, name: str, subpage: str | None = None) -> str: ...


class InterwikiLookup(typ.Protocol):
    def all_prefixes(self) -> typ.Iterable[typ.Mapping[str, typ.Any]]: ...


class LanguageNameRegistry(typ.Protocol):
    def language_names(self) -> typ.Mapping[str, str]: ...


class UserOptionsLookup(typ.Protocol):
    def default_option(self, name: str) -> typ.Any: ...


class LanguageConverter(typ.Protocol):
    def has_variants(self) -> bool: ...

    def variants(self) -> list[str]: ...

    def variant_fallbacks(self, variant: str) -> str | list[str]: ...


class LanguageConverterFactory(typ.Protocol):
    def is_conversion_disabled(self) -> bool: ...

    def converter_for(self, code: str) -> LanguageConverter | None: ...


class ParserHooks(typ.Protocol):
    def function_synonyms(self) -> dict[int, dict[str, typ.Any]]: ...

    def tags(self) -> list[str]: ...


@dc.dataclass(slots=True)
class UpstreamServices:
    """Bundle of every upstream capability the facade consumes."""

    content_language: ContentLanguage
    namespace_info: NamespaceInfo
    magic_words: MagicWordFactory
    special_pages: SpecialPageRegistry
    interwiki: InterwikiLookup
    language_names: LanguageNameRegistry
    user_options: UserOptionsLookup
    converters: LanguageConverterFactory
    parser: ParserHooks


__all__ = [
    "ContentLanguage",
    "InterwikiLookup",
    "LanguageConverter",
    "LanguageConverterFactory",
    "LanguageNameRegistry",
    "MagicWord",
    "MagicWordArray",
    "MagicWordFactory",
    "NamespaceInfo",
    "ParserHooks",
    "SpecialPageRegistry",
    "UpstreamServices",
    "UserOptionsLookup",
]
