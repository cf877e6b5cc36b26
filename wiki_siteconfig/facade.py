"""Public facade answering every site-configuration query of the parser.

:class:`SiteConfig` combines a :class:`~wiki_siteconfig.config.ConfigSource`
with the upstream capability bundle and exposes one query method per derived
artifact: regex matchers for redirects, categories and behaviour switches,
the normalised interwiki map, the language-variant map, alias lists, the
article-path URI pair, and plain pass-through settings.

Derived values are computed at most once per instance, on first access,
behind a lock, and handed to callers as fresh containers.

Examples
--------
>>> from wiki_siteconfig import ConfigSource, SiteConfig
>>> site = SiteConfig(ConfigSource({"ArticlePath": "/wiki/$1"}), services)  # doctest: +SKIP
>>> site.base_uri()  # doctest: +SKIP
'http://localhost/wiki/'
"""

from __future__ import annotations

import logging
import threading
import typing as typ

from ._constants import (
    NEVER_MATCH,
    NS_CATEGORY,
    NS_MAIN,
    NS_SPECIAL,
    RESPONSIVE_REFERENCES_THRESHOLD,
)
from .config.helpers import _as_bool, _as_list, _as_mapping, _optional_str
from .config.models import (
    ArticlePathShape,
    CompiledMatcher,
    InterwikiEntry,
    UpstreamResolutionError,
    VariantEntry,
)
from .derivation import (
    LanguageVariantResolver,
    ParameterizedAliasMatcher,
    build_interwiki_map,
    canonical_protocol,
    compile_case_bucketed,
    quoted_aliases,
    resolve_article_path,
    resolve_width,
    single_bucket_pattern,
    start_to_end_pattern,
)
from .services import MagicWordArray

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config.source import ConfigSource
    from .services import UpstreamServices

logger = logging.getLogger(__name__)

_T = typ.TypeVar("_T")


class SiteConfig:
    """Site configuration facade consumed by the content-transformation pipeline.

    Parameters
    ----------
    source : ConfigSource
        Merged site settings and deployment-local overrides.
    services : UpstreamServices
        Read-only upstream capabilities (content language, namespaces, magic
        words, special pages, interwiki table, language names, user options,
        language converters and parser hooks).
    """

    redirect_word_ids: tuple[str, ...] = ("redirect",)

    def __init__(self, source: ConfigSource, services: UpstreamServices) -> None:
        self._source = source
        self._services = services
        self._memo: dict[str, typ.Any] = {}
        self._memo_lock = threading.RLock()
        self._variant_resolver = LanguageVariantResolver(
            services.converters,
            disabled=_as_bool(source.get("DisableLangConversion", False)),
        )

    def _cached(self, key: str, compute: cabc.Callable[[], _T]) -> _T:
        """Return the memoised value for ``key``, computing it exactly once."""
        try:
            return self._memo[key]
        except KeyError:
            pass
        with self._memo_lock:
            if key not in self._memo:
                self._memo[key] = compute()
            return self._memo[key]

    # -- pass-through settings -------------------------------------------

    def gallery_options(self) -> dict[str, typ.Any] | list[typ.Any]:
        """Return the gallery options, defaulting to an empty mapping."""
        options = self._source.get("GalleryOptions")
        if isinstance(options, list):
            return list(options)
        return _as_mapping(options)

    def allowed_external_image_prefixes(self) -> list[str]:
        """Return URL prefixes external images may be embedded from.

        ``[""]`` allows every URL; an empty list allows none.
        """
        if _as_bool(self._source.get("AllowExternalImages")):
            return [""]
        return [str(prefix) for prefix in _as_list(self._source.get("AllowExternalImagesFrom"))]

    def interwiki_magic(self) -> bool:
        return _as_bool(self._source.get("InterwikiMagic"))

    def lang(self) -> str:
        """Return the content language code."""
        return str(self._source.get("LanguageCode"))

    def main_page(self) -> str:
        return str(self._source.get("MainPage"))

    def iwp(self) -> str:
        """Return the interwiki prefix identifying this wiki."""
        return str(self._source.get("WikiId"))

    def responsive_references(self) -> dict[str, typ.Any]:
        """Return the responsive reference-list settings of the Cite extension."""
        return {
            "enabled": _as_bool(self._source.get("CiteResponsiveReferences", False)),
            "threshold": RESPONSIVE_REFERENCES_THRESHOLD,
        }

    def script(self) -> str | None:
        return _optional_str(self._source.get("Script"))

    def scriptpath(self) -> str:
        return str(self._source.get("ScriptPath"))

    def load_script(self) -> str | None:
        return _optional_str(self._source.get("LoadScript"))

    def server(self) -> str:
        return str(self._source.get("Server"))

    def timezone_offset(self) -> int | None:
        """Return the local time-zone offset in minutes, when configured."""
        offset = self._source.get("LocalTZoffset")
        return None if offset is None else int(offset)

    def max_template_depth(self) -> int:
        return int(self._source.get("MaxTemplateDepth"))

    def legal_title_chars(self) -> str:
        return str(self._source.get("LegalTitleChars"))

    def protocols(self) -> list[str]:
        """Return the URL protocols recognised in free external links."""
        return [str(protocol) for protocol in _as_list(self._source.get("UrlProtocols"))]

    def native_gallery_enabled(self) -> bool:
        return _as_bool(self._source.override("nativeGalleryEnabled", False))

    # -- namespaces and language rules -----------------------------------

    def canonical_namespace_id(self, name: str) -> int | None:
        return self._services.namespace_info.canonical_index(name)

    def namespace_id(self, name: str) -> int | None:
        """Return the namespace index for a localised name or alias."""
        return self._services.content_language.ns_index(name)

    def namespace_name(self, ns: int) -> str | None:
        """Return the localised namespace name, ``None`` for unnamed namespaces."""
        name = self._services.content_language.formatted_ns_text(ns)
        if name == "" and ns != NS_MAIN:
            return None
        return name

    def namespace_has_subpages(self, ns: int) -> bool:
        return bool(self._services.namespace_info.has_subpages(ns))

    def namespace_case(self, ns: int) -> str:
        """Return ``first-letter`` for capitalised namespaces, else ``case-sensitive``."""
        if self._services.namespace_info.is_capitalized(ns):
            return "first-letter"
        return "case-sensitive"

    def namespace_is_talk(self, ns: int) -> bool:
        return bool(self._services.namespace_info.is_talk(ns))

    def ucfirst(self, text: str) -> str:
        return self._services.content_language.ucfirst(text)

    def link_trail(self) -> str:
        return self._services.content_language.link_trail()

    def rtl(self) -> bool:
        return bool(self._services.content_language.is_rtl())

    def link_prefix_regex(self) -> CompiledMatcher | None:
        """Return the matcher for link prefixes, or ``None`` when unsupported."""
        language = self._services.content_language
        if not language.link_prefix_extension():
            return None
        return CompiledMatcher(f"[{language.link_prefix_charset()}]+\\Z")

    def _alias_names(self, ns: int) -> list[str | None]:
        """Collect canonical, localised, language and configured names of ``ns``."""
        language = self._services.content_language
        names: list[str | None] = [
            self._services.namespace_info.canonical_name(ns),
            language.ns_text(ns),
        ]
        names.extend(alias for alias, target in language.namespace_aliases().items() if target == ns)
        configured = _as_mapping(self._source.get("NamespaceAliases"))
        names.extend(alias for alias, target in configured.items() if target == ns)
        return names

    def namespace_aliases(self, ns: int) -> list[str]:
        """Return regex-quoted names of ``ns`` with ``[ _]`` between words.

        Order is canonical name, localised name, language aliases, then
        configured aliases; exact duplicates are dropped and case is kept.
        """
        return quoted_aliases(self._alias_names(ns))

    def special_ns_aliases(self) -> list[str]:
        return list(self._cached("special_ns_aliases", lambda: self.namespace_aliases(NS_SPECIAL)))

    def category_regexp(self) -> CompiledMatcher:
        """Return the case-insensitive matcher for every Category namespace name."""
        return self._cached(
            "category_regexp",
            lambda: CompiledMatcher(single_bucket_pattern(self._alias_names(NS_CATEGORY))),
        )

    # -- special pages -----------------------------------------------------

    def special_page_local_name(self, alias: str) -> str:
        """Return the localised name of the special page ``alias`` refers to.

        The alias is returned unchanged when the registry cannot resolve it.
        """
        registry = self._services.special_pages
        try:
            name, subpage = registry.resolve_alias(alias)
            if name is None:
                return alias
            return registry.local_name_for(name, subpage)
        except UpstreamResolutionError as exc:
            logger.debug("Cannot localise special page alias %r: %s", alias, exc)
            return alias

    def special_page_aliases(self, name: str) -> list[str]:
        """Return ``[name, *aliases]`` for the canonical special page ``name``."""
        aliases = self._services.content_language.special_page_aliases().get(name) or []
        return [name, *aliases]

    # -- magic words -------------------------------------------------------

    def _word_array(self, ids: cabc.Iterable[str]) -> MagicWordArray:
        return MagicWordArray(tuple(ids), self._services.magic_words)

    def redirect_regexp(self) -> CompiledMatcher:
        """Return the alternation of every redirect synonym."""
        return self._cached(
            "redirect_regexp",
            lambda: compile_case_bucketed(self._word_array(self.redirect_word_ids).words()),
        )

    def bsw_regexp(self) -> CompiledMatcher:
        """Return the alternation of every behaviour-switch synonym."""
        return self._cached(
            "bsw_regexp",
            lambda: compile_case_bucketed(
                self._word_array(self._services.magic_words.double_underscore_ids()).words()
            ),
        )

    def magic_word_matcher(self, word_id: str) -> CompiledMatcher:
        """Return a start-to-end matcher for one magic word.

        Unknown ids yield a matcher that never matches.
        """
        resolved = self._word_array([word_id]).words()
        if not resolved:
            return CompiledMatcher(NEVER_MATCH)
        return start_to_end_pattern(resolved[0])

    def parameterized_alias_matcher(self, word_ids: cabc.Iterable[str]) -> ParameterizedAliasMatcher:
        """Return a callable extracting ``$1`` arguments from synonyms of ``word_ids``."""
        return ParameterizedAliasMatcher(self._word_array(word_ids).items())

    def variable_ids(self) -> list[str]:
        return list(self._services.magic_words.variable_ids())

    def function_synonyms(self) -> dict[int, dict[str, typ.Any]]:
        return self._services.parser.function_synonyms()

    def magic_words(self) -> dict[str, list[typ.Any]]:
        return self._services.content_language.magic_words()

    def non_native_extension_tags(self) -> dict[str, bool]:
        return dict.fromkeys(self._services.parser.tags(), True)

    # -- derived maps ------------------------------------------------------

    def interwiki_map(self) -> dict[str, InterwikiEntry]:
        """Return the interwiki map keyed by prefix."""
        return dict(self._cached("interwiki_map", self._build_interwiki_map))

    def _build_interwiki_map(self) -> dict[str, InterwikiEntry]:
        services = self._services
        return build_interwiki_map(
            services.interwiki.all_prefixes(),
            language_names=services.language_names.language_names(),
            local_interwikis=frozenset(_as_list(self._source.get("LocalInterwikis"))),
            extra_language_prefixes=frozenset(
                _as_list(self._source.get("ExtraInterlanguageLinkPrefixes"))
            ),
            protocol=canonical_protocol(self.server()),
        )

    def _variant_candidates(self) -> list[str]:
        extra = _as_list(self._source.get("VariantCandidateLanguages", []))
        return [self.lang(), *(str(code) for code in extra)]

    def variants(self) -> dict[str, VariantEntry]:
        """Return every conversion variant mapped to its base and fallbacks.

        Empty whenever language conversion is disabled for the site.
        """
        return dict(
            self._cached(
                "variants",
                lambda: self._variant_resolver.resolve(self._variant_candidates()),
            )
        )

    def lang_converter_enabled(self, code: str) -> bool:
        """Return whether the language ``code`` has conversion variants."""
        return self._variant_resolver.enabled(code)

    def width_option(self, width: int | None = None) -> int:
        """Return ``width`` or the site's default thumbnail width in pixels."""
        return resolve_width(self._source.get("ThumbLimits"), self._services.user_options, width)

    # -- article path ------------------------------------------------------

    def _article_path(self) -> ArticlePathShape:
        return self._cached(
            "article_path",
            lambda: resolve_article_path(self._source.get("ArticlePath"), self.server()),
        )

    def base_uri(self) -> str:
        """Return the absolute URI page links are resolved against."""
        return self._article_path().base_uri

    def relative_link_prefix(self) -> str:
        """Return the prefix of a relative link to another page, e.g. ``./``."""
        return self._article_path().relative_link_prefix


__all__ = ["SiteConfig"]
