"""Resolve language-conversion variants to their base language and fallbacks."""

from __future__ import annotations

import logging
import typing as typ

from wiki_siteconfig.config.helpers import _dedupe
from wiki_siteconfig.config.models import UpstreamResolutionError, VariantEntry

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from wiki_siteconfig.services import LanguageConverter, LanguageConverterFactory

logger = logging.getLogger(__name__)


class LanguageVariantResolver:
    """Compute the variant map for a set of candidate base languages.

    Parameters
    ----------
    converters : LanguageConverterFactory
        Source of per-language converters and the site-wide disable switch.
    disabled : bool, optional
        Site setting that disables conversion regardless of the factory.
    """

    def __init__(self, converters: LanguageConverterFactory, *, disabled: bool = False) -> None:
        self._converters = converters
        self._disabled = disabled

    def conversion_disabled(self) -> bool:
        """Return whether language conversion is switched off for the site."""
        return self._disabled or bool(self._converters.is_conversion_disabled())

    def converter(self, code: str) -> LanguageConverter | None:
        """Return the converter for ``code``, or ``None`` when it cannot resolve."""
        try:
            return self._converters.converter_for(code)
        except UpstreamResolutionError as exc:
            logger.debug("No language converter for %r: %s", code, exc)
            return None

    def enabled(self, code: str) -> bool:
        """Return whether ``code`` participates in language conversion."""
        if self.conversion_disabled():
            return False
        converter = self.converter(code)
        if converter is None:
            return False
        try:
            return bool(converter.has_variants())
        except UpstreamResolutionError as exc:
            logger.debug("Cannot query variants of %r: %s", code, exc)
            return False

    def resolve(self, candidates: cabc.Iterable[str]) -> dict[str, VariantEntry]:
        """Map every variant reachable from ``candidates`` to its entry.

        Candidates are visited in order and a variant reported by more than
        one base language keeps the entry of the last one. A candidate whose
        converter fails part-way contributes nothing.
        """
        if self.conversion_disabled():
            return {}
        entries: dict[str, VariantEntry] = {}
        for code in _dedupe(candidates):
            converter = self.converter(code)
            if converter is None:
                continue
            try:
                entries.update(_entries_for(code, converter))
            except UpstreamResolutionError as exc:
                logger.debug("Skipping variants of %r: %s", code, exc)
        return entries


def _entries_for(code: str, converter: LanguageConverter) -> dict[str, VariantEntry]:
    if not converter.has_variants():
        return {}
    return {
        variant: VariantEntry(
            variant=variant,
            base=code,
            fallbacks=_as_chain(converter.variant_fallbacks(variant)),
        )
        for variant in converter.variants()
    }


def _as_chain(fallbacks: str | cabc.Iterable[str] | None) -> tuple[str, ...]:
    if fallbacks is None:
        return ()
    if isinstance(fallbacks, str):
        return (fallbacks,)
    return tuple(fallbacks)


__all__ = ["LanguageVariantResolver"]
