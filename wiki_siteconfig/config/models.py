"""Typed dataclasses and errors describing derived wiki site configuration."""

from __future__ import annotations

import dataclasses as dc
import enum
import re
import typing as typ


class SiteConfigError(ValueError):
    """Base class for site configuration failures."""


class ErrorKind(enum.StrEnum):
    """Categories of deployment misconfiguration."""

    MALFORMED_PATH = "malformed-path"
    MISSING_SIZE = "missing-size"
    UNKNOWN_SETTING = "unknown-setting"


class ConfigurationError(SiteConfigError):
    """Raised when a setting is malformed or missing.

    Parameters
    ----------
    kind : ErrorKind
        Which misconfiguration was detected.
    message : str
        Human-readable description naming the offending value.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class UpstreamResolutionError(LookupError):
    """Raised by upstream services that cannot resolve a code, id or alias."""


@dc.dataclass(frozen=True, slots=True)
class ArticlePathShape:
    """Absolute base URI and page-relative link prefix of the article path."""

    base_uri: str
    relative_link_prefix: str


@dc.dataclass(frozen=True, slots=True)
class InterwikiEntry:
    """Normalised record for one interwiki prefix.

    Attributes
    ----------
    prefix : str
        Interwiki prefix as stored in the interwiki table.
    url : str
        Absolute URL template, always containing ``$1``.
    protorel : bool
        Whether the table stored a protocol-relative URL.
    local : bool
        Whether the table marks the target as local.
    language : bool
        Whether the prefix names a known language.
    localinterwiki : bool
        Whether the prefix is one of the site's own interwiki aliases.
    extralanglink : bool
        Whether the prefix is an extra interlanguage link prefix.
    """

    prefix: str
    url: str
    protorel: bool = False
    local: bool = False
    language: bool = False
    localinterwiki: bool = False
    extralanglink: bool = False

    def as_dict(self) -> dict[str, typ.Any]:
        """Return the record with false flags omitted."""
        record: dict[str, typ.Any] = {"prefix": self.prefix, "url": self.url}
        for flag in ("protorel", "local", "language", "localinterwiki", "extralanglink"):
            if getattr(self, flag):
                record[flag] = True
        return record


@dc.dataclass(frozen=True, slots=True)
class VariantEntry:
    """Base language and fallback chain for one language variant."""

    variant: str
    base: str
    fallbacks: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, typ.Any]:
        """Return the ``{"base", "fallbacks"}`` shape consumed by the parser."""
        return {"base": self.base, "fallbacks": list(self.fallbacks)}


@dc.dataclass(frozen=True, slots=True)
class AliasMatch:
    """Result of a parameterized alias match."""

    key: str
    value: str


@dc.dataclass(frozen=True, slots=True)
class CompiledMatcher:
    """A regular expression source plus the flags it is compiled with.

    ``pattern`` is kept verbatim so callers can splice it into larger
    expressions; ``regex`` compiles it once on first access.
    """

    pattern: str
    flags: int = 0
    _compiled: list[re.Pattern[str]] = dc.field(
        default_factory=list, init=False, repr=False, compare=False
    )

    @property
    def regex(self) -> re.Pattern[str]:
        """Return the compiled pattern."""
        if not self._compiled:
            self._compiled.append(re.compile(self.pattern, self.flags))
        return self._compiled[0]

    def search(self, text: str) -> re.Match[str] | None:
        """Search ``text`` anywhere."""
        return self.regex.search(text)

    def match(self, text: str) -> re.Match[str] | None:
        """Match ``text`` at its start."""
        return self.regex.match(text)

    def fullmatch(self, text: str) -> re.Match[str] | None:
        """Match the whole of ``text``."""
        return self.regex.fullmatch(text)


__all__ = [
    "AliasMatch",
    "ArticlePathShape",
    "CompiledMatcher",
    "ConfigurationError",
    "ErrorKind",
    "InterwikiEntry",
    "SiteConfigError",
    "UpstreamResolutionError",
    "VariantEntry",
]
