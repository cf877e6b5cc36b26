"""Merge the interwiki table with language names and site flags."""

from __future__ import annotations

import typing as typ
from urllib.parse import urlsplit

from wiki_siteconfig._constants import TITLE_PLACEHOLDER
from wiki_siteconfig.config.models import InterwikiEntry

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def canonical_protocol(server: str) -> str:
    """Return the scheme of ``server``, or ``http`` when it names no host.

    A bare ``host:port`` parses with the host as its scheme, so the scheme
    only counts when a network location follows it.
    """
    parts = urlsplit(server)
    if parts.scheme and parts.netloc:
        return parts.scheme
    return "http"


def _is_set(value: object) -> bool:
    return value is True or str(value) == "1"


def build_interwiki_map(
    rows: cabc.Iterable[cabc.Mapping[str, typ.Any]],
    *,
    language_names: cabc.Mapping[str, str],
    local_interwikis: cabc.Collection[str],
    extra_language_prefixes: cabc.Collection[str],
    protocol: str,
) -> dict[str, InterwikiEntry]:
    """Return one :class:`InterwikiEntry` per interwiki table row, keyed by prefix.

    Protocol-relative URLs are expanded with ``protocol`` and a ``$1``
    placeholder is appended to URLs that lack one. Rows are never dropped;
    a repeated prefix keeps its last row.

    Examples
    --------
    >>> rows = [{"iw_prefix": "ru", "iw_url": "//test/", "iw_local": 1}]
    >>> entry = build_interwiki_map(
    ...     rows,
    ...     language_names={"ru": "Russian"},
    ...     local_interwikis=[],
    ...     extra_language_prefixes=[],
    ...     protocol="http",
    ... )["ru"]
    >>> entry.url, entry.protorel, entry.language
    ('http://test/$1', True, True)
    """
    entries: dict[str, InterwikiEntry] = {}
    for row in rows:
        prefix = str(row["iw_prefix"])
        raw_url = str(row.get("iw_url") or "")
        protorel = raw_url.startswith("//")
        url = f"{protocol}:{raw_url}" if protorel else raw_url
        if TITLE_PLACEHOLDER not in url:
            url = f"{url}{TITLE_PLACEHOLDER}"
        entries[prefix] = InterwikiEntry(
            prefix=prefix,
            url=url,
            protorel=protorel,
            local=_is_set(row.get("iw_local")),
            language=prefix in language_names,
            localinterwiki=prefix in local_interwikis,
            extralanglink=prefix in extra_language_prefixes,
        )
    return entries


__all__ = ["build_interwiki_map", "canonical_protocol"]
