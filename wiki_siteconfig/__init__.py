"""Derive stable, queryable parser artifacts from raw wiki site settings.

This package compiles loosely typed wiki settings and the answers of several
upstream services (content language rules, namespace metadata, magic words,
the interwiki table, special pages, language converters) into the values a
wikitext parser consumes: redirect, category and behaviour-switch matchers,
the interwiki map, the language-variant map, alias lists, and the article
path's base URI and relative link prefix.

Exports
-------
- ``SiteConfig``: the query facade.
- ``ConfigSource`` / ``load_site_settings``: raw settings input.
- ``UpstreamServices``: bundle of upstream capability interfaces.
- ``ConfigurationError`` / ``UpstreamResolutionError``: error types.

Examples
--------
>>> from wiki_siteconfig import ConfigSource
>>> ConfigSource().get("InterwikiMagic")
True
"""

from __future__ import annotations

from .config import (
    ConfigSource,
    ConfigurationError,
    ErrorKind,
    SiteConfigError,
    UpstreamResolutionError,
    load_site_settings,
)
from .facade import SiteConfig
from .services import MagicWord, UpstreamServices

__all__ = [
    "ConfigSource",
    "ConfigurationError",
    "ErrorKind",
    "MagicWord",
    "SiteConfig",
    "SiteConfigError",
    "UpstreamResolutionError",
    "UpstreamServices",
    "load_site_settings",
]
