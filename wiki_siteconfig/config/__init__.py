"""Load and represent the raw site settings the facade derives from.

This subpackage reads a YAML settings document, merges it over the built-in
defaults, and exposes the result as a read-only :class:`ConfigSource`. It also
defines the value objects (:class:`InterwikiEntry`, :class:`VariantEntry`,
:class:`CompiledMatcher`, ...) and error types shared by the derivation
components.

Examples
--------
>>> from wiki_siteconfig.config import ConfigSource
>>> ConfigSource({"ArticlePath": "/wiki/$1"}).get("ArticlePath")
'/wiki/$1'
"""

from .loader import load_site_settings
from .models import (
    AliasMatch,
    ArticlePathShape,
    CompiledMatcher,
    ConfigurationError,
    ErrorKind,
    InterwikiEntry,
    SiteConfigError,
    UpstreamResolutionError,
    VariantEntry,
)
from .source import ConfigSource

__all__ = [
    "AliasMatch",
    "ArticlePathShape",
    "CompiledMatcher",
    "ConfigSource",
    "ConfigurationError",
    "ErrorKind",
    "InterwikiEntry",
    "SiteConfigError",
    "UpstreamResolutionError",
    "VariantEntry",
    "load_site_settings",
]
