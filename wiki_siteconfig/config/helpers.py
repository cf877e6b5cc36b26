"""Utility helpers shared by the settings loader and the facade."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

DEFAULT_SETTINGS: dict[str, typ.Any] = {
    "GalleryOptions": {},
    "AllowExternalImages": False,
    "AllowExternalImagesFrom": "",
    "Server": "localhost",
    "ArticlePath": False,
    "InterwikiMagic": True,
    "ExtraInterlanguageLinkPrefixes": [],
    "LocalInterwikis": [],
    "LanguageCode": "en",
    "DisableLangConversion": False,
    "NamespaceAliases": {},
    "UrlProtocols": ["http://", "https://"],
    "Script": False,
    "ScriptPath": "/w",
    "LoadScript": False,
    "LocalTZoffset": None,
    "ThumbLimits": [120, 150, 180, 200, 250, 300],
    "MaxTemplateDepth": 100,
    "LegalTitleChars": " %!\"$&'()*,\\-.\\/0-9:;=?@A-Z\\\\^_`a-z~\\x80-\\xFF+",
    "MainPage": "Main Page",
    "WikiId": "wiki",
    "VariantCandidateLanguages": [],
}


def _as_list(value: object) -> list[typ.Any]:
    """Coerce a scalar-or-sequence setting into a list, dropping falsy scalars."""
    match value:
        case None | False | "":
            return []
        case list() | tuple():
            return list(value)
        case dict():
            return list(value.values())
        case _:
            return [value]


def _as_mapping(value: object) -> dict[str, typ.Any]:
    """Return a shallow dict copy of a mapping setting, or an empty dict."""
    if isinstance(value, cabc.Mapping):
        return dict(value)
    return {}


def _as_bool(value: object) -> bool:
    """Interpret common truthy spellings used in YAML and ini-style settings."""
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty or disabled."""
    if value is None or value is False:
        return None
    text = str(value).strip()
    return text or None


def _dedupe(values: typ.Iterable[str]) -> list[str]:
    """Drop repeated strings, keeping the first occurrence of each."""
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


__all__ = [
    "DEFAULT_SETTINGS",
    "_as_bool",
    "_as_list",
    "_as_mapping",
    "_dedupe",
    "_optional_str",
]
