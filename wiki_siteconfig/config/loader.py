"""Load wiki site settings YAML into a :class:`ConfigSource`."""

from __future__ import annotations

import logging
import typing as typ

from ruamel.yaml import YAML

from .source import ConfigSource

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_site_settings(path: Path) -> ConfigSource:
    """Load the YAML document describing site settings and local overrides.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML settings file (for example,
        ``site.yaml``). The document may hold a ``settings`` mapping merged
        over the built-in defaults and an ``overrides`` mapping of
        deployment-local toggles.

    Returns
    -------
    ConfigSource
        Read-only view over the merged settings.

    Raises
    ------
    FileNotFoundError
        If the settings file does not exist at ``path``.
    TypeError
        If the document, ``settings`` or ``overrides`` is not a mapping.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from wiki_siteconfig.config import load_site_settings
    >>> source = load_site_settings(Path("site.yaml"))  # doctest: +SKIP
    >>> source.get("ArticlePath")  # doctest: +SKIP
    '/wiki/$1'
    """
    if not path.exists():
        msg = f"Settings file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)

    settings = _section(loaded, "settings")
    overrides = _section(loaded, "overrides")
    logger.debug(
        "Loaded %d settings and %d overrides from %s",
        len(settings),
        len(overrides),
        path,
    )
    return ConfigSource(settings, overrides)


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> dict[str, typ.Any]:
    """Return the named top-level mapping, or an empty dict when absent."""
    section = raw.get(key) or {}
    if not isinstance(section, dict):
        msg = f"'{key}' must be a mapping of setting names to values."
        raise TypeError(msg)
    return dict(section)


__all__ = ["load_site_settings"]
