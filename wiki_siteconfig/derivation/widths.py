"""Resolve the default thumbnail width from the user option and size table."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from wiki_siteconfig._constants import THUMBSIZE_OPTION
from wiki_siteconfig.config.models import ConfigurationError, ErrorKind

if typ.TYPE_CHECKING:
    from wiki_siteconfig.services import UserOptionsLookup


def _lookup(table: object, key: object) -> int:
    """Return ``table[key]`` for a named mapping or an ordinal sequence."""
    if isinstance(table, cabc.Mapping):
        if key in table:
            return int(table[key])
        if str(key) in table:
            return int(table[str(key)])
        raise KeyError(key)
    if isinstance(table, list | tuple):
        if isinstance(key, bool):
            raise KeyError(key)
        if isinstance(key, str) and key.isdigit():
            key = int(key)
        if isinstance(key, int) and 0 <= key < len(table):
            return int(table[key])
    raise KeyError(key)


def resolve_width(
    table: object,
    options: UserOptionsLookup,
    width: int | None = None,
) -> int:
    """Return ``width`` or the pixel width named by the default thumbnail size.

    Parameters
    ----------
    table : object
        Thumbnail size table: a mapping keyed by size name or a list indexed
        by position.
    options : UserOptionsLookup
        Provides the default value of the ``thumbsize`` option.
    width : int or None, optional
        Explicit width requested by the caller; returned unchanged.

    Raises
    ------
    ConfigurationError
        With kind ``missing-size`` when the table has no entry for the
        default size name.

    Examples
    --------
    >>> from types import SimpleNamespace
    >>> options = SimpleNamespace(default_option=lambda name: "small")
    >>> resolve_width({"small": 42}, options)
    42
    """
    if width is not None:
        return width
    size_name = options.default_option(THUMBSIZE_OPTION)
    try:
        return _lookup(table, size_name)
    except KeyError as exc:
        msg = f"Thumbnail size {size_name!r} is not defined in the size table."
        raise ConfigurationError(ErrorKind.MISSING_SIZE, msg) from exc


__all__ = ["resolve_width"]
