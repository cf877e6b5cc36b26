"""Read-only view over merged wiki settings and deployment overrides."""

from __future__ import annotations

import types
import typing as typ

from .helpers import DEFAULT_SETTINGS
from .models import ConfigurationError, ErrorKind

_MISSING = object()


class ConfigSource:
    """Merged site settings plus a secondary map of deployment-local toggles.

    Parameters
    ----------
    settings : Mapping[str, Any], optional
        Site settings overriding :data:`DEFAULT_SETTINGS` key by key.
    overrides : Mapping[str, Any], optional
        Deployment-local settings such as ``nativeGalleryEnabled`` that are
        not part of the site settings namespace.
    defaults : Mapping[str, Any], optional
        Base settings; :data:`DEFAULT_SETTINGS` when omitted.

    Examples
    --------
    >>> source = ConfigSource({"Server": "https://example.org"})
    >>> source.get("Server")
    'https://example.org'
    >>> source.has("CiteResponsiveReferences")
    False
    """

    def __init__(
        self,
        settings: typ.Mapping[str, typ.Any] | None = None,
        overrides: typ.Mapping[str, typ.Any] | None = None,
        *,
        defaults: typ.Mapping[str, typ.Any] | None = None,
    ) -> None:
        merged = dict(DEFAULT_SETTINGS if defaults is None else defaults)
        merged.update(settings or {})
        self._settings = types.MappingProxyType(merged)
        self._overrides = types.MappingProxyType(dict(overrides or {}))

    def get(self, name: str, default: object = _MISSING) -> typ.Any:
        """Return the named setting.

        Raises
        ------
        ConfigurationError
            If the setting is unknown and no ``default`` was supplied.
        """
        try:
            return self._settings[name]
        except KeyError as exc:
            if default is not _MISSING:
                return default
            msg = f"Unknown site setting '{name}'."
            raise ConfigurationError(ErrorKind.UNKNOWN_SETTING, msg) from exc

    def has(self, name: str) -> bool:
        """Return whether the setting is defined, by default or explicitly."""
        return name in self._settings

    def override(self, name: str, default: typ.Any = None) -> typ.Any:
        """Return a deployment-local override, or ``default`` when unset."""
        return self._overrides.get(name, default)

    @property
    def settings(self) -> typ.Mapping[str, typ.Any]:
        """Read-only mapping of every merged setting."""
        return self._settings

    @property
    def overrides(self) -> typ.Mapping[str, typ.Any]:
        """Read-only mapping of deployment-local overrides."""
        return self._overrides


__all__ = ["ConfigSource"]
