"""Shared pytest fixtures for the wiki_siteconfig test suite."""

from __future__ import annotations

import typing as typ

import pytest
from fakes import build_services

from wiki_siteconfig import ConfigSource, SiteConfig

SiteFactory = typ.Callable[..., SiteConfig]


@pytest.fixture
def make_site() -> SiteFactory:
    """Build a :class:`SiteConfig` from settings, overrides and fake services.

    Returns
    -------
    SiteFactory
        Callable accepting optional ``settings`` and ``overrides`` mappings
        plus keyword replacements for individual upstream services.
    """

    def factory(
        settings: dict[str, typ.Any] | None = None,
        overrides: dict[str, typ.Any] | None = None,
        **services: typ.Any,
    ) -> SiteConfig:
        return SiteConfig(ConfigSource(settings, overrides), build_services(**services))

    return factory
