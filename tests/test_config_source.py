"""Unit tests for the settings view and its YAML loader."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from wiki_siteconfig import ConfigSource, ConfigurationError, ErrorKind, load_site_settings

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_settings_overlay_defaults() -> None:
    """Supplied settings replace defaults key by key and keep the rest."""
    source = ConfigSource({"Server": "https://example.org"})
    assert source.get("Server") == "https://example.org", "expected supplied server"
    assert source.get("InterwikiMagic") is True, "expected default InterwikiMagic"


def test_unknown_setting_raises_configuration_error() -> None:
    """Reading an undefined setting without a default is a misconfiguration."""
    source = ConfigSource()
    with pytest.raises(ConfigurationError) as excinfo:
        source.get("NoSuchSetting")
    assert excinfo.value.kind is ErrorKind.UNKNOWN_SETTING, (
        f"expected unknown-setting kind, got {excinfo.value.kind!r}"
    )
    assert source.get("NoSuchSetting", 7) == 7, "expected explicit default"
    assert not source.has("NoSuchSetting")


def test_source_does_not_alias_caller_mappings() -> None:
    """Mutating the input mapping after construction leaves the view unchanged."""
    settings = {"LocalInterwikis": ["en"]}
    overrides = {"nativeGalleryEnabled": True}
    source = ConfigSource(settings, overrides)
    settings["LocalInterwikis"] = ["fr"]
    overrides["nativeGalleryEnabled"] = False
    assert source.get("LocalInterwikis") == ["en"]
    assert source.override("nativeGalleryEnabled") is True
    with pytest.raises(TypeError):
        source.settings["Server"] = "elsewhere"  # type: ignore[index]


def test_load_site_settings_reads_sections(tmp_path: Path) -> None:
    """Both ``settings`` and ``overrides`` sections should be honoured."""
    path = tmp_path / "site.yaml"
    path.write_text(
        dedent(
            """
            settings:
              Server: https://example.org
              ArticlePath: /wiki/$1
              ThumbLimits:
                small: 120
                large: 300
            overrides:
              nativeGalleryEnabled: true
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    source = load_site_settings(path)
    assert source.get("ArticlePath") == "/wiki/$1", (
        f"expected article path from YAML, got {source.get('ArticlePath')!r}"
    )
    assert source.get("ThumbLimits") == {"small": 120, "large": 300}
    assert source.override("nativeGalleryEnabled") is True
    assert source.get("MaxTemplateDepth") == 100, "expected default depth"


def test_load_site_settings_accepts_empty_document(tmp_path: Path) -> None:
    """An empty file yields the defaults."""
    path = tmp_path / "site.yaml"
    path.write_text("", encoding="utf-8")
    assert load_site_settings(path).get("LanguageCode") == "en"


def test_load_site_settings_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_site_settings(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "document",
    ["- just\n- a list\n", "settings:\n  - not\n  - a mapping\n"],
)
def test_load_site_settings_rejects_non_mappings(tmp_path: Path, document: str) -> None:
    """The document and its sections must be mappings."""
    path = tmp_path / "site.yaml"
    path.write_text(document, encoding="utf-8")
    with pytest.raises(TypeError):
        load_site_settings(path)
