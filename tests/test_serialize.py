"""Unit tests for serializing the site configuration.

The serialized mapping is the contract external generators read, so these
tests check its key spelling and ordering, and that documents written in each
supported format load back into an equal configuration.

Usage
-----
Run ``pytest tests/test_serialize.py -v``.
"""

from __future__ import annotations

import dataclasses as dc
import json
import tomllib
from pathlib import Path

import pytest
from ruamel.yaml import YAML

from wagjo_blog.config import (
    SUPPORTED_FORMATS,
    MenuLinkConfig,
    SiteConfig,
    SiteConfigError,
    StaticPageConfig,
    dump_site_config,
    dumps_site_config,
    get_site_config,
    load_site_config,
    site_config_to_mapping,
)


def test_mapping_uses_contract_keys_in_order() -> None:
    """Mapping keys should use kebab-case and end with the page tables."""
    mapping = site_config_to_mapping(get_site_config())
    assert list(mapping) == [
        "target-path",
        "static-path",
        "logo-url",
        "proj-name",
        "disqus",
        "proj-url",
        "no-doc-title",
        "copy-years",
        "additional-copyright",
        "authors",
        "header-menu",
        "static-pages",
    ]
    assert mapping["target-path"] == "gh-pages"
    assert mapping["static-pages"][0] == {"filename": "index", "name": "Blog"}
    assert mapping["static-pages"][1]["disqus-id"] == "set"


def test_mapping_includes_optional_fields_when_set() -> None:
    """Version and teaser appear only when populated."""
    config = dc.replace(
        get_site_config(), current_version="1.0", teaser="<b>Hire me</b>"
    )
    mapping = site_config_to_mapping(config)
    assert mapping["current-version"] == "1.0"
    assert mapping["teaser"] == "<b>Hire me</b>"


@pytest.mark.parametrize("fmt", SUPPORTED_FORMATS)
def test_documents_load_back_equal(tmp_path: Path, fmt: str) -> None:
    """A written document should load into a config equal to the original."""
    original = dc.replace(
        get_site_config(), teaser="Hi, I'm a consultant.<br/>\n<b>Hire me</b>"
    )
    path = dump_site_config(original, tmp_path / f"site.{fmt}")

    loaded = load_site_config(path)

    assert loaded == original
    assert [link.url for link in loaded.header_menu] == [
        link.url for link in original.header_menu
    ]
    assert [page.filename for page in loaded.static_pages] == [
        page.filename for page in original.static_pages
    ]


def _edge_value_configs() -> dict[str, SiteConfig]:
    base = get_site_config()
    return {
        "whitespace-and-empties": dc.replace(
            base,
            logo_url=" logo.png",
            copy_years="2015, ",
            authors=("Jozef Wagner", ""),
            current_version="",
            teaser="",
            header_menu=(
                MenuLinkConfig(url="http://wagjo.com ", name=" Home", icon=""),
            ),
            static_pages=(
                StaticPageConfig(filename="my-page", name=""),
                StaticPageConfig(filename="jwt", name=" JWT ", disqus_id=""),
            ),
        ),
        "no-pages-or-links": dc.replace(base, header_menu=(), static_pages=()),
        "scalar-lookalikes": dc.replace(
            base,
            proj_name="2015",
            disqus="null",
            copy_years="true",
            authors=("~", "1.0"),
            header_menu=(MenuLinkConfig(url="#", name="RSS", icon=":fa-rss"),),
        ),
    }


@pytest.mark.parametrize("case", sorted(_edge_value_configs()))
@pytest.mark.parametrize("fmt", SUPPORTED_FORMATS)
def test_edge_values_load_back_equal(tmp_path: Path, fmt: str, case: str) -> None:
    """Any record should survive export and reload in every format unchanged."""
    original = _edge_value_configs()[case]
    path = dump_site_config(original, tmp_path / f"site.{fmt}")

    loaded = load_site_config(path)

    assert loaded == original, f"{case} changed on a {fmt} round trip: {loaded!r}"


def test_toml_empty_page_list_stays_top_level() -> None:
    """Empty lists must not be swallowed by a preceding array of tables."""
    config = dc.replace(get_site_config(), static_pages=())
    parsed = tomllib.loads(dumps_site_config(config, "toml"))
    assert parsed["static-pages"] == []
    assert all("static-pages" not in entry for entry in parsed["header-menu"])


def test_yaml_output_is_plain_block_style() -> None:
    """YAML output should parse with a safe loader into the contract mapping."""
    text = dumps_site_config(get_site_config(), "yaml")
    parsed = YAML(typ="safe").load(text)
    assert parsed == site_config_to_mapping(get_site_config())
    assert text.startswith("target-path: gh-pages\n")


def test_toml_output_uses_tables_for_entries() -> None:
    """Menu and page entries should be written as arrays of tables."""
    text = dumps_site_config(get_site_config(), "toml")
    assert "[[header-menu]]" in text
    assert "[[static-pages]]" in text
    parsed = tomllib.loads(text)
    assert [page["filename"] for page in parsed["static-pages"]] == [
        "index",
        "set",
        "markov",
        "factory",
        "jwt",
    ]


def test_json_output_keeps_unicode() -> None:
    """JSON output should not escape non-ASCII text."""
    config = dc.replace(get_site_config(), proj_name="Jozef Wagner – blog")
    text = dumps_site_config(config, "json")
    assert "–" in text
    assert json.loads(text)["proj-name"] == "Jozef Wagner – blog"


def test_explicit_format_overrides_suffix(tmp_path: Path) -> None:
    """An explicit format wins over the destination suffix."""
    path = dump_site_config(get_site_config(), tmp_path / "site.txt", "json")
    assert json.loads(path.read_text(encoding="utf-8"))["disqus"] == "wagjo"


def test_unknown_format_rejected(tmp_path: Path) -> None:
    """Unknown formats and suffixes should raise SiteConfigError."""
    with pytest.raises(SiteConfigError, match="Unsupported configuration format"):
        dumps_site_config(get_site_config(), "xml")
    with pytest.raises(SiteConfigError, match="Unsupported configuration format"):
        dump_site_config(get_site_config(), tmp_path / "site.txt")


def test_dump_creates_parent_directories(tmp_path: Path) -> None:
    """Exports into new directories should create them."""
    target = tmp_path / "nested" / "dir" / "site.yaml"
    assert dump_site_config(get_site_config(), target) == target
    assert target.exists()
