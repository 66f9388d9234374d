"""Load site configuration documents into typed dataclasses."""

from __future__ import annotations

import json
import tomllib
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _as_bool,
    _format_for_suffix,
    _normalize_mapping,
    _optional_str,
    _require_str,
    _string_list,
)
from .models import MenuLinkConfig, SiteConfig, SiteConfigError, StaticPageConfig


def load_site_config(path: Path) -> SiteConfig:
    """Load a YAML, TOML, or JSON document describing the blog site.

    Parameters
    ----------
    path : Path
        Filesystem path to the configuration document. The format is chosen
        from the suffix (``.yaml``/``.yml``, ``.toml``, ``.json``).

    Returns
    -------
    SiteConfig
        Immutable site configuration ready to hand to the generator.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level document is not a mapping.
    SiteConfigError
        If the suffix is unsupported, or required fields are missing or
        malformed.

    Examples
    --------
    >>> from pathlib import Path
    >>> from wagjo_blog.config import load_site_config
    >>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
    >>> config.static_pages[0].filename  # doctest: +SKIP
    'index'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    fmt = _format_for_suffix(path.suffix)
    with path.open("r", encoding="utf-8") as handle:
        text = handle.read()
    loaded = _parse_document(text, fmt)
    if not isinstance(loaded, dict):
        msg = "Top-level configuration structure must be a mapping."
        raise TypeError(msg)
    return site_config_from_mapping(loaded)


def _parse_document(text: str, fmt: str) -> object:
    """Parse ``text`` using the loader for ``fmt``."""
    match fmt:
        case "yaml":
            loader = YAML(typ="safe")
            loader.version = (1, 2)
            return loader.load(text) or {}
        case "toml":
            return tomllib.loads(text)
        case "json":
            return json.loads(text) if text.strip() else {}
        case _:  # pragma: no cover - guarded by _format_for_suffix
            msg = f"Unsupported configuration format '{fmt}'."
            raise SiteConfigError(msg)


def site_config_from_mapping(payload: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a :class:`SiteConfig` from an already-parsed mapping.

    Keys may use the kebab-case contract spelling (``target-path``) or the
    snake_case attribute spelling (``target_path``).
    """
    raw = _normalize_mapping(payload)
    where = "Site configuration"

    return SiteConfig(
        target_path=Path(_require_str(raw, "target-path", where=where)),
        static_path=Path(_require_str(raw, "static-path", where=where)),
        logo_url=_optional_str(raw.get("logo-url")) or "",
        proj_name=_require_str(raw, "proj-name", where=where),
        disqus=_optional_str(raw.get("disqus")) or "",
        proj_url=_optional_str(raw.get("proj-url")) or "",
        copy_years=_optional_str(raw.get("copy-years")) or "",
        additional_copyright=_optional_str(raw.get("additional-copyright")) or "",
        authors=_string_list(raw.get("authors"), key="authors"),
        header_menu=_build_header_menu(raw.get("header-menu")),
        static_pages=_build_static_pages(raw.get("static-pages")),
        current_version=_optional_str(raw.get("current-version")),
        no_doc_title=_as_bool(raw.get("no-doc-title"), key="no-doc-title"),
        teaser=_optional_str(raw.get("teaser")),
    )


def _entries(value: object, *, key: str) -> list[object]:
    """Return the list stored under ``key`` or raise when it is not a list."""
    match value:
        case None:
            return []
        case list() | tuple() as items:
            return list(items)
        case _:
            msg = f"Site configuration field '{key}' must be a list."
            raise SiteConfigError(msg)


def _build_header_menu(value: object) -> tuple[MenuLinkConfig, ...]:
    """Build header navigation entries, keeping declaration order."""
    links: list[MenuLinkConfig] = []
    for index, entry in enumerate(_entries(value, key="header-menu"), start=1):
        where = f"Header menu entry {index}"
        match entry:
            case dict():
                data = _normalize_mapping(entry)
            case _:
                msg = f"{where} must be a mapping."
                raise SiteConfigError(msg)
        links.append(
            MenuLinkConfig(
                url=_require_str(data, "url", where=where),
                name=_require_str(data, "name", where=where),
                icon=_optional_str(data.get("icon")) or "",
            )
        )
    return tuple(links)


def _build_static_pages(value: object) -> tuple[StaticPageConfig, ...]:
    """Build static page entries, keeping declaration order."""
    pages: list[StaticPageConfig] = []
    for index, entry in enumerate(_entries(value, key="static-pages"), start=1):
        where = f"Static page entry {index}"
        match entry:
            case dict():
                data = _normalize_mapping(entry)
            case _:
                msg = f"{where} must be a mapping."
                raise SiteConfigError(msg)
        filename = _require_str(data, "filename", where=where)
        name = _optional_str(data.get("name"))
        if name is None:
            name = filename.replace("-", " ").title()
        pages.append(
            StaticPageConfig(
                filename=filename,
                name=name,
                disqus_id=_optional_str(data.get("disqus-id")),
            )
        )
    return tuple(pages)


__all__ = ["load_site_config", "site_config_from_mapping"]
