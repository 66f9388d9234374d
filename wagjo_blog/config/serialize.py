"""Serialize :class:`SiteConfig` values using the kebab-case data contract.

The mapping produced by :func:`site_config_to_mapping` is the shape external
generators consume; :func:`dump_site_config` writes it as YAML, TOML, or JSON
so that :func:`~wagjo_blog.config.load_site_config` reads back an equal value.

Examples
--------
>>> from wagjo_blog.config import get_site_config, site_config_to_mapping
>>> list(site_config_to_mapping(get_site_config()))[:3]
['target-path', 'static-path', 'logo-url']
"""

from __future__ import annotations

import io
import json
import typing as typ

import tomlkit
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from .helpers import _format_for_suffix
from .models import SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import MenuLinkConfig, SiteConfig, StaticPageConfig

SUPPORTED_FORMATS = ("yaml", "toml", "json")


def site_config_to_mapping(config: SiteConfig) -> dict[str, typ.Any]:
    """Return an ordered, plain-data mapping for ``config``.

    Optional fields holding ``None`` are omitted. Sequences of tables come
    last so the mapping can be written as TOML without reordering.
    """
    mapping: dict[str, typ.Any] = {
        "target-path": config.target_path.as_posix(),
        "static-path": config.static_path.as_posix(),
        "logo-url": config.logo_url,
        "proj-name": config.proj_name,
        "disqus": config.disqus,
        "proj-url": config.proj_url,
    }
    if config.current_version is not None:
        mapping["current-version"] = config.current_version
    mapping["no-doc-title"] = config.no_doc_title
    if config.teaser is not None:
        mapping["teaser"] = config.teaser
    mapping["copy-years"] = config.copy_years
    mapping["additional-copyright"] = config.additional_copyright
    mapping["authors"] = list(config.authors)
    mapping["header-menu"] = [_menu_link_mapping(link) for link in config.header_menu]
    mapping["static-pages"] = [_page_mapping(page) for page in config.static_pages]
    return mapping


def _menu_link_mapping(link: MenuLinkConfig) -> dict[str, str]:
    return {"url": link.url, "name": link.name, "icon": link.icon}


def _page_mapping(page: StaticPageConfig) -> dict[str, str]:
    payload = {"filename": page.filename, "name": page.name}
    if page.disqus_id is not None:
        payload["disqus-id"] = page.disqus_id
    return payload


def dumps_site_config(config: SiteConfig, fmt: str = "yaml") -> str:
    """Serialize ``config`` to a string in the requested format.

    Parameters
    ----------
    config : SiteConfig
        Configuration to serialize.
    fmt : str, optional
        One of ``"yaml"`` (default), ``"toml"``, or ``"json"``.

    Returns
    -------
    str
        The serialized document, terminated by a newline.

    Raises
    ------
    SiteConfigError
        If ``fmt`` is not a supported format.
    """
    mapping = site_config_to_mapping(config)
    match fmt.lower():
        case "yaml":
            return _dump_yaml(mapping)
        case "toml":
            return _dump_toml(mapping)
        case "json":
            return json.dumps(mapping, indent=2, ensure_ascii=False) + "\n"
        case _:
            known = ", ".join(SUPPORTED_FORMATS)
            msg = f"Unsupported configuration format '{fmt}'. Use one of: {known}"
            raise SiteConfigError(msg)


def dump_site_config(config: SiteConfig, path: Path, fmt: str | None = None) -> Path:
    """Write ``config`` to ``path``, inferring the format from its suffix."""
    resolved = fmt or _format_for_suffix(path.suffix)
    text = dumps_site_config(config, resolved)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _build_roundtrip_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def _to_commented(value: typ.Any) -> typ.Any:
    """Convert plain containers into ruamel's order-preserving node types."""
    if isinstance(value, dict):
        node = CommentedMap()
        for key, item in value.items():
            node[key] = _to_commented(item)
        return node
    if isinstance(value, list):
        return CommentedSeq(_to_commented(item) for item in value)
    return value


def _dump_yaml(mapping: dict[str, typ.Any]) -> str:
    stream = io.StringIO()
    _build_roundtrip_yaml().dump(_to_commented(mapping), stream)
    return stream.getvalue()


def _dump_toml(mapping: dict[str, typ.Any]) -> str:
    document = tomlkit.document()
    tables: dict[str, list[dict[str, typ.Any]]] = {}
    for key, value in mapping.items():
        if isinstance(value, list) and value and all(isinstance(v, dict) for v in value):
            tables[key] = value
        else:
            document.add(key, value)
    # Plain keys after an array of tables would land inside its last entry.
    for key, entries in tables.items():
        aot = tomlkit.aot()
        for entry in entries:
            table = tomlkit.table()
            for entry_key, entry_value in entry.items():
                table.add(entry_key, entry_value)
            aot.append(table)
        document.add(key, aot)
    return tomlkit.dumps(document)


__all__ = [
    "SUPPORTED_FORMATS",
    "dump_site_config",
    "dumps_site_config",
    "site_config_to_mapping",
]
