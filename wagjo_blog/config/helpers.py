"""Utility helpers shared by the site configuration loader and serializer."""

from __future__ import annotations

import typing as typ

from .models import SiteConfigError

FORMAT_SUFFIXES: dict[str, str] = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
    ".json": "json",
}


def _normalize_key(key: object) -> str:
    """Return ``key`` in the kebab-case spelling used by the data contract."""
    return str(key).strip().replace("_", "-")


def _normalize_mapping(payload: typ.Mapping[typ.Any, typ.Any]) -> dict[str, typ.Any]:
    """Return a shallow copy of ``payload`` with kebab-case keys."""
    return {_normalize_key(key): value for key, value in payload.items()}


def _optional_str(value: object | None) -> str | None:
    """Return ``value`` as a string, kept verbatim, or None when absent."""
    if value is None:
        return None
    return str(value)


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, *, where: str) -> str:
    """Return the string stored under ``key`` or raise when it is absent."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"{where} is missing '{key}'."
        raise SiteConfigError(msg)
    return value


def _string_list(value: object, *, key: str) -> tuple[str, ...]:
    """Normalize a sequence of names into a tuple of strings, in order."""
    match value:
        case None:
            return ()
        case str() as text:
            items: list[object] = [text]
        case list() | tuple() as entries:
            items = list(entries)
        case _:
            msg = f"Site configuration field '{key}' must be a list of strings."
            raise SiteConfigError(msg)
    if any(item is None for item in items):
        msg = f"Site configuration field '{key}' must not contain null entries."
        raise SiteConfigError(msg)
    return tuple(str(item) for item in items)


def _as_bool(value: object, *, key: str) -> bool:
    """Interpret YAML/TOML/JSON booleans, rejecting anything ambiguous."""
    match value:
        case None:
            return False
        case bool():
            return value
        case str() as text if text.strip().lower() in {"true", "yes", "1"}:
            return True
        case str() as text if text.strip().lower() in {"false", "no", "0", ""}:
            return False
        case _:
            msg = f"Site configuration field '{key}' must be a boolean."
            raise SiteConfigError(msg)


def _format_for_suffix(suffix: str) -> str:
    """Return the serialization format name for a file suffix."""
    try:
        return FORMAT_SUFFIXES[suffix.lower()]
    except KeyError as exc:
        known = ", ".join(sorted(FORMAT_SUFFIXES))
        msg = f"Unsupported configuration format '{suffix}'. Use one of: {known}"
        raise SiteConfigError(msg) from exc


__all__ = [
    "FORMAT_SUFFIXES",
    "_as_bool",
    "_format_for_suffix",
    "_normalize_key",
    "_normalize_mapping",
    "_optional_str",
    "_require_str",
    "_string_list",
]
