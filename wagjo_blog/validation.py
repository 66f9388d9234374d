"""Pre-flight checks for a site configuration before generator handoff.

The generator owns rendering and its own error reporting; these checks only
catch problems that are cheap to spot up front: duplicate or empty page
filenames, duplicate comment thread ids, incomplete menu entries, and pages
whose content file is missing from the static directory.

Examples
--------
>>> from wagjo_blog.config import get_site_config
>>> from wagjo_blog.validation import find_config_problems
>>> find_config_problems(get_site_config(), check_files=False)
[]
"""

from __future__ import annotations

import typing as typ

from ._constants import CONTENT_SUFFIXES
from .config import SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig


def resolve_page_source(static_path: Path, filename: str) -> Path | None:
    """Return the content file backing ``filename`` under ``static_path``.

    Parameters
    ----------
    static_path : Path
        Directory holding the static page sources.
    filename : str
        Page filename as declared in the configuration, usually without a
        suffix (``"markov"``).

    Returns
    -------
    Path or None
        The first existing candidate, trying each of
        :data:`~wagjo_blog._constants.CONTENT_SUFFIXES` before the bare
        filename, or ``None`` when no file exists.
    """
    if not filename:
        return None
    for suffix in CONTENT_SUFFIXES:
        candidate = static_path / f"{filename}{suffix}"
        if candidate.is_file():
            return candidate
    bare = static_path / filename
    if bare.is_file():
        return bare
    return None


def find_config_problems(config: SiteConfig, *, check_files: bool = True) -> list[str]:
    """Return human-readable problems found in ``config``; empty when valid."""
    problems: list[str] = []
    problems.extend(_page_problems(config))
    problems.extend(_menu_problems(config))
    if check_files:
        problems.extend(_content_problems(config))
    return problems


def validate_site_config(config: SiteConfig, *, check_files: bool = True) -> None:
    """Raise :class:`SiteConfigError` listing every problem in ``config``."""
    problems = find_config_problems(config, check_files=check_files)
    if problems:
        details = "\n".join(f"- {problem}" for problem in problems)
        msg = f"Site configuration has {len(problems)} problem(s):\n{details}"
        raise SiteConfigError(msg)


def _page_problems(config: SiteConfig) -> list[str]:
    if not config.static_pages:
        return ["No static pages are declared."]
    problems: list[str] = []
    seen_filenames: set[str] = set()
    seen_threads: set[str] = set()
    for index, page in enumerate(config.static_pages, start=1):
        filename = page.filename.strip()
        if not filename:
            problems.append(f"Static page {index} has an empty filename.")
        elif filename in seen_filenames:
            problems.append(f"Static page filename '{filename}' is declared twice.")
        else:
            seen_filenames.add(filename)

        if page.disqus_id is None:
            continue
        if page.disqus_id in seen_threads:
            problems.append(f"Disqus id '{page.disqus_id}' is used by several pages.")
        seen_threads.add(page.disqus_id)
    return problems


def _menu_problems(config: SiteConfig) -> list[str]:
    problems: list[str] = []
    for index, link in enumerate(config.header_menu, start=1):
        if not link.url.strip():
            problems.append(f"Header menu entry {index} has an empty url.")
        if not link.name.strip():
            problems.append(f"Header menu entry {index} has an empty name.")
    return problems


def _content_problems(config: SiteConfig) -> list[str]:
    if not config.static_path.is_dir():
        return [f"Static path '{config.static_path}' is not a directory."]
    return [
        f"Static page '{page.filename}' has no content file in "
        f"'{config.static_path}'."
        for page in config.static_pages
        if page.filename.strip()
        and resolve_page_source(config.static_path, page.filename) is None
    ]


__all__ = ["find_config_problems", "resolve_page_source", "validate_site_config"]
