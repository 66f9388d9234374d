"""Typed dataclasses describing the blog's static-site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class MenuLinkConfig:
    """Header navigation entry rendered in declaration order."""

    url: str
    name: str
    icon: str


@dc.dataclass(frozen=True, slots=True)
class StaticPageConfig:
    """A pre-authored content file the generator renders into the site."""

    filename: str
    name: str
    disqus_id: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site metadata and page list handed to the static-site generator.

    Attributes
    ----------
    target_path : Path
        Output directory for the generated site.
    static_path : Path
        Directory holding the static page sources.
    logo_url : str
        Relative URL of the logo asset.
    proj_name : str
        Display name of the site or its author.
    disqus : str
        Disqus shortname used for comment threads.
    proj_url : str
        Canonical site URL.
    copy_years : str
        Copyright year range shown in the footer.
    additional_copyright : str
        Extra attribution text shown next to the copyright.
    authors : tuple[str, ...]
        Author names.
    header_menu : tuple[MenuLinkConfig, ...]
        Navigation entries, in display order.
    static_pages : tuple[StaticPageConfig, ...]
        Pages to render, in display order.
    current_version : str or None
        Documented version; blogs leave this unset.
    no_doc_title : bool
        Suppress the generator's generic documentation title.
    teaser : str or None
        Optional HTML teaser for the landing page.
    """

    target_path: Path
    static_path: Path
    logo_url: str
    proj_name: str
    disqus: str
    proj_url: str
    copy_years: str
    additional_copyright: str
    authors: tuple[str, ...]
    header_menu: tuple[MenuLinkConfig, ...]
    static_pages: tuple[StaticPageConfig, ...]
    current_version: str | None = None
    no_doc_title: bool = False
    teaser: str | None = None

    def get_page(self, filename: str) -> StaticPageConfig:
        """Return the static page registered under ``filename``."""
        for page in self.static_pages:
            if page.filename == filename:
                return page
        available = ", ".join(page.filename for page in self.static_pages)
        msg = f"Unknown page '{filename}'. Known pages: {available}"
        raise KeyError(msg)


__all__ = [
    "MenuLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "StaticPageConfig",
]
