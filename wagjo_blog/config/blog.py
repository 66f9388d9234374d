"""The blog's built-in site configuration.

``BLOG_CONFIG`` is constructed once at import time and never mutated; the
generator reads it through :func:`get_site_config`.

Examples
--------
>>> from wagjo_blog.config import get_site_config
>>> get_site_config().proj_name
'Jozef Wagner'
>>> [page.filename for page in get_site_config().static_pages]
['index', 'set', 'markov', 'factory', 'jwt']
"""

from __future__ import annotations

from pathlib import Path

from .models import MenuLinkConfig, SiteConfig, StaticPageConfig

BLOG_CONFIG = SiteConfig(
    target_path=Path("gh-pages"),
    static_path=Path("blog"),
    logo_url="logo.png",
    proj_name="Jozef Wagner",
    disqus="wagjo",
    proj_url="http://www.wagjo.com/",
    copy_years="2015,",
    additional_copyright="2008, 2015, Rich Hickey and Clojure contributors",
    authors=("Jozef Wagner",),
    header_menu=(
        MenuLinkConfig(url="http://wagjo.com", name="Homepage", icon="fa-home"),
        MenuLinkConfig(url="http://blog.wagjo.com", name="Blog", icon="fa-pencil"),
        MenuLinkConfig(
            url="http://wagjo.com/consulting",
            name="Consulting Services",
            icon="fa-dot-circle-o",
        ),
        MenuLinkConfig(
            url="http://blog.wagjo.com/feed.xml", name="RSS Feed", icon="fa-rss"
        ),
    ),
    static_pages=(
        StaticPageConfig(filename="index", name="Blog"),
        StaticPageConfig(
            filename="set",
            name="Universal and Complement Sets in Dunaj",
            disqus_id="set",
        ),
        StaticPageConfig(
            filename="markov",
            name="Markov Text Generator in Dunaj",
            disqus_id="markov",
        ),
        StaticPageConfig(
            filename="factory",
            name="Idiomatic Factory Pattern in Clojure",
            disqus_id="factory",
        ),
        StaticPageConfig(
            filename="jwt",
            name="Handling JSON Web Tokens in Dunaj",
            disqus_id="jwt",
        ),
    ),
    current_version=None,
    no_doc_title=True,
)


def get_site_config() -> SiteConfig:
    """Return the blog's site configuration."""
    return BLOG_CONFIG


__all__ = ["BLOG_CONFIG", "get_site_config"]
