"""Site configuration for the blog's static-site generation.

This subpackage holds the built-in :data:`BLOG_CONFIG` literal and its read
accessor :func:`get_site_config`, the immutable dataclasses it is made of,
and helpers to load the same record from YAML, TOML, or JSON documents and
to serialize it back using the kebab-case keys external generators expect.

Examples
--------
>>> from wagjo_blog.config import get_site_config
>>> config = get_site_config()
>>> config.get_page("jwt").disqus_id
'jwt'
>>> [link.name for link in config.header_menu][0]
'Homepage'
"""

from .blog import BLOG_CONFIG, get_site_config
from .loader import load_site_config, site_config_from_mapping
from .models import MenuLinkConfig, SiteConfig, SiteConfigError, StaticPageConfig
from .serialize import (
    SUPPORTED_FORMATS,
    dump_site_config,
    dumps_site_config,
    site_config_to_mapping,
)

__all__ = [
    "BLOG_CONFIG",
    "SUPPORTED_FORMATS",
    "MenuLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "StaticPageConfig",
    "dump_site_config",
    "dumps_site_config",
    "get_site_config",
    "load_site_config",
    "site_config_from_mapping",
    "site_config_to_mapping",
]
