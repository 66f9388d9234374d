"""Static-site configuration for Jozef Wagner's blog.

This package holds the blog's site configuration and the ``blog`` CLI used
to inspect it, export it, and hand it to an external static-site generator.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``get_site_config``: Read accessor for the built-in site configuration.

Examples
--------
>>> from wagjo_blog import get_site_config
>>> get_site_config().disqus
'wagjo'
"""

from __future__ import annotations

from .cli import app, main
from .config import get_site_config

__all__ = ["app", "get_site_config", "main"]
