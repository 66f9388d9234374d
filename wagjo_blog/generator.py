"""Hand the site configuration to an external static-site generator.

Rendering lives outside this package. A generator is any callable that
accepts a :class:`~wagjo_blog.config.SiteConfig` and writes the site into
``config.target_path``, optionally returning the paths it wrote. Generators
are named either by import path (``"package.module:attribute"``) or by an
entry point registered under :data:`GENERATOR_ENTRY_POINT_GROUP`.

Example
-------
>>> from wagjo_blog.config import get_site_config
>>> from wagjo_blog.generator import generate_static_site, resolve_generator
>>> generator = resolve_generator("dunaj_doc:gen_static")  # doctest: +SKIP
>>> generate_static_site(get_site_config(), generator)  # doctest: +SKIP
[PosixPath('gh-pages/index.html'), ...]
"""

from __future__ import annotations

import collections.abc as cabc
import importlib
import os
import typing as typ
from importlib.metadata import entry_points
from pathlib import Path

from ._constants import GENERATOR_ENTRY_POINT_GROUP

if typ.TYPE_CHECKING:
    from .config import SiteConfig


class GeneratorResolutionError(RuntimeError):
    """Raised when a generator target cannot be imported or is not callable."""


class StaticSiteGenerator(typ.Protocol):
    """Callable rendering a whole site from its configuration."""

    def __call__(
        self, config: SiteConfig
    ) -> cabc.Iterable[Path | str] | Path | str | None:  # pragma: no cover - protocol
        """Render ``config`` and return the written paths, if known."""
        ...


def resolve_generator(target: str) -> StaticSiteGenerator:
    """Return the generator callable named by ``target``.

    Parameters
    ----------
    target : str
        Either ``"package.module:attribute"`` (attribute may be dotted) or the
        name of an entry point in the ``wagjo_blog.generators`` group.

    Returns
    -------
    StaticSiteGenerator
        The resolved callable.

    Raises
    ------
    GeneratorResolutionError
        If the module, attribute, or entry point cannot be found, or the
        resolved object is not callable.
    """
    name = target.strip()
    if not name:
        msg = "Generator target must not be empty."
        raise GeneratorResolutionError(msg)
    if ":" in name:
        candidate = _import_target(name)
    else:
        candidate = _load_entry_point(name)
    if not callable(candidate):
        msg = f"Generator '{name}' resolved to a non-callable {type(candidate).__name__}."
        raise GeneratorResolutionError(msg)
    return typ.cast("StaticSiteGenerator", candidate)


def _import_target(target: str) -> object:
    """Import ``module:attribute`` and return the attribute."""
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        msg = f"Generator target '{target}' must look like 'module:attribute'."
        raise GeneratorResolutionError(msg)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Unable to import generator module '{module_name}'."
        raise GeneratorResolutionError(msg) from exc
    obj: object = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            msg = f"Generator module '{module_name}' has no attribute '{attribute}'."
            raise GeneratorResolutionError(msg) from exc
    return obj


def _load_entry_point(name: str) -> object:
    """Load the generator registered as entry point ``name``."""
    matches = list(entry_points(group=GENERATOR_ENTRY_POINT_GROUP, name=name))
    if not matches:
        msg = (
            f"No generator named '{name}' is registered under "
            f"'{GENERATOR_ENTRY_POINT_GROUP}'."
        )
        raise GeneratorResolutionError(msg)
    try:
        return matches[0].load()
    except (ImportError, AttributeError) as exc:
        msg = f"Unable to load generator entry point '{name}'."
        raise GeneratorResolutionError(msg) from exc


def generate_static_site(
    config: SiteConfig, generator: StaticSiteGenerator
) -> list[Path]:
    """Pass ``config`` wholesale to ``generator`` and collect written paths.

    Errors raised by the generator propagate unchanged. A generator that
    returns ``None`` yields an empty list, and one returning a single path
    yields a one-element list.
    """
    written = generator(config)
    match written:
        case None:
            return []
        case str() | os.PathLike():
            return [Path(written)]
        case _:
            return [Path(path) for path in written]


__all__ = [
    "GeneratorResolutionError",
    "StaticSiteGenerator",
    "generate_static_site",
    "resolve_generator",
]
