"""Cyclopts CLI entrypoint for the blog's static-site configuration.

The ``blog`` console script defined here prints or exports the site
configuration, checks it against the static content directory, lists the
static pages, and hands the configuration to an external generator. Every
command reads the built-in configuration unless ``--config`` (or
``INPUT_CONFIG``) points at a YAML, TOML, or JSON document.

Examples
--------
Print the built-in configuration as YAML:

>>> from wagjo_blog.cli import main
>>> main()  # doctest: +SKIP

Hand the configuration to a generator:

>>> from wagjo_blog.cli import app
>>> app(["generate", "--generator", "dunaj_doc:gen_static"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import (
    SiteConfig,
    SiteConfigError,
    dump_site_config,
    dumps_site_config,
    get_site_config,
    load_site_config,
)
from .generator import generate_static_site, resolve_generator
from .validation import find_config_problems, resolve_page_source, validate_site_config

Format = typ.Literal["yaml", "toml", "json"]

app = App(name="blog", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(config: Path | None) -> SiteConfig:
    """Return the configuration stored at ``config`` or the built-in one."""
    if config is None:
        return get_site_config()
    return load_site_config(config)


@app.command(help="Print the site configuration.")
def show(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a site config document")
    ] = None,
    fmt: typ.Annotated[Format, Parameter(help="Output format")] = "yaml",
) -> None:
    """Print the serialized site configuration to stdout."""
    site_config = _load_config(config)
    print(dumps_site_config(site_config, fmt), end="")


@app.command(help="Write the site configuration for an external generator.")
def export(
    *,
    output: typ.Annotated[Path, Parameter(help="Destination file")],
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a site config document")
    ] = None,
    fmt: typ.Annotated[
        Format | None,
        Parameter(help="Output format; inferred from the suffix when omitted"),
    ] = None,
) -> None:
    """Serialize the site configuration into ``output``.

    Parameters
    ----------
    output : Path
        File to write. Parent directories are created as needed.
    config : Path or None, optional
        Source configuration document; the built-in configuration is used
        when ``None``.
    fmt : {"yaml", "toml", "json"} or None, optional
        Explicit format. When ``None`` the format follows ``output``'s
        suffix, and unknown suffixes raise :class:`SiteConfigError`.
    """
    site_config = _load_config(config)
    written = dump_site_config(site_config, output, fmt)
    print(f"wrote {_format_path(written)}")


@app.command(help="Check static pages and menu entries for problems.")
def check(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a site config document")
    ] = None,
    check_files: typ.Annotated[
        bool, Parameter(help="Require a content file for every static page")
    ] = True,
) -> None:
    """Report configuration problems, raising when any are found.

    Raises
    ------
    SiteConfigError
        If at least one problem was found; each problem is printed first.
    """
    site_config = _load_config(config)
    problems = find_config_problems(site_config, check_files=check_files)
    if problems:
        for problem in problems:
            print(f"error: {problem}")
        msg = f"{len(problems)} problem(s) found in site configuration."
        raise SiteConfigError(msg)
    print(
        f"ok: {len(site_config.static_pages)} static pages, "
        f"{len(site_config.header_menu)} menu links"
    )


@app.command(help="List the configured static pages.")
def pages(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a site config document")
    ] = None,
) -> None:
    """Print each static page with its comment thread and content file."""
    site_config = _load_config(config)
    for page in site_config.static_pages:
        source = resolve_page_source(site_config.static_path, page.filename)
        location = _format_path(source) if source else "missing"
        thread = page.disqus_id or "-"
        print(f"{page.filename}: {page.name} [disqus: {thread}] -> {location}")


@app.command(help="Hand the site configuration to an external static-site generator.")
def generate(
    *,
    generator: typ.Annotated[
        str,
        Parameter(
            help="Generator as 'module:attribute' or a registered entry point name"
        ),
    ],
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a site config document")
    ] = None,
    validate: typ.Annotated[
        bool, Parameter(help="Check the configuration before handing it off")
    ] = True,
) -> None:
    """Resolve ``generator`` and pass it the site configuration.

    Parameters
    ----------
    generator : str
        Generator target; see :func:`wagjo_blog.generator.resolve_generator`.
    config : Path or None, optional
        Source configuration document; the built-in configuration is used
        when ``None``.
    validate : bool, optional
        Run :func:`wagjo_blog.validation.validate_site_config` first
        (default ``True``).

    Raises
    ------
    GeneratorResolutionError
        If the generator cannot be resolved.
    SiteConfigError
        If validation is enabled and the configuration has problems.
    """
    site_config = _load_config(config)
    if validate:
        validate_site_config(site_config)
    render = resolve_generator(generator)
    for path in generate_static_site(site_config, render):
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``blog`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
