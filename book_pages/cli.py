"""Cyclopts CLI entrypoint for the book content pipeline.

The ``book-pages`` console script defined here prints the static route list,
prints the props of a single page, and exports the props of every route as
JSON files. Typical usage runs ``book-pages export`` during a site build so
the page-rendering layer can read ``public/data/**.json``.

Examples
--------
Export every route with the default configuration:

>>> from book_pages.cli import main
>>> main()  # doctest: +SKIP

Print the props of one page:

>>> from book_pages.cli import app
>>> app(["props", "--slug", "tokio/tutorial/hello-tokio"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import os
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import LOG_LEVEL_ENV
from .config import load_site_config
from .content import PropsAssembler, get_menu_paths
from .export import StaticPropsExporter, encode_json

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="book-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _write_stdout(payload: bytes) -> None:
    sys.stdout.write(payload.decode("utf-8"))


@app.command(help="Print the statically generated routes as JSON.")
def paths(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print ``{"paths": [...], "fallback": false}`` for the configured sitemap.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    """
    site_config = load_site_config(config)
    _write_stdout(encode_json(get_menu_paths(site_config.sitemap)))


@app.command(help="Print the props of a single page as JSON.")
def props(
    *,
    slug: typ.Annotated[
        str, Parameter(help="Page slug, e.g. tokio/tutorial", env_var="INPUT_SLUG")
    ],
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print the ``{"props": {...}}`` payload for ``slug``.

    Parameters
    ----------
    slug : str
        Slash-separated route slug whose first segment names the section.
    config : Path, optional
        Path to the ``site.yaml`` configuration file.

    Raises
    ------
    PageNotFoundError
        If the page or a page of its section has no Markdown file.
    SitemapError
        If the slug's first segment is not a sitemap section.
    """
    site_config = load_site_config(config)
    assembler = PropsAssembler.from_config(site_config)
    page_props = assembler.get_props(site_config.sitemap, slug)
    _write_stdout(encode_json(page_props.to_payload()))


@app.command(help="Write props JSON for every route plus a paths manifest.")
def export(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Export the props of every route and log the written paths.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    output_dir : Path or None, optional
        Override for the configured ``output_dir``.
    """
    site_config = load_site_config(config)
    for path in StaticPropsExporter(site_config, output_dir=output_dir).run():
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Configure logging from ``BOOK_PAGES_LOG_LEVEL`` and run the CLI app."""
    logging.basicConfig(
        level=os.getenv(LOG_LEVEL_ENV, "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
