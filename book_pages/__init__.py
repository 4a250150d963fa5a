"""Content pipeline for a Markdown tutorial and book site.

This package loads Markdown pages with front matter, turns the configured
sitemap into menus and static routes, links pages to their reading-order
neighbours, and assembles the props consumed by a page-rendering layer. The
``book-pages`` console script exposes the same pipeline.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from book_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
