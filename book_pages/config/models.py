"""Typed dataclasses describing the site configuration and sitemap."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


class SitemapError(ValueError):
    """Raised when the sitemap description is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class ExternalLink:
    """Menu entry pointing outside the content tree; no Markdown file backs it."""

    key: str
    href: str
    title: str | None = None


@dc.dataclass(frozen=True, slots=True)
class Page:
    """Single Markdown-backed page without children."""

    key: str
    title: str | None = None


@dc.dataclass(frozen=True, slots=True)
class PageWithChildren:
    """Section index page whose children share the section's content folder.

    Attributes
    ----------
    key : str
        Folder name of the section below its parent prefix.
    children : tuple[str, ...]
        Child page keys in menu order; each resolves to ``<key>/<child>``.
    title : str or None
        Optional label declared in the sitemap (front matter wins for pages).
    """

    key: str
    children: tuple[str, ...]
    title: str | None = None


@dc.dataclass(frozen=True, slots=True)
class PageGroup:
    """Section index page with a nested sitemap below it.

    Attributes
    ----------
    key : str
        Folder name of the group below its parent prefix.
    entries : tuple[SitemapNode, ...]
        Nested nodes in declaration order.
    title : str or None
        Optional label declared in the sitemap.
    """

    key: str
    entries: tuple[SitemapNode, ...]
    title: str | None = None


SitemapNode: typ.TypeAlias = ExternalLink | Page | PageWithChildren | PageGroup
Sitemap: typ.TypeAlias = dict[str, SitemapNode]


@dc.dataclass(slots=True)
class SiteConfig:
    """Top-level configuration consumed by the content pipeline.

    Attributes
    ----------
    content_dir : Path
        Root directory holding ``<slug>.md`` and ``<slug>/index.md`` files.
    sitemap : Sitemap
        Ordered mapping of top-level section key to its sitemap node.
    blog_root : str
        Content folder of the date-ordered collection used for app props.
    pygments_style : str
        Pygments style used by the default Markdown renderer.
    output_dir : Path
        Directory receiving exported props JSON files.
    """

    content_dir: Path
    sitemap: Sitemap
    blog_root: str
    pygments_style: str
    output_dir: Path

    def get_section(self, key: str) -> SitemapNode:
        """Return the top-level sitemap node for ``key``."""
        return get_section(self.sitemap, key)


def get_section(sitemap: Sitemap, key: str) -> SitemapNode:
    """Return the top-level node ``key`` or raise :class:`SitemapError`."""
    try:
        return sitemap[key]
    except KeyError as exc:
        msg = f"Unknown sitemap section '{key}'."
        raise SitemapError(msg) from exc


__all__ = [
    "ExternalLink",
    "Page",
    "PageGroup",
    "PageWithChildren",
    "SiteConfig",
    "Sitemap",
    "SitemapError",
    "SitemapNode",
    "get_section",
]
