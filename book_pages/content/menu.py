"""Turn the sitemap into menu trees, route lists, and prev/next links.

The sitemap declares the reading order of the book. :func:`normalize_section`
loads front matter for every declared page of one section,
:func:`collect_paths` enumerates the file-backed routes for static
generation, and :func:`link_prev_next` walks the normalized tree in reading
order to find a page's neighbours.

Example
-------
>>> from book_pages.config import parse_sitemap
>>> sitemap = parse_sitemap(
...     {"tutorial": {"nested": {"intro": {}, "api": {"href": "https://x"}}}}
... )
>>> collect_paths(sitemap)
['/tutorial', '/tutorial/intro']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from book_pages.config import (
    ExternalLink,
    Page,
    PageGroup,
    PageWithChildren,
    Sitemap,
    SitemapNode,
)

from .models import MenuEntry, MenuPage, MenuPaths, PageRecord, RoutePath

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .loader import PageLoader


def _child_nodes(node: SitemapNode) -> tuple[SitemapNode, ...]:
    """Return the nodes nested directly below ``node``."""
    match node:
        case PageWithChildren(children=children):
            return tuple(Page(key=child) for child in children)
        case PageGroup(entries=entries):
            return entries
        case ExternalLink() | Page():
            return ()


def _normalize_node(loader: PageLoader, node: SitemapNode, prefix: str) -> MenuEntry:
    """Build the menu entry for ``node`` located below ``prefix``."""
    path = f"{prefix}/{node.key}"
    match node:
        case ExternalLink(key=key, href=href, title=title):
            return MenuEntry(page=MenuPage(key=key, href=href, title=title))
        case Page():
            return MenuEntry(page=loader.load_menu_page(path))
        case PageWithChildren() | PageGroup():
            index = loader.load_menu_page(path)
            nested = tuple(
                _normalize_node(loader, child, path) for child in _child_nodes(node)
            )
            return MenuEntry(page=index, nested=nested)


def normalize_section(
    loader: PageLoader, node: SitemapNode, root: str
) -> tuple[MenuEntry, ...]:
    """Load the menu entries nested below a top-level section.

    Parameters
    ----------
    loader : PageLoader
        Loader used to read front matter for each file-backed page.
    node : SitemapNode
        Top-level sitemap node of the section.
    root : str
        Content folder of the section, normally the node's key.

    Returns
    -------
    tuple[MenuEntry, ...]
        Entries in declaration order. External links wrap a page stub without
        ``data``; sections carry their index page plus ``nested`` entries.

    Raises
    ------
    PageNotFoundError
        If a declared page has no backing Markdown file.
    """
    return tuple(
        _normalize_node(loader, child, root) for child in _child_nodes(node)
    )


def collect_paths(
    sitemap: Sitemap | cabc.Iterable[SitemapNode], prefix: str = ""
) -> list[str]:
    """Return the ``/``-joined path of every file-backed sitemap node."""
    nodes = sitemap.values() if isinstance(sitemap, dict) else sitemap
    out: list[str] = []
    for node in nodes:
        path = f"{prefix}/{node.key}"
        if not isinstance(node, ExternalLink):
            out.append(path)
        out.extend(collect_paths(_child_nodes(node), path))
    return out


def get_menu_paths(sitemap: Sitemap) -> MenuPaths:
    """Return the static route list for the sitemap with fallback disabled.

    Each route's slug starts with the top-level section key, matching the
    slug accepted by :meth:`PropsAssembler.get_props`.
    """
    paths = tuple(
        RoutePath(slug=tuple(path.split("/")[1:])) for path in collect_paths(sitemap)
    )
    return MenuPaths(paths=paths, fallback=False)


def iter_pages(menu: cabc.Iterable[MenuEntry]) -> cabc.Iterator[MenuPage]:
    """Yield file-backed menu pages depth-first, parents before children."""
    for entry in menu:
        if entry.page is not None and entry.page.data is not None:
            yield entry.page
        if entry.nested:
            yield from iter_pages(entry.nested)


def link_prev_next(page: PageRecord, menu: cabc.Iterable[MenuEntry]) -> PageRecord:
    """Return ``page`` with ``prev``/``next`` set from its menu neighbours.

    External links are skipped. A page missing from ``menu`` is returned
    unchanged.
    """
    flat = list(iter_pages(menu))
    index = next(
        (idx for idx, candidate in enumerate(flat) if candidate.href == page.href),
        None,
    )
    if index is None:
        return page
    prev = flat[index - 1].nav_link() if index > 0 else None
    following = flat[index + 1].nav_link() if index + 1 < len(flat) else None
    return dc.replace(page, prev=prev, next=following)


__all__ = [
    "collect_paths",
    "get_menu_paths",
    "iter_pages",
    "link_prev_next",
    "normalize_section",
]
