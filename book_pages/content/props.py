"""Assemble the props object consumed by the page-rendering layer.

:class:`PropsAssembler` composes the page loader, the Markdown renderer, the
menu normalizer, and the prev/next linker. Every call builds its records and
menu tree from scratch; nothing is cached between calls.

Example
-------
>>> from pathlib import Path
>>> from book_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> assembler = PropsAssembler.from_config(site)  # doctest: +SKIP
>>> props = assembler.get_props(site.sitemap, ["tokio", "tutorial"])  # doctest: +SKIP
>>> props.page.next.href  # doctest: +SKIP
'/tokio/tutorial/setup'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from book_pages._constants import DEFAULT_BLOG_ROOT
from book_pages.config import Sitemap, get_section

from .loader import PageLoader
from .menu import link_prev_next, normalize_section
from .models import AppProps, MenuEntry, PageProps, PageRecord
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from book_pages.config import SiteConfig

Renderer: typ.TypeAlias = "cabc.Callable[[str], str]"


class PropsAssembler:
    """Build page props from a sitemap and a requested slug."""

    def __init__(
        self,
        loader: PageLoader,
        *,
        renderer: Renderer | None = None,
        blog_root: str = DEFAULT_BLOG_ROOT,
    ) -> None:
        """Initialize the assembler.

        Parameters
        ----------
        loader : PageLoader
            Loader bound to the site's content root.
        renderer : Callable[[str], str], optional
            Markdown to HTML function; defaults to :class:`HtmlContentRenderer`.
        blog_root : str, optional
            Content folder of the date-ordered collection whose newest entry
            is attached as app-wide props.
        """
        self.loader = loader
        self.renderer = renderer or HtmlContentRenderer()
        self.blog_root = blog_root

    @classmethod
    def from_config(cls, site_config: SiteConfig) -> PropsAssembler:
        """Return an assembler wired from a loaded :class:`SiteConfig`."""
        return cls(
            PageLoader(site_config.content_dir),
            renderer=HtmlContentRenderer(site_config.pygments_style),
            blog_root=site_config.blog_root,
        )

    def get_props(
        self, sitemap: Sitemap, slug: str | cabc.Sequence[str]
    ) -> PageProps:
        """Return the props for the page at ``slug``.

        Parameters
        ----------
        sitemap : Sitemap
            Full site sitemap; only the requested section is normalized.
        slug : str or Sequence[str]
            Route slug whose first segment names the top-level section.

        Returns
        -------
        PageProps
            Rendered page with prev/next links, the section menu, and the
            app-wide props.

        Raises
        ------
        SitemapError
            If the first slug segment is not a top-level sitemap key.
        PageNotFoundError
            If the page or any page of its section has no backing file.
        """
        path = slug if isinstance(slug, str) else "/".join(slug)
        path = path.replace("\\", "/").strip("/")
        root = path.split("/", 1)[0]
        section = get_section(sitemap, root)

        page = self.loader.load_page(path)
        page = dc.replace(page, body=self.renderer(page.body or ""))

        menu = (
            MenuEntry(
                key=root,
                title=section.title,
                nested=normalize_section(self.loader, section, root),
            ),
        )
        page = link_prev_next(page, menu)
        return self.with_app_props(PageProps(page=page, menu=menu))

    def with_app_props(self, props: PageProps | None = None) -> PageProps:
        """Return ``props`` with the app-wide data attached."""
        props = props or PageProps()
        return dc.replace(props, app=AppProps(blog=self.get_last_blog()))

    def get_last_blog(self) -> PageRecord | None:
        """Return the newest page of the blog collection without its body."""
        pages = self.loader.date_ordered_pages(self.blog_root)
        if not pages:
            return None
        return dc.replace(pages[0], body=None)


__all__ = ["PropsAssembler", "Renderer"]
