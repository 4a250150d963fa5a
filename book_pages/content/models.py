"""Shared dataclasses used by the content pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class PageNotFoundError(FileNotFoundError):
    """Raised when neither ``<path>.md`` nor ``<path>/index.md`` exists."""

    def __init__(self, attempted: tuple[str, ...]) -> None:
        self.attempted = attempted
        tried = " and ".join(f"'{candidate}'" for candidate in attempted)
        super().__init__(f"ENOENT: no such file or directory, tried {tried}")


@dc.dataclass(frozen=True, slots=True)
class NavLink:
    """Previous/next navigation target."""

    title: str | None
    href: str


@dc.dataclass(frozen=True, slots=True)
class PageRecord:
    """A loaded Markdown page.

    Attributes
    ----------
    key : str
        Last segment of the page path.
    href : str
        Site-absolute URL path using forward slashes (``/tutorial/intro``).
    title : str or None
        Front matter ``title``.
    menu_title : str or None
        Front matter ``menu`` when present, otherwise ``title``.
    md_path : str
        Forward-slash path of the backing file relative to the content root.
    data : dict[str, Any]
        Complete front matter mapping.
    body : str or None
        Raw Markdown after loading, rendered HTML after props assembly, and
        ``None`` when stripped for app-wide props.
    description : str or None
        Front matter ``description``.
    prev, next : NavLink or None
        Neighbouring pages in menu order, attached by the prev/next linker.
    """

    key: str
    href: str
    title: str | None
    menu_title: str | None
    md_path: str
    data: dict[str, typ.Any]
    body: str | None
    description: str | None
    prev: NavLink | None = None
    next: NavLink | None = None

    def nav_link(self) -> NavLink:
        """Return a navigation link pointing at this page."""
        return NavLink(title=self.menu_title or self.title, href=self.href)


@dc.dataclass(frozen=True, slots=True)
class MenuPage:
    """Front matter summary of a page kept in the menu tree.

    ``title`` holds the menu label. ``data`` is ``None`` for external links,
    which never take part in prev/next traversal.
    """

    key: str
    href: str
    title: str | None
    data: dict[str, typ.Any] | None = None

    def nav_link(self) -> NavLink:
        """Return a navigation link pointing at this menu page."""
        return NavLink(title=self.title, href=self.href)


@dc.dataclass(frozen=True, slots=True)
class MenuEntry:
    """A node of the normalized menu tree.

    Section roots produced by the props assembler carry ``key`` and ``title``
    but no ``page``; every other entry wraps a :class:`MenuPage`.
    """

    page: MenuPage | None = None
    nested: tuple[MenuEntry, ...] | None = None
    key: str | None = None
    title: str | None = None


@dc.dataclass(frozen=True, slots=True)
class RoutePath:
    """Slug segments of one statically generated route."""

    slug: tuple[str, ...]

    def to_payload(self) -> dict[str, typ.Any]:
        """Return the ``{"params": {"slug": [...]}}`` route entry."""
        return {"params": {"slug": list(self.slug)}}


@dc.dataclass(frozen=True, slots=True)
class MenuPaths:
    """Static path enumeration; unlisted paths are never rendered on demand."""

    paths: tuple[RoutePath, ...]
    fallback: bool = False


@dc.dataclass(frozen=True, slots=True)
class AppProps:
    """Site-wide data attached to every page."""

    blog: PageRecord | None = None


@dc.dataclass(frozen=True, slots=True)
class PageProps:
    """Data handed to the page-rendering layer."""

    page: PageRecord | None = None
    menu: tuple[MenuEntry, ...] = ()
    app: AppProps | None = None

    def to_payload(self) -> dict[str, typ.Any]:
        """Return the ``{"props": {...}}`` envelope expected by renderers."""
        props: dict[str, typ.Any] = {}
        if self.page is not None:
            props["page"] = self.page
            props["menu"] = self.menu
        props["app"] = self.app or AppProps()
        return {"props": props}


__all__ = [
    "AppProps",
    "MenuEntry",
    "MenuPage",
    "MenuPaths",
    "NavLink",
    "PageNotFoundError",
    "PageProps",
    "PageRecord",
    "RoutePath",
]
