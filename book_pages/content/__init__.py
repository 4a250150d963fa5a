"""Load Markdown content, build menus, and assemble page props."""

from .loader import PageLoader, parse_page_date
from .menu import (
    collect_paths,
    get_menu_paths,
    iter_pages,
    link_prev_next,
    normalize_section,
)
from .models import (
    AppProps,
    MenuEntry,
    MenuPage,
    MenuPaths,
    NavLink,
    PageNotFoundError,
    PageProps,
    PageRecord,
    RoutePath,
)
from .props import PropsAssembler
from .renderer import HtmlContentRenderer

__all__ = [
    "AppProps",
    "HtmlContentRenderer",
    "MenuEntry",
    "MenuPage",
    "MenuPaths",
    "NavLink",
    "PageLoader",
    "PageNotFoundError",
    "PageProps",
    "PageRecord",
    "PropsAssembler",
    "RoutePath",
    "collect_paths",
    "get_menu_paths",
    "iter_pages",
    "link_prev_next",
    "normalize_section",
    "parse_page_date",
]
