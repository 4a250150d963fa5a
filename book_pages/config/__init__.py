"""Load and validate the site configuration for book content builds.

This subpackage parses the project's ``site.yaml`` file, resolves the content
root and export directory, and turns the nested sitemap description into
tagged dataclasses (:class:`ExternalLink`, :class:`Page`,
:class:`PageWithChildren`, :class:`PageGroup`) that the content pipeline
walks. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from book_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.get_section("tokio").title  # doctest: +SKIP
'Tutorial'
"""

from .helpers import parse_sitemap
from .loader import load_site_config
from .models import (
    ExternalLink,
    Page,
    PageGroup,
    PageWithChildren,
    SiteConfig,
    Sitemap,
    SitemapError,
    SitemapNode,
    get_section,
)

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
    "load_site_config",
    "parse_sitemap",
]
