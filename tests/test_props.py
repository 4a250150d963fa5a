"""Tests for page props assembly and app-wide props."""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from book_pages.config import SitemapError
from book_pages.content import (
    AppProps,
    NavLink,
    PageLoader,
    PageNotFoundError,
    PageProps,
    PropsAssembler,
)

if typ.TYPE_CHECKING:
    from book_pages.config import SiteConfig


@pytest.fixture
def assembler(site_config: SiteConfig) -> PropsAssembler:
    """Return an assembler wired from the sample site configuration."""
    return PropsAssembler.from_config(site_config)


def test_get_props_renders_body_and_links_neighbours(
    assembler: PropsAssembler, site_config: SiteConfig
) -> None:
    """The requested page should be rendered and linked in reading order."""
    props = assembler.get_props(site_config.sitemap, ["tokio", "tutorial", "setup"])
    page = props.page
    assert page is not None
    assert page.href == "/tokio/tutorial/setup"
    assert page.prev == NavLink(title="Overview", href="/tokio/tutorial")
    assert page.next == NavLink(title="Hello Tokio", href="/tokio/tutorial/hello-tokio")
    soup = BeautifulSoup(page.body or "", "html.parser")
    block = soup.select_one("div.codehilite")
    assert block is not None, "expected highlighted code block in rendered body"
    assert block.get("data-language") == "bash"


def test_get_props_accepts_joined_slug(
    assembler: PropsAssembler, site_config: SiteConfig
) -> None:
    """String slugs should behave like segment lists."""
    joined = assembler.get_props(site_config.sitemap, "tokio/glossary")
    split = assembler.get_props(site_config.sitemap, ("tokio", "glossary"))
    assert joined == split
    assert joined.page is not None
    assert joined.page.prev == NavLink(title="Bridging", href="/tokio/topics/bridging")
    assert joined.page.next is None, "external links never become next targets"


def test_get_props_builds_section_menu(
    assembler: PropsAssembler, site_config: SiteConfig
) -> None:
    """Only the requested section is normalized, under a titled root entry."""
    props = assembler.get_props(site_config.sitemap, ["tokio", "topics", "bridging"])
    (root,) = props.menu
    assert root.key == "tokio"
    assert root.title == "Tokio"
    assert root.page is None
    assert [entry.page.key for entry in root.nested or () if entry.page] == [
        "tutorial",
        "topics",
        "glossary",
        "api",
    ]


def test_get_props_section_root_has_no_neighbours(
    assembler: PropsAssembler, site_config: SiteConfig
) -> None:
    """The section landing page is not part of its own menu traversal."""
    props = assembler.get_props(site_config.sitemap, ["tokio"])
    assert props.page is not None
    assert props.page.prev is None
    assert props.page.next is None


def test_get_props_attaches_latest_blog_without_body(
    assembler: PropsAssembler, site_config: SiteConfig
) -> None:
    """App props carry the newest blog entry with its body stripped."""
    props = assembler.get_props(site_config.sitemap, ["blog"])
    assert props.app is not None
    blog = props.app.blog
    assert blog is not None
    assert blog.key == "2024-06-15-release"
    assert blog.body is None


def test_get_props_rejects_unknown_section(
    assembler: PropsAssembler, site_config: SiteConfig
) -> None:
    """A slug outside the sitemap cannot be assembled."""
    with pytest.raises(SitemapError):
        assembler.get_props(site_config.sitemap, ["guides", "intro"])


def test_get_props_propagates_missing_page(
    assembler: PropsAssembler, site_config: SiteConfig
) -> None:
    """Loader failures abort props assembly."""
    with pytest.raises(PageNotFoundError):
        assembler.get_props(site_config.sitemap, ["tokio", "nowhere"])


def test_custom_renderer_is_used(site_config: SiteConfig, loader: PageLoader) -> None:
    """Any markdown-to-markup callable can stand in for the default renderer."""
    assembler = PropsAssembler(loader, renderer=lambda text: f"<p>{text.upper()}</p>")
    props = assembler.get_props(site_config.sitemap, ["tokio", "glossary"])
    assert props.page is not None
    assert props.page.body == "<p>TERMS.</p>"


def test_with_app_props_on_empty_props(loader: PageLoader) -> None:
    """Pages outside the sitemap can still receive app-wide props."""
    props = PropsAssembler(loader).with_app_props()
    assert props.page is None
    assert props.app is not None
    assert props.app.blog is not None
    assert props.to_payload() == {"props": {"app": props.app}}


def test_get_last_blog_handles_empty_collection(loader: PageLoader) -> None:
    """No dated pages means no blog entry in app props."""
    assembler = PropsAssembler(loader, blog_root="news")
    assert assembler.get_last_blog() is None
    assert assembler.with_app_props(PageProps()).app == AppProps(blog=None)
