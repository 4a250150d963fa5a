"""Shared fixtures that build a small book content tree on disk.

The ``site_config_path`` fixture writes a ``site.yaml`` plus a content folder
under ``tmp_path`` mirroring a real tutorial layout: a section with an index
page, a list-style sub-section, a nested group, a plain page, an external
link, and a dated blog collection.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from book_pages.config import SiteConfig, load_site_config
from book_pages.content import PageLoader

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

SITE_YAML = dedent(
    """
    content_dir: content
    output_dir: public/data
    blog_root: blog
    sitemap:
      tokio:
        title: Tokio
        nested:
          tutorial:
            nested:
              - setup
              - hello-tokio
          topics:
            nested:
              bridging: {}
          glossary: {}
          api:
            title: API documentation
            href: https://docs.rs/tokio
      blog:
        title: Blog
    """
).lstrip()

PAGES: dict[str, tuple[str, str]] = {
    "tokio/index.md": ("title: Tokio\n", "Tokio home."),
    "tokio/tutorial/index.md": ("title: Tutorial\nmenu: Overview\n", "Intro."),
    "tokio/tutorial/setup.md": ("title: Setup\n", "```bash\ncargo new demo\n```"),
    "tokio/tutorial/hello-tokio.md": ("title: Hello Tokio\n", "Hello."),
    "tokio/topics/index.md": ("title: Topics\n", "Topics."),
    "tokio/topics/bridging.md": (
        "title: Bridging with sync code\nmenu: Bridging\n",
        "Bridging.",
    ),
    "tokio/glossary.md": ("title: Glossary\ndescription: Terms.\n", "Terms."),
    "blog.md": ("title: Blog\n", "Posts."),
    "blog/2023-01-01-new-year.md": ("title: New year\ndate: 2023-01-01\n", "A."),
    "blog/2024-06-15-release.md": ("title: Release\ndate: 2024-06-15\n", "B."),
    "blog/2022-12-31-review.md": ("title: Review\ndate: 2022-12-31\n", "C."),
}


def write_page(content_dir: Path, relative: str, front: str, body: str) -> Path:
    """Write a Markdown file with a YAML front matter block."""
    path = content_dir / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{front}---\n\n{body}\n", encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Populate ``tmp_path/content`` with the sample book pages."""
    root = tmp_path / "content"
    for relative, (front, body) in PAGES.items():
        write_page(root, relative, front, body)
    return root


@pytest.fixture
def site_config_path(tmp_path: Path, content_dir: Path) -> Path:
    """Write ``site.yaml`` next to the sample content folder."""
    path = tmp_path / "site.yaml"
    path.write_text(SITE_YAML, encoding="utf-8")
    return path


@pytest.fixture
def site_config(site_config_path: Path) -> SiteConfig:
    """Return the parsed sample site configuration."""
    return load_site_config(site_config_path)


@pytest.fixture
def loader(content_dir: Path) -> PageLoader:
    """Return a page loader rooted at the sample content folder."""
    return PageLoader(content_dir)


@pytest.fixture
def add_page(content_dir: Path) -> cabc.Callable[[str, str, str], Path]:
    """Return a helper that writes an extra page into the sample content."""

    def _add(relative: str, front: str, body: str) -> Path:
        return write_page(content_dir, relative, front, body)

    return _add
