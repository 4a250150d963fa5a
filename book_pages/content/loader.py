"""Locate Markdown pages under the content root and parse their front matter.

:class:`PageLoader` is constructed with the content root and resolves
logical page paths (``tutorial/hello-world``, ``/tutorial/hello-world`` or a
path that already includes the content root) to ``<path>.md`` or
``<path>/index.md``. Each hit becomes an immutable
:class:`~book_pages.content.models.PageRecord`.

Example
-------
>>> from pathlib import Path
>>> loader = PageLoader(Path("content"))  # doctest: +SKIP
>>> loader.load_page("tutorial/hello-world").href  # doctest: +SKIP
'/tutorial/hello-world'
"""

from __future__ import annotations

import datetime as dt
import logging
import os
from pathlib import Path

import frontmatter
from dateutil import parser as date_parser

from book_pages._constants import INDEX_FILENAME, MARKDOWN_SUFFIX

from .models import MenuPage, PageNotFoundError, PageRecord

logger = logging.getLogger(__name__)


class PageLoader:
    """Resolve and parse Markdown pages relative to a content root."""

    def __init__(self, content_dir: Path) -> None:
        """Initialize the loader.

        Parameters
        ----------
        content_dir : Path
            Directory containing the site's Markdown content. Relative values
            are kept as given and also matched in resolved form when stripping
            prefixes from requested paths.
        """
        self.content_dir = Path(content_dir)

    def relative_path(self, path: str | os.PathLike[str]) -> str:
        """Return ``path`` as a forward-slash path relative to the content root.

        Absolute paths inside the content root and paths that start with the
        configured content root lose that prefix; leading slashes and a
        leading ``./`` are stripped. Back-slashes count as separators.
        """
        text = os.fspath(path).replace("\\", "/")
        for prefix in self._root_prefixes():
            if text == prefix:
                text = ""
                break
            if text.startswith(f"{prefix}/"):
                text = text[len(prefix) + 1 :]
                break
        if text.startswith("./"):
            text = text[2:]
        return text.strip("/")

    def _root_prefixes(self) -> list[str]:
        """Return the content root spellings recognized as path prefixes."""
        prefixes = [self.content_dir.resolve().as_posix()]
        configured = self.content_dir.as_posix()
        if configured not in prefixes and configured != ".":
            prefixes.append(configured)
        return prefixes

    def resolve(self, relative: str) -> tuple[Path, str]:
        """Return the backing file and its content-relative path.

        Raises
        ------
        PageNotFoundError
            If neither ``<relative>.md`` nor ``<relative>/index.md`` exists.
        """
        base = self.content_dir / relative if relative else self.content_dir
        direct = Path(f"{base}{MARKDOWN_SUFFIX}")
        index = base / INDEX_FILENAME
        if relative and direct.is_file():
            return direct, f"{relative}{MARKDOWN_SUFFIX}"
        if index.is_file():
            md_path = f"{relative}/{INDEX_FILENAME}" if relative else INDEX_FILENAME
            return index, md_path
        raise PageNotFoundError((direct.as_posix(), index.as_posix()))

    def load_page(self, path: str | os.PathLike[str]) -> PageRecord:
        """Load the page at ``path``.

        Parameters
        ----------
        path : str or PathLike
            Logical content path, optionally absolute or prefixed with the
            content root.

        Returns
        -------
        PageRecord
            Parsed page with raw Markdown ``body`` and no prev/next links.

        Raises
        ------
        PageNotFoundError
            If no backing Markdown file exists; both candidates are named.
        yaml.YAMLError
            If the front matter block is malformed.
        """
        relative = self.relative_path(path)
        file_path, md_path = self.resolve(relative)
        logger.debug("loading %s from %s", relative or "/", file_path)
        post = frontmatter.loads(file_path.read_text(encoding="utf-8"))
        data = dict(post.metadata)
        title = data.get("title")
        return PageRecord(
            key=relative.rsplit("/", 1)[-1],
            href=f"/{relative}",
            title=title,
            menu_title=data.get("menu") or title,
            md_path=md_path,
            data=data,
            body=post.content,
            description=data.get("description") or None,
        )

    def load_menu_page(self, path: str) -> MenuPage:
        """Load the front matter summary of ``path`` used in menu trees."""
        page = self.load_page(path)
        return MenuPage(
            key=page.key, href=page.href, title=page.menu_title, data=page.data
        )

    def date_ordered_pages(self, root: str) -> list[PageRecord]:
        """Return the pages directly under ``root`` ordered newest first.

        Files are enumerated in name order; pages sharing a date keep that
        order. Pages whose ``date`` is missing or unparseable come last, and
        the collection's own ``index.md`` is not part of it.

        Examples
        --------
        >>> [p.key for p in loader.date_ordered_pages("blog")]  # doctest: +SKIP
        ['2024-06-15-release', '2023-01-01-hello', '2022-12-31-eoy']
        """
        root = self.relative_path(root)
        folder = self.content_dir / root
        pages = [
            self.load_page(f"{root}/{entry.stem}" if root else entry.stem)
            for entry in sorted(folder.glob(f"*{MARKDOWN_SUFFIX}"))
            if entry.name != INDEX_FILENAME
        ]
        return sorted(pages, key=_date_sort_key)


def _date_sort_key(page: PageRecord) -> tuple[int, float]:
    """Sort dated pages first, newest to oldest."""
    parsed = parse_page_date(page.data.get("date"))
    if parsed is None:
        return (1, 0.0)
    return (0, -parsed.timestamp())


def parse_page_date(value: object) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from a front matter date."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime.combine(value, dt.time.min)
        case str() as text:
            parsed = _parse_date_text(text.strip())
            if parsed is None:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


def _parse_date_text(text: str) -> dt.datetime | None:
    """Parse ISO 8601 first, then free-form dates such as ``June 15, 2024``."""
    if not text:
        return None
    try:
        return date_parser.isoparse(text)
    except (ValueError, OverflowError):
        pass
    try:
        return date_parser.parse(text)
    except (ValueError, OverflowError):
        return None


__all__ = ["PageLoader", "parse_page_date"]
