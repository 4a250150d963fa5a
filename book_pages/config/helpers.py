"""Utility helpers shared by the book_pages configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import (
    ExternalLink,
    Page,
    PageGroup,
    PageWithChildren,
    Sitemap,
    SitemapError,
    SitemapNode,
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(value: str | Path, base_dir: Path) -> Path:
    """Resolve ``value`` against ``base_dir`` unless it is already absolute."""
    path = Path(value)
    if path.is_absolute():
        return path
    return base_dir / path


def _parse_children(key: str, nested: list[object]) -> tuple[str, ...]:
    """Validate a list of child keys declared under ``key``."""
    children: list[str] = []
    for child in nested:
        match child:
            case str() if child.strip():
                name = child.strip()
            case _:
                msg = f"Sitemap entry '{key}' lists a non-string child {child!r}."
                raise SitemapError(msg)
        if name in children:
            msg = f"Sitemap entry '{key}' lists child '{name}' more than once."
            raise SitemapError(msg)
        children.append(name)
    return tuple(children)


def _parse_node(key: str, payload: object) -> SitemapNode:
    """Build the sitemap variant for ``key`` from its raw mapping payload."""
    match payload:
        case None:
            return Page(key=key)
        case dict():
            pass
        case _:
            msg = f"Sitemap entry '{key}' must be a mapping, got {type(payload).__name__}."
            raise SitemapError(msg)

    title = _optional_str(payload.get("title"))
    href = payload.get("href")
    nested = payload.get("nested")
    if href is not None and nested is not None:
        msg = f"Sitemap entry '{key}' cannot declare both 'href' and 'nested'."
        raise SitemapError(msg)

    if href is not None:
        link = _optional_str(href) if isinstance(href, str) else None
        if not link:
            msg = f"Sitemap entry '{key}' has an empty or non-string 'href'."
            raise SitemapError(msg)
        return ExternalLink(key=key, href=link, title=title)

    match nested:
        case None:
            return Page(key=key, title=title)
        case list():
            return PageWithChildren(
                key=key, children=_parse_children(key, nested), title=title
            )
        case dict():
            return PageGroup(
                key=key, entries=tuple(_parse_level(nested).values()), title=title
            )
        case _:
            msg = f"Sitemap entry '{key}' has 'nested' that is neither a list nor a mapping."
            raise SitemapError(msg)


def _parse_level(level: typ.Mapping[object, object]) -> Sitemap:
    """Parse one mapping level, preserving declaration order."""
    nodes: Sitemap = {}
    for raw_key, payload in level.items():
        key = str(raw_key).strip()
        if not key:
            msg = "Sitemap keys must be non-empty strings."
            raise SitemapError(msg)
        nodes[key] = _parse_node(key, payload)
    return nodes


def parse_sitemap(raw: typ.Mapping[object, object] | None) -> Sitemap:
    """Build a typed sitemap from its raw nested mapping description.

    Parameters
    ----------
    raw : Mapping or None
        Mapping of section key to ``{href}``, ``{nested: [...]}``,
        ``{nested: {...}}`` or an empty mapping for a plain page.

    Returns
    -------
    Sitemap
        Ordered mapping of key to :data:`~book_pages.config.SitemapNode`.

    Raises
    ------
    SitemapError
        If the mapping is empty or any node is malformed.

    Examples
    --------
    >>> sitemap = parse_sitemap({"tutorial": {"nested": {"intro": {}}}})
    >>> sitemap["tutorial"].entries[0]
    Page(key='intro', title=None)
    """
    if not isinstance(raw, dict) or not raw:
        msg = "No sitemap sections defined in site configuration."
        raise SitemapError(msg)
    return _parse_level(raw)


__all__ = ["_optional_str", "_resolve_path", "parse_sitemap"]
