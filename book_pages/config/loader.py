"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from book_pages._constants import DEFAULT_BLOG_ROOT, DEFAULT_CONTENT_DIR

from .helpers import _optional_str, _resolve_path, parse_sitemap
from .models import SiteConfig


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the content tree and sitemap.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative ``content_dir`` and ``output_dir``
        values resolve against the file's parent directory.

    Returns
    -------
    SiteConfig
        Parsed configuration including the typed sitemap.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SitemapError
        If the sitemap is missing or malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from book_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> list(config.sitemap)  # doctest: +SKIP
    ['tokio', 'blog']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.parent

    content_dir = _resolve_path(raw.get("content_dir") or DEFAULT_CONTENT_DIR, base_dir)
    output_dir = _resolve_path(raw.get("output_dir") or "public/data", base_dir)
    blog_root = _optional_str(raw.get("blog_root")) or DEFAULT_BLOG_ROOT
    pygments_style = _optional_str(raw.get("pygments_style")) or "monokai"

    return SiteConfig(
        content_dir=content_dir,
        sitemap=parse_sitemap(raw.get("sitemap")),
        blog_root=blog_root.strip("/"),
        pygments_style=pygments_style,
        output_dir=output_dir,
    )


__all__ = ["load_site_config"]
