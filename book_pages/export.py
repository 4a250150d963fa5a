"""Write page props and the static path manifest as JSON files.

This module walks every route enumerated from the sitemap, assembles its
props with :class:`~book_pages.content.PropsAssembler`, and persists one JSON
document per route under the configured output directory together with a
``paths.json`` manifest. A page-rendering layer reads these files at build
time instead of importing the pipeline.

Typical usage pairs the loader with a site config:

>>> from pathlib import Path
>>> from book_pages.config import load_site_config
>>> from book_pages.export import StaticPropsExporter
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> written = StaticPropsExporter(site).run()  # doctest: +SKIP
>>> written[0].name  # doctest: +SKIP
'paths.json'

Any missing content file aborts the export; files written before the failure
are left in place.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

import msgspec.json

from ._constants import PATHS_MANIFEST, PROPS_FILE_TEMPLATE
from .content import PropsAssembler, get_menu_paths

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig

logger = logging.getLogger(__name__)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_wire(value: object) -> typ.Any:
    """Convert pipeline records into the JSON shape page renderers read.

    Dataclass field names become camelCase (``menu_title`` -> ``menuTitle``)
    and fields set to ``None`` are left out. Records with a ``to_payload``
    method supply their own shape. Front matter mappings keep their keys.

    Examples
    --------
    >>> from book_pages.content import NavLink, RoutePath
    >>> to_wire(RoutePath(slug=("tokio", "tutorial")))
    {'params': {'slug': ['tokio', 'tutorial']}}
    >>> to_wire(NavLink(title=None, href="/tokio"))
    {'href': '/tokio'}
    """
    to_payload = getattr(value, "to_payload", None)
    if callable(to_payload):
        return to_wire(to_payload())
    if dc.is_dataclass(value) and not isinstance(value, type):
        return {
            _camel(field.name): to_wire(item)
            for field in dc.fields(value)
            if (item := getattr(value, field.name)) is not None
        }
    if isinstance(value, dict):
        return {key: to_wire(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [to_wire(item) for item in value]
    return value


def encode_json(payload: object) -> bytes:
    """Encode ``payload`` in wire shape as indented UTF-8 JSON plus newline."""
    encoded = msgspec.json.encode(to_wire(payload))
    return msgspec.json.format(encoded, indent=2) + b"\n"


class StaticPropsExporter:
    """Render the props of every sitemap route into JSON files."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        output_dir: Path | None = None,
        assembler: PropsAssembler | None = None,
    ) -> None:
        """Initialize the exporter.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed configuration providing the sitemap and content root.
        output_dir : Path, optional
            Override for ``site_config.output_dir``.
        assembler : PropsAssembler, optional
            Pre-built assembler; defaults to one wired from ``site_config``.
        """
        self.site_config = site_config
        self.output_dir = output_dir or site_config.output_dir
        self.assembler = assembler or PropsAssembler.from_config(site_config)

    def run(self) -> list[Path]:
        """Write the path manifest followed by one props file per route.

        Returns
        -------
        list[Path]
            Written files, manifest first, then routes in sitemap order.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        menu_paths = get_menu_paths(self.site_config.sitemap)
        manifest = self.output_dir / PATHS_MANIFEST
        manifest.write_bytes(encode_json(menu_paths))
        written = [manifest]

        for route in menu_paths.paths:
            props = self.assembler.get_props(self.site_config.sitemap, route.slug)
            target = self.output_dir / PROPS_FILE_TEMPLATE.format(
                slug="/".join(route.slug)
            )
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(encode_json(props.to_payload()))
            logger.debug("exported %s", target)
            written.append(target)
        return written


__all__ = ["StaticPropsExporter", "encode_json", "to_wire"]
