"""Render page Markdown into HTML with syntax-highlighted code blocks.

Fenced (backtick or tilde) and indented code blocks all pass through
Python-Markdown's ``codehilite`` extension. The Pygments formatter installed
here receives each block's resolved lexer name and writes it onto the
wrapping ``<div class="codehilite">`` as ``data-language``, so unlabelled and
indented blocks report ``text``.
"""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    import collections.abc as cabc

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
MARKDOWN_EXTENSIONS = ("fenced_code", "codehilite", "tables", "sane_lists", "toc")


class LanguageTaggedFormatter(HtmlFormatter):
    """Pygments HTML formatter that records the block language on its div."""

    def __init__(self, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.language = lang_str or "text"

    def _wrap_div(
        self, inner: cabc.Iterable[tuple[int, str]]
    ) -> cabc.Iterator[tuple[int, str]]:
        language = escape(self.language, quote=True)
        yield 0, f'<div class="{self.cssclass}" data-language="{language}">'
        yield from inner
        yield 0, "</div>\n"


class HtmlContentRenderer:
    """Render Markdown page bodies with consistent code styling.

    Instances are callable so they can be passed wherever a plain
    ``markdown -> html`` function is expected.
    """

    def __init__(self, pygments_style: str = "monokai") -> None:
        self.pygments_style = pygments_style

    def __call__(self, text: str) -> str:
        return self.markdown(text)

    def markdown(self, text: str) -> str:
        """Render ``text`` to HTML; blank input yields an empty string."""
        normalized = _normalize_fences(text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=list(MARKDOWN_EXTENSIONS),
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "lang_prefix": "",
                    "pygments_style": self.pygments_style,
                    "pygments_formatter": LanguageTaggedFormatter,
                }
            },
            output_format="html",
        )
        return md.convert(normalized)


def _normalize_fences(text: str) -> str:
    """Outdent list-nested fences and drop ``,attr`` suffixes (``rust,no_run``)."""
    without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

    def _strip_labels(match: re.Match[str]) -> str:
        fence, language, _extras = match.groups()
        return f"{fence}{language or ''}"

    return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["HtmlContentRenderer", "LanguageTaggedFormatter"]
