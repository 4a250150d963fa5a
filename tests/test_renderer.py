"""Unit tests for the Markdown renderer."""

from __future__ import annotations

from bs4 import BeautifulSoup

from book_pages.content import HtmlContentRenderer


def _languages(html: str) -> list[str | None]:
    soup = BeautifulSoup(html, "html.parser")
    return [block.get("data-language") for block in soup.select("div.codehilite")]


def test_markdown_annotates_code_languages() -> None:
    """Highlighted blocks should expose their fence language."""
    renderer = HtmlContentRenderer()
    html = renderer(
        "# Title\n\n```rust\nfn main() {}\n```\n\n```\nplain\n```\n"
    )
    assert _languages(html) == ["rust", "text"]
    assert BeautifulSoup(html, "html.parser").find("h1") is not None


def test_markdown_labels_indented_block_before_fence() -> None:
    """Indented code reports ``text``; the following fence keeps its label."""
    html = HtmlContentRenderer()(
        "Intro.\n\n    plain indented\n\nThen:\n\n```rust\nlet x = 1;\n```\n"
    )
    assert _languages(html) == ["text", "rust"]


def test_markdown_labels_tilde_fences() -> None:
    """``~~~`` fences report their language like backtick fences."""
    html = HtmlContentRenderer()("~~~rust\nfn main() {}\n~~~\n")
    assert _languages(html) == ["rust"]


def test_markdown_strips_fence_attributes_and_indent() -> None:
    """``rust,no_run`` fences inside lists still highlight as rust."""
    renderer = HtmlContentRenderer("default")
    html = renderer.markdown("- item\n\n  ```rust,no_run\n  let x = 1;\n  ```\n")
    soup = BeautifulSoup(html, "html.parser")
    block = soup.select_one("div.codehilite")
    assert block is not None, "expected indented fence to render as code block"
    assert block.get("data-language") == "rust"


def test_markdown_blank_input_renders_empty() -> None:
    """Whitespace-only bodies produce no markup."""
    assert HtmlContentRenderer().markdown("  \n\n") == ""
