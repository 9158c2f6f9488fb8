"""HTML to lightweight Markdown, and Markdown back down to plain text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .text import normalize_whitespace, strip_tags

_TITLE_PATTERN = re.compile(r"<title\b[^>]*>(.*?)</title\s*>", re.IGNORECASE | re.DOTALL)
_NON_CONTENT_PATTERNS = [
    re.compile(rf"<{tag}\b.*?</{tag}\s*>", re.IGNORECASE | re.DOTALL)
    for tag in ("script", "style", "noscript")
]
_ANCHOR_PATTERN = re.compile(
    r"""<a\s+[^>]*href=["']([^"']+)["'][^>]*>(.*?)</a\s*>""",
    re.IGNORECASE | re.DOTALL,
)
# Backreference keeps <h2>...</h3> from being converted
_HEADING_PATTERN = re.compile(r"<h([1-6])\b[^>]*>(.*?)</h\1\s*>", re.IGNORECASE | re.DOTALL)
_LIST_ITEM_PATTERN = re.compile(r"<li\b[^>]*>(.*?)</li\s*>", re.IGNORECASE | re.DOTALL)
_LINE_BREAK_PATTERN = re.compile(r"<(?:br|hr)\s*/?>", re.IGNORECASE)
_BLOCK_CLOSE_PATTERN = re.compile(
    r"</(?:p|div|section|article|header|footer|table|tr|ul|ol)\s*>",
    re.IGNORECASE,
)

_IMAGE_SYNTAX = re.compile(r"!\[[^\]]*\]\([^)]+\)")
_LINK_SYNTAX = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_FENCED_BLOCK = re.compile(r"```.*?```", re.DOTALL)
_OPENING_FENCE = re.compile(r"```[^\n]*\n?")
_INLINE_CODE = re.compile(r"`([^`]+)`")
_HEADING_MARKER = re.compile(r"^#{1,6}[ \t]+", re.MULTILINE)
_BULLET_MARKER = re.compile(r"^[ \t]*[-*+][ \t]+", re.MULTILINE)
_ORDERED_MARKER = re.compile(r"^[ \t]*\d+\.[ \t]+", re.MULTILINE)


@dataclass(frozen=True)
class RenderedMarkdown:
    """Markdown text plus the title found in the source HTML, if any."""

    text: str
    title: Optional[str] = None


def _inline_text(fragment: str) -> str:
    return normalize_whitespace(strip_tags(fragment))


def _render_anchor(match: re.Match[str]) -> str:
    href = match.group(1)
    label = _inline_text(match.group(2))
    if not label:
        return href
    return f"[{label}]({href})"


def _render_heading(match: re.Match[str]) -> str:
    level = max(1, min(6, int(match.group(1))))
    return f"\n{'#' * level} {_inline_text(match.group(2))}\n"


def _render_list_item(match: re.Match[str]) -> str:
    label = _inline_text(match.group(1))
    return f"\n- {label}" if label else ""


def html_to_markdown(html: str) -> RenderedMarkdown:
    """
    Render an HTML fragment as lightweight Markdown.

    Rewrites run in order, each on the output of the previous one: title
    lookup, removal of script/style/noscript, links, headings, list items,
    br/hr, block closers, then a generic tag strip and whitespace
    normalization. Structural rewrites have to happen before the tag strip,
    which would otherwise discard them.

    Args:
        html: Main-content HTML (or a whole document when a title is wanted)

    Returns:
        RenderedMarkdown with normalized text and optional title
    """
    title_match = _TITLE_PATTERN.search(html)
    title = _inline_text(title_match.group(1)) if title_match else None

    text = html
    for pattern in _NON_CONTENT_PATTERNS:
        text = pattern.sub("", text)

    text = _ANCHOR_PATTERN.sub(_render_anchor, text)
    text = _HEADING_PATTERN.sub(_render_heading, text)
    text = _LIST_ITEM_PATTERN.sub(_render_list_item, text)
    text = _LINE_BREAK_PATTERN.sub("\n", text)
    text = _BLOCK_CLOSE_PATTERN.sub("\n", text)
    text = normalize_whitespace(strip_tags(text))

    return RenderedMarkdown(text=text, title=title or None)


def _unfence(match: re.Match[str]) -> str:
    block = _OPENING_FENCE.sub("", match.group(0))
    return block.replace("```", "")


def markdown_to_text(markdown: str) -> str:
    """
    Strip Markdown syntax down to plain text.

    Images are dropped, links keep their label, code fences and inline
    code keep their content, and heading, bullet and ordered-list markers
    are removed at the start of a line only.
    """
    text = _IMAGE_SYNTAX.sub("", markdown)
    text = _LINK_SYNTAX.sub(r"\1", text)
    text = _FENCED_BLOCK.sub(_unfence, text)
    text = _INLINE_CODE.sub(r"\1", text)
    text = _HEADING_MARKER.sub("", text)
    text = _BULLET_MARKER.sub("", text)
    text = _ORDERED_MARKER.sub("", text)
    return normalize_whitespace(text)


class HtmlToMarkdown:
    """
    Converts main-content HTML to Markdown.

    Example:
        converter = HtmlToMarkdown()
        rendered = converter.convert("<h1>Title</h1><p>Body</p>")
    """

    def convert(self, html: str) -> RenderedMarkdown:
        return html_to_markdown(html)


class MarkdownToText:
    """Downgrades Markdown to plain text."""

    def convert(self, markdown: str) -> str:
        return markdown_to_text(markdown)
