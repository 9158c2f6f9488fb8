"""Content conversion for htmlreader (parsing, extraction, Markdown, text)."""

from .extractor import MainContentExtractor, ReadabilityExtractor
from .markdown import (
    HtmlToMarkdown,
    MarkdownToText,
    RenderedMarkdown,
    html_to_markdown,
    markdown_to_text,
)
from .parser import SoupDocumentParser
from .protocols import ContentExtractor, DocumentParser
from .text import decode_entities, normalize_whitespace, strip_tags, truncate_text

__all__ = [
    # Protocols
    "ContentExtractor",
    "DocumentParser",
    # Implementations
    "SoupDocumentParser",
    "MainContentExtractor",
    "ReadabilityExtractor",
    "HtmlToMarkdown",
    "MarkdownToText",
    "RenderedMarkdown",
    # Functions
    "decode_entities",
    "strip_tags",
    "normalize_whitespace",
    "truncate_text",
    "html_to_markdown",
    "markdown_to_text",
]
