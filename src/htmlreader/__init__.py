"""
htmlreader - Turn fetched HTML into readable Markdown or plain text.

Usage:
    from htmlreader import extract_readable_content, truncate_text

    result = await extract_readable_content(html, "https://example.com/post", "markdown")
    if result is not None:
        bounded = truncate_text(result.text, 20_000)
        print(result.title, bounded.text)
"""

__version__ = "0.1.0"

from .conversion import (
    HtmlToMarkdown,
    MainContentExtractor,
    MarkdownToText,
    ReadabilityExtractor,
    SoupDocumentParser,
    decode_entities,
    html_to_markdown,
    markdown_to_text,
    normalize_whitespace,
    strip_tags,
    truncate_text,
)
from .core import ReadableContentReader, extract_blocking, extract_readable_content
from .models import (
    ExtractedContent,
    ExtractionOutcome,
    ExtractionRequest,
    ExtractionResult,
    ExtractMode,
    FailureReason,
    ReaderConfig,
    TruncationResult,
)

__all__ = [
    "__version__",
    # Core
    "ReadableContentReader",
    "extract_readable_content",
    "extract_blocking",
    # Conversion
    "SoupDocumentParser",
    "MainContentExtractor",
    "ReadabilityExtractor",
    "HtmlToMarkdown",
    "MarkdownToText",
    "decode_entities",
    "strip_tags",
    "normalize_whitespace",
    "truncate_text",
    "html_to_markdown",
    "markdown_to_text",
    # Models
    "ExtractMode",
    "ExtractionRequest",
    "ReaderConfig",
    "ExtractedContent",
    "ExtractionOutcome",
    "ExtractionResult",
    "FailureReason",
    "TruncationResult",
]
