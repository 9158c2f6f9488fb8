"""Extraction orchestrator: parse, find main content, render."""

from __future__ import annotations

import asyncio
import logging
from importlib import import_module
from typing import Optional, Union

from pydantic import ValidationError

from ..conversion.markdown import html_to_markdown
from ..conversion.parser import SoupDocumentParser
from ..conversion.protocols import ContentExtractor, DocumentParser
from ..conversion.text import normalize_whitespace
from ..models.config import ExtractionRequest, ExtractMode, ReaderConfig
from ..models.results import (
    ExtractedContent,
    ExtractionOutcome,
    ExtractionResult,
    FailureReason,
)

logger = logging.getLogger(__name__)

# Extractor backends, imported on first use
EXTRACTORS = {
    "heuristic": "htmlreader.conversion.extractor:MainContentExtractor",
    "readability": "htmlreader.conversion.extractor:ReadabilityExtractor",
}


def _clean_title(title: Optional[str]) -> Optional[str]:
    if not title:
        return None
    return normalize_whitespace(title) or None


class ReadableContentReader:
    """
    Turns a fetched HTML document into readable Markdown or plain text.

    Every failure (parser error, extractor error, no main content) is
    reported as a failed ExtractionOutcome; ``read`` never raises.
    Collaborators are acquired per call, so a reader holds no state between
    documents and can be shared freely.

    Example:
        reader = ReadableContentReader(ReaderConfig(extractor="readability"))
        outcome = await reader.read(
            ExtractionRequest(html=html, url="https://example.com/post", mode="text")
        )
        if outcome.ok:
            print(outcome.result.text)
    """

    def __init__(
        self,
        config: Optional[ReaderConfig] = None,
        parser: Optional[DocumentParser] = None,
        extractor: Optional[ContentExtractor] = None,
    ):
        """
        Initialize the reader.

        Args:
            config: Reader configuration (defaults if None)
            parser: Document parser (BeautifulSoup parser if None)
            extractor: Content extractor (backend named in config if None)
        """
        self._config = config or ReaderConfig()
        self._parser = parser
        self._extractor = extractor

    def _load_collaborators(self) -> tuple[DocumentParser, ContentExtractor]:
        parser = self._parser or SoupDocumentParser()
        if self._extractor is not None:
            return parser, self._extractor

        module_name, _, class_name = EXTRACTORS[self._config.extractor].partition(":")
        extractor_class = getattr(import_module(module_name), class_name)
        return parser, extractor_class(char_threshold=self._config.char_threshold)

    def _render(self, extracted: ExtractedContent, mode: ExtractMode) -> ExtractionResult:
        title = _clean_title(extracted.title)

        if mode == ExtractMode.TEXT:
            return ExtractionResult(text=normalize_whitespace(extracted.text_content or ""), title=title)

        rendered = html_to_markdown(extracted.content)
        return ExtractionResult(text=rendered.text, title=title or rendered.title)

    async def read(self, request: ExtractionRequest) -> ExtractionOutcome:
        """
        Extract readable content from a document.

        Args:
            request: The document, its URL and the output mode

        Returns:
            ExtractionOutcome holding either the result or the failure reason
        """
        try:
            parser, extractor = await asyncio.to_thread(self._load_collaborators)
        except ImportError as e:
            logger.warning(f"Extractor backend {self._config.extractor!r} unavailable: {e}")
            return ExtractionOutcome.failure(FailureReason.DEPENDENCY_MISSING, str(e))
        except Exception as e:
            logger.warning(f"Could not set up extractor {self._config.extractor!r}: {e}")
            return ExtractionOutcome.failure(FailureReason.EXTRACT_ERROR, str(e))

        try:
            document = parser.parse(request.html, request.url)
        except Exception as e:
            logger.warning(f"Failed to parse {request.url}: {e}")
            return ExtractionOutcome.failure(FailureReason.PARSE_ERROR, str(e))

        try:
            extracted = extractor.extract(document)
        except Exception as e:
            logger.warning(f"Content extraction failed for {request.url}: {e}")
            return ExtractionOutcome.failure(FailureReason.EXTRACT_ERROR, str(e))

        if extracted is None or not extracted.content:
            logger.debug(f"No readable content in {request.url}")
            return ExtractionOutcome.failure(FailureReason.NO_CONTENT)

        try:
            result = self._render(extracted, request.mode)
        except Exception as e:
            logger.warning(f"Failed to render {request.url}: {e}")
            return ExtractionOutcome.failure(FailureReason.RENDER_ERROR, str(e))

        logger.debug(f"Extracted {len(result.text)} chars from {request.url} ({request.mode.value})")
        return ExtractionOutcome.success(result)


async def extract_readable_content(
    html: str,
    url: str,
    extract_mode: Union[ExtractMode, str] = ExtractMode.MARKDOWN,
    config: Optional[ReaderConfig] = None,
) -> Optional[ExtractionResult]:
    """
    Extract readable content, returning None on any failure.

    Args:
        html: Raw HTML of the document
        url: Source URL (base for relative links)
        extract_mode: "markdown" or "text"
        config: Optional reader configuration

    Returns:
        ExtractionResult, or None if nothing could be extracted
    """
    try:
        request = ExtractionRequest(html=html, url=url, mode=extract_mode)
    except ValidationError as e:
        logger.warning(f"Invalid extraction request for {url!r}: {e}")
        return None

    outcome = await ReadableContentReader(config).read(request)
    return outcome.result


def extract_blocking(
    html: str,
    url: str,
    extract_mode: Union[ExtractMode, str] = ExtractMode.MARKDOWN,
    config: Optional[ReaderConfig] = None,
) -> Optional[ExtractionResult]:
    """
    Blocking variant of extract_readable_content.

    WARNING: Do not call from within an existing event loop (e.g., Jupyter,
    asyncio-based frameworks). Await extract_readable_content instead.
    """
    return asyncio.run(extract_readable_content(html, url, extract_mode, config))
