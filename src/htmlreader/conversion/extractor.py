"""Main content extraction from parsed HTML documents."""

import logging
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from ..models.document import ParsedDocument
from ..models.results import ExtractedContent

logger = logging.getLogger(__name__)

# Elements that typically contain main content
CONTENT_SELECTORS = [
    "article",
    "main",
    '[role="main"]',
    ".content",
    ".main-content",
    ".post-content",
    ".article-content",
    ".entry-content",
    ".documentation",
    "#content",
    "#main-content",
]

# Elements to remove (navigation, ads, etc.)
REMOVE_SELECTORS = [
    "head",
    "nav",
    "aside",
    "body > header",
    "body > footer",
    ".site-header",
    ".site-footer",
    ".nav",
    ".navbar",
    ".sidebar",
    ".menu",
    ".advertisement",
    ".ads",
    ".social-share",
    ".comments",
    ".related-posts",
    '[role="navigation"]',
    '[role="banner"]',
    '[role="contentinfo"]',
    '[aria-hidden="true"]',
    "script",
    "style",
    "noscript",
    "iframe",
    "svg",
    "form",
]

KEEP_ATTRIBUTES = {"href", "src", "alt", "title"}

NO_TITLE = "[no-title]"


def _document_title(soup: BeautifulSoup) -> Optional[str]:
    """Title from <title>, falling back to og:title."""
    title_tag = soup.find("title")
    if isinstance(title_tag, Tag):
        title = title_tag.get_text(" ", strip=True)
        if title:
            return title

    og_title = soup.find("meta", attrs={"property": "og:title"})
    if isinstance(og_title, Tag):
        content = og_title.get("content")
        if isinstance(content, str) and content.strip():
            return content.strip()

    return None


def _visible_length(element: Tag) -> int:
    return len(element.get_text(strip=True))


class MainContentExtractor:
    """
    Heuristic main content extractor.

    Looks for the first well-known content container (``article``,
    ``main``, ...) holding enough text, falling back to ``<body>``. The
    chosen region is copied, stripped of navigation and other boilerplate,
    and its links are made absolute.

    Example:
        extractor = MainContentExtractor(char_threshold=200)
        content = extractor.extract(SoupDocumentParser().parse(html, url))
    """

    def __init__(
        self,
        char_threshold: int = 0,
        content_selectors: Optional[list[str]] = None,
        remove_selectors: Optional[list[str]] = None,
    ):
        """
        Initialize the content extractor.

        Args:
            char_threshold: Minimum visible characters for a region to qualify
            content_selectors: CSS selectors for main content (overrides defaults)
            remove_selectors: CSS selectors for elements to remove (extends defaults)
        """
        self._char_threshold = char_threshold
        self._content_selectors = content_selectors or CONTENT_SELECTORS
        self._remove_selectors = list(REMOVE_SELECTORS)
        if remove_selectors:
            self._remove_selectors.extend(remove_selectors)

    def _candidates(self, soup: BeautifulSoup) -> list[Tag]:
        candidates = []
        for selector in self._content_selectors:
            element = soup.select_one(selector)
            if isinstance(element, Tag):
                candidates.append(element)

        body = soup.find("body")
        candidates.append(body if isinstance(body, Tag) else soup)
        return candidates

    def _remove_unwanted(self, element: BeautifulSoup) -> None:
        """Remove navigation, ads, and other unwanted elements."""
        for selector in self._remove_selectors:
            for el in element.select(selector):
                el.decompose()

    def _clean_attributes(self, element: BeautifulSoup) -> None:
        """Drop presentational attributes, keeping links and alt text."""
        for tag in element.find_all(True):
            attrs_to_remove = [attr for attr in tag.attrs if attr not in KEEP_ATTRIBUTES]
            for attr in attrs_to_remove:
                del tag[attr]

    def _resolve_links(self, element: BeautifulSoup, base_url: str) -> None:
        """Convert relative URLs to absolute URLs."""
        for tag in element.find_all("a", href=True):
            href = tag["href"]
            if href.startswith("#"):
                continue  # Keep anchor links
            if not href.startswith(("http://", "https://", "//", "mailto:", "tel:")):
                tag["href"] = urljoin(base_url, href)

        for tag in element.find_all(src=True):
            src = tag["src"]
            if not src.startswith(("http://", "https://", "//", "data:")):
                tag["src"] = urljoin(base_url, src)

    def _prepare(self, element: Tag, base_url: Optional[str]) -> BeautifulSoup:
        # Work on a copy so the parsed document is left intact
        region = BeautifulSoup(str(element), "html.parser")
        self._remove_unwanted(region)
        self._clean_attributes(region)
        if base_url:
            self._resolve_links(region, base_url)
        return region

    def extract(self, document: ParsedDocument) -> Optional[ExtractedContent]:
        """
        Extract the main content region.

        Args:
            document: Parsed document

        Returns:
            ExtractedContent, or None if no region has enough text
        """
        minimum = max(1, self._char_threshold)

        for candidate in self._candidates(document.soup):
            region = self._prepare(candidate, document.base_url)
            if _visible_length(region) < minimum:
                continue
            return ExtractedContent(
                content=str(region).strip(),
                text_content=region.get_text(),
                title=_document_title(document.soup),
            )

        logger.debug(f"No main content found (base URL {document.base_url})")
        return None


class ReadabilityExtractor:
    """
    Main content extractor backed by readability-lxml.

    Requires the ``readability`` extra (``pip install htmlreader[readability]``).

    Example:
        extractor = ReadabilityExtractor()
        content = extractor.extract(SoupDocumentParser().parse(html, url))
    """

    def __init__(self, char_threshold: int = 0):
        from readability import Document

        self._document_class = Document
        self._char_threshold = char_threshold

    def extract(self, document: ParsedDocument) -> Optional[ExtractedContent]:
        """
        Extract the main content region.

        Args:
            document: Parsed document

        Returns:
            ExtractedContent, or None if the summary has too little text
        """
        readable = self._document_class(document.html, url=document.base_url)
        content = readable.summary(html_partial=True)
        region = BeautifulSoup(content, "html.parser")

        if _visible_length(region) < max(1, self._char_threshold):
            logger.debug(f"Readability summary too short (base URL {document.base_url})")
            return None

        title = readable.short_title()
        if not title or title == NO_TITLE:
            title = _document_title(document.soup)

        return ExtractedContent(
            content=content,
            text_content=region.get_text(),
            title=title,
        )
