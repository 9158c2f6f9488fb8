"""BeautifulSoup-backed document parser."""

import logging
from typing import Optional
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup, Tag

from ..models.document import ParsedDocument

logger = logging.getLogger(__name__)


class SoupDocumentParser:
    """
    Parses HTML strings with BeautifulSoup.

    The document's base URL is the request URL, adjusted by any
    ``<base href>`` the page declares. Working it out is best-effort: if the
    URL is unusable the document is returned with ``base_url=None``.

    Example:
        parser = SoupDocumentParser()
        document = parser.parse(html, "https://docs.example.com/page")
    """

    def __init__(self, features: str = "html.parser"):
        """
        Initialize the parser.

        Args:
            features: BeautifulSoup tree builder to use
        """
        self._features = features

    def _resolve_base_url(self, soup: BeautifulSoup, url: str) -> Optional[str]:
        """Combine the request URL with the page's own <base href>."""
        parsed = urlparse(url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"Not an absolute URL: {url!r}")

        base_tag = soup.find("base", href=True)
        if isinstance(base_tag, Tag):
            href = base_tag.get("href")
            if isinstance(href, str) and href.strip():
                return urljoin(url, href.strip())
        return url

    def parse(self, html: str, base_url: str) -> ParsedDocument:
        """
        Parse HTML into a document.

        Args:
            html: Raw HTML string
            base_url: Source URL of the document

        Returns:
            ParsedDocument wrapping the soup
        """
        soup = BeautifulSoup(html, self._features)
        document = ParsedDocument(soup=soup)

        try:
            document.base_url = self._resolve_base_url(soup, base_url)
        except ValueError as e:
            logger.debug(f"Ignoring unusable base URL {base_url!r}: {e}")

        return document
