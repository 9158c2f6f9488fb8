"""Protocol definitions for the document parsing and extraction collaborators."""

from typing import Optional, Protocol

from ..models.document import ParsedDocument
from ..models.results import ExtractedContent


class DocumentParser(Protocol):
    """
    Protocol for turning an HTML string into a traversable document.

    Implementations raise on input they cannot parse. Failing to apply the
    base URL must not raise; relative-link resolution simply degrades.
    """

    def parse(self, html: str, base_url: str) -> ParsedDocument:
        """
        Parse HTML into a document.

        Args:
            html: Raw HTML string
            base_url: URL relative references resolve against

        Returns:
            The parsed document
        """
        ...


class ContentExtractor(Protocol):
    """
    Protocol for locating the main readable content of a document.

    Implementations should keep the primary article/documentation region
    and drop navigation, headers, footers, ads, etc.
    """

    def extract(self, document: ParsedDocument) -> Optional[ExtractedContent]:
        """
        Extract the main content region.

        Args:
            document: Parsed document

        Returns:
            The region's HTML, text and title, or None if nothing qualifies
        """
        ...
