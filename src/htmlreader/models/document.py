"""Parsed document handed from the parser to content extractors."""

from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup


@dataclass
class ParsedDocument:
    """
    A parsed HTML document.

    Attributes:
        soup: The parsed tree
        base_url: Absolute URL relative references resolve against, or None
            when no usable base could be determined
    """

    soup: BeautifulSoup
    base_url: Optional[str] = None

    @property
    def html(self) -> str:
        return str(self.soup)
