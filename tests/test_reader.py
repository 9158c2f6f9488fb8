"""Tests for the extraction orchestrator."""

import sys
from unittest.mock import MagicMock

import pytest
from htmlreader import (
    ExtractedContent,
    ExtractionRequest,
    ExtractMode,
    FailureReason,
    ReadableContentReader,
    ReaderConfig,
    extract_blocking,
    extract_readable_content,
)
from htmlreader.conversion import SoupDocumentParser

PAGE = """<!DOCTYPE html>
<html>
<head>
    <title>  Getting   Started  </title>
</head>
<body>
    <nav><a href="/">Home</a></nav>
    <main>
        <h1>Getting Started</h1>
        <p>Welcome to our <a href="/docs/install">installation guide</a>.</p>
        <ul>
            <li>Download</li>
            <li> </li>
            <li>Install</li>
        </ul>
    </main>
    <footer>Copyright 2024</footer>
</body>
</html>"""

URL = "https://docs.example.com/start"


def stub_extractor(content):
    extractor = MagicMock()
    extractor.extract.return_value = content
    return extractor


class TestExtractReadableContent:
    """Tests for extract_readable_content."""

    @pytest.mark.asyncio
    async def test_markdown_mode(self):
        """Test markdown extraction of a full page."""
        result = await extract_readable_content(PAGE, URL, "markdown")

        assert result is not None
        assert result.title == "Getting Started"
        assert result.text.startswith("# Getting Started")
        assert "[installation guide](https://docs.example.com/docs/install)" in result.text
        assert "- Download" in result.text
        assert "- Install" in result.text
        assert all(line.strip() != "-" for line in result.text.split("\n"))
        assert "Home" not in result.text
        assert "Copyright" not in result.text

    @pytest.mark.asyncio
    async def test_text_mode(self):
        """Test plain text extraction of a full page."""
        result = await extract_readable_content(PAGE, URL, ExtractMode.TEXT)

        assert result is not None
        assert result.title == "Getting Started"
        assert "Welcome to our installation guide." in result.text
        assert "#" not in result.text
        assert "](" not in result.text
        assert "\n\n\n" not in result.text
        assert "  " not in result.text

    @pytest.mark.asyncio
    async def test_no_main_content(self):
        """Test that a page with nothing readable yields None."""
        assert await extract_readable_content("<html><body></body></html>", URL) is None
        assert await extract_readable_content("", URL) is None

    @pytest.mark.asyncio
    async def test_invalid_mode(self):
        """Test that an unknown mode yields None instead of raising."""
        assert await extract_readable_content(PAGE, URL, "pdf") is None

    @pytest.mark.asyncio
    async def test_unusable_url_still_extracts(self):
        """Test that a bad base URL only degrades link resolution."""
        result = await extract_readable_content(PAGE, "not a url")

        assert result is not None
        assert "[installation guide](/docs/install)" in result.text

    @pytest.mark.asyncio
    async def test_deterministic(self):
        """Test identical input gives identical output."""
        first = await extract_readable_content(PAGE, URL)
        second = await extract_readable_content(PAGE, URL)
        assert first == second

    def test_blocking(self):
        """Test the blocking wrapper."""
        result = extract_blocking(PAGE, URL, "text")

        assert result is not None
        assert result.title == "Getting Started"


class TestReadableContentReader:
    """Tests for ReadableContentReader outcomes."""

    @pytest.mark.asyncio
    async def test_parser_failure(self):
        """Test that a parser error becomes a failed outcome."""
        parser = MagicMock()
        parser.parse.side_effect = RuntimeError("boom")
        reader = ReadableContentReader(parser=parser)

        outcome = await reader.read(ExtractionRequest(html=PAGE, url=URL))

        assert not outcome.ok
        assert outcome.result is None
        assert outcome.reason == FailureReason.PARSE_ERROR
        assert outcome.error == "boom"

    @pytest.mark.asyncio
    async def test_extractor_failure(self):
        """Test that an extractor error becomes a failed outcome."""
        extractor = MagicMock()
        extractor.extract.side_effect = ValueError("bad tree")
        reader = ReadableContentReader(extractor=extractor)

        outcome = await reader.read(ExtractionRequest(html=PAGE, url=URL))

        assert outcome.reason == FailureReason.EXTRACT_ERROR
        assert outcome.error == "bad tree"

    @pytest.mark.asyncio
    async def test_empty_content(self):
        """Test that an empty extraction is reported as no content."""
        reader = ReadableContentReader(extractor=stub_extractor(ExtractedContent(content="", text_content="x")))

        outcome = await reader.read(ExtractionRequest(html=PAGE, url=URL))

        assert outcome.reason == FailureReason.NO_CONTENT
        assert outcome.error is None

    @pytest.mark.asyncio
    async def test_collaborator_title_preferred(self):
        """Test the extractor's title wins over the rendered one."""
        content = ExtractedContent(content="<title>Inner</title><p>Body</p>", text_content="Body", title="Outer")
        reader = ReadableContentReader(extractor=stub_extractor(content))

        outcome = await reader.read(ExtractionRequest(html=PAGE, url=URL))

        assert outcome.ok
        assert outcome.result.title == "Outer"

    @pytest.mark.asyncio
    async def test_rendered_title_fallback(self):
        """Test the rendered title is used when the extractor has none."""
        content = ExtractedContent(content="<title>Inner</title><p>Body</p>", text_content="Body", title="   ")
        reader = ReadableContentReader(extractor=stub_extractor(content))

        outcome = await reader.read(ExtractionRequest(html=PAGE, url=URL))

        assert outcome.result.title == "Inner"

    @pytest.mark.asyncio
    async def test_text_mode_uses_text_content(self):
        """Test text mode normalizes the extractor's plain text."""
        content = ExtractedContent(
            content="<p>ignored</p>",
            text_content="  Line one  \r\n\n\n\nLine   two ",
            title="  Spaced   Title ",
        )
        reader = ReadableContentReader(extractor=stub_extractor(content))

        outcome = await reader.read(ExtractionRequest(html=PAGE, url=URL, mode="text"))

        assert outcome.result.text == "Line one\n\nLine two"
        assert outcome.result.title == "Spaced Title"

    @pytest.mark.asyncio
    async def test_text_mode_without_title(self):
        """Test that a missing title stays absent."""
        content = ExtractedContent(content="<p>x</p>", text_content="x")
        reader = ReadableContentReader(extractor=stub_extractor(content))

        outcome = await reader.read(ExtractionRequest(html=PAGE, url=URL, mode=ExtractMode.TEXT))

        assert outcome.result.title is None

    @pytest.mark.asyncio
    async def test_passes_base_url_to_extractor(self):
        """Test the parsed document carries the request URL."""
        extractor = stub_extractor(None)
        reader = ReadableContentReader(parser=SoupDocumentParser(), extractor=extractor)

        await reader.read(ExtractionRequest(html=PAGE, url=URL))

        document = extractor.extract.call_args.args[0]
        assert document.base_url == URL

    @pytest.mark.asyncio
    async def test_char_threshold_from_config(self):
        """Test the configured threshold reaches the default extractor."""
        reader = ReadableContentReader(ReaderConfig(char_threshold=100_000))

        outcome = await reader.read(ExtractionRequest(html=PAGE, url=URL))

        assert outcome.reason == FailureReason.NO_CONTENT

    @pytest.mark.asyncio
    async def test_missing_backend(self, monkeypatch):
        """Test a missing optional backend is reported, not raised."""
        monkeypatch.setitem(sys.modules, "readability", None)
        reader = ReadableContentReader(ReaderConfig(extractor="readability"))

        outcome = await reader.read(ExtractionRequest(html=PAGE, url=URL))

        assert outcome.reason == FailureReason.DEPENDENCY_MISSING
