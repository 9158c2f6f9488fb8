"""Tests for the command-line interface."""

import io
import json
import logging

import pytest
from htmlreader.cli import EXIT_NO_CONTENT, EXIT_OK, EXIT_USAGE, main

PAGE = """<html><head><title>Welcome Page</title></head><body>
<article>
<h1>Welcome</h1>
<p>Hello <a href="/more">more info</a> here.</p>
</article>
</body></html>"""


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to captured streams between tests."""
    yield
    logger = logging.getLogger("htmlreader")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def page_file(tmp_path):
    path = tmp_path / "page.html"
    path.write_text(PAGE, encoding="utf-8")
    return path


class TestCli:
    """Tests for htmlreader.cli.main."""

    def test_markdown_output(self, page_file, capsys):
        """Test default markdown output on stdout."""
        code = main([str(page_file), "--url", "https://example.com/a/"])

        captured = capsys.readouterr()
        assert code == EXIT_OK
        assert "# Welcome" in captured.out
        assert "[more info](https://example.com/more)" in captured.out
        assert "Welcome Page" in captured.err

    def test_text_json_output(self, page_file, capsys):
        """Test JSON output in text mode."""
        code = main([str(page_file), "--url", "https://example.com/a/", "-m", "text", "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert payload["title"] == "Welcome Page"
        assert payload["truncated"] is False
        assert payload["url"] == "https://example.com/a/"
        assert "Hello more info here." in payload["text"]

    def test_max_chars(self, page_file, capsys):
        """Test truncation through --max-chars."""
        code = main([str(page_file), "--json", "--max-chars", "5"])

        payload = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert payload["text"] == "# Wel"
        assert payload["truncated"] is True

    def test_file_url_default(self, page_file, capsys):
        """Test the input file's URL is used as base when --url is absent."""
        main([str(page_file), "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["url"].startswith("file://")

    def test_stdin(self, monkeypatch, capsys):
        """Test reading HTML from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO(PAGE))

        code = main(["--url", "https://example.com/", "-q"])

        assert code == EXIT_OK
        assert "# Welcome" in capsys.readouterr().out

    def test_stdin_requires_url(self, monkeypatch, capsys):
        """Test stdin without a URL is a usage error."""
        monkeypatch.setattr("sys.stdin", io.StringIO(PAGE))

        assert main([]) == EXIT_USAGE
        assert "--url" in capsys.readouterr().err

    def test_no_content(self, tmp_path, capsys):
        """Test exit code when nothing can be extracted."""
        path = tmp_path / "empty.html"
        path.write_text("<html><body></body></html>")

        code = main([str(path)])

        assert code == EXIT_NO_CONTENT
        assert "no_content" in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        """Test a missing input file."""
        assert main([str(tmp_path / "missing.html")]) == EXIT_USAGE

    def test_config_file(self, page_file, tmp_path, capsys):
        """Test settings loaded from YAML."""
        config = tmp_path / "htmlreader.yaml"
        config.write_text("max_chars: 3\n")

        main([str(page_file), "--config", str(config), "--json"])

        assert json.loads(capsys.readouterr().out)["text"] == "# W"

    def test_invalid_config(self, page_file, tmp_path):
        """Test that an invalid config is a usage error."""
        config = tmp_path / "htmlreader.yaml"
        config.write_text("unknown_key: 1\n")

        assert main([str(page_file), "--config", str(config)]) == EXIT_USAGE

    def test_invalid_override(self, page_file):
        """Test that an out-of-range flag is a usage error."""
        assert main([str(page_file), "--max-chars", "0"]) == EXIT_USAGE
