"""Command-line interface for htmlreader."""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from . import __version__
from .conversion.text import truncate_text
from .core.reader import ReadableContentReader
from .logging_config import setup_logging
from .models.config import ExtractionRequest, ExtractMode, ReaderConfig

EXIT_OK = 0
EXIT_NO_CONTENT = 1
EXIT_USAGE = 2


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="htmlreader",
        description="Extract readable Markdown or plain text from an HTML document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Markdown from a saved page
  htmlreader page.html --url https://example.com/post

  # Plain text from stdin, capped at 4000 characters
  curl -s https://example.com/post | htmlreader --url https://example.com/post -m text --max-chars 4000

  # Use the readability backend and emit JSON
  htmlreader page.html --extractor readability --json
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="HTML file to read ('-' or omitted for stdin)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--url",
        "-u",
        type=str,
        default=None,
        help="Source URL of the document (default: file:// URL of the input file)",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="FILE",
        help="YAML configuration file",
    )

    # Extraction settings
    extract_group = parser.add_argument_group("extraction settings")
    extract_group.add_argument(
        "--mode",
        "-m",
        choices=[mode.value for mode in ExtractMode],
        default=ExtractMode.MARKDOWN.value,
        help="Output mode (default: markdown)",
    )
    extract_group.add_argument(
        "--extractor",
        choices=["heuristic", "readability"],
        default=None,
        help="Main-content extractor backend (default: heuristic)",
    )
    extract_group.add_argument(
        "--char-threshold",
        type=int,
        default=None,
        metavar="N",
        help="Minimum characters for a region to count as main content",
    )
    extract_group.add_argument(
        "--max-chars",
        type=int,
        default=None,
        metavar="N",
        help="Truncate the output to N characters",
    )

    # Output control
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Emit a JSON object with title, text and truncation flag",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress status output",
    )

    return parser


def build_config(args: argparse.Namespace) -> ReaderConfig:
    """Load the YAML config (if any) and apply command-line overrides."""
    config = ReaderConfig.from_yaml_file(args.config) if args.config else ReaderConfig()

    overrides: dict = {}
    if args.extractor is not None:
        overrides["extractor"] = args.extractor
    if args.char_threshold is not None:
        overrides["char_threshold"] = args.char_threshold
    if args.max_chars is not None:
        overrides["max_chars"] = args.max_chars
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    elif args.quiet:
        overrides["log_level"] = "ERROR"

    if not overrides:
        return config
    return ReaderConfig.model_validate({**config.model_dump(), **overrides})


def read_input(source: str) -> tuple[str, Optional[str]]:
    """Read HTML from a file or stdin, with the file's URL when there is one."""
    if source == "-":
        return sys.stdin.read(), None
    path = Path(source)
    return path.read_text(encoding="utf-8", errors="replace"), path.resolve().as_uri()


def run_reader(args: argparse.Namespace) -> int:
    """Run the extraction with given arguments."""
    console = Console(stderr=True)

    try:
        config = build_config(args)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}", highlight=False)
        return EXIT_USAGE

    setup_logging(config.log_level, config.log_file)

    try:
        html, file_url = read_input(args.input)
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        return EXIT_USAGE

    url = args.url or file_url
    if not url:
        console.print("[red]Error:[/red] --url is required when reading from stdin")
        return EXIT_USAGE

    request = ExtractionRequest(html=html, url=url, mode=ExtractMode(args.mode))
    outcome = asyncio.run(ReadableContentReader(config).read(request))

    if not outcome.ok:
        if not args.quiet:
            detail = f": {escape(outcome.error)}" if outcome.error else ""
            console.print(f"[red]No readable content[/red] ({outcome.reason.value}){detail}", highlight=False)
        return EXIT_NO_CONTENT

    result = outcome.result
    text, truncated = result.text, False
    if config.max_chars is not None:
        bounded = truncate_text(result.text, config.max_chars)
        text, truncated = bounded.text, bounded.truncated

    if args.json:
        payload = {"url": url, "title": result.title, "text": text, "truncated": truncated}
        sys.stdout.write(json.dumps(payload, ensure_ascii=False) + "\n")
        return EXIT_OK

    if not args.quiet:
        if result.title:
            console.print(f"[bold]Title:[/bold] {escape(result.title)}", highlight=False)
        if truncated:
            console.print(f"[yellow]Truncated to {config.max_chars} characters[/yellow]")

    sys.stdout.write(text + "\n")
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_reader(args)


if __name__ == "__main__":
    sys.exit(main())
