"""Result types produced by the extraction pipeline."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureReason(str, Enum):
    """Reasons an extraction produced no result."""

    NO_CONTENT = "no_content"
    PARSE_ERROR = "parse_error"
    EXTRACT_ERROR = "extract_error"
    RENDER_ERROR = "render_error"
    DEPENDENCY_MISSING = "dependency_missing"


@dataclass(frozen=True)
class ExtractedContent:
    """
    Main-content fragment returned by a content extractor.

    Attributes:
        content: Inner HTML of the main content region
        text_content: Plain text of the same region
        title: Document title, if one was found
    """

    content: str
    text_content: str
    title: Optional[str] = None


@dataclass(frozen=True)
class ExtractionResult:
    """Readable text (markdown or plain) and an optional title."""

    text: str
    title: Optional[str] = None


@dataclass(frozen=True)
class TruncationResult:
    """Text bounded to a character budget."""

    text: str
    truncated: bool


@dataclass(frozen=True)
class ExtractionOutcome:
    """
    Success-or-failure wrapper around an extraction.

    Exactly one of ``result`` and ``reason`` is set. ``error`` carries the
    message of the exception behind a failure, when there was one.

    Example:
        outcome = await reader.read(request)
        if outcome.ok:
            print(outcome.result.text)
        else:
            print(f"Failed ({outcome.reason.value}): {outcome.error}")
    """

    result: Optional[ExtractionResult] = None
    reason: Optional[FailureReason] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.reason is None):
            raise ValueError("ExtractionOutcome needs exactly one of result or reason")

    @property
    def ok(self) -> bool:
        return self.result is not None

    @classmethod
    def success(cls, result: ExtractionResult) -> "ExtractionOutcome":
        return cls(result=result)

    @classmethod
    def failure(cls, reason: FailureReason, error: Optional[str] = None) -> "ExtractionOutcome":
        return cls(reason=reason, error=error)
