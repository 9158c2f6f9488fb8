"""htmlreader configuration and result models."""

from .config import ExtractionRequest, ExtractMode, ReaderConfig
from .document import ParsedDocument
from .results import (
    ExtractedContent,
    ExtractionOutcome,
    ExtractionResult,
    FailureReason,
    TruncationResult,
)

__all__ = [
    # Config
    "ExtractMode",
    "ExtractionRequest",
    "ReaderConfig",
    # Documents
    "ParsedDocument",
    # Results
    "ExtractedContent",
    "ExtractionOutcome",
    "ExtractionResult",
    "FailureReason",
    "TruncationResult",
]
