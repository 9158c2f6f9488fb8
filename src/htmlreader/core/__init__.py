"""Core extraction orchestration."""

from .reader import ReadableContentReader, extract_blocking, extract_readable_content

__all__ = [
    "ReadableContentReader",
    "extract_readable_content",
    "extract_blocking",
]
