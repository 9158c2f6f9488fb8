"""Text primitives: entity decoding, tag stripping, whitespace and truncation."""

from __future__ import annotations

import re

from ..models.results import TruncationResult

# Named references are matched case-insensitively; numeric ones capture the value
_ENTITY_PATTERN = re.compile(
    r"&(?:(?P<named>nbsp|amp|quot|lt|gt);|#x(?P<hex>[0-9a-f]+);|#(?P<dec>\d+);)",
    re.IGNORECASE,
)

_NAMED_ENTITIES = {
    "nbsp": " ",
    "amp": "&",
    "quot": '"',
    "lt": "<",
    "gt": ">",
}

_TAG_PATTERN = re.compile(r"<[^>]+>")

_TRAILING_SPACE_PATTERN = re.compile(r"[ \t]+\n")
_BLANK_RUN_PATTERN = re.compile(r"\n{3,}")
_SPACE_RUN_PATTERN = re.compile(r"[ \t]{2,}")


def _decode_entity(match: re.Match[str]) -> str:
    named = match.group("named")
    if named is not None:
        return _NAMED_ENTITIES[named.lower()]

    hex_value = match.group("hex")
    try:
        code_point = int(hex_value, 16) if hex_value is not None else int(match.group("dec"))
        return chr(code_point)
    except (ValueError, OverflowError):
        # Beyond the Unicode range or too long to convert: keep the reference as written
        return match.group(0)


def decode_entities(value: str) -> str:
    """
    Decode the supported HTML character references in a single pass.

    Handles ``&nbsp;``, ``&amp;``, ``&quot;``, ``&#39;``, ``&lt;``, ``&gt;``
    plus hexadecimal and decimal numeric references. Anything else is left
    untouched, and decoded output is never scanned again, so ``&amp;lt;``
    becomes ``&lt;`` rather than ``<``.

    Args:
        value: Text that may contain character references

    Returns:
        Text with the recognised references replaced
    """
    return _ENTITY_PATTERN.sub(_decode_entity, value)


def strip_tags(value: str) -> str:
    """Remove every ``<...>`` tag and decode entities in what remains."""
    return decode_entities(_TAG_PATTERN.sub("", value))


def normalize_whitespace(value: str) -> str:
    """
    Canonicalize line endings, blank-line runs and horizontal whitespace.

    Steps run in a fixed order: drop carriage returns, drop spaces/tabs
    before a newline, cap blank lines at one, collapse space/tab runs,
    then trim the whole string.
    """
    value = value.replace("\r", "")
    value = _TRAILING_SPACE_PATTERN.sub("\n", value)
    value = _BLANK_RUN_PATTERN.sub("\n\n", value)
    value = _SPACE_RUN_PATTERN.sub(" ", value)
    return value.strip()


def truncate_text(value: str, max_chars: int) -> TruncationResult:
    """
    Cut text down to at most ``max_chars`` characters.

    No attempt is made to break on word or sentence boundaries.

    Args:
        value: Text to bound
        max_chars: Character budget (must not be negative)

    Returns:
        TruncationResult with the (possibly shortened) text

    Raises:
        ValueError: If max_chars is negative
    """
    if max_chars < 0:
        raise ValueError(f"max_chars must be >= 0, got {max_chars}")
    if len(value) <= max_chars:
        return TruncationResult(text=value, truncated=False)
    return TruncationResult(text=value[:max_chars], truncated=True)
