"""
Text normalization for raw model output.

The baseline normalizer unifies line breaks, whitespace and colon spelling so
the field extractor can rely on ``label: value`` lines. Vendor profiles pick
one of the normalizers below.
"""

from chinese_react_parser.constants import (
    COLON_PATTERN,
    ERNIE_FILLER_PATTERNS,
    FULLWIDTH_COLON_PATTERN,
    HORIZONTAL_SPACE_PATTERN,
    LINE_BREAK_PATTERN,
    LINE_LEADING_SPACE_PATTERN,
)


def normalize_text(text: str) -> str:
    """Baseline normalization: every colon variant becomes ``": "``."""
    normalized = _normalize_layout(text)
    return COLON_PATTERN.sub(": ", normalized)


def normalize_ascii_colons(text: str) -> str:
    """Rewrite full-width colons to ASCII without adding a trailing space."""
    normalized = LINE_BREAK_PATTERN.sub("\n", text.strip())
    normalized = FULLWIDTH_COLON_PATTERN.sub(":", normalized)
    normalized = HORIZONTAL_SPACE_PATTERN.sub(" ", normalized)
    return LINE_LEADING_SPACE_PATTERN.sub("\n", normalized)


def normalize_without_fillers(text: str) -> str:
    """Drop polite preambles, then apply the baseline normalization."""
    cleaned = text
    for pattern in ERNIE_FILLER_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    return normalize_text(cleaned)


def _normalize_layout(text: str) -> str:
    normalized = LINE_BREAK_PATTERN.sub("\n", text.strip())
    normalized = HORIZONTAL_SPACE_PATTERN.sub(" ", normalized)
    return LINE_LEADING_SPACE_PATTERN.sub("\n", normalized)
