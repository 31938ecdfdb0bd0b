"""Text utilities for normalizing and splitting support notes."""
import re
from typing import Iterable, List

SENTENCE_SPLIT_PATTERN = re.compile(r"[\r\n]+|[.?!]+")


def normalize_whitespace(text: str) -> str:
    """
    Normalize a raw note before any matching.

    Strips leading/trailing whitespace and collapses every whitespace run
    (line breaks included) into a single space.

    Args:
        text: Raw note

    Returns:
        Normalized text ("" for empty input)
    """
    if not text:
        return ""

    return re.sub(r"\s+", " ", text.strip())


def split_sentences(text: str) -> List[str]:
    """
    Split text into trimmed, non-empty sentence fragments.

    Splits on runs of '.', '?', '!' and on line breaks.

    Args:
        text: Text to split

    Returns:
        Fragments in original order
    """
    fragments = (fragment.strip() for fragment in SENTENCE_SPLIT_PATTERN.split(text or ""))
    return [fragment for fragment in fragments if fragment]


def capitalize_first(text: str) -> str:
    """Uppercase the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def ensure_period(text: str) -> str:
    """Append a trailing period if missing."""
    return text if text.endswith(".") else text + "."


def join_labels(labels: Iterable[str]) -> str:
    """Join labels the way they are displayed in ticket prose."""
    return ", ".join(labels)
