from __future__ import annotations

from typing import List


def is_blank(value: str | None) -> bool:
    """Return True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def normalize_for_scan(value: str) -> str:
    """Trim and lower-case text before character scanning."""
    return value.strip().lower()


def split_words(text: str) -> List[str]:
    """
    Split on single spaces, keeping empty fields between consecutive spaces
    so that word lengths still add up to character offsets. Trailing empty
    fields are dropped.
    """
    words = text.split(" ")
    while words and words[-1] == "":
        words.pop()
    return words
