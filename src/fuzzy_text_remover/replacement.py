"""
Replace approximately matching text.

Every matched string is substituted wherever it literally occurs in the
source, not only at the offset where it was found.
"""

from __future__ import annotations

from typing import Iterable, List

from .metrics import DistanceMetric
from .scanner import find_matches_by_edit_distance, find_matches_by_similarity
from .windowing import find_windows_by_edit_distance


def ordered_matches(matches: Iterable[str]) -> List[str]:
    """Longest first, so a match is never clipped by one of its own substrings."""
    return sorted(matches, key=lambda m: (-len(m), m))


def replace_all(source: str, matches: Iterable[str], replacement: str) -> str:
    result = source
    for match in matches:
        if match:
            result = result.replace(match, replacement)
    return result


def replace_by_similarity(
    source: str,
    search: str,
    replacement: str,
    min_similarity: float,
    metric: DistanceMetric | None = None,
) -> str:
    """Replace substrings at least ``min_similarity`` similar to ``search``."""
    matches = find_matches_by_similarity(source, search, min_similarity, metric)
    return replace_all(source, ordered_matches(matches), replacement)


def replace_by_edit_distance(
    source: str,
    search: str,
    replacement: str,
    max_distance: int,
    metric: DistanceMetric | None = None,
) -> str:
    """Replace substrings within ``max_distance`` edits of ``search``."""
    matches = find_matches_by_edit_distance(source, search, max_distance, metric)
    return replace_all(source, ordered_matches(matches), replacement)


def replace_windows_by_edit_distance(
    text: str,
    phrase: str,
    replacement: str,
    threshold: float,
    max_distance: int,
    metric: DistanceMetric | None = None,
) -> str:
    """Replace every word window of ``text`` that matches ``phrase`` above ``threshold``."""
    windows = find_windows_by_edit_distance(
        text, phrase, threshold, max_distance, metric
    )
    return replace_all(text, (w.matching_text for w in windows), replacement)
