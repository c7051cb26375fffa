from __future__ import annotations

import logging
from typing import Callable, Set

from .completion import complete_span
from .metrics import DistanceMetric, default_metric
from .models import escape_quotes
from .tokenization import is_blank, normalize_for_scan

logger = logging.getLogger(__name__)


class InvalidSimilarityError(ValueError):
    """Raised when a similarity threshold falls outside [0, 1]."""


def validate_min_similarity(min_similarity: float) -> None:
    if min_similarity < 0 or min_similarity > 1:
        raise InvalidSimilarityError(
            f"min_similarity must be in range 0 <= min_similarity <= 1, got {min_similarity}"
        )


def find_matches_by_edit_distance(
    source: str,
    search: str,
    max_distance: int,
    metric: DistanceMetric | None = None,
) -> Set[str]:
    """Return lower-cased substrings of ``source`` within ``max_distance`` edits of ``search``."""
    metric = metric or default_metric()
    return _scan(
        source,
        search,
        lambda candidate, term: metric.edit_distance(candidate, term) <= max_distance,
    )


def find_matches_by_similarity(
    source: str,
    search: str,
    min_similarity: float,
    metric: DistanceMetric | None = None,
) -> Set[str]:
    """Return lower-cased substrings of ``source`` at least ``min_similarity`` similar to ``search``."""
    validate_min_similarity(min_similarity)
    metric = metric or default_metric()
    return _scan(
        source,
        search,
        lambda candidate, term: metric.similarity(candidate, term) >= min_similarity,
    )


def _scan(
    source: str, search: str, accept: Callable[[str, str], bool]
) -> Set[str]:
    matches: Set[str] = set()
    if is_blank(search):
        return matches

    source = normalize_for_scan(source)
    search = normalize_for_scan(search)
    search_len = len(search)
    source_len = len(source)

    i = 0
    while i < source_len:
        end_index = min(i + search_len, source_len)
        candidate = complete_span(source, i, end_index)
        if candidate not in matches and accept(candidate, search):
            matches.add(escape_quotes(candidate))
            logger.debug("Matched %r at offset %d for %r", candidate, i, search)
            # Skip past the matched span. A second match starting inside it
            # is not reported.
            i = end_index
        i += 1
    return matches
