"""
fuzzy_text_remover package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .completion import complete_span
from .config import RemoverConfig, config_from_dict, config_from_yaml, load_config
from .metrics import DistanceMetric, RapidFuzzMetric, create_metric
from .models import MatchingWindow
from .pipeline import scrub_corpus, scrub_document
from .replacement import (
    replace_by_edit_distance,
    replace_by_similarity,
    replace_windows_by_edit_distance,
)
from .scanner import (
    InvalidSimilarityError,
    find_matches_by_edit_distance,
    find_matches_by_similarity,
)
from .windowing import best_window, find_windows_by_edit_distance

__all__ = [
    "RemoverConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "DistanceMetric",
    "RapidFuzzMetric",
    "create_metric",
    "MatchingWindow",
    "InvalidSimilarityError",
    "complete_span",
    "find_matches_by_edit_distance",
    "find_matches_by_similarity",
    "find_windows_by_edit_distance",
    "best_window",
    "replace_by_edit_distance",
    "replace_by_similarity",
    "replace_windows_by_edit_distance",
    "scrub_corpus",
    "scrub_document",
]

__version__ = "0.1.0"
