from __future__ import annotations

from rapidfuzz.distance import JaroWinkler, Levenshtein

from .base import DistanceMetric


class RapidFuzzMetric(DistanceMetric):
    """
    Levenshtein distance and Jaro-Winkler similarity backed by rapidfuzz.
    Jaro-Winkler rewards shared prefixes, which suits names and addresses
    where the leading characters are usually typed correctly.
    """

    def __init__(self, prefix_weight: float = 0.1) -> None:
        self.prefix_weight = prefix_weight

    def edit_distance(self, left: str, right: str) -> int:
        return int(Levenshtein.distance(left, right))

    def similarity(self, left: str, right: str) -> float:
        return float(
            JaroWinkler.similarity(left, right, prefix_weight=self.prefix_weight)
        )
