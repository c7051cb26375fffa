from __future__ import annotations

from abc import ABC, abstractmethod


class DistanceMetric(ABC):
    """Abstract provider of edit distance and normalized similarity."""

    @abstractmethod
    def edit_distance(self, left: str, right: str) -> int:
        """Return the number of single-character edits between two strings."""
        raise NotImplementedError

    @abstractmethod
    def similarity(self, left: str, right: str) -> float:
        """Return a closeness score in [0, 1] where 1 means identical."""
        raise NotImplementedError
