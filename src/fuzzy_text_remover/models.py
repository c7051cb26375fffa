from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .metrics import DistanceMetric


def escape_quotes(value: str) -> str:
    """Escape double quotes so matched text can be interpolated downstream."""
    return value.replace('"', '\\"')


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True)
class MatchingWindow:
    """
    A contiguous run of source words scored against a multi-word phrase.

    ``begin``/``end`` index into the original text. ``score`` is the fraction
    of the phrase's words that found a match, so a window truncated at the
    end of the text can never reach 1.0.
    """

    begin: int = 0
    end: int = 0
    start_word_idx: int = 0
    max_distance: int = 0
    score: float = 0.0
    text: str = ""
    words: List[str] = field(default_factory=list)

    @property
    def matching_text(self) -> str:
        return escape_quotes(self.text)

    def add_word(self, word: str) -> None:
        self.words.append(word)

    def score_against(
        self, search_words: Sequence[str], metric: "DistanceMetric"
    ) -> float:
        """Score the window against ``search_words`` and store the result."""
        if not self.words or not search_words:
            self.score = 0.0
            return self.score
        matched = 0
        for word in self.words:
            if any(
                metric.edit_distance(word, search_word) <= self.max_distance
                for search_word in search_words
            ):
                matched += 1
        self.score = matched / len(search_words)
        return self.score

    def is_score_above_threshold(self, threshold: float) -> bool:
        return self.score >= threshold


@dataclass(slots=True)
class ScrubReport:
    """Records which strings one search term removed from a document."""

    doc_id: str
    search: str
    strategy: str
    matches: list[str]
