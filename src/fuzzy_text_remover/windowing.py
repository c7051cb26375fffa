from __future__ import annotations

import logging
from typing import List, Sequence

from .metrics import DistanceMetric, default_metric
from .models import MatchingWindow
from .tokenization import is_blank, split_words

logger = logging.getLogger(__name__)


def take_window(
    text_words: Sequence[str], start_word_idx: int, bag_size: int, max_distance: int
) -> MatchingWindow:
    """Build the window of up to ``bag_size`` words starting at ``start_word_idx``."""
    window = MatchingWindow(start_word_idx=start_word_idx, max_distance=max_distance)
    span = 0
    for word in text_words[start_word_idx : start_word_idx + bag_size]:
        span += len(word) + 1
        window.add_word(word)
    # Offsets assume exactly one space between words.
    begin = sum(len(word) + 1 for word in text_words[:start_word_idx])
    window.begin = begin
    window.end = begin + span - 1
    return window


def rank_windows(windows: List[MatchingWindow]) -> List[MatchingWindow]:
    """Order windows by score, highest first; equal scores keep their start order."""
    return sorted(windows, key=lambda w: (-w.score, w.start_word_idx))


def find_windows_by_edit_distance(
    text: str,
    phrase: str,
    threshold: float,
    max_distance: int,
    metric: DistanceMetric | None = None,
) -> List[MatchingWindow]:
    """
    Score every word-aligned window of ``text`` against ``phrase``.

    One window is built per starting word, sized to the phrase's word count
    (shorter at the tail). Each window word counts as matched when any phrase
    word lies within ``max_distance`` edits of it. Windows scoring at least
    ``threshold`` are returned best first.
    """
    if is_blank(text) or is_blank(phrase):
        return []

    metric = metric or default_metric()
    search_words = split_words(phrase)
    bag_size = len(search_words)
    text_words = split_words(text)

    windows: List[MatchingWindow] = []
    for start_idx in range(len(text_words)):
        window = take_window(text_words, start_idx, bag_size, max_distance)
        window.score_against(search_words, metric)
        window.text = text[window.begin : window.end]
        windows.append(window)

    ranked = rank_windows(windows)
    accepted = [w for w in ranked if w.is_score_above_threshold(threshold)]
    logger.debug(
        "Scored %d windows against %d-word phrase; %d at or above %.2f",
        len(windows),
        bag_size,
        len(accepted),
        threshold,
    )
    return accepted


def best_window(
    text: str,
    phrase: str,
    threshold: float,
    max_distance: int,
    metric: DistanceMetric | None = None,
) -> MatchingWindow | None:
    """Return the highest-scoring window above ``threshold``, if any."""
    windows = find_windows_by_edit_distance(
        text, phrase, threshold, max_distance, metric
    )
    return windows[0] if windows else None
