from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Tuple

from .config import STRATEGIES, RemoverConfig
from .metrics import DistanceMetric
from .models import Document, ScrubReport
from .replacement import ordered_matches, replace_all
from .scanner import find_matches_by_edit_distance, find_matches_by_similarity
from .windowing import find_windows_by_edit_distance

logger = logging.getLogger(__name__)


def find_term_matches(
    text: str, search: str, config: RemoverConfig, metric: DistanceMetric
) -> List[str]:
    """Return the strings the configured strategy would replace, in replacement order."""
    strategy = config.strategy
    if strategy == "edit_distance":
        return ordered_matches(
            find_matches_by_edit_distance(text, search, config.max_distance, metric)
        )
    if strategy == "similarity":
        return ordered_matches(
            find_matches_by_similarity(text, search, config.min_similarity, metric)
        )
    if strategy == "window":
        windows = find_windows_by_edit_distance(
            text, search, config.window_threshold, config.max_distance, metric
        )
        return [w.matching_text for w in windows]
    raise ValueError(
        f"Unknown strategy '{strategy}'. Expected one of: {', '.join(STRATEGIES)}."
    )


def scrub_document(
    doc: Document, config: RemoverConfig, metric: DistanceMetric
) -> Tuple[Document, List[ScrubReport]]:
    """Apply every configured search term to a single document, in order."""
    current_doc = Document(doc.doc_id, doc.text)
    reports: List[ScrubReport] = []

    for search in config.search_terms:
        matches = find_term_matches(current_doc.text, search, config, metric)
        logger.info(
            "doc=%s strategy=%s search=%r matched %d string(s)",
            doc.doc_id,
            config.strategy,
            search,
            len(matches),
        )
        if matches:
            current_doc = replace(
                current_doc,
                text=replace_all(current_doc.text, matches, config.replacement),
            )
        reports.append(
            ScrubReport(
                doc_id=doc.doc_id,
                search=search,
                strategy=config.strategy,
                matches=matches,
            )
        )

    return current_doc, reports


def scrub_corpus(
    documents: List[Document], config: RemoverConfig, metric: DistanceMetric
) -> Dict[str, Tuple[Document, List[ScrubReport]]]:
    """Scrub all documents and return the per-document outputs."""
    results: Dict[str, Tuple[Document, List[ScrubReport]]] = {}
    for document in documents:
        results[document.doc_id] = scrub_document(document, config, metric)
    return results
