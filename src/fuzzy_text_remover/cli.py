from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Tuple, TypedDict

import typer
import yaml

from .config import RemoverConfig, load_config
from .metrics import build_metric_from_config, default_metric
from .models import Document, MatchingWindow, ScrubReport
from .pipeline import scrub_corpus
from .scanner import find_matches_by_edit_distance, find_matches_by_similarity
from .windowing import find_windows_by_edit_distance

app = typer.Typer(help="Fuzzy Text Remover CLI.", no_args_is_help=True)


@app.callback()
def _root(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log match decisions at DEBUG level."
    ),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command()
def find(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    search: str = typer.Option(..., "--search", "-s", help="Term to look for."),
    max_distance: int = typer.Option(
        1, "--max-distance", help="Maximum edit distance for a match."
    ),
    min_similarity: float | None = typer.Option(
        None,
        "--min-similarity",
        help="Use Jaro-Winkler similarity with this minimum instead of edit distance.",
    ),
) -> None:
    """Print the substrings of a file that approximately match a search term."""
    text = input_path.read_text(encoding="utf-8")
    metric = default_metric()
    try:
        if min_similarity is not None:
            matches = find_matches_by_similarity(text, search, min_similarity, metric)
        else:
            matches = find_matches_by_edit_distance(text, search, max_distance, metric)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(json.dumps({"matches": sorted(matches)}, indent=2))


@app.command()
def windows(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    phrase: str = typer.Option(..., "--phrase", "-p", help="Multi-word phrase."),
    threshold: float = typer.Option(
        0.8, "--threshold", "-t", help="Minimum fraction of phrase words matched."
    ),
    max_distance: int = typer.Option(
        1, "--max-distance", help="Per-word maximum edit distance."
    ),
) -> None:
    """Print the word windows of a file that match a phrase, best first."""
    text = input_path.read_text(encoding="utf-8")
    found = find_windows_by_edit_distance(
        text, phrase, threshold, max_distance, default_metric()
    )
    typer.echo(json.dumps({"windows": [_window_dict(w) for w in found]}, indent=2))


@app.command()
def scrub(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    output_path: Path = typer.Option(..., file_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
    strategy: str | None = typer.Option(
        None,
        "--strategy",
        help="Matching strategy: 'edit_distance', 'similarity' or 'window'.",
    ),
    search: List[str] | None = typer.Option(
        None, "--search", "-s", help="Search term; repeat for several terms."
    ),
    replacement: str | None = typer.Option(
        None, "--replacement", "-r", help="Text substituted for each match."
    ),
    max_distance: int | None = typer.Option(None, "--max-distance"),
    min_similarity: float | None = typer.Option(None, "--min-similarity"),
    threshold: float | None = typer.Option(
        None, "--threshold", help="Override window_threshold for the window strategy."
    ),
) -> None:
    """Scrub matching text from documents and save them with a summary."""
    try:
        cfg = load_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _apply_overrides(
        cfg, strategy, search, replacement, max_distance, min_similarity, threshold
    )
    if not cfg.search_terms:
        raise typer.BadParameter(
            "No search terms given. Use --search or set search_terms in the config."
        )
    documents = _load_documents(input_path)
    try:
        metric = build_metric_from_config(cfg)
        results = scrub_corpus(documents, cfg, metric)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    output_path.mkdir(parents=True, exist_ok=True)
    for doc_id, (final_doc, _) in results.items():
        dest = output_path / doc_id
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(final_doc.text, encoding="utf-8")

    summary = _build_summary(results)
    summary_path = output_path / "summary.json"
    summary_path.write_text(
        json.dumps({"documents": summary}, indent=2), encoding="utf-8"
    )
    typer.echo(f"Wrote scrubbed documents to {output_path} and summary to {summary_path}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = RemoverConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: RemoverConfig,
    strategy: str | None,
    search: List[str] | None,
    replacement: str | None,
    max_distance: int | None,
    min_similarity: float | None,
    threshold: float | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if strategy:
        config.strategy = strategy
    if search:
        config.search_terms = list(search)
    if replacement is not None:
        config.replacement = replacement
    if max_distance is not None:
        config.max_distance = max_distance
    if min_similarity is not None:
        config.min_similarity = min_similarity
    if threshold is not None:
        config.window_threshold = threshold


SUPPORTED_INPUT_EXTENSIONS = {".txt"}


class WindowPayload(TypedDict):
    begin: int
    end: int
    score: float
    matching_text: str
    words: List[str]


class ReportPayload(TypedDict):
    search: str
    strategy: str
    matches: List[str]


class DocumentSummary(TypedDict):
    doc_id: str
    reports: List[ReportPayload]


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their path relative to it."""
    if input_path.is_file():
        return [
            Document(
                doc_id=input_path.name, text=input_path.read_text(encoding="utf-8")
            )
        ]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    documents: List[Document] = []
    for file in files:
        # Relative paths as doc IDs so the output mirrors the input tree.
        relative_id = str(file.relative_to(input_path))
        documents.append(
            Document(doc_id=relative_id, text=file.read_text(encoding="utf-8"))
        )
    return documents


def _build_summary(
    results: Dict[str, Tuple[Document, List[ScrubReport]]],
) -> List[DocumentSummary]:
    summary: List[DocumentSummary] = []
    for doc_id, (_, reports) in sorted(results.items()):
        summary.append(
            {"doc_id": doc_id, "reports": [_report_dict(r) for r in reports]}
        )
    return summary


def _report_dict(report: ScrubReport) -> ReportPayload:
    return {
        "search": report.search,
        "strategy": report.strategy,
        "matches": list(report.matches),
    }


def _window_dict(window: MatchingWindow) -> WindowPayload:
    return {
        "begin": window.begin,
        "end": window.end,
        "score": window.score,
        "matching_text": window.matching_text,
        "words": list(window.words),
    }


if __name__ == "__main__":
    main()
