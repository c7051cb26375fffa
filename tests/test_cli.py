import json
from pathlib import Path

from typer.testing import CliRunner

from fuzzy_text_remover.cli import _load_documents, app

runner = CliRunner()

ADDRESS_TEXT = (
    "I am Ismail Emre Kartoglu. My address changes. It is now 33 Marmora Road, "
    "SE22 0RX, London, UK. This is some extra text."
)


def test_cli_find_outputs_matches(tmp_path: Path):
    """find command prints the sorted set of matched substrings."""
    source = tmp_path / "names.txt"
    source.write_text(
        "Ismail Emre Kartoglu. Ismai Emre. Ismal. My name is Is mail.",
        encoding="utf-8",
    )
    result = runner.invoke(
        app, ["find", "--input-path", str(source), "--search", "Ismail"]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["matches"] == ["is mail", "ismai", "ismail", "ismal"]


def test_cli_find_rejects_bad_similarity(tmp_path: Path):
    source = tmp_path / "names.txt"
    source.write_text("Ismail", encoding="utf-8")
    result = runner.invoke(
        app,
        [
            "find",
            "--input-path",
            str(source),
            "--search",
            "Ismail",
            "--min-similarity",
            "1.5",
        ],
    )
    assert result.exit_code != 0


def test_cli_windows_outputs_ranked_windows(tmp_path: Path):
    source = tmp_path / "address.txt"
    source.write_text(ADDRESS_TEXT, encoding="utf-8")
    result = runner.invoke(
        app,
        [
            "windows",
            "--input-path",
            str(source),
            "--phrase",
            "33, London, Marmora Road, SE22 0RX",
            "--threshold",
            "0.5",
        ],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    top = payload["windows"][0]
    assert top["matching_text"] == "33 Marmora Road, SE22 0RX, London,"
    assert ADDRESS_TEXT[top["begin"] : top["end"]] == top["matching_text"]
    assert top["score"] == 1.0


def test_cli_scrub_writes_files(tmp_path: Path):
    """scrub command mirrors the input tree and writes summary.json."""
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "letter.txt").write_text(ADDRESS_TEXT, encoding="utf-8")
    (corpus_dir / "nested" / "note.txt").write_text(
        "Nothing personal in here.", encoding="utf-8"
    )
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "strategy: window\n"
        "search_terms:\n"
        "  - 33, London, Marmora Road, SE22 0RX\n"
        "window_threshold: 0.8\n",
        encoding="utf-8",
    )
    output_dir = tmp_path / "scrubbed"
    result = runner.invoke(
        app,
        [
            "scrub",
            "--input-path",
            str(corpus_dir),
            "--output-path",
            str(output_dir),
            "--config",
            str(config_path),
            "--replacement",
            "[ADDRESS]",
        ],
    )
    assert result.exit_code == 0
    letter = (output_dir / "letter.txt").read_text(encoding="utf-8")
    assert "Marmora" not in letter
    assert "It is now [ADDRESS] UK." in letter
    assert (output_dir / "nested" / "note.txt").exists()
    summary = json.loads((output_dir / "summary.json").read_text(encoding="utf-8"))
    doc_ids = [doc["doc_id"] for doc in summary["documents"]]
    assert "letter.txt" in doc_ids


def test_cli_scrub_search_overrides_config(tmp_path: Path):
    source = tmp_path / "names.txt"
    source.write_text("ismail emre. ismai went home.", encoding="utf-8")
    output_dir = tmp_path / "out"
    result = runner.invoke(
        app,
        [
            "scrub",
            "--input-path",
            str(source),
            "--output-path",
            str(output_dir),
            "--search",
            "Ismail",
            "--replacement",
            "X",
        ],
    )
    assert result.exit_code == 0
    assert (output_dir / "names.txt").read_text(encoding="utf-8") == (
        "X emre. X went home."
    )


def test_cli_scrub_requires_search_terms(tmp_path: Path):
    source = tmp_path / "names.txt"
    source.write_text("ismail", encoding="utf-8")
    result = runner.invoke(
        app,
        ["scrub", "--input-path", str(source), "--output-path", str(tmp_path / "o")],
    )
    assert result.exit_code != 0


def test_cli_print_config():
    """print-config command dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "search_terms" in result.stdout
    assert "window_threshold" in result.stdout


def test_load_documents_returns_documents_keyed_by_relative_path(tmp_path: Path):
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "a.txt").write_text("first", encoding="utf-8")
    (corpus_dir / "nested" / "b.txt").write_text("second", encoding="utf-8")
    (corpus_dir / "skip.md").write_text("ignored", encoding="utf-8")

    documents = _load_documents(corpus_dir)
    assert [doc.doc_id for doc in documents] == [
        "a.txt",
        str(Path("nested") / "b.txt"),
    ]
    assert [doc.text for doc in documents] == ["first", "second"]

    single = _load_documents(corpus_dir / "a.txt")
    assert [(doc.doc_id, doc.text) for doc in single] == [("a.txt", "first")]
