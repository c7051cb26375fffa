from pathlib import Path

import pytest

from fuzzy_text_remover.config import (
    RemoverConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults_without_path():
    cfg = load_config(None)
    assert cfg == RemoverConfig()
    assert cfg.strategy == "edit_distance"
    assert cfg.search_terms == []


def test_config_from_yaml_reads_known_keys(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "strategy: window\n"
        "search_terms:\n"
        "  - 33, London, Marmora Road, SE22 0RX\n"
        "window_threshold: 0.6\n"
        "unknown_key: ignored\n",
        encoding="utf-8",
    )
    cfg = config_from_yaml(path)

    assert cfg.strategy == "window"
    assert cfg.search_terms == ["33, London, Marmora Road, SE22 0RX"]
    assert cfg.window_threshold == 0.6
    assert cfg.max_distance == 1


def test_config_from_yaml_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


def test_single_search_term_string_becomes_list():
    cfg = config_from_dict({"search_terms": "Ismail"})
    assert cfg.search_terms == ["Ismail"]


def test_to_dict_round_trips_through_config_from_dict():
    cfg = RemoverConfig(strategy="similarity", min_similarity=0.85)
    assert config_from_dict(cfg.to_dict()) == cfg
