from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

STRATEGIES = ("edit_distance", "similarity", "window")


@dataclass(slots=True)
class RemoverConfig:
    """Configuration options for scrubbing documents."""

    strategy: str = "edit_distance"
    search_terms: List[str] = field(default_factory=list)
    replacement: str = "[REDACTED]"
    max_distance: int = 1
    min_similarity: float = 0.9
    window_threshold: float = 0.8
    metric_name: str = "rapidfuzz"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(RemoverConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "search_terms" in kwargs:
        terms = kwargs["search_terms"]
        if isinstance(terms, str):
            terms = [terms]
        kwargs["search_terms"] = [str(term) for term in terms or []]
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> RemoverConfig:
    """Build a RemoverConfig from a dictionary-like input."""
    if data is None:
        return RemoverConfig()
    return RemoverConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> RemoverConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> RemoverConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return RemoverConfig()
    return config_from_yaml(path)
