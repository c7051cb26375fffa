from __future__ import annotations

from typing import TYPE_CHECKING

from .base import DistanceMetric
from .rapidfuzz_metric import RapidFuzzMetric

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import RemoverConfig

__all__ = [
    "DistanceMetric",
    "RapidFuzzMetric",
    "create_metric",
    "build_metric_from_config",
    "default_metric",
]


def create_metric(name: str) -> DistanceMetric:
    """Factory for building distance metrics by name."""
    normalized = name.lower().strip()
    if normalized == "rapidfuzz":
        return RapidFuzzMetric()
    raise ValueError(f"Unknown metric '{name}'.")


def build_metric_from_config(config: "RemoverConfig") -> DistanceMetric:
    return create_metric(config.metric_name)


def default_metric() -> DistanceMetric:
    return RapidFuzzMetric()
