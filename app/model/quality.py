"""Synthetic quality-indicator placeholders.

Nothing here looks at the scored predictions: the values are decorative and
only mimic what a trained model would report.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Sequence

import numpy as np

from app.features.schema import IMPORTANCE_SPECS


@dataclass(frozen=True)
class ModelMetrics:
    accuracy: float
    auc: float
    precision: float
    recall: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class FeatureImportance:
    feature: str
    importance: float

    def to_dict(self) -> dict[str, float | str]:
        return asdict(self)


METRIC_RANGES: dict[str, tuple[float, float]] = {
    "accuracy": (0.82, 0.08),
    "auc": (0.85, 0.10),
    "precision": (0.78, 0.12),
    "recall": (0.75, 0.15),
}

# Weighted "overall score" shown next to the individual metrics.
METRIC_WEIGHTS: dict[str, float] = {
    "auc": 0.4,
    "accuracy": 0.2,
    "precision": 0.2,
    "recall": 0.2,
}


def synthesize_metrics(rng: np.random.Generator) -> ModelMetrics:
    values = {name: low + float(rng.random()) * span for name, (low, span) in METRIC_RANGES.items()}
    return ModelMetrics(**values)


def synthesize_feature_importance(rng: np.random.Generator) -> list[FeatureImportance]:
    return [
        FeatureImportance(feature=spec.feature, importance=spec.low + float(rng.random()) * spec.span)
        for spec in IMPORTANCE_SPECS
    ]


def performance_level(score: float) -> str:
    if score >= 0.9:
        return "Excellent"
    if score >= 0.8:
        return "Good"
    if score >= 0.7:
        return "Fair"
    return "Poor"


def overall_score(metrics: ModelMetrics) -> float:
    values = metrics.to_dict()
    return sum(values[name] * weight for name, weight in METRIC_WEIGHTS.items())


def rank_feature_importance(features: Sequence[FeatureImportance]) -> list[FeatureImportance]:
    """Strongest first; equal weights keep their listed order."""
    return sorted(features, key=lambda f: f.importance, reverse=True)
