from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

import numpy as np

from app.data.records import CustomerRecord
from app.data.synthetic import RandomState, ensure_rng
from app.features.schema import DISPLAY_FEATURES
from app.model.quality import (
    FeatureImportance,
    ModelMetrics,
    synthesize_feature_importance,
    synthesize_metrics,
)

logger = logging.getLogger(__name__)

BASE_PROBABILITY = 0.30
NOISE_AMPLITUDE = 0.15
HIGH_RISK_THRESHOLD = 0.70
MEDIUM_RISK_THRESHOLD = 0.40

RISK_LEVELS: list[str] = ["Low", "Medium", "High"]


@dataclass(frozen=True)
class ChurnPrediction:
    user_id: str
    churn_probability: float
    risk_level: str
    features: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "churnProbability": self.churn_probability,
            "riskLevel": self.risk_level,
            "features": dict(self.features),
        }


@dataclass(frozen=True)
class ScoringResult:
    predictions: list[ChurnPrediction]
    metrics: ModelMetrics
    feature_importance: list[FeatureImportance]


def base_probability(record: CustomerRecord) -> float:
    """Deterministic part of the churn score, before noise and clamping."""
    prob = BASE_PROBABILITY
    prob += (72 - record.tenure) / 100
    prob += (record.monthly_charges - 50) / 200

    if record.contract_type == "Month-to-month":
        prob += 0.20
    elif record.contract_type == "Two year":
        prob -= 0.15

    if record.payment_method == "Electronic check":
        prob += 0.10

    if record.tech_support == "No":
        prob += 0.10

    return prob


def risk_level(probability: float) -> str:
    if probability >= HIGH_RISK_THRESHOLD:
        return "High"
    if probability >= MEDIUM_RISK_THRESHOLD:
        return "Medium"
    return "Low"


def display_features(record: CustomerRecord) -> dict[str, Any]:
    view = record.to_dict()
    return {name: view[name] for name in DISPLAY_FEATURES}


def _prediction(record: CustomerRecord, probability: float) -> ChurnPrediction:
    return ChurnPrediction(
        user_id=record.customer_id,
        churn_probability=probability,
        risk_level=risk_level(probability),
        features=display_features(record),
    )


def score(records: Sequence[CustomerRecord], *, random_state: RandomState = None) -> ScoringResult:
    """
    Score every record independently, then draw the batch-level placeholders.

    Records never influence each other: the noise is one independent draw per
    record, taken as a single vector for the whole batch.
    """
    rng = ensure_rng(random_state)
    logger.info("Generating churn predictions for %d customers", len(records))

    base = np.array([base_probability(r) for r in records], dtype=float)
    noise = rng.uniform(-NOISE_AMPLITUDE, NOISE_AMPLITUDE, size=len(records))
    probabilities = np.clip(base + noise, 0.0, 1.0)

    predictions = [_prediction(r, float(p)) for r, p in zip(records, probabilities)]

    metrics = synthesize_metrics(rng)
    importance = synthesize_feature_importance(rng)

    logger.info("Generated predictions for %d customers", len(predictions))
    logger.info("Model AUC-ROC: %.1f%%", metrics.auc * 100)

    return ScoringResult(predictions=predictions, metrics=metrics, feature_importance=importance)
