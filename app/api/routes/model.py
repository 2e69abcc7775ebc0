from __future__ import annotations

from fastapi import APIRouter

from app.features.schema import (
    CATEGORICAL_COLUMNS,
    DISPLAY_FEATURES,
    FLAG_COLUMNS,
    NUMERIC_COLUMNS,
    feature_schema,
    importance_schema,
)
from app.model.quality import METRIC_RANGES
from app.model.scoring import HIGH_RISK_THRESHOLD, MEDIUM_RISK_THRESHOLD

router = APIRouter(prefix="/model")


@router.get("/schema")
def model_schema() -> dict:
    return {
        "features": feature_schema(),
        "numeric_features": NUMERIC_COLUMNS,
        "categorical_features": CATEGORICAL_COLUMNS,
        "flag_features": FLAG_COLUMNS,
        "display_features": DISPLAY_FEATURES,
        "risk_thresholds": {"high": HIGH_RISK_THRESHOLD, "medium": MEDIUM_RISK_THRESHOLD},
        "metric_ranges": {name: {"min": low, "max": low + span} for name, (low, span) in METRIC_RANGES.items()},
        "feature_importance": importance_schema(),
    }
