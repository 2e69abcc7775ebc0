from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from app.model.quality import (
    METRIC_WEIGHTS,
    FeatureImportance,
    ModelMetrics,
    overall_score,
    performance_level,
    rank_feature_importance,
)
from app.model.scoring import RISK_LEVELS, ChurnPrediction

TOP_N_DEFAULT = 10
HISTOGRAM_BINS = 10
TOP_FEATURES = 3


@dataclass(frozen=True)
class HistogramBin:
    range: str
    count: int


@dataclass(frozen=True)
class AnalysisSummary:
    total_customers: int
    risk_counts: dict[str, int]
    high_risk_count: int
    average_churn_probability: float
    top_risk: list[ChurnPrediction]
    histogram: list[HistogramBin]
    metric_grades: dict[str, str]
    metric_weights: dict[str, float]
    overall_score: float
    ranked_feature_importance: list[FeatureImportance]
    strongest_feature: str | None
    top_features_share: float


def predictions_frame(predictions: Sequence[ChurnPrediction]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "user_id": [p.user_id for p in predictions],
            "churn_probability": pd.Series([p.churn_probability for p in predictions], dtype=float),
            "risk_level": [p.risk_level for p in predictions],
        }
    )


def risk_counts(df: pd.DataFrame) -> dict[str, int]:
    vc = df["risk_level"].value_counts()
    return {level: int(vc.get(level, 0)) for level in RISK_LEVELS}


def probability_histogram(df: pd.DataFrame, bins: int = HISTOGRAM_BINS) -> list[HistogramBin]:
    """
    Count probabilities in equal-width bins over [0, 1].

    Bins are half-open except the last, which also counts a probability of
    exactly 1.0. A strict "< upper edge" test would leave it out of every bin,
    so bin counts always add up to the number of predictions here.
    """
    edges = np.arange(bins + 1) / bins
    idx = np.searchsorted(edges, df["churn_probability"].to_numpy(), side="right") - 1
    idx = np.clip(idx, 0, bins - 1)
    counts = np.bincount(idx, minlength=bins)

    out: list[HistogramBin] = []
    for i in range(bins):
        start = round(i * 100 / bins)
        end = round((i + 1) * 100 / bins)
        out.append(HistogramBin(range=f"{start}-{end}%", count=int(counts[i])))
    return out


def top_risk(
    predictions: Sequence[ChurnPrediction], df: pd.DataFrame, n: int = TOP_N_DEFAULT
) -> list[ChurnPrediction]:
    order = df["churn_probability"].sort_values(ascending=False, kind="stable").index[:n]
    return [predictions[i] for i in order]


def summarize(
    predictions: Sequence[ChurnPrediction],
    metrics: ModelMetrics,
    feature_importance: Sequence[FeatureImportance] = (),
    *,
    top_n: int = TOP_N_DEFAULT,
) -> AnalysisSummary:
    df = predictions_frame(predictions)
    ranked = rank_feature_importance(feature_importance)
    counts = risk_counts(df)
    average = float(df["churn_probability"].mean()) if len(df) else 0.0

    return AnalysisSummary(
        total_customers=int(len(df)),
        risk_counts=counts,
        high_risk_count=counts["High"],
        average_churn_probability=average,
        top_risk=top_risk(predictions, df, top_n),
        histogram=probability_histogram(df),
        metric_grades={name: performance_level(value) for name, value in metrics.to_dict().items()},
        metric_weights=dict(METRIC_WEIGHTS),
        overall_score=overall_score(metrics),
        ranked_feature_importance=ranked,
        strongest_feature=ranked[0].feature if ranked else None,
        top_features_share=sum(f.importance for f in ranked[:TOP_FEATURES]),
    )
