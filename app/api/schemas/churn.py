from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: Any = None


class CustomerRecordChurn(CamelModel):
    customer_id: str
    tenure: float
    monthly_charges: float
    total_charges: float
    contract_type: str
    payment_method: str
    internet_service: str
    tech_support: Literal["Yes", "No"]
    streaming_tv: Literal["Yes", "No"] = Field(alias="streamingTV")
    paperless_billing: Literal["Yes", "No"]
    multiple_lines: Literal["Yes", "No"]
    extras: dict[str, Literal["Yes", "No"]] = Field(default_factory=dict)


class PredictionChurn(CamelModel):
    user_id: str
    churn_probability: float = Field(..., ge=0.0, le=1.0)
    risk_level: Literal["Low", "Medium", "High"]
    features: dict[str, Any]


class ModelMetricsChurn(CamelModel):
    accuracy: float
    auc: float
    precision: float
    recall: float


class FeatureImportanceChurn(CamelModel):
    feature: str
    importance: float


class HistogramBinChurn(CamelModel):
    range: str
    count: int = Field(..., ge=0)


class AnalysisSummaryChurn(CamelModel):
    total_customers: int
    risk_counts: dict[str, int]
    high_risk_count: int
    average_churn_probability: float
    top_risk: list[PredictionChurn]
    histogram: list[HistogramBinChurn]
    metric_grades: dict[str, str]
    metric_weights: dict[str, float]
    overall_score: float
    ranked_feature_importance: list[FeatureImportanceChurn]
    strongest_feature: str | None = None
    top_features_share: float


class AnalysisResponseChurn(CamelModel):
    predictions: list[PredictionChurn]
    metrics: ModelMetricsChurn
    feature_importance: list[FeatureImportanceChurn]
    summary: AnalysisSummaryChurn


class NormalizedPreviewChurn(CamelModel):
    rows: int
    synthetic_fallback: bool
    preview: list[CustomerRecordChurn]
