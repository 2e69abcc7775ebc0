from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FeatureSpec:
    name: str
    dtype: str  # "float" | "int" | "str"
    kind: str  # "numeric" | "categorical" | "flag" | "id"


@dataclass(frozen=True)
class ImportanceSpec:
    feature: str
    low: float
    span: float

    @property
    def high(self) -> float:
        return self.low + self.span


CONTRACT_TYPES: list[str] = ["Month-to-month", "One year", "Two year"]
PAYMENT_METHODS: list[str] = ["Electronic check", "Credit card", "Bank transfer", "Mailed check"]
# Per-row backfill for parsed CSV lines never produced "Mailed check".
ROW_PAYMENT_METHODS: list[str] = PAYMENT_METHODS[:3]
INTERNET_SERVICES: list[str] = ["DSL", "Fiber optic", "No"]

# Positional CSV layout; the header text itself is never matched.
FEATURE_SPECS: list[FeatureSpec] = [
    FeatureSpec(name="customerId", dtype="str", kind="id"),
    FeatureSpec(name="tenure", dtype="float", kind="numeric"),
    FeatureSpec(name="monthlyCharges", dtype="float", kind="numeric"),
    FeatureSpec(name="totalCharges", dtype="float", kind="numeric"),
    FeatureSpec(name="contractType", dtype="str", kind="categorical"),
    FeatureSpec(name="paymentMethod", dtype="str", kind="categorical"),
    FeatureSpec(name="internetService", dtype="str", kind="categorical"),
    FeatureSpec(name="techSupport", dtype="str", kind="flag"),
    FeatureSpec(name="streamingTV", dtype="str", kind="flag"),
    FeatureSpec(name="paperlessBilling", dtype="str", kind="flag"),
    FeatureSpec(name="multipleLines", dtype="str", kind="flag"),
]

# Probability that a draw is "No": the value is "Yes" when random() > threshold.
ROW_FLAG_THRESHOLDS: dict[str, float] = {
    "techSupport": 0.5,
    "streamingTV": 0.6,
    "paperlessBilling": 0.4,
    "multipleLines": 0.5,
}

EXTRA_FLAG_THRESHOLDS: dict[str, float] = {
    "onlineSecurity": 0.5,
    "deviceProtection": 0.6,
    "senior": 0.8,
    "partner": 0.5,
    "dependents": 0.7,
}

DISPLAY_FEATURES: list[str] = [
    "tenure",
    "monthlyCharges",
    "totalCharges",
    "contractType",
    "paymentMethod",
    "internetService",
    "techSupport",
]

IMPORTANCE_SPECS: list[ImportanceSpec] = [
    ImportanceSpec(feature="Tenure", low=0.25, span=0.10),
    ImportanceSpec(feature="Monthly Charges", low=0.20, span=0.05),
    ImportanceSpec(feature="Contract Type", low=0.15, span=0.05),
    ImportanceSpec(feature="Total Charges", low=0.12, span=0.03),
    ImportanceSpec(feature="Payment Method", low=0.10, span=0.03),
    ImportanceSpec(feature="Tech Support", low=0.08, span=0.02),
    ImportanceSpec(feature="Internet Service", low=0.06, span=0.02),
    ImportanceSpec(feature="Paperless Billing", low=0.04, span=0.02),
]

FEATURE_COLUMNS: list[str] = [s.name for s in FEATURE_SPECS]
NUMERIC_COLUMNS: list[str] = [s.name for s in FEATURE_SPECS if s.kind == "numeric"]
CATEGORICAL_COLUMNS: list[str] = [s.name for s in FEATURE_SPECS if s.kind == "categorical"]
FLAG_COLUMNS: list[str] = [s.name for s in FEATURE_SPECS if s.kind == "flag"]


def feature_schema() -> list[dict[str, str]]:
    return [{"name": s.name, "type": s.dtype, "kind": s.kind} for s in FEATURE_SPECS]


def importance_schema() -> list[dict[str, float | str]]:
    return [{"feature": s.feature, "min": s.low, "max": s.high} for s in IMPORTANCE_SPECS]
