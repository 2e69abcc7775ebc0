from __future__ import annotations

import logging
from typing import Union

import numpy as np

from app.data.records import CustomerRecord
from app.features.schema import (
    CONTRACT_TYPES,
    EXTRA_FLAG_THRESHOLDS,
    INTERNET_SERVICES,
    PAYMENT_METHODS,
    ROW_FLAG_THRESHOLDS,
)

logger = logging.getLogger(__name__)

FALLBACK_BATCH_SIZE = 500

RandomState = Union[None, int, np.random.Generator]


def ensure_rng(random_state: RandomState = None) -> np.random.Generator:
    """Accept a seed, an existing generator or None (fresh entropy)."""
    if isinstance(random_state, np.random.Generator):
        return random_state
    return np.random.default_rng(random_state)


def customer_id_for(index: int) -> str:
    return f"CUST_{index:04d}"


def draw_tenure(rng: np.random.Generator) -> float:
    return float(rng.integers(1, 73))


def draw_monthly_charges(rng: np.random.Generator) -> float:
    return float(rng.uniform(20.0, 120.0))


def draw_total_charges(rng: np.random.Generator) -> float:
    return float(rng.uniform(200.0, 8200.0))


def draw_choice(rng: np.random.Generator, options: list[str]) -> str:
    return options[int(rng.integers(0, len(options)))]


def draw_flag(rng: np.random.Generator, threshold: float) -> str:
    return "Yes" if rng.random() > threshold else "No"


def draw_flags(rng: np.random.Generator, thresholds: dict[str, float]) -> dict[str, str]:
    return {name: draw_flag(rng, threshold) for name, threshold in thresholds.items()}


def generate_synthetic_records(count: int, *, random_state: RandomState = None) -> list[CustomerRecord]:
    rng = ensure_rng(random_state)
    records: list[CustomerRecord] = []

    for i in range(count):
        flags = draw_flags(rng, ROW_FLAG_THRESHOLDS)
        records.append(
            CustomerRecord(
                customer_id=customer_id_for(i + 1),
                tenure=draw_tenure(rng),
                monthly_charges=draw_monthly_charges(rng),
                total_charges=draw_total_charges(rng),
                contract_type=draw_choice(rng, CONTRACT_TYPES),
                payment_method=draw_choice(rng, PAYMENT_METHODS),
                internet_service=draw_choice(rng, INTERNET_SERVICES),
                tech_support=flags["techSupport"],
                streaming_tv=flags["streamingTV"],
                paperless_billing=flags["paperlessBilling"],
                multiple_lines=flags["multipleLines"],
                extras=draw_flags(rng, EXTRA_FLAG_THRESHOLDS),
            )
        )

    logger.info("Generated %d synthetic customer records", len(records))
    return records
