from __future__ import annotations

import logging
import math
import re

import numpy as np

from app.data.records import CustomerRecord
from app.data.synthetic import (
    FALLBACK_BATCH_SIZE,
    RandomState,
    customer_id_for,
    draw_choice,
    draw_flags,
    draw_monthly_charges,
    draw_tenure,
    draw_total_charges,
    ensure_rng,
    generate_synthetic_records,
)
from app.features.schema import CONTRACT_TYPES, INTERNET_SERVICES, ROW_FLAG_THRESHOLDS, ROW_PAYMENT_METHODS

logger = logging.getLogger(__name__)

MAX_DATA_ROWS = 1000

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def split_line(line: str) -> list[str]:
    # Quoted commas are not supported: quotes are dropped, not interpreted.
    return [v.strip().replace('"', "") for v in line.split(",")]


def parse_number(raw: str | None) -> float | None:
    """Leading-number parse: "29.85 USD" -> 29.85, "abc" -> None, "1e400" -> None."""
    if not raw:
        return None
    match = _LEADING_NUMBER.match(raw.strip())
    if match is None:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse_field_number(raw: str | None) -> float | None:
    """Numeric CSV field: zero counts as missing, like an unparseable value."""
    value = parse_number(raw)
    if value is None or value == 0:
        return None
    return value


def _field(values: list[str], index: int) -> str:
    return values[index] if index < len(values) else ""


def build_record(values: list[str], line_number: int, rng: np.random.Generator) -> CustomerRecord:
    """Map one accepted CSV line positionally, backfilling each field on its own."""
    tenure = parse_field_number(_field(values, 1))
    monthly = parse_field_number(_field(values, 2))
    total = parse_field_number(_field(values, 3))

    customer_id = _field(values, 0) or customer_id_for(line_number)
    record_tenure = tenure if tenure is not None else draw_tenure(rng)
    record_monthly = monthly if monthly is not None else draw_monthly_charges(rng)
    record_total = total if total is not None else draw_total_charges(rng)
    contract_type = _field(values, 4) or draw_choice(rng, CONTRACT_TYPES)
    payment_method = _field(values, 5) or draw_choice(rng, ROW_PAYMENT_METHODS)
    internet_service = _field(values, 6) or draw_choice(rng, INTERNET_SERVICES)

    flags = draw_flags(rng, ROW_FLAG_THRESHOLDS)

    return CustomerRecord(
        customer_id=customer_id,
        tenure=record_tenure,
        monthly_charges=record_monthly,
        total_charges=record_total,
        contract_type=contract_type,
        payment_method=payment_method,
        internet_service=internet_service,
        tech_support=flags["techSupport"],
        streaming_tv=flags["streamingTV"],
        paperless_billing=flags["paperlessBilling"],
        multiple_lines=flags["multipleLines"],
    )


def normalize(raw_text: str, *, random_state: RandomState = None) -> list[CustomerRecord]:
    """
    Turn raw CSV text into a fully populated list of customer records.

    Never raises on content: short lines are skipped, bad fields are backfilled
    with random values, and a batch with no accepted line is replaced entirely
    by a synthetic batch of FALLBACK_BATCH_SIZE records.
    """
    rng = ensure_rng(random_state)

    lines = raw_text.split("\n")
    header_width = len(split_line(lines[0]))

    records: list[CustomerRecord] = []
    skipped = 0
    for line_number in range(1, min(len(lines), MAX_DATA_ROWS + 1)):
        values = split_line(lines[line_number])
        if len(values) < header_width:
            skipped += 1
            logger.debug(
                "Skipping line %d: %d fields, header has %d", line_number, len(values), header_width
            )
            continue
        records.append(build_record(values, line_number, rng))

    if not records:
        logger.info("No usable rows in input, generating synthetic dataset")
        return generate_synthetic_records(FALLBACK_BATCH_SIZE, random_state=rng)

    dropped = max(0, len(lines) - 1 - MAX_DATA_ROWS)
    logger.info(
        "Processed %d customer records (skipped=%d, dropped_over_limit=%d)", len(records), skipped, dropped
    )
    return records


def is_synthetic_fallback(raw_text: str) -> bool:
    """True when normalize() would ignore the input and return the synthetic batch."""
    lines = raw_text.split("\n")
    header_width = len(split_line(lines[0]))
    return not any(
        len(split_line(lines[i])) >= header_width for i in range(1, min(len(lines), MAX_DATA_ROWS + 1))
    )
