from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest
from fastapi.testclient import TestClient

# Ensure project root on sys.path for module imports in tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

HEADER = "customerID,tenure,MonthlyCharges,TotalCharges,Contract,PaymentMethod,InternetService"


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture()
def sample_csv() -> str:
    # Three usable rows, one short row, and a trailing newline.
    return "\n".join(
        [
            HEADER,
            "7590-VHVEG,1,29.85,29.85,Month-to-month,Electronic check,DSL",
            '"5575-GNVDE", "34" ,"56.95","1889.5","One year","Mailed check","DSL"',
            "3668-QPYBK,2,53.85",
            "9237-HQITU,abc,,108.15,Two year,,Fiber optic",
            "",
        ]
    )


@pytest.fixture()
def make_record():
    from app.data.records import CustomerRecord

    def _make(**overrides) -> CustomerRecord:
        fields = {
            "customer_id": "CUST_0001",
            "tenure": 24.0,
            "monthly_charges": 70.0,
            "total_charges": 1680.0,
            "contract_type": "One year",
            "payment_method": "Credit card",
            "internet_service": "DSL",
            "tech_support": "Yes",
            "streaming_tv": "No",
            "paperless_billing": "Yes",
            "multiple_lines": "No",
        }
        fields.update(overrides)
        return CustomerRecord(**fields)

    return _make


@pytest.fixture()
def app_client() -> TestClient:
    from main import app

    return TestClient(app)
