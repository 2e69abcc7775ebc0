from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class CustomerRecord:
    customer_id: str
    tenure: float
    monthly_charges: float
    total_charges: float
    contract_type: str
    payment_method: str
    internet_service: str
    tech_support: str
    streaming_tv: str
    paperless_billing: str
    multiple_lines: str
    # Wider Yes/No attribute set; only filled for fully synthetic batches.
    extras: Mapping[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "customerId": self.customer_id,
            "tenure": self.tenure,
            "monthlyCharges": self.monthly_charges,
            "totalCharges": self.total_charges,
            "contractType": self.contract_type,
            "paymentMethod": self.payment_method,
            "internetService": self.internet_service,
            "techSupport": self.tech_support,
            "streamingTV": self.streaming_tv,
            "paperlessBilling": self.paperless_billing,
            "multipleLines": self.multiple_lines,
        }
        out.update(self.extras)
        return out
