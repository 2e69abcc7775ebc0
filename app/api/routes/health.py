from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from app.data import ingestion, synthetic

router = APIRouter()

SERVICE_NAME = "churn-risk-analysis"


@router.get("/", include_in_schema=False)
def root() -> RedirectResponse:
    return RedirectResponse(url="/docs")


@router.get("/health")
def health() -> dict:
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "max_rows": ingestion.MAX_DATA_ROWS,
        "fallback_batch_size": synthetic.FALLBACK_BATCH_SIZE,
    }
