from __future__ import annotations

from fastapi import APIRouter, File, Query, UploadFile

from app.api.routes.analyze import read_csv_upload, record_out
from app.api.schemas.churn import NormalizedPreviewChurn
from app.data.ingestion import is_synthetic_fallback, normalize

router = APIRouter(prefix="/dataset")


@router.post("/normalize", response_model=NormalizedPreviewChurn)
def dataset_normalize(
    file: UploadFile = File(...),
    n: int = Query(10, ge=1, le=100),
    seed: int | None = Query(None, ge=0),
) -> NormalizedPreviewChurn:
    csv_text = read_csv_upload(file)
    records = normalize(csv_text, random_state=seed)
    return NormalizedPreviewChurn(
        rows=len(records),
        synthetic_fallback=is_synthetic_fallback(csv_text),
        preview=[record_out(r) for r in records[:n]],
    )
