from __future__ import annotations

import logging

from fastapi import APIRouter, File, Query, Request, UploadFile
from starlette.concurrency import run_in_threadpool

from app.api.errors import upload_error
from app.api.schemas.churn import (
    AnalysisResponseChurn,
    AnalysisSummaryChurn,
    CustomerRecordChurn,
    ErrorResponse,
    FeatureImportanceChurn,
    HistogramBinChurn,
    ModelMetricsChurn,
    PredictionChurn,
)
from app.data.ingestion import normalize
from app.data.records import CustomerRecord
from app.data.synthetic import ensure_rng
from app.model.scoring import ChurnPrediction, score
from app.model.summary import TOP_N_DEFAULT, summarize

router = APIRouter(prefix="/analyze")
logger = logging.getLogger(__name__)

PROCESSING_ERROR_MESSAGE = "Failed to process the file. Please check the format and try again."


def read_csv_upload(file: UploadFile) -> str:
    filename = file.filename or ""
    if not filename.lower().endswith(".csv"):
        logger.warning("Rejected upload with unsupported file name: %r", filename)
        raise upload_error("unsupported_file_type", "Only .csv files are supported", {"filename": filename})
    return decode_csv(file.file.read())


def decode_csv(raw: bytes) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.warning("Failed to decode upload: %s", e)
        raise upload_error("processing_error", PROCESSING_ERROR_MESSAGE, str(e)) from e


def record_out(record: CustomerRecord) -> CustomerRecordChurn:
    return CustomerRecordChurn(
        customer_id=record.customer_id,
        tenure=record.tenure,
        monthly_charges=record.monthly_charges,
        total_charges=record.total_charges,
        contract_type=record.contract_type,
        payment_method=record.payment_method,
        internet_service=record.internet_service,
        tech_support=record.tech_support,
        streaming_tv=record.streaming_tv,
        paperless_billing=record.paperless_billing,
        multiple_lines=record.multiple_lines,
        extras=dict(record.extras),
    )


def prediction_out(prediction: ChurnPrediction) -> PredictionChurn:
    return PredictionChurn(
        user_id=prediction.user_id,
        churn_probability=prediction.churn_probability,
        risk_level=prediction.risk_level,
        features=dict(prediction.features),
    )


def run_analysis(csv_text: str, *, seed: int | None, top_n: int) -> AnalysisResponseChurn:
    rng = ensure_rng(seed)
    records = normalize(csv_text, random_state=rng)
    result = score(records, random_state=rng)
    summary = summarize(result.predictions, result.metrics, result.feature_importance, top_n=top_n)

    return AnalysisResponseChurn(
        predictions=[prediction_out(p) for p in result.predictions],
        metrics=ModelMetricsChurn(**result.metrics.to_dict()),
        feature_importance=[FeatureImportanceChurn(**f.to_dict()) for f in result.feature_importance],
        summary=AnalysisSummaryChurn(
            total_customers=summary.total_customers,
            risk_counts=summary.risk_counts,
            high_risk_count=summary.high_risk_count,
            average_churn_probability=summary.average_churn_probability,
            top_risk=[prediction_out(p) for p in summary.top_risk],
            histogram=[HistogramBinChurn(range=b.range, count=b.count) for b in summary.histogram],
            metric_grades=summary.metric_grades,
            metric_weights=summary.metric_weights,
            overall_score=summary.overall_score,
            ranked_feature_importance=[
                FeatureImportanceChurn(**f.to_dict()) for f in summary.ranked_feature_importance
            ],
            strongest_feature=summary.strongest_feature,
            top_features_share=summary.top_features_share,
        ),
    )


_ERROR_RESPONSES = {
    400: {
        "description": "Upload rejected",
        "model": ErrorResponse,
        "content": {
            "application/json": {
                "examples": {
                    "unsupported_file_type": {
                        "summary": "Not a CSV file",
                        "value": {
                            "code": "unsupported_file_type",
                            "message": "Only .csv files are supported",
                            "details": {"filename": "customers.xlsx"},
                        },
                    },
                    "processing_error": {
                        "summary": "File could not be read",
                        "value": {
                            "code": "processing_error",
                            "message": PROCESSING_ERROR_MESSAGE,
                            "details": "'utf-8' codec can't decode byte 0xff in position 0",
                        },
                    },
                }
            }
        },
    },
}


@router.post("", response_model=AnalysisResponseChurn, responses=_ERROR_RESPONSES)
def analyze_upload(
    file: UploadFile = File(...),
    seed: int | None = Query(None, ge=0),
    top_n: int = Query(TOP_N_DEFAULT, ge=1, le=100),
) -> AnalysisResponseChurn:
    csv_text = read_csv_upload(file)
    logger.info("Analyze request: filename=%s chars=%d seed=%s", file.filename, len(csv_text), seed)
    return run_analysis(csv_text, seed=seed, top_n=top_n)


@router.post("/text", response_model=AnalysisResponseChurn, responses=_ERROR_RESPONSES)
async def analyze_text(
    request: Request,
    seed: int | None = Query(None, ge=0),
    top_n: int = Query(TOP_N_DEFAULT, ge=1, le=100),
) -> AnalysisResponseChurn:
    csv_text = decode_csv(await request.body())
    logger.info("Analyze request: raw body chars=%d seed=%s", len(csv_text), seed)
    return await run_in_threadpool(run_analysis, csv_text, seed=seed, top_n=top_n)
