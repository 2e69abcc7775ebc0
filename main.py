from fastapi import FastAPI

from app.api.errors import register_exception_handlers
from app.api.routes import analyze, dataset, health, model

app = FastAPI(
    title="Churn risk analysis",
    description="Upload a customer CSV and get synthetic churn-risk scores for a dashboard.",
)

register_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(analyze.router, tags=["analyze"])
app.include_router(dataset.router, tags=["dataset"])
app.include_router(model.router, tags=["model"])
