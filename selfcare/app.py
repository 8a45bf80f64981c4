from __future__ import annotations

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .dataset.cache import get_cache_stats
from .dataset.config import DEFAULT_DATASET_CONFIG, DatasetConfig
from .dataset.errors import DatasetUnavailableError
from .recommendations.models import (
    AnswerSet,
    ErrorResponse,
    PredictionResponse,
    SchemaResponse,
)
from .recommendations.retrieval import get_recommendation, get_schema

logger = logging.getLogger(__name__)

app = FastAPI(title="Self-Care Recommendation API", version="1.0.0")

_STATIC_DIR = Path(__file__).resolve().parent / "static"


def get_dataset_config() -> DatasetConfig:
    return DEFAULT_DATASET_CONFIG


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def invalid_input_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return _error(400, "Invalid input format")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get(
    "/api/predict",
    response_model=SchemaResponse,
    responses={500: {"model": ErrorResponse}},
)
def form_schema(config: DatasetConfig = Depends(get_dataset_config)):
    try:
        return get_schema(config)
    except DatasetUnavailableError:
        logger.exception("GET error")
        return _error(500, "Failed to load form structure")


@app.post(
    "/api/predict",
    response_model=PredictionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def predict(body: AnswerSet, config: DatasetConfig = Depends(get_dataset_config)):
    try:
        return get_recommendation(body.root, config)
    except DatasetUnavailableError:
        logger.exception("Recommendation error")
        return _error(500, "Failed to generate recommendation")


@app.get("/cache/stats")
def cache_stats(config: DatasetConfig = Depends(get_dataset_config)) -> dict:
    return get_cache_stats(config)


# ── Static / form UI ────────────────────────────────────────────────────


app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")


@app.get("/")
def root():
    return FileResponse(str(_STATIC_DIR / "index.html"))
