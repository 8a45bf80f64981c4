from __future__ import annotations

import logging
from typing import Any, Mapping

from ..dataset.cache import get_dataset
from ..dataset.config import DEFAULT_DATASET_CONFIG, DatasetConfig
from .matcher import find_best_match
from .models import ColumnOut, PredictionResponse, SchemaResponse

logger = logging.getLogger(__name__)


def get_schema(config: DatasetConfig = DEFAULT_DATASET_CONFIG) -> SchemaResponse:
    dataset = get_dataset(config)
    return SchemaResponse(
        columns=[
            ColumnOut(name=c.name, type=c.type, options=list(c.options))
            for c in dataset.columns
        ]
    )


def get_recommendation(
    answers: Mapping[str, Any],
    config: DatasetConfig = DEFAULT_DATASET_CONFIG,
) -> PredictionResponse:
    """Match the answers against the cached dataset and return the winning tip."""
    dataset = get_dataset(config)
    match = find_best_match(answers, dataset.rows)

    logger.debug(
        "Best match row %d scored %.3f on %s",
        match.index,
        match.score,
        match.matched_fields,
    )
    return PredictionResponse(
        prediction=dataset.tip_for(match.row),
        score=round(match.score, 4),
        matched_fields=match.matched_fields,
    )
