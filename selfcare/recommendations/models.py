from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, RootModel


class AnswerSet(RootModel[dict[str, Any]]):
    """Submitted answers keyed by question column name."""


class ColumnOut(BaseModel):
    name: str
    type: Literal["categorical"] = "categorical"
    options: list[str] = Field(default_factory=list)


class SchemaResponse(BaseModel):
    success: bool = True
    columns: list[ColumnOut]


class PredictionResponse(BaseModel):
    success: bool = True
    prediction: str
    score: float = Field(..., ge=0.0, le=1.0)
    matched_fields: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
