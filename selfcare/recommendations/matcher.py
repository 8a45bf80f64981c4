from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence


@dataclass(frozen=True)
class MatchResult:
    row: dict[str, str]
    score: float
    index: int
    matched_fields: list[str] = field(default_factory=list)


def _answered(answers: Mapping[str, Any]) -> dict[str, Any]:
    """Drop unanswered fields and strip surrounding whitespace from text answers."""
    cleaned: dict[str, Any] = {}
    for key, value in answers.items():
        if value is None:
            continue
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        cleaned[key] = value
    return cleaned


def score_row(answers: Mapping[str, Any], row: Mapping[str, str]) -> tuple[float, list[str]]:
    """
    Fraction of answered fields whose value exactly equals the row's value.

    Keys the row does not have still count towards the total, so answering a
    question the dataset never asked can only lower the score.
    """
    answered = _answered(answers)
    if not answered:
        return 0.0, []
    matched = [key for key, value in answered.items() if row.get(key) == value]
    return len(matched) / len(answered), matched


def find_best_match(answers: Mapping[str, Any], rows: Sequence[Mapping[str, str]]) -> MatchResult:
    """Return the row with the highest overlap score; the earliest row wins ties."""
    if not rows:
        raise ValueError("Cannot match against an empty dataset")

    answered = _answered(answers)
    best_index = 0
    best_score = -1.0
    best_fields: list[str] = []

    for index, row in enumerate(rows):
        score, matched = score_row(answered, row)
        if score > best_score:
            best_index, best_score, best_fields = index, score, matched

    return MatchResult(
        row=dict(rows[best_index]),
        score=best_score,
        index=best_index,
        matched_fields=best_fields,
    )
