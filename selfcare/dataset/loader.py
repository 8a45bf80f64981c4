from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List

import pandas as pd

from .config import DEFAULT_DATASET_CONFIG, DatasetConfig
from .errors import DatasetError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Column:
    """One question field of the form and its allowed answers."""

    name: str
    options: List[str]
    type: str = "categorical"


@dataclass
class Dataset:
    rows: List[dict[str, str]]
    columns: List[Column]
    tip_column: str
    loaded_at: float = field(default_factory=time.time)

    def tip_for(self, row: dict[str, str]) -> str:
        return row.get(self.tip_column, "")


def _read_frame(config: DatasetConfig) -> pd.DataFrame:
    try:
        df = pd.read_csv(
            config.csv_path,
            dtype=str,
            index_col=False,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding=config.encoding,
        )
    except pd.errors.EmptyDataError as exc:
        raise DatasetError("Invalid data structure in CSV") from exc
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as exc:
        raise DatasetError(f"Could not read dataset at {config.csv_path}") from exc

    # Short rows leave NaN behind even with keep_default_na=False
    df = df.fillna("")
    df.columns = [str(c).strip() for c in df.columns]
    if df.empty:
        return df
    df = df.apply(lambda col: col.str.strip())

    # Rows that only held whitespace or separators
    return df.loc[(df != "").any(axis=1)].reset_index(drop=True)


def build_columns(df: pd.DataFrame, tip_column: str) -> List[Column]:
    """Derive the form schema: every non-tip header with its sorted distinct values."""
    columns: List[Column] = []
    for name in df.columns:
        if name == tip_column:
            continue
        values = {v for v in df[name] if v}
        columns.append(Column(name=name, options=sorted(values)))
    return columns


def load_dataset(config: DatasetConfig = DEFAULT_DATASET_CONFIG) -> Dataset:
    """
    Parse the self-care CSV into rows and a column schema.

    Every header and cell is kept as stripped text. Raises ``DatasetError``
    when the file cannot be read, holds no rows, or lacks the tip column.
    """
    df = _read_frame(config)

    if df.empty or config.tip_column not in df.columns:
        raise DatasetError("Invalid data structure in CSV")

    rows = df.to_dict(orient="records")
    columns = build_columns(df, config.tip_column)

    logger.info(
        "Loaded %d rows with %d question columns from %s",
        len(rows),
        len(columns),
        config.csv_path,
    )
    return Dataset(rows=rows, columns=columns, tip_column=config.tip_column)
