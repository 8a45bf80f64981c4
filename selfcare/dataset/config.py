from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_FILE = Path(__file__).resolve().parent.parent.parent / ".env"

# Load .env from project root
load_dotenv(ENV_FILE)

_DEFAULT_CSV = Path(__file__).resolve().parent.parent / "data" / "data.csv"

TIP_COLUMN = "Self-care tips that might help you out"


def env(name: str, default: str) -> str:
    """Read an environment variable, treating an empty value as unset."""
    return os.getenv(name) or default


@dataclass(frozen=True)
class DatasetConfig:
    csv_path: Path = Path(env("SELFCARE_DATA_PATH", str(_DEFAULT_CSV)))
    tip_column: str = env("SELFCARE_TIP_COLUMN", TIP_COLUMN)
    cache_ttl: float = float(env("SELFCARE_CACHE_TTL", "3600"))  # 1 hour
    encoding: str = "utf-8"


DEFAULT_DATASET_CONFIG = DatasetConfig()
