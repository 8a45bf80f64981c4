from __future__ import annotations

import logging
import time
from threading import Lock
from typing import Any

from .config import DEFAULT_DATASET_CONFIG, DatasetConfig
from .errors import DatasetError, DatasetUnavailableError
from .loader import Dataset, load_dataset

logger = logging.getLogger(__name__)

_cache: dict[DatasetConfig, Dataset] = {}
_lock = Lock()
_hits: int = 0
_misses: int = 0
_loads: int = 0


def _is_fresh(dataset: Dataset, ttl: float) -> bool:
    return time.time() - dataset.loaded_at <= ttl


def get_dataset(config: DatasetConfig = DEFAULT_DATASET_CONFIG) -> Dataset:
    """
    Return the parsed dataset, reloading it once the TTL has elapsed.

    Load failures are never masked by a stale copy: they surface as
    ``DatasetUnavailableError`` and the cached entry is left as it was.
    """
    global _hits, _misses, _loads
    with _lock:
        entry = _cache.get(config)
        if entry is not None and _is_fresh(entry, config.cache_ttl):
            _hits += 1
            return entry

        _misses += 1
        try:
            dataset = load_dataset(config)
        except DatasetError as exc:
            logger.error("Error loading data from %s", config.csv_path, exc_info=True)
            raise DatasetUnavailableError("Failed to load data") from exc

        _cache[config] = dataset
        _loads += 1
        return dataset


def get_cache_stats(config: DatasetConfig = DEFAULT_DATASET_CONFIG) -> dict[str, Any]:
    total = _hits + _misses
    entry = _cache.get(config)
    return {
        "hits": _hits,
        "misses": _misses,
        "loads": _loads,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
        "loaded_at": entry.loaded_at if entry else None,
        "age_seconds": round(time.time() - entry.loaded_at, 1) if entry else None,
    }


def clear_cache() -> None:
    global _hits, _misses, _loads
    with _lock:
        _cache.clear()
        _hits = 0
        _misses = 0
        _loads = 0
