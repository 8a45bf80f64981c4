from __future__ import annotations


class DatasetError(Exception):
    """Raised when the CSV is missing, unreadable, or structurally invalid."""


class DatasetUnavailableError(RuntimeError):
    """Raised by the cache when a (re)load of the dataset fails."""
