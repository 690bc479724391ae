"""Search and sort helpers for catalog records."""

from .criteria import SearchCriteria
from .engine import SORT_KEYS, resolve_sort_key, search, sort_records

__all__ = ["SearchCriteria", "SORT_KEYS", "resolve_sort_key", "search", "sort_records"]
