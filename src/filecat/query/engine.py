"""Filtering and ordering over sequences of file records."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from filecat.records import FileRecord

from .criteria import SearchCriteria

LOGGER = logging.getLogger(__name__)

SortKey = Callable[[FileRecord], object]

# Dates stay strings, so DD.MM.YYYY orders by day first.
SORT_KEYS: dict[str, SortKey] = {
    "name": lambda record: record.name,
    "creation_date": lambda record: record.creation_date,
    "size_kb": lambda record: record.size_kb,
}

SORT_KEY_ALIASES = {
    "creationDate": "creation_date",
    "sizeKB": "size_kb",
    "size": "size_kb",
}


def search(
    records: Iterable[FileRecord],
    criteria: Optional[SearchCriteria] = None,
) -> list[FileRecord]:
    """Return records satisfying ``criteria`` in their original order.

    Args:
        records: Candidate records, typically a catalog's live set.
        criteria: Predicates to apply; None matches everything.

    Returns:
        list[FileRecord]: Matching records.
    """

    active = criteria or SearchCriteria()
    return [record for record in records if active.matches(record)]


def resolve_sort_key(key: str) -> Optional[str]:
    """Return the canonical sort key name for ``key`` or None when unknown."""
    canonical = SORT_KEY_ALIASES.get(key, key)
    if canonical in SORT_KEYS:
        return canonical
    return None


def sort_records(records: Iterable[FileRecord], key: str = "name") -> list[FileRecord]:
    """Return ``records`` in stable ascending order of ``key``.

    Unknown keys leave the order untouched.

    Args:
        records: Records to order.
        key: One of ``name``, ``creation_date`` or ``size_kb`` (camelCase and
            ``size`` spellings are accepted).

    Returns:
        list[FileRecord]: A new, ordered list.
    """

    ordered = list(records)
    canonical = resolve_sort_key(key)
    if canonical is None:
        LOGGER.debug("Ignoring unknown sort key %r.", key)
        return ordered
    return sorted(ordered, key=SORT_KEYS[canonical])


__all__ = ["SORT_KEYS", "SORT_KEY_ALIASES", "search", "resolve_sort_key", "sort_records"]
