"""Aggregate statistics over record result sets."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel

from filecat.records import FileRecord


class Report(BaseModel):
    """Summary statistics for a sequence of records.

    Attributes:
        count: Number of records.
        total_size_kb: Sum of record sizes in kilobytes.
        average_size_kb: Floor of the mean size; 0 for an empty sequence.
        last_modification_date: Greatest modification date compared as a
            string, or an empty string when none is set.
    """

    count: int = 0
    total_size_kb: int = 0
    average_size_kb: int = 0
    last_modification_date: str = ""


def summarize(records: Iterable[FileRecord]) -> Report:
    """Compute a ``Report`` for ``records``."""
    count = 0
    total = 0
    last_modified = ""
    for record in records:
        count += 1
        total += record.size_kb
        if record.modification_date > last_modified:
            last_modified = record.modification_date
    return Report(
        count=count,
        total_size_kb=total,
        average_size_kb=total // count if count else 0,
        last_modification_date=last_modified,
    )


__all__ = ["Report", "summarize"]
