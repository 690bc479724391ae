"""Import result models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from filecat.records import FileRecord


class ImportResult(BaseModel):
    """Outcome of a bulk import.

    Attributes:
        records: Records parsed, in source order.
        skipped: Line numbers skipped because they were blank or carried no
            recognized extension.
        errors: Messages for lines that failed to parse.
    """

    records: List[FileRecord] = Field(default_factory=list)
    skipped: List[int] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)


__all__ = ["ImportResult"]
