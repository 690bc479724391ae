"""Search criteria model."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from filecat.records import FileRecord, RecordType, UnrecognizedTypeError, type_for_code


class SearchCriteria(BaseModel):
    """Conjunction of optional predicates applied by ``search``.

    Attributes:
        record_type: Required record type, or None for any type.
        tag: Tag that must be attached to the record (exact match).
        min_size: Inclusive lower bound on size in kilobytes.
        max_size: Inclusive upper bound on size in kilobytes; None is unbounded.
        creation_date: Exact creation date string to match.
        modification_date: Exact modification date string to match.
    """

    model_config = ConfigDict(extra="forbid")

    record_type: Optional[RecordType] = None
    tag: Optional[str] = None
    min_size: int = Field(default=0, ge=0)
    max_size: Optional[int] = Field(default=None, ge=0)
    creation_date: Optional[str] = None
    modification_date: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _blank_means_any(cls, data):
        # Interactive callers pass "" for "any"; treat it like an omitted value.
        if isinstance(data, dict):
            return {key: (None if value == "" else value) for key, value in data.items()}
        return data

    @field_validator("record_type", mode="before")
    @classmethod
    def _accept_type_codes(cls, value):
        if isinstance(value, str):
            try:
                return type_for_code(value)
            except UnrecognizedTypeError as exc:
                raise ValueError(str(exc)) from exc
        return value

    def matches(self, record: FileRecord) -> bool:
        """Return True when ``record`` satisfies every specified predicate."""
        if self.record_type is not None and record.record_type != self.record_type:
            return False
        if self.tag is not None and not record.has_tag(self.tag):
            return False
        if record.size_kb < self.min_size:
            return False
        if self.max_size is not None and record.size_kb > self.max_size:
            return False
        if self.creation_date is not None and record.creation_date != self.creation_date:
            return False
        if (
            self.modification_date is not None
            and record.modification_date != self.modification_date
        ):
            return False
        return True


__all__ = ["SearchCriteria"]
