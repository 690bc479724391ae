"""File record models for the metadata catalog."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class RecordType(str, Enum):
    """Closed set of file type classifications."""

    TEXT_DOCUMENT = "TextDocument"
    PDF_DOCUMENT = "PDFDocument"
    IMAGE_FILE = "ImageFile"
    VIDEO_FILE = "VideoFile"
    AUDIO_FILE = "AudioFile"

    @property
    def code(self) -> str:
        """Return the short code used when adding a record by type."""
        return _TYPE_CODES[self]

    @property
    def extension(self) -> str:
        """Return the extension marker recognized in file names."""
        return f".{_TYPE_CODES[self]}"


_TYPE_CODES = {
    RecordType.TEXT_DOCUMENT: "txt",
    RecordType.PDF_DOCUMENT: "pdf",
    RecordType.IMAGE_FILE: "jpg",
    RecordType.VIDEO_FILE: "mp4",
    RecordType.AUDIO_FILE: "mp3",
}

OPEN_DESCRIPTIONS = {
    RecordType.TEXT_DOCUMENT: "Opened text document: {name}",
    RecordType.PDF_DOCUMENT: "Opened PDF document: {name}",
    RecordType.IMAGE_FILE: "Opened image: {name}",
    RecordType.VIDEO_FILE: "Opened video file: {name}",
    RecordType.AUDIO_FILE: "Opened audio file: {name}",
}


class FileRecord(BaseModel):
    """Metadata describing a single catalogued file.

    Attributes:
        name: Identifier of the record within a catalog.
        path: Informational location of the file.
        creation_date: Creation date encoded as ``DD.MM.YYYY``.
        modification_date: Last modification date, empty until first set.
        size_kb: Size of the file in kilobytes.
        tags: Ordered free-form tags; duplicates are allowed.
        record_type: Type classification fixed at construction.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(min_length=1, frozen=True)
    path: str = Field(default="", frozen=True)
    creation_date: str = Field(default="", frozen=True)
    modification_date: str = ""
    size_kb: int = Field(default=0, ge=0, frozen=True)
    tags: List[str] = Field(default_factory=list)
    record_type: RecordType = Field(frozen=True)

    def has_tag(self, tag: str) -> bool:
        """Return True when ``tag`` is attached to the record (exact match)."""
        return tag in self.tags

    def add_tag(self, tag: str) -> None:
        """Append ``tag`` to the record, keeping any existing duplicates."""
        self.tags.append(tag)

    def mark_modified(self, date: str) -> None:
        """Record a new modification date.

        Args:
            date: Modification date encoded as ``DD.MM.YYYY``.
        """
        self.modification_date = date

    def describe_open(self) -> str:
        """Return the human-readable description of opening this record.

        No file is touched; the description is the whole effect.

        Returns:
            str: Message naming the record and its type.
        """
        return OPEN_DESCRIPTIONS[self.record_type].format(name=self.name)


__all__ = ["RecordType", "FileRecord", "OPEN_DESCRIPTIONS"]
