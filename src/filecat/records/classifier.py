"""Map file names and type codes onto record types."""

from __future__ import annotations

from typing import Iterable, Optional

from .errors import UnrecognizedTypeError
from .models import FileRecord, RecordType

# Earlier entries win when a name carries several markers.
CLASSIFICATION_ORDER = (
    RecordType.PDF_DOCUMENT,
    RecordType.IMAGE_FILE,
    RecordType.TEXT_DOCUMENT,
    RecordType.VIDEO_FILE,
    RecordType.AUDIO_FILE,
)


def classify_name(name: str) -> Optional[RecordType]:
    """Return the record type whose extension marker appears in ``name``.

    Markers are matched anywhere in the name rather than as a suffix, so
    ``report.txtfinal`` still classifies as a text document.

    Args:
        name: File name to classify.

    Returns:
        Optional[RecordType]: Matching type, or None when no marker is present.
    """

    for record_type in CLASSIFICATION_ORDER:
        if record_type.extension in name:
            return record_type
    return None


def type_for_code(code: str) -> RecordType:
    """Resolve a short type code (``pdf``) or type name (``PDFDocument``).

    Args:
        code: Value supplied when adding a record by type.

    Returns:
        RecordType: The resolved record type.

    Raises:
        UnrecognizedTypeError: If ``code`` names no known type.
    """

    for record_type in RecordType:
        if code in (record_type.code, record_type.value):
            return record_type
    raise UnrecognizedTypeError(code)


def build_record(
    code: str,
    name: str,
    path: str,
    creation_date: str,
    size_kb: int,
    tags: Iterable[str] = (),
) -> FileRecord:
    """Construct a record for an explicitly chosen type code.

    Raises:
        UnrecognizedTypeError: If ``code`` names no known type.
    """

    return FileRecord(
        name=name,
        path=path,
        creation_date=creation_date,
        size_kb=size_kb,
        tags=list(tags),
        record_type=type_for_code(code),
    )


__all__ = ["CLASSIFICATION_ORDER", "classify_name", "type_for_code", "build_record"]
