"""File record models and type classification."""

from .classifier import CLASSIFICATION_ORDER, build_record, classify_name, type_for_code
from .errors import RecordError, UnrecognizedTypeError
from .models import OPEN_DESCRIPTIONS, FileRecord, RecordType

__all__ = [
    "FileRecord",
    "RecordType",
    "OPEN_DESCRIPTIONS",
    "CLASSIFICATION_ORDER",
    "classify_name",
    "type_for_code",
    "build_record",
    "RecordError",
    "UnrecognizedTypeError",
]
