"""Bulk import of file records from delimited text."""

from .errors import ImportFileError, ParseError, ParseErrorKind
from .importer import import_file, import_lines, iter_records, split_lines
from .models import ImportResult
from .parser import parse_line, parse_size, parse_tags

__all__ = [
    "ImportResult",
    "ImportFileError",
    "ParseError",
    "ParseErrorKind",
    "import_file",
    "import_lines",
    "iter_records",
    "parse_line",
    "parse_size",
    "parse_tags",
    "split_lines",
]
