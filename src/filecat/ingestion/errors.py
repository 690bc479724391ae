"""Import errors."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ParseErrorKind(str, Enum):
    """Reasons an import line cannot become a record."""

    MALFORMED_LINE = "malformed_line"
    UNKNOWN_SIZE_UNIT = "unknown_size_unit"


class ParseError(ValueError):
    """Raised when an import line cannot be converted into a record.

    Attributes:
        kind: Category of the failure.
        line: Offending line without its terminator.
        line_number: 1-based position in the source, when known.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        *,
        line: str,
        line_number: Optional[int] = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.line = line
        self.line_number = line_number
        super().__init__(str(self))

    def __str__(self) -> str:
        prefix = f"line {self.line_number}: " if self.line_number is not None else ""
        return f"{prefix}{self.message}"

    def at_line(self, line_number: int) -> "ParseError":
        """Return a copy of this error annotated with ``line_number``."""
        return ParseError(self.kind, self.message, line=self.line, line_number=line_number)


class ImportFileError(Exception):
    """Raised when an import source cannot be read."""
