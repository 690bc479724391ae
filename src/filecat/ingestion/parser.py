"""Parse delimited import lines into file records.

Each line carries ``name,path,creationDate,sizeWithUnit,tagsTail``. Only the
first four commas delimit fields; whatever follows is the tag list, itself
split on commas. There is no header, quoting or escaping.
"""

from __future__ import annotations

from typing import Optional

from filecat.records import FileRecord, classify_name

from .errors import ParseError, ParseErrorKind

FIELD_COUNT = 5
KB_PER_MB = 1024

# Checked in order; a field mentioning both units resolves to KB.
SIZE_UNITS = (("KB", 1), ("MB", KB_PER_MB))


def parse_size(field: str, *, line: str = "") -> int:
    """Convert ``<int>KB`` or ``<int>MB`` into kilobytes.

    Args:
        field: Raw size field.
        line: Full source line, attached to raised errors.

    Returns:
        int: Size in kilobytes.

    Raises:
        ParseError: If the unit is missing or the number is not a
            non-negative integer.
    """

    for unit, multiplier in SIZE_UNITS:
        position = field.find(unit)
        if position == -1:
            continue
        number = field[:position].strip()
        # Plain ASCII digits only: no sign, underscores or non-Latin numerals.
        if not (number.isascii() and number.isdigit()):
            raise ParseError(
                ParseErrorKind.MALFORMED_LINE,
                f"size {field!r} does not start with a non-negative integer",
                line=line,
            )
        return int(number) * multiplier

    raise ParseError(
        ParseErrorKind.UNKNOWN_SIZE_UNIT,
        f"size {field!r} has no KB or MB unit",
        line=line,
    )


def parse_tags(field: str) -> list[str]:
    """Split the tag tail on commas; an empty tail yields ``[""]``."""
    return field.split(",")


def parse_line(line: str) -> Optional[FileRecord]:
    """Convert one import line into a record.

    Args:
        line: Source line, with or without its trailing line terminator.

    Returns:
        Optional[FileRecord]: The parsed record, or None when the name carries
        no recognized extension and the line should be skipped.

    Raises:
        ParseError: If the line is malformed or the size unit is unknown.
    """

    text = line.rstrip("\r\n")
    fields = text.split(",", FIELD_COUNT - 1)
    if len(fields) < FIELD_COUNT - 1:
        raise ParseError(
            ParseErrorKind.MALFORMED_LINE,
            f"expected at least {FIELD_COUNT - 1} comma-separated fields, got {len(fields)}",
            line=text,
        )
    name, path, creation_date, size_field = fields[:4]
    tags_field = fields[4] if len(fields) == FIELD_COUNT else ""

    if not name:
        raise ParseError(ParseErrorKind.MALFORMED_LINE, "file name is empty", line=text)

    record_type = classify_name(name)
    if record_type is None:
        return None

    return FileRecord(
        name=name,
        path=path,
        creation_date=creation_date,
        size_kb=parse_size(size_field, line=text),
        tags=parse_tags(tags_field),
        record_type=record_type,
    )


__all__ = ["FIELD_COUNT", "KB_PER_MB", "parse_size", "parse_tags", "parse_line"]
