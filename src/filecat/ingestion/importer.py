"""Bulk import of records from delimited text sources."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Tuple

from filecat.records import FileRecord

from .errors import ImportFileError, ParseError
from .models import ImportResult
from .parser import parse_line

if TYPE_CHECKING:
    from filecat.catalog import Catalog

LOGGER = logging.getLogger(__name__)

ParsedLine = Tuple[int, Optional[FileRecord], Optional[ParseError]]


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n`` only; a final terminator adds no empty line.

    Other line-break characters (form feed, ``\\u2028`` and friends) stay
    inside their field.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _parse_lines(lines: Iterable[str]) -> Iterator[ParsedLine]:
    """Yield ``(line_number, record, error)`` for every source line.

    Blank lines and unrecognized names yield neither a record nor an error.
    """

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            yield line_number, None, None
            continue
        try:
            record = parse_line(line)
        except ParseError as exc:
            located = exc.at_line(line_number)
            located.__cause__ = exc
            yield line_number, None, located
            continue
        yield line_number, record, None


def iter_records(lines: Iterable[str]) -> Iterator[Tuple[int, FileRecord]]:
    """Lazily yield ``(line_number, record)`` for each importable line.

    Blank lines and names without a recognized extension are skipped.

    Raises:
        ParseError: On the first line that fails to parse, annotated with its
            line number.
    """

    for line_number, record, error in _parse_lines(lines):
        if error is not None:
            raise error
        if record is not None:
            yield line_number, record


def import_lines(lines: Iterable[str], *, strict: bool = False) -> ImportResult:
    """Parse every line of an import source.

    Args:
        lines: Source lines.
        strict: Propagate the first parse error instead of collecting it.

    Returns:
        ImportResult: Parsed records plus skipped lines and error messages.

    Raises:
        ParseError: In strict mode, for the first line that fails to parse.
    """

    result = ImportResult()
    for line_number, record, error in _parse_lines(lines):
        if error is not None:
            if strict:
                raise error
            LOGGER.debug("Import error: %s", error)
            result.errors.append(str(error))
        elif record is None:
            LOGGER.debug("Skipping line %d: blank or unrecognized file type.", line_number)
            result.skipped.append(line_number)
        else:
            result.records.append(record)
    return result


def import_file(
    catalog: "Catalog",
    path: str | Path,
    *,
    encoding: str = "utf-8",
    strict: bool = False,
) -> ImportResult:
    """Read ``path`` and add every parsed record to ``catalog``.

    The file is read in full before any record is added, so a strict-mode
    failure leaves the catalog unchanged.

    Args:
        catalog: Catalog receiving the records.
        path: Text file in the import format.
        encoding: Text encoding of the file.
        strict: Propagate the first parse error instead of collecting it.

    Returns:
        ImportResult: Outcome of the import.

    Raises:
        ImportFileError: If the file cannot be read.
        ParseError: In strict mode, for the first line that fails to parse.
    """

    source = Path(path).expanduser()
    try:
        with source.open("r", encoding=encoding, newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ImportFileError(f"Cannot read import file {source}: {exc}") from exc

    result = import_lines(split_lines(text), strict=strict)
    for record in result.records:
        catalog.add(record)
    LOGGER.debug(
        "Imported %d record(s) from %s (%d skipped, %d errors).",
        len(result.records),
        source,
        len(result.skipped),
        len(result.errors),
    )
    return result


__all__ = ["split_lines", "iter_records", "import_lines", "import_file"]
