"""Import line parser tests."""

from __future__ import annotations

import pytest

from filecat.ingestion import ParseError, ParseErrorKind, parse_line, parse_size
from filecat.records import RecordType


def test_parse_line_reads_pdf_record() -> None:
    record = parse_line("Report.pdf,C:/Documents,10.05.2023,200KB,work,project")

    assert record is not None
    assert record.record_type is RecordType.PDF_DOCUMENT
    assert record.name == "Report.pdf"
    assert record.path == "C:/Documents"
    assert record.creation_date == "10.05.2023"
    assert record.size_kb == 200
    assert record.tags == ["work", "project"]
    assert record.modification_date == ""


def test_parse_line_converts_megabytes() -> None:
    record = parse_line("Video.mp4,C:/Videos,20.02.2020,5MB,work\n")

    assert record is not None
    assert record.record_type is RecordType.VIDEO_FILE
    assert record.size_kb == 5120
    assert record.tags == ["work"]


def test_parse_line_strips_windows_line_endings() -> None:
    record = parse_line("Notes.txt,C:/Documents,01.01.2021,50KB,work,personal\r\n")

    assert record is not None
    assert record.tags == ["work", "personal"]


@pytest.mark.parametrize(
    ("line", "expected_tags"),
    [
        ("a.txt,p,01.01.2024,1KB,", [""]),
        ("a.txt,p,01.01.2024,1KB", [""]),
        ("a.txt,p,01.01.2024,1KB,x,,y", ["x", "", "y"]),
        ("a.txt,p,01.01.2024,1KB,dup,dup", ["dup", "dup"]),
    ],
)
def test_tags_always_yield_at_least_one_entry(line: str, expected_tags: list[str]) -> None:
    record = parse_line(line)

    assert record is not None
    assert record.tags == expected_tags


def test_unrecognized_extension_is_skipped() -> None:
    assert parse_line("archive.zip,C:/,01.01.2024,10KB,misc") is None


def test_unrecognized_extension_skips_before_size_validation() -> None:
    assert parse_line("archive.zip,C:/,01.01.2024,10GB,misc") is None


@pytest.mark.parametrize(
    "line",
    [
        "Report.pdf,C:/Documents,10.05.2023",
        "Report.pdf",
        ",C:/Documents,10.05.2023,10KB,tag",
        "Report.pdf,C:/Documents,10.05.2023,tenKB,tag",
        "Report.pdf,C:/Documents,10.05.2023,-5KB,tag",
    ],
)
def test_malformed_lines_raise(line: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_line(line)

    assert excinfo.value.kind is ParseErrorKind.MALFORMED_LINE


@pytest.mark.parametrize("size", ["200", "200GB", "", "2 kb"])
def test_missing_size_unit_raises(size: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_line(f"Report.pdf,C:/Documents,10.05.2023,{size},work")

    assert excinfo.value.kind is ParseErrorKind.UNKNOWN_SIZE_UNIT
    assert excinfo.value.line == f"Report.pdf,C:/Documents,10.05.2023,{size},work"


@pytest.mark.parametrize(
    ("field", "expected"),
    [("0KB", 0), ("12KB", 12), (" 7 KB", 7), ("3MB", 3072), ("1KBMB", 1)],
)
def test_parse_size(field: str, expected: int) -> None:
    assert parse_size(field) == expected


def test_parse_error_mentions_line_number_when_located() -> None:
    error = ParseError(ParseErrorKind.MALFORMED_LINE, "broken", line="x").at_line(4)

    assert str(error) == "line 4: broken"
    assert error.line_number == 4


@pytest.mark.parametrize("field", ["1_000KB", "\u0665KB", "+5KB", "-5MB", "1.5MB", "\u00b2KB"])
def test_size_prefix_must_be_plain_ascii_digits(field: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_size(field)

    assert excinfo.value.kind is ParseErrorKind.MALFORMED_LINE
