"""File record model and classifier tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from filecat.records import (
    FileRecord,
    RecordType,
    UnrecognizedTypeError,
    build_record,
    classify_name,
    type_for_code,
)


def test_record_defaults_and_tag_helpers() -> None:
    record = build_record("txt", "Notes.txt", "C:/Documents", "01.01.2021", 50, ["work"])

    assert record.record_type is RecordType.TEXT_DOCUMENT
    assert record.modification_date == ""

    record.add_tag("work")
    record.add_tag("personal")

    assert record.tags == ["work", "work", "personal"]
    assert record.has_tag("personal")
    assert not record.has_tag("Personal")


def test_modification_date_is_mutable_but_identity_is_frozen() -> None:
    record = build_record("pdf", "Report.pdf", "C:/Documents", "10.05.2023", 200)

    record.mark_modified("11.05.2023")
    record.mark_modified("12.05.2023")
    assert record.modification_date == "12.05.2023"

    with pytest.raises(ValidationError):
        record.name = "Other.pdf"
    with pytest.raises(ValidationError):
        record.record_type = RecordType.IMAGE_FILE
    with pytest.raises(ValidationError):
        record.size_kb = 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "size_kb": 1},
        {"name": "a.pdf", "size_kb": -1},
    ],
)
def test_record_rejects_invalid_values(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        FileRecord(record_type=RecordType.PDF_DOCUMENT, **kwargs)


@pytest.mark.parametrize(
    ("record_type", "expected"),
    [
        (RecordType.TEXT_DOCUMENT, "Opened text document: x"),
        (RecordType.PDF_DOCUMENT, "Opened PDF document: x"),
        (RecordType.IMAGE_FILE, "Opened image: x"),
        (RecordType.VIDEO_FILE, "Opened video file: x"),
        (RecordType.AUDIO_FILE, "Opened audio file: x"),
    ],
)
def test_describe_open_per_type(record_type: RecordType, expected: str) -> None:
    record = FileRecord(name="x", record_type=record_type)

    assert record.describe_open() == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Report.pdf", RecordType.PDF_DOCUMENT),
        ("Image.jpg", RecordType.IMAGE_FILE),
        ("Notes.txt", RecordType.TEXT_DOCUMENT),
        ("Video.mp4", RecordType.VIDEO_FILE),
        ("Podcast.mp3", RecordType.AUDIO_FILE),
        ("report.txtfinal", RecordType.TEXT_DOCUMENT),
        ("scan.jpg.pdf", RecordType.PDF_DOCUMENT),
        ("notes.txt.mp3", RecordType.TEXT_DOCUMENT),
        ("archive.zip", None),
        ("README", None),
        ("photo.JPG", None),
    ],
)
def test_classify_name_uses_substring_priority(name: str, expected: RecordType | None) -> None:
    assert classify_name(name) == expected


def test_type_for_code_accepts_codes_and_type_names() -> None:
    assert type_for_code("mp4") is RecordType.VIDEO_FILE
    assert type_for_code("AudioFile") is RecordType.AUDIO_FILE


def test_unknown_type_code_is_a_hard_error() -> None:
    with pytest.raises(UnrecognizedTypeError) as excinfo:
        build_record("exe", "setup.exe", "C:/", "01.01.2024", 10)

    assert excinfo.value.value == "exe"
