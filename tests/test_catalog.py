"""Catalog lifecycle tests."""

from __future__ import annotations

import pytest

from filecat.catalog import Catalog, CatalogError, NotFoundError, sample_records
from filecat.records import RecordType


def test_added_records_are_found_until_archived_or_deleted(make_record) -> None:
    report = make_record("Report.pdf", RecordType.PDF_DOCUMENT)
    notes = make_record("Notes.txt", RecordType.TEXT_DOCUMENT)
    catalog = Catalog([report, notes])

    assert catalog.find_by_name("Report.pdf") is report
    assert catalog.find_by_name("Notes.txt") is notes

    catalog.archive("Report.pdf")
    catalog.delete("Notes.txt", confirmed=True)

    assert catalog.find_by_name("Report.pdf") is None
    assert catalog.find_by_name("Notes.txt") is None


def test_archive_moves_record_by_reference(make_record) -> None:
    record = make_record("Image.jpg", RecordType.IMAGE_FILE)
    catalog = Catalog([record])

    archived = catalog.archive("Image.jpg")

    assert archived is record
    assert catalog.all_live() == ()
    assert catalog.all_archived() == (record,)
    assert catalog.search() == []


def test_second_archive_of_same_name_raises(make_record) -> None:
    catalog = Catalog([make_record("Image.jpg", RecordType.IMAGE_FILE)])
    catalog.archive("Image.jpg")

    with pytest.raises(NotFoundError) as excinfo:
        catalog.archive("Image.jpg")

    assert excinfo.value.name == "Image.jpg"
    assert len(catalog.all_archived()) == 1


def test_archive_missing_name_mutates_nothing(make_record) -> None:
    record = make_record("Image.jpg", RecordType.IMAGE_FILE)
    catalog = Catalog([record])

    with pytest.raises(NotFoundError):
        catalog.archive("Missing.jpg")

    assert catalog.all_live() == (record,)
    assert catalog.all_archived() == ()


def test_unconfirmed_delete_is_a_no_op(make_record) -> None:
    record = make_record("Notes.txt", RecordType.TEXT_DOCUMENT)
    catalog = Catalog([record])

    assert catalog.delete("Notes.txt", confirmed=False) is False
    assert catalog.all_live() == (record,)


def test_confirmed_delete_does_not_archive(make_record) -> None:
    catalog = Catalog([make_record("Notes.txt", RecordType.TEXT_DOCUMENT)])

    assert catalog.delete("Notes.txt", confirmed=True) is True
    assert catalog.all_live() == ()
    assert catalog.all_archived() == ()
    with pytest.raises(NotFoundError):
        catalog.delete("Notes.txt", confirmed=True)


def test_archived_records_cannot_be_deleted(make_record) -> None:
    catalog = Catalog([make_record("Notes.txt", RecordType.TEXT_DOCUMENT)])
    catalog.archive("Notes.txt")

    with pytest.raises(NotFoundError):
        catalog.delete("Notes.txt", confirmed=True)
    assert len(catalog.all_archived()) == 1


def test_duplicate_names_target_first_match(make_record) -> None:
    first = make_record("Song.mp3", RecordType.AUDIO_FILE, size_kb=1)
    second = make_record("Song.mp3", RecordType.AUDIO_FILE, size_kb=2)
    catalog = Catalog([first, second])

    assert catalog.find_by_name("Song.mp3") is first
    assert catalog.archive("Song.mp3") is first
    assert catalog.find_by_name("Song.mp3") is second


def test_adding_the_same_record_twice_raises(make_record) -> None:
    record = make_record("Notes.txt", RecordType.TEXT_DOCUMENT)
    catalog = Catalog([record])
    catalog.archive("Notes.txt")

    with pytest.raises(CatalogError):
        catalog.add(record)


def test_open_describes_live_records_only(make_record) -> None:
    catalog = Catalog([make_record("Clip.mp4", RecordType.VIDEO_FILE)])

    assert catalog.open("Clip.mp4") == "Opened video file: Clip.mp4"

    catalog.archive("Clip.mp4")
    with pytest.raises(NotFoundError):
        catalog.open("Clip.mp4")


def test_views_are_read_only_snapshots(make_record) -> None:
    catalog = Catalog([make_record("Notes.txt", RecordType.TEXT_DOCUMENT)])

    live = catalog.all_live()
    catalog.add(make_record("Other.txt", RecordType.TEXT_DOCUMENT))

    assert isinstance(live, tuple)
    assert len(live) == 1
    assert len(catalog) == 2


def test_sample_records_cover_every_type() -> None:
    records = sample_records()

    assert [record.name for record in records] == [
        "Report.pdf",
        "Image.jpg",
        "Notes.txt",
        "Video.mp4",
        "Podcast.mp3",
    ]
    assert {record.record_type for record in records} == set(RecordType)
    assert sample_records()[0] is not records[0]
