"""Demonstration records used to seed an interactive session."""

from __future__ import annotations

from filecat.records import FileRecord, RecordType


def sample_records() -> list[FileRecord]:
    """Return fresh copies of the demo records, in seeding order."""
    return [
        FileRecord(
            name="Report.pdf",
            path="C:/Documents",
            creation_date="10.05.2023",
            size_kb=200,
            tags=["work", "project"],
            record_type=RecordType.PDF_DOCUMENT,
        ),
        FileRecord(
            name="Image.jpg",
            path="C:/Pictures",
            creation_date="15.11.2022",
            size_kb=1500,
            tags=["vacation", "family"],
            record_type=RecordType.IMAGE_FILE,
        ),
        FileRecord(
            name="Notes.txt",
            path="C:/Documents",
            creation_date="01.01.2021",
            size_kb=50,
            tags=["work", "personal"],
            record_type=RecordType.TEXT_DOCUMENT,
        ),
        FileRecord(
            name="Video.mp4",
            path="C:/Videos",
            creation_date="20.02.2020",
            size_kb=500000,
            tags=["work"],
            record_type=RecordType.VIDEO_FILE,
        ),
        FileRecord(
            name="Podcast.mp3",
            path="C:/Music",
            creation_date="05.04.2021",
            size_kb=100000,
            tags=["project"],
            record_type=RecordType.AUDIO_FILE,
        ),
    ]


__all__ = ["sample_records"]
