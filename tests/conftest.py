"""Shared fixtures for the filecat test suite."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

from filecat.records import FileRecord, RecordType

RecordFactory = Callable[..., FileRecord]


def _make_record(
    name: str,
    record_type: RecordType,
    *,
    size_kb: int = 0,
    creation_date: str = "01.01.2024",
    tags: list[str] | None = None,
    path: str = "C:/Files",
) -> FileRecord:
    return FileRecord(
        name=name,
        path=path,
        creation_date=creation_date,
        size_kb=size_kb,
        tags=list(tags or []),
        record_type=record_type,
    )


@pytest.fixture
def make_record() -> RecordFactory:
    """Return a factory building records with sensible defaults."""
    return _make_record


@pytest.fixture
def cli_env(tmp_path: Path) -> dict[str, str]:
    """Return environment variables pointing HOME to a temp directory."""
    env = {key: value for key, value in os.environ.items() if not key.startswith("FILECAT__")}
    env["HOME"] = str(tmp_path / "home")
    return env


@pytest.fixture
def import_source(tmp_path: Path) -> Path:
    """Write a small import file covering every record type plus bad lines."""
    source = tmp_path / "files.txt"
    source.write_text(
        "\n".join(
            [
                "Report.pdf,C:/Documents,10.05.2023,200KB,work,project",
                "Image.jpg,C:/Pictures,15.11.2022,1500KB,vacation,family",
                "Notes.txt,C:/Documents,01.01.2021,50KB,work,personal",
                "Video.mp4,C:/Videos,20.02.2020,5MB,work",
                "Podcast.mp3,C:/Music,05.04.2021,100MB,project",
                "archive.zip,C:/Downloads,01.01.2024,10KB,misc",
                "",
                "Broken.pdf,C:/Documents,01.01.2024,200,work",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return source
