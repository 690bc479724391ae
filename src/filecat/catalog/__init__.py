"""In-memory catalog of live and archived file records."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from filecat.query import SearchCriteria, search
from filecat.records import FileRecord

from .errors import CatalogError, NotFoundError
from .samples import sample_records

LOGGER = logging.getLogger(__name__)


class Catalog:
    """Own the live and archived record sets of a single session.

    Every record belongs to exactly one of the two sets. Name lookups scan the
    live set in insertion order and return the first match, so duplicate names
    are legal but only the earliest one is addressable.
    """

    def __init__(self, records: Iterable[FileRecord] = ()) -> None:
        """Initialize the catalog, optionally with records to add.

        Args:
            records: Records appended to the live set in order.
        """
        self._live: list[FileRecord] = []
        self._archived: list[FileRecord] = []
        for record in records:
            self.add(record)

    def add(self, record: FileRecord) -> None:
        """Append ``record`` to the live set.

        Args:
            record: Record to track.

        Raises:
            CatalogError: If this exact record object is already tracked.
        """
        if self._tracks(record):
            raise CatalogError(f"Record {record.name!r} is already in the catalog.")
        self._live.append(record)
        LOGGER.debug("Added %s (%s).", record.name, record.record_type.value)

    def find_by_name(self, name: str) -> Optional[FileRecord]:
        """Return the first live record named ``name``, or None.

        Archived records are never returned.
        """
        index = self._live_index(name)
        return None if index is None else self._live[index]

    def archive(self, name: str) -> FileRecord:
        """Move the first live record named ``name`` into the archive.

        Args:
            name: Name of the record to archive.

        Returns:
            FileRecord: The archived record.

        Raises:
            NotFoundError: If no live record carries ``name``.
        """
        index = self._require_live_index(name)
        record = self._live.pop(index)
        self._archived.append(record)
        LOGGER.debug("Archived %s.", name)
        return record

    def delete(self, name: str, *, confirmed: bool) -> bool:
        """Permanently remove the first live record named ``name``.

        Args:
            name: Name of the record to delete.
            confirmed: Caller's confirmation; nothing changes when False.

        Returns:
            bool: True when the record was removed.

        Raises:
            NotFoundError: If no live record carries ``name``.
        """
        index = self._require_live_index(name)
        if not confirmed:
            return False
        del self._live[index]
        LOGGER.debug("Deleted %s.", name)
        return True

    def open(self, name: str) -> str:
        """Return the open description for the first live record named ``name``.

        Raises:
            NotFoundError: If no live record carries ``name``.
        """
        return self._live[self._require_live_index(name)].describe_open()

    def search(self, criteria: Optional[SearchCriteria] = None) -> list[FileRecord]:
        """Search the live set; archived records never match."""
        return search(self._live, criteria)

    def all_live(self) -> tuple[FileRecord, ...]:
        """Return the live records in insertion order."""
        return tuple(self._live)

    def all_archived(self) -> tuple[FileRecord, ...]:
        """Return the archived records in archive order."""
        return tuple(self._archived)

    def __len__(self) -> int:
        return len(self._live)

    # Internal helpers -------------------------------------------------

    def _tracks(self, record: FileRecord) -> bool:
        return any(existing is record for existing in (*self._live, *self._archived))

    def _live_index(self, name: str) -> Optional[int]:
        for index, record in enumerate(self._live):
            if record.name == name:
                return index
        return None

    def _require_live_index(self, name: str) -> int:
        index = self._live_index(name)
        if index is None:
            raise NotFoundError(name)
        return index


__all__ = ["Catalog", "CatalogError", "NotFoundError", "sample_records"]
