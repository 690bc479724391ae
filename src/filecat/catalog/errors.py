"""Catalog errors."""


class CatalogError(Exception):
    """Base exception for catalog operations."""


class NotFoundError(CatalogError):
    """Raised when no live record carries the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"File {name!r} not found.")
        self.name = name
