"""Configuration models describing filecat settings."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class FilecatBaseModel(BaseModel):
    """Shared configuration for filecat Pydantic models."""

    model_config = ConfigDict(extra="forbid")


class CatalogSettings(FilecatBaseModel):
    """Catalog session and import behavior.

    Attributes:
        seed_samples: Whether interactive sessions start with the demo records.
        import_encoding: Text encoding used to read import files.
        strict_import: Whether the first bad import line aborts the import.
    """

    seed_samples: bool = True
    import_encoding: str = "utf-8"
    strict_import: bool = False


class SearchSettings(FilecatBaseModel):
    """Defaults applied to search commands.

    Attributes:
        default_sort: Sort key used when none is given.
    """

    default_sort: Literal["name", "creation_date", "size_kb"] = "name"


class LoggingSettings(FilecatBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level.
    """

    level: str = "WARNING"


class CLIOptions(FilecatBaseModel):
    """CLI behavior defaults.

    Attributes:
        quiet_default: Whether commands suppress non-error output by default.
    """

    quiet_default: bool = False


class FilecatConfig(FilecatBaseModel):
    """Top-level configuration struct for filecat.

    Attributes:
        catalog: Catalog session and import settings.
        search: Search defaults.
        logging: Logging configuration.
        cli: CLI presentation defaults.
    """

    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cli: CLIOptions = Field(default_factory=CLIOptions)


__all__ = [
    "FilecatBaseModel",
    "CatalogSettings",
    "SearchSettings",
    "LoggingSettings",
    "CLIOptions",
    "FilecatConfig",
]
