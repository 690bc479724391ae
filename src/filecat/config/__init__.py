"""Configuration management for filecat."""

from __future__ import annotations

import os
import textwrap
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

import yaml

from .exceptions import ConfigError
from .models import FilecatConfig
from .resolver import assign_nested, resolve_with_precedence

DEFAULT_CONFIG_PATH = Path("~/.filecat/config.yaml")
ENV_PREFIX = "FILECAT__"
_CONFIG_HEADER = textwrap.dedent(
    """\
    # filecat configuration file
    # Generated automatically; update it with `filecat config set KEY --value VALUE`.
    """
)


class ConfigManager:
    """Read and write the YAML configuration file and resolve overrides."""

    def __init__(
        self,
        config_path: Path | None = None,
        *,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._config_path = (config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._env = env if env is not None else os.environ

    @property
    def config_path(self) -> Path:
        """Return the resolved configuration path."""
        return self._config_path

    def load(
        self,
        *,
        cli_overrides: Mapping[str, Any] | None = None,
        include_env: bool = True,
    ) -> FilecatConfig:
        """Return the effective configuration.

        Args:
            cli_overrides: Highest-precedence overrides, keyed by dotted path.
            include_env: Whether ``FILECAT__SECTION__KEY`` variables apply.

        Raises:
            ConfigError: If the file or any override is invalid.
        """
        self.ensure_exists()
        return resolve_with_precedence(
            defaults=FilecatConfig(),
            file_overrides=self.load_file_overrides(),
            env_overrides=self._env_overrides() if include_env else None,
            cli_overrides=cli_overrides,
        )

    def load_file_overrides(self) -> dict[str, Any]:
        """Return the raw mapping stored in the configuration file."""
        if not self._config_path.exists():
            return {}

        try:
            raw = yaml.safe_load(self._config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse configuration file: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigError("Configuration file must contain a mapping at the top level.")
        return raw

    def save(self, config: FilecatConfig | Mapping[str, Any]) -> None:
        """Write ``config`` to disk with a generated header."""
        if isinstance(config, FilecatConfig):
            data = config.model_dump(mode="python")
        else:
            data = dict(config)
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        body = yaml.safe_dump(data, sort_keys=False)
        self._config_path.write_text(
            f"{_CONFIG_HEADER}# Last updated: {stamp}\n{body}", encoding="utf-8"
        )

    def ensure_exists(self) -> Path:
        """Create the configuration file with defaults when missing."""
        if not self._config_path.exists():
            self.save(FilecatConfig())
        return self._config_path

    def read_text(self) -> str:
        """Return the configuration file contents, or an empty string."""
        if not self._config_path.exists():
            return ""
        return self._config_path.read_text(encoding="utf-8")

    def _env_overrides(self) -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        for key, raw_value in self._env.items():
            if not key.startswith(ENV_PREFIX):
                continue
            path = [segment.lower() for segment in key[len(ENV_PREFIX) :].split("__") if segment]
            if not path:
                continue
            try:
                value = yaml.safe_load(raw_value)
            except yaml.YAMLError:
                value = raw_value
            assign_nested(overrides, path, value)
        return overrides


__all__ = [
    "ConfigManager",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "FilecatConfig",
    "assign_nested",
    "resolve_with_precedence",
]
