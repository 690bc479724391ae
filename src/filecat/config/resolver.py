"""Merge configuration layers into a validated ``FilecatConfig``."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from copy import deepcopy
from typing import Any, Mapping

from pydantic import ValidationError

from .exceptions import ConfigError
from .models import FilecatConfig


def resolve_with_precedence(
    *,
    defaults: FilecatConfig,
    file_overrides: Mapping[str, Any] | None = None,
    env_overrides: Mapping[str, Any] | None = None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> FilecatConfig:
    """Layer overrides onto ``defaults``: file, then environment, then CLI.

    CLI override keys may use dotted paths (``search.default_sort``).

    Raises:
        ConfigError: If a layer is not a mapping or the merged result is invalid.
    """
    merged = defaults.model_dump(mode="python")
    layers = (("file", file_overrides), ("environment", env_overrides), ("cli", cli_overrides))
    for source_name, layer in layers:
        if layer is None:
            continue
        merged = _deep_merge(merged, _expand_dotted(layer, source_name=source_name))

    try:
        return FilecatConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration values: {exc}") from exc


def _expand_dotted(source: Mapping[str, Any], *, source_name: str) -> dict[str, Any]:
    if not isinstance(source, MappingABC):
        raise ConfigError(f"{source_name.capitalize()} overrides must be a mapping.")

    expanded: dict[str, Any] = {}
    for key, value in source.items():
        if not isinstance(key, str):
            raise ConfigError(f"{source_name.capitalize()} override keys must be strings.")
        if isinstance(value, MappingABC):
            value = _expand_dotted(value, source_name=source_name)
        assign_nested(expanded, key.split("."), value)
    return expanded


def assign_nested(target: dict[str, Any], path: list[str], value: Any) -> None:
    """Assign ``value`` at the nested ``path`` inside ``target``.

    Raises:
        ConfigError: If a non-mapping value sits along ``path``.
    """
    node = target
    for segment in path[:-1]:
        existing = node.setdefault(segment, {})
        if not isinstance(existing, dict):
            raise ConfigError(
                f"Cannot assign {'.'.join(path)} because {segment!r} is not a mapping."
            )
        node = existing
    leaf = path[-1]
    if isinstance(value, dict) and isinstance(node.get(leaf), dict):
        node[leaf] = _deep_merge(node[leaf], value)
    else:
        node[leaf] = value


def _deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged = deepcopy(dict(base))
    for key, value in overrides.items():
        if isinstance(value, MappingABC) and isinstance(merged.get(key), MappingABC):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


__all__ = ["resolve_with_precedence", "assign_nested"]
