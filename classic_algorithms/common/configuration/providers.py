"""Sources of raw configuration for the ConfigurationHub.

Three sources are layered by the default hub, later ones winning:

1. the YAML files packaged under ``classic_algorithms/config``;
2. an optional user YAML file (``--config`` on the command line);
3. ``CLASSIC_ALGORITHMS_*`` environment variables.

``MappingConfigProvider`` serves in-memory overrides, mostly for tests and
embedding applications.
"""
from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional

import yaml

ENV_PREFIX = "CLASSIC_ALGORITHMS_"


class ConfigProvider(ABC):
    """Abstract configuration provider returning a nested dictionary."""

    @abstractmethod
    def load(self) -> Dict[str, Any]:
        """Return configuration payload."""


class YamlConfigProvider(ConfigProvider):
    """Load a YAML file, or every ``*.yml``/``*.yaml`` file of a directory.

    Directory entries are merged in file-name order. With ``required=False``
    a missing path yields an empty payload instead of failing at
    construction time.
    """

    def __init__(self, path: Path | str, *, required: bool = True) -> None:
        self._path = Path(path)
        self._required = required
        if required and not self._path.exists():
            raise FileNotFoundError(f"Config path {self._path} not found")

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        payload: Dict[str, Any] = {}
        for file in self._files():
            payload = merge_mappings(payload, _read_yaml(file))
        return payload

    def _files(self) -> Iterator[Path]:
        if not self._path.is_dir():
            yield self._path
            return
        yield from sorted(
            p for p in self._path.iterdir() if p.suffix in {".yml", ".yaml"}
        )


class EnvVarConfigProvider(ConfigProvider):
    """Build a payload from prefixed environment variables.

    ``separator`` splits a key into nested sections, so
    ``CLASSIC_ALGORITHMS_logging__level=DEBUG`` becomes
    ``{"logging": {"level": "DEBUG"}}``. Values are decoded as JSON when
    possible (``8`` -> int, ``false`` -> bool, ``[1, 2]`` -> list).
    Variables under ``<prefix>CONFIG_`` steer the loader itself and are skipped.
    """

    def __init__(self, prefix: str = ENV_PREFIX, separator: str = "__") -> None:
        self._prefix = prefix
        self._separator = separator

    def load(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        reserved = f"{self._prefix}CONFIG_"
        for key, raw_value in os.environ.items():
            if not key.startswith(self._prefix) or key.startswith(reserved):
                continue
            *parents, leaf = key[len(self._prefix):].lower().split(self._separator)
            section = payload
            for part in parents:
                section = section.setdefault(part, {})
                if not isinstance(section, dict):
                    raise ValueError(
                        f"Environment variable {key} nests under {self._prefix}{part}, "
                        "which is already set to a plain value"
                    )
            if isinstance(section.get(leaf), dict):
                raise ValueError(
                    f"Environment variable {key} sets a plain value on a section "
                    "that other variables already populate"
                )
            section[leaf] = decode_value(raw_value)
        return payload


class MappingConfigProvider(ConfigProvider):
    """Serve a fixed in-memory mapping."""

    def __init__(self, payload: Optional[Mapping[str, Any]] = None) -> None:
        self._payload = dict(payload or {})

    def load(self) -> Dict[str, Any]:
        return deepcopy(self._payload)


def merge_mappings(base: Mapping[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new dict with ``incoming`` merged over ``base`` section by section."""

    merged = deepcopy(dict(base))
    for key, value in incoming.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_mappings(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged


def decode_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        lowered = raw.lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
        return raw


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"YAML config at {path} must produce a mapping")
    return loaded
