"""Bootstrap of the process-wide configuration hub."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel

from .hub import ConfigurationHub
from .providers import ENV_PREFIX, ConfigProvider, EnvVarConfigProvider, YamlConfigProvider

T = TypeVar("T", bound=BaseModel)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"
ENV_CONFIG_DIR = f"{ENV_PREFIX}CONFIG_DIR"
ENV_CONFIG_FILE = f"{ENV_PREFIX}CONFIG_FILE"

_default_hub: Optional[ConfigurationHub] = None


def build_hub(config_file: Optional[str] = None) -> ConfigurationHub:
    """Build a hub over packaged defaults, ``config_file`` and the environment.

    ``CLASSIC_ALGORITHMS_CONFIG_DIR`` replaces the packaged defaults directory
    and ``CLASSIC_ALGORITHMS_CONFIG_FILE`` supplies ``config_file`` when the
    argument is omitted.
    """

    config_dir = Path(os.environ.get(ENV_CONFIG_DIR, str(DEFAULT_CONFIG_DIR)))
    if not config_dir.is_dir():
        raise FileNotFoundError(
            f"Configuration directory {config_dir} was not found; set {ENV_CONFIG_DIR}"
        )
    providers: List[ConfigProvider] = [YamlConfigProvider(config_dir)]
    config_file = config_file or os.environ.get(ENV_CONFIG_FILE)
    if config_file:
        providers.append(YamlConfigProvider(config_file))
    providers.append(EnvVarConfigProvider())
    return ConfigurationHub(providers)


def get_hub() -> ConfigurationHub:
    """Return the process-wide hub, building it on first use."""

    global _default_hub
    if _default_hub is None:
        _default_hub = build_hub()
    return _default_hub


def use_hub(hub: ConfigurationHub) -> ConfigurationHub:
    """Install ``hub`` as the process-wide hub."""

    global _default_hub
    _default_hub = hub
    return hub


def get_settings(path: Optional[str] = None, *, model: Optional[Type[T]] = None) -> Any:
    return get_hub().get(path, model=model)


def reload_settings() -> None:
    get_hub().reload()


def reset_hub() -> None:
    """Forget the process-wide hub; the next ``get_hub()`` rebuilds it."""

    global _default_hub
    _default_hub = None
