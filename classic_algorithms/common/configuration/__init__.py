from .hub import ConfigurationHub, ConfigNotFoundError
from .loaders import build_hub, get_hub, get_settings, reload_settings, reset_hub, use_hub
from .providers import (
    ConfigProvider,
    EnvVarConfigProvider,
    MappingConfigProvider,
    YamlConfigProvider,
)
