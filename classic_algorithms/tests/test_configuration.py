import logging

import pytest
import yaml

from classic_algorithms.algorithm_manager import ManagerSettings
from classic_algorithms.common.configuration import (
    ConfigNotFoundError,
    ConfigurationHub,
    EnvVarConfigProvider,
    MappingConfigProvider,
    YamlConfigProvider,
    build_hub,
    get_hub,
    get_settings,
    reload_settings,
)
from classic_algorithms.common.logging import (
    LoggingConfig,
    configure_from_settings,
    get_logger,
    is_configured,
    setup_logging,
)
from classic_algorithms.common.logging import setup as logging_setup


def _write_yaml(path, payload):
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(payload, handle)


def test_yaml_directory_is_merged_in_order(tmp_path):
    _write_yaml(tmp_path / "a.yaml", {"manager": {"max_workers": 2, "enable_metrics": True}})
    _write_yaml(tmp_path / "b.yaml", {"manager": {"max_workers": 3}})
    payload = YamlConfigProvider(tmp_path).load()
    assert payload == {"manager": {"max_workers": 3, "enable_metrics": True}}


def test_yaml_provider_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        YamlConfigProvider(tmp_path / "missing")


def test_yaml_must_be_mapping(tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        YamlConfigProvider(config).load()


def test_env_provider_nesting_and_coercion(monkeypatch):
    monkeypatch.setenv("TESTCFG_logging__level", "DEBUG")
    monkeypatch.setenv("TESTCFG_manager__max_workers", "8")
    monkeypatch.setenv("TESTCFG_manager__enable_metrics", "false")
    payload = EnvVarConfigProvider(prefix="TESTCFG_").load()
    assert payload == {
        "logging": {"level": "DEBUG"},
        "manager": {"max_workers": 8, "enable_metrics": False},
    }


def test_hub_env_overrides_yaml(tmp_path, monkeypatch):
    _write_yaml(tmp_path / "defaults.yaml", {"manager": {"max_workers": 2, "metrics_history_limit": 10}})
    monkeypatch.setenv("TESTCFG_manager__max_workers", "5")
    hub = ConfigurationHub([YamlConfigProvider(tmp_path), EnvVarConfigProvider(prefix="TESTCFG_")])

    settings = hub.get("manager", model=ManagerSettings)
    assert settings.max_workers == 5
    assert settings.metrics_history_limit == 10
    assert hub.get("manager", model=ManagerSettings) is settings
    assert hub.get("manager.max_workers") == 5


def test_hub_missing_path_and_default(tmp_path):
    _write_yaml(tmp_path / "defaults.yaml", {"manager": {}})
    hub = ConfigurationHub([YamlConfigProvider(tmp_path)])
    with pytest.raises(ConfigNotFoundError):
        hub.get("logging")
    assert hub.get("logging.level", default="WARNING") == "WARNING"


def test_hub_reload_notifies_listeners(tmp_path):
    config = tmp_path / "config.yaml"
    _write_yaml(config, {"manager": {"max_workers": 1}})
    hub = ConfigurationHub([YamlConfigProvider(config)])
    seen = []
    hub.add_listener(lambda h: seen.append(h.get("manager.max_workers")))

    _write_yaml(config, {"manager": {"max_workers": 9}})
    hub.reload()
    assert seen == [9]


def test_hub_requires_providers():
    with pytest.raises(ValueError):
        ConfigurationHub([])


def test_default_hub_reads_packaged_defaults(monkeypatch):
    monkeypatch.delenv("CLASSIC_ALGORITHMS_CONFIG_DIR", raising=False)
    settings = get_settings("manager", model=ManagerSettings)
    assert settings.max_workers >= 1
    assert get_hub() is get_hub()


def test_default_hub_respects_config_dir(tmp_path, monkeypatch):
    _write_yaml(tmp_path / "custom.yaml", {"manager": {"max_workers": 11}})
    monkeypatch.setenv("CLASSIC_ALGORITHMS_CONFIG_DIR", str(tmp_path))
    assert get_settings("manager", model=ManagerSettings).max_workers == 11


def test_default_hub_missing_config_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("CLASSIC_ALGORITHMS_CONFIG_DIR", str(tmp_path / "nope"))
    with pytest.raises(FileNotFoundError):
        get_hub()


def test_optional_yaml_provider_tolerates_missing_path(tmp_path):
    assert YamlConfigProvider(tmp_path / "missing.yaml", required=False).load() == {}


def test_env_provider_skips_loader_variables(monkeypatch):
    monkeypatch.setenv("TESTCFG_CONFIG_DIR", "/somewhere")
    monkeypatch.setenv("TESTCFG_manager__max_workers", "2")
    assert EnvVarConfigProvider(prefix="TESTCFG_").load() == {"manager": {"max_workers": 2}}


def test_mapping_provider_overrides_nested_keys():
    hub = ConfigurationHub(
        [
            MappingConfigProvider({"manager": {"max_workers": 2, "enable_metrics": False}}),
            MappingConfigProvider({"manager": {"max_workers": 6}}),
        ]
    )
    assert hub.get("manager") == {"max_workers": 6, "enable_metrics": False}


def test_section_falls_back_to_model_defaults():
    hub = ConfigurationHub([MappingConfigProvider({})])
    assert hub.section("manager", ManagerSettings) == ManagerSettings()


def test_build_hub_layers_user_file(tmp_path, monkeypatch):
    monkeypatch.delenv("CLASSIC_ALGORITHMS_CONFIG_DIR", raising=False)
    user = tmp_path / "user.yaml"
    _write_yaml(user, {"manager": {"max_workers": 3}})
    hub = build_hub(str(user))
    settings = hub.get("manager", model=ManagerSettings)
    assert settings.max_workers == 3
    assert settings.metrics_history_limit == 1000


def test_setup_logging_with_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "algo.log"
    resolved = setup_logging({"level": "debug", "log_file": str(log_file)})
    assert isinstance(resolved, LoggingConfig)
    assert resolved.level == "DEBUG"
    assert logging.getLogger().level == logging.DEBUG
    assert log_file.exists()


def test_logging_config_rejects_unknown_level():
    with pytest.raises(ValueError):
        LoggingConfig(level="LOUD")


def test_configure_from_settings_reads_logging_section(tmp_path):
    _write_yaml(tmp_path / "logging.yaml", {"logging": {"level": "WARNING", "renderer": "json"}})
    resolved = configure_from_settings(ConfigurationHub([YamlConfigProvider(tmp_path)]))
    assert resolved.level == "WARNING"
    assert resolved.renderer == "json"
    assert logging.getLogger().level == logging.WARNING


def test_reload_settings_picks_up_environment(monkeypatch):
    monkeypatch.delenv("CLASSIC_ALGORITHMS_CONFIG_DIR", raising=False)
    monkeypatch.delenv("CLASSIC_ALGORITHMS_manager__max_workers", raising=False)
    assert get_settings("manager.max_workers") == 4

    monkeypatch.setenv("CLASSIC_ALGORITHMS_manager__max_workers", "9")
    assert get_settings("manager.max_workers") == 4
    reload_settings()
    assert get_settings("manager", model=ManagerSettings).max_workers == 9


def test_get_logger_configures_on_first_use(monkeypatch):
    monkeypatch.delenv("CLASSIC_ALGORITHMS_CONFIG_DIR", raising=False)
    monkeypatch.setattr(logging_setup, "_is_configured", False)
    assert not is_configured()

    log = get_logger("classic_algorithms.tests")
    assert is_configured()
    assert logging.getLogger().handlers
    log.info("logger ready", check=True)


def test_env_provider_rejects_value_and_section_clash(monkeypatch):
    monkeypatch.setenv("TESTCFG_logging", "1")
    monkeypatch.setenv("TESTCFG_logging__level", "DEBUG")
    with pytest.raises(ValueError, match="TESTCFG_logging"):
        EnvVarConfigProvider(prefix="TESTCFG_").load()
