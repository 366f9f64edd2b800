"""
Unit tests for stratification configuration.

Tests value validation and YAML/JSON loading through ConfigManager,
including the fallback to defaults on missing or broken files.
"""

import json
import logging

import pytest

from dalenius.config import (
    DEFAULT_BOUNDARY_EPSILON,
    DEFAULT_INTERVAL_COEFFICIENT,
    DEFAULT_LOG_BASE,
    ConfigManager,
    StratificationConfig,
    validate_stratification_config,
)
from dalenius.utils.logging import configure_logging


class TestValidateStratificationConfig:
    """Tests for validate_stratification_config()."""

    def test_empty_config_gives_defaults(self):
        assert validate_stratification_config({}) == StratificationConfig().to_dict()

    def test_valid_values_kept(self):
        validated = validate_stratification_config(
            {
                "interval_coefficient": 5,
                "log_base": 2,
                "boundary_epsilon": 0,
                "level_prefix": "s",
            }
        )

        assert validated == {
            "interval_coefficient": 5.0,
            "log_base": 2.0,
            "boundary_epsilon": 0.0,
            "level_prefix": "s",
        }

    @pytest.mark.parametrize(
        "key, value, default",
        [
            ("interval_coefficient", -1.0, DEFAULT_INTERVAL_COEFFICIENT),
            ("interval_coefficient", "4.3", DEFAULT_INTERVAL_COEFFICIENT),
            ("log_base", 1.0, DEFAULT_LOG_BASE),
            ("log_base", True, DEFAULT_LOG_BASE),
            ("boundary_epsilon", -1e-8, DEFAULT_BOUNDARY_EPSILON),
            ("boundary_epsilon", 0.5, DEFAULT_BOUNDARY_EPSILON),
        ],
    )
    def test_invalid_values_reset_with_warning(self, key, value, default, caplog):
        caplog.set_level("WARNING", logger="dalenius")
        validated = validate_stratification_config({key: value})

        assert validated[key] == default
        assert f"Invalid {key}" in caplog.text

    def test_invalid_prefix_reset(self):
        assert validate_stratification_config({"level_prefix": 3})["level_prefix"] == (
            "level"
        )

    def test_unknown_keys_ignored_with_warning(self, caplog):
        caplog.set_level("WARNING", logger="dalenius")

        validated = validate_stratification_config(
            {"colour": "red", "interval_coefficent": 6.0}
        )

        assert "colour" not in validated
        assert validated["interval_coefficient"] == DEFAULT_INTERVAL_COEFFICIENT
        assert "unknown stratification key 'colour'" in caplog.text
        assert "'interval_coefficent'" in caplog.text

    def test_known_keys_do_not_warn(self, caplog):
        caplog.set_level("WARNING", logger="dalenius")
        validate_stratification_config(StratificationConfig().to_dict())

        assert caplog.records == []


class TestStratificationConfig:
    """Tests for the StratificationConfig dataclass."""

    def test_defaults(self):
        config = StratificationConfig()

        assert config.interval_coefficient == 4.3
        assert config.log_base == 10.0
        assert config.boundary_epsilon == 1e-8
        assert config.level_prefix == "level"

    def test_from_dict_sanitizes(self):
        config = StratificationConfig.from_dict({"log_base": 0.5, "level_prefix": "L"})

        assert config.log_base == DEFAULT_LOG_BASE
        assert config.level_prefix == "L"

    def test_from_none(self):
        assert StratificationConfig.from_dict(None) == StratificationConfig()


class TestConfigManager:
    """Tests for ConfigManager file loading."""

    def test_no_file_uses_defaults(self):
        manager = ConfigManager()

        assert manager.get_stratification_config() == StratificationConfig()

    def test_loads_yaml(self, yaml_config_file):
        config = ConfigManager(yaml_config_file).get_stratification_config()

        assert config.interval_coefficient == 6.0
        assert config.boundary_epsilon == 1e-9
        assert config.level_prefix == "stratum"

    def test_loads_json(self, tmp_path):
        path = tmp_path / "dalenius.json"
        path.write_text(
            json.dumps({"stratification": {"interval_coefficient": 3.0}}),
            encoding="utf-8",
        )

        config = ConfigManager(str(path)).get_stratification_config()

        assert config.interval_coefficient == 3.0
        assert config.log_base == DEFAULT_LOG_BASE

    def test_override(self):
        manager = ConfigManager(
            config_override={"stratification": {"level_prefix": "band"}}
        )

        assert manager.get_stratification_config().level_prefix == "band"

    def test_missing_file_falls_back(self, tmp_path, caplog):
        caplog.set_level("ERROR", logger="dalenius")
        manager = ConfigManager(tmp_path / "absent.yaml")

        assert manager.get_stratification_config() == StratificationConfig()
        assert "not found" in caplog.text

    def test_broken_json_falls_back(self, tmp_path, caplog):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        caplog.set_level("ERROR", logger="dalenius")

        manager = ConfigManager(path)

        assert manager.get_stratification_config() == StratificationConfig()
        assert "JSON parsing error" in caplog.text

    def test_broken_yaml_falls_back(self, tmp_path, caplog):
        path = tmp_path / "broken.yaml"
        path.write_text("stratification: [unclosed", encoding="utf-8")
        caplog.set_level("ERROR", logger="dalenius")

        manager = ConfigManager(path)

        assert manager.get_stratification_config() == StratificationConfig()
        assert "YAML parsing error" in caplog.text

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert ConfigManager(path).get_stratification_config() == StratificationConfig()

    def test_non_mapping_section_ignored(self):
        manager = ConfigManager(config_override={"stratification": [1, 2]})

        assert manager.get_stratification_config() == StratificationConfig()

    def test_logging_section_sets_level(self):
        try:
            ConfigManager(
                config_override={
                    "stratification": {},
                    "logging": {"level": "DEBUG"},
                }
            )
            assert logging.getLogger("dalenius").level == logging.DEBUG
        finally:
            configure_logging("INFO")

    def test_logging_level_from_yaml(self, tmp_path):
        path = tmp_path / "quiet.yaml"
        path.write_text("logging:\n  level: WARNING\n", encoding="utf-8")
        try:
            ConfigManager(path)
            assert logging.getLogger("dalenius").level == logging.WARNING
        finally:
            configure_logging("INFO")

    def test_no_logging_section_keeps_level(self):
        ConfigManager(config_override={"stratification": {}})

        assert logging.getLogger("dalenius").level == logging.INFO
