"""
Unit tests for the configuration manager.
"""

import pytest

from config import CONFIG_DIR, ConfigurationManager, get_config, get_rules_path
from invoice_batch.utils.exceptions import ConfigurationError


class TestConfigurationManager:
    """Test cases for ConfigurationManager."""

    def test_bundled_defaults(self):
        assert get_config("pipeline.workers") == 8
        assert get_config("input.pattern") == "*.pdf"
        assert get_config("paths.output_file") == "invoices.csv"

    def test_missing_key_returns_default(self):
        assert get_config("nonexistent.key", "fallback") == "fallback"

    def test_null_value_returns_default(self):
        assert get_config("paths.rules_file", "fallback") == "fallback"

    def test_singleton(self):
        assert ConfigurationManager() is ConfigurationManager()

    def test_custom_file(self, tmp_path):
        settings = tmp_path / "settings.yaml"
        settings.write_text("pipeline:\n  workers: 3\n", encoding='utf-8')

        ConfigurationManager(str(settings))

        assert get_config("pipeline.workers") == 3
        assert get_config("input.pattern", "*.pdf") == "*.pdf"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(tmp_path / "absent.yaml"))

    def test_invalid_yaml(self, tmp_path):
        settings = tmp_path / "settings.yaml"
        settings.write_text("pipeline: [unclosed\n", encoding='utf-8')

        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(settings))

    def test_non_mapping_yaml(self, tmp_path):
        settings = tmp_path / "settings.yaml"
        settings.write_text("- just\n- a list\n", encoding='utf-8')

        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(settings))


class TestRulesPath:
    """Test cases for get_rules_path."""

    def test_bundled_template_by_default(self):
        assert get_rules_path() == CONFIG_DIR / "template.json"

    def test_configured_rules_file(self, tmp_path):
        settings = tmp_path / "settings.yaml"
        settings.write_text("paths:\n  rules_file: rules/custom.json\n", encoding='utf-8')
        ConfigurationManager(str(settings))

        assert str(get_rules_path()) == "rules/custom.json"
