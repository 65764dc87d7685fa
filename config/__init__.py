"""
Configuration Module for the Invoice Batch Extractor.

This module provides centralized configuration management using YAML files.
Run parameters (worker count, paths, output and logging options) are read
from settings.yaml; command-line flags override them.

The pattern rules themselves live in a separate rule file (template.json by
default) and are loaded by invoice_batch.extraction.rules.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from invoice_batch.utils.exceptions import ConfigurationError

# Directory holding the bundled settings.yaml and template.json
CONFIG_DIR = Path(__file__).parent


class ConfigurationManager:
    """
    Centralized configuration management for the invoice batch extractor.

    Handles loading and providing access to the parameters defined in
    settings.yaml.

    Attributes:
        config_path (Path): Path to the configuration file.

    Example:
        >>> config = ConfigurationManager()
        >>> workers = config.get("pipeline.workers")
        >>> pattern = config.get("input.pattern", "*.pdf")
    """

    _instance: Optional['ConfigurationManager'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[str] = None) -> 'ConfigurationManager':
        """
        Singleton pattern to ensure only one configuration instance exists.

        Args:
            config_path: Optional path to configuration file.

        Returns:
            ConfigurationManager instance.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Optional path to configuration file.
                        Defaults to config/settings.yaml.
        """
        if self._initialized:
            return

        if config_path is None:
            self.config_path = CONFIG_DIR / "settings.yaml"
        else:
            self.config_path = Path(config_path)

        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """
        Load configuration from YAML file.

        Raises:
            ConfigurationError: If the file is missing or is not a YAML
                mapping.
        """
        if not self.config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {self.config_path}"
            )

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid configuration file: {self.config_path}",
                {"reason": str(e)}
            )

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {self.config_path}"
            )
        self._config = loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g., "pipeline.workers").
            default: Default value if key doesn't exist.

        Returns:
            Configuration value or default.

        Example:
            >>> config.get("output.csv.delimiter")
            ","
            >>> config.get("nonexistent.key", "default_value")
            "default_value"
        """
        keys = key.split('.')
        value = self._config

        try:
            for k in keys:
                value = value[k]
        except (KeyError, TypeError):
            return default

        return default if value is None else value

    @classmethod
    def reset(cls) -> None:
        """
        Reset the singleton instance.
        Useful for testing or configuration changes.
        """
        cls._instance = None


def get_config(key: str, default: Any = None) -> Any:
    """
    Convenience function to get configuration values.

    Args:
        key: Configuration key in dot notation.
        default: Default value if key doesn't exist.

    Returns:
        Configuration value or default.
    """
    return ConfigurationManager().get(key, default)


def get_rules_path() -> Path:
    """
    Resolve the pattern rule file to use when none is given explicitly.

    Returns:
        ``paths.rules_file`` from configuration, or the bundled
        config/template.json when it is unset.
    """
    configured = get_config("paths.rules_file")
    if configured:
        return Path(configured)
    return CONFIG_DIR / "template.json"


__all__ = ['ConfigurationManager', 'get_config', 'get_rules_path', 'CONFIG_DIR']
