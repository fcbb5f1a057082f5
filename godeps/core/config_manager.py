"""
Configuration management for godeps.

Handles loading, merging, and discovery of configuration files, with
single responsibility for config operations.
"""
import importlib.resources as importlib_resources
import logging
import os
from typing import Optional

import yaml

from godeps.config_validator import ConfigValidator
from godeps.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILE = "godeps.config.yaml"


class ConfigManager:
    """Manages godeps configuration loading and merging operations."""

    def __init__(self, validator: Optional[ConfigValidator] = None):
        self.validator = validator or ConfigValidator()

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}", original_exception=e)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        return data

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        config_files = importlib_resources.files("godeps.config")
        with (config_files / "default.yaml").open("r") as f:
            return yaml.safe_load(f)

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        logger.debug("Loading configuration from %s", user_config_path)
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order and validate it."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                config = self.load_and_merge_config(config_arg)
            else:
                raise ConfigurationError(f"Config file not found: {config_arg}")

        # Priority 2: godeps.config.yaml in current directory
        elif os.path.exists(PROJECT_CONFIG_FILE):
            config = self.load_and_merge_config(PROJECT_CONFIG_FILE)

        # Priority 3: Package default config
        else:
            config = self.load_package_default_config()

        errors = self.validator.validate_config(config)
        if errors:
            raise ConfigurationError("Invalid configuration: " + "; ".join(errors))

        return config
