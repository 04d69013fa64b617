"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from holiday_calculator.data.schemas import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    ENV_MAPPINGS = {
        "HOLIDAY_DEFAULT_BUNDESLAND": "default_bundesland",
        "HOLIDAY_OUTPUT_FORMAT": "output_format",
        "HOLIDAY_LANGUAGE": "holiday_language",
        "HOLIDAY_OUTPUT_DIRECTORY": "output_directory",
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = config_path or self._get_default_config_path()

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        return str(Path(__file__).parent / "settings.yaml")

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        config_dict = self._load_yaml()
        config_dict = self._apply_env_overrides(config_dict)

        try:
            return Config(**config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            logger.debug("Config file not found: %s, using defaults", config_path)
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}") from e

        logger.debug("Loaded config from: %s", config_path)
        return self._flatten_config(config) if config else {}

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}

        if "location" in config:
            loc = config["location"] or {}
            if "default_bundesland" in loc:
                result["default_bundesland"] = loc["default_bundesland"]

        if "holidays" in config:
            hol = config["holidays"] or {}
            if "language" in hol:
                result["holiday_language"] = hol["language"]
            if "date_format" in hol:
                result["output_format"] = hol["date_format"]

        if "output" in config:
            out = config["output"] or {}
            if "directory" in out:
                result["output_directory"] = out["directory"]

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables:
        - HOLIDAY_DEFAULT_BUNDESLAND -> default_bundesland
        - HOLIDAY_OUTPUT_FORMAT -> output_format
        - HOLIDAY_LANGUAGE -> holiday_language
        - HOLIDAY_OUTPUT_DIRECTORY -> output_directory

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        for env_var, config_key in self.ENV_MAPPINGS.items():
            env_value = os.environ.get(env_var)
            if env_value is not None:
                logger.debug("Config override from %s", env_var)
                config_dict[config_key] = env_value

        if isinstance(config_dict.get("default_bundesland"), str):
            config_dict["default_bundesland"] = config_dict["default_bundesland"].upper()
        if isinstance(config_dict.get("output_format"), str):
            config_dict["output_format"] = config_dict["output_format"].lower()

        return config_dict

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = output_path or self.config_path

        config_dict = {
            "location": {
                "default_bundesland": config.default_bundesland.value,
            },
            "holidays": {
                "language": config.holiday_language,
                "date_format": config.output_format.value,
            },
            "output": {
                "directory": config.output_directory,
            },
        }

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
        logger.debug("Saved config to: %s", output_path)
