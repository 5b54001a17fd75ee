"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from vacation_tracker.data.schemas import Config

logger = logging.getLogger(__name__)

# Default config file path
DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    # Mapping of environment variables to config fields, with optional converters
    ENV_MAPPINGS = {
        "VACATION_TRACKER_APP_ID": "app_id",
        "VACATION_TRACKER_STORE_BACKEND": "store_backend",
        "VACATION_TRACKER_STORE_PATH": "store_path",
        "VACATION_TRACKER_IDENTITY_PATH": "identity_path",
        "VACATION_TRACKER_AUTH_TOKEN": "auth_token",
        "VACATION_TRACKER_DEFAULT_DAYS": ("default_available_days", int),
        "VACATION_TRACKER_HOLIDAY_COUNTRY": "holiday_country",
        "VACATION_TRACKER_HOLIDAY_SUBDIVISION": "holiday_subdivision",
        "VACATION_TRACKER_LANGUAGE": "language",
        "VACATION_TRACKER_OUTPUT_FORMAT": "output_format",
        "VACATION_TRACKER_OUTPUT_DIR": "output_directory",
        "VACATION_TRACKER_API_HOST": "api_host",
        "VACATION_TRACKER_API_PORT": ("api_port", int),
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        # 1. Load from YAML file
        config_dict = self._load_yaml()

        # 2. Apply environment variable overrides
        config_dict = self._apply_env_overrides(config_dict)

        # 3. Validate and create Config object
        try:
            return Config(**config_dict)
        except Exception as e:
            raise ValueError(f"Invalid configuration: {e}")

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            logger.debug(f"Config file not found: {self.config_path}, using defaults")
            return {}

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}")

        logger.debug(f"Loaded config from: {self.config_path}")
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

        if "app_id" in config:
            result["app_id"] = config["app_id"]
        if "language" in config:
            result["language"] = config["language"]

        # Handle store section
        if "store" in config:
            store = config["store"] or {}
            if "backend" in store:
                result["store_backend"] = store["backend"]
            if "path" in store:
                result["store_path"] = store["path"]

        # Handle auth section
        if "auth" in config:
            auth = config["auth"] or {}
            if "token" in auth:
                result["auth_token"] = auth["token"]
            if "identity_path" in auth:
                result["identity_path"] = auth["identity_path"]

        # Handle vacation section
        if "vacation" in config:
            vacation = config["vacation"] or {}
            if "default_available_days" in vacation:
                result["default_available_days"] = vacation["default_available_days"]

        # Handle holidays section
        if "holidays" in config:
            hol = config["holidays"] or {}
            if "country" in hol:
                result["holiday_country"] = hol["country"]
            if "subdivision" in hol:
                result["holiday_subdivision"] = hol["subdivision"]

        # Handle output section
        if "output" in config:
            out = config["output"] or {}
            if "format" in out:
                result["output_format"] = out["format"]
            if "directory" in out:
                result["output_directory"] = out["directory"]

        # Handle API section
        if "api" in config:
            api = config["api"] or {}
            if "host" in api:
                result["api_host"] = api["host"]
            if "port" in api:
                result["api_port"] = api["port"]

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply VACATION_TRACKER_* environment variable overrides.

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        for env_var, mapping in self.ENV_MAPPINGS.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue

            if isinstance(mapping, tuple):
                config_key, type_converter = mapping
                try:
                    config_dict[config_key] = type_converter(env_value)
                except ValueError:
                    logger.warning(f"Ignoring invalid value for {env_var}: {env_value}")
                    continue
            else:
                config_key = mapping
                config_dict[config_key] = env_value
            logger.debug(f"Override from env: {env_var} -> {config_key}")

        return config_dict

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = Path(output_path) if output_path else self.config_path

        config_dict = {
            "app_id": config.app_id,
            "language": config.language,
            "store": {
                "backend": config.store_backend,
                "path": config.store_path,
            },
            "auth": {
                "token": config.auth_token,
                "identity_path": config.identity_path,
            },
            "vacation": {
                "default_available_days": config.default_available_days,
            },
            "holidays": {
                "country": config.holiday_country,
                "subdivision": config.holiday_subdivision,
            },
            "output": {
                "format": config.output_format,
                "directory": config.output_directory,
            },
            "api": {
                "host": config.api_host,
                "port": config.api_port,
            },
        }

        # Ensure directory exists
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        logger.info(f"Saved configuration to: {output_path}")
