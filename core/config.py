"""
Configuration Manager with Environment Variables Support

Usage:
    from core.config import config

    language = config.get("CHANGEPASS_LANGUAGE", "en")
    policy = config.get_mapping("PASSWORD_POLICY")
"""
import os
import re
import json
import logging
from core.singleton import SingletonMeta
from typing import Any, Optional, Dict
from pathlib import Path
from dotenv import load_dotenv

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config/settings.json"


class Config(metaclass=SingletonMeta):
    """
    Unified configuration manager that supports:
    - Environment variables (.env)
    - JSON configuration files
    - Default values
    - Type conversion
    - Validation
    """

    def __init__(self, config_file: Optional[str] = None, env_file: str = ".env"):
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}
        self._env_file_path = Path(env_file)
        self._config_file_path = Path(
            config_file or os.getenv("CHANGEPASS_CONFIG_FILE", DEFAULT_CONFIG_FILE)
        )

        self._load_env()
        self._load_json_config()

    def _load_env(self):
        """Load environment variables from .env file"""
        if self._env_file_path.exists():
            load_dotenv(self._env_file_path)
            self._env_loaded = True
            logger.info(f"Environment variables loaded from {self._env_file_path}")
        else:
            logger.debug(".env file not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if not self._config_file_path.exists():
            logger.debug(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}
            return

        try:
            with open(self._config_file_path, 'r', encoding='utf-8') as f:
                self._config_cache = json.load(f)
            logger.info(f"Configuration loaded from {self._config_file_path}")
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load config file: {e}")
            self._config_cache = {}

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
            from_env: bool = True
    ) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable (if from_env=True)
        2. JSON config file
        3. Default value

        Raises:
            ConfigurationError: If required=True and key not found
        """
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in .env or {self._config_file_path}",
                code="CONFIG_MISSING",
            )

        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')

        return bool(value)

    def get_mapping(self, key: str, default: Optional[dict] = None) -> Dict[str, Any]:
        """
        Get a mapping configuration value.

        Accepts a JSON object from the settings file or a JSON string from
        the environment (e.g. PASSWORD_POLICY='{"min_length": 10}').
        """
        value = self.get(key)

        if value is None:
            return dict(default or {})

        if isinstance(value, dict):
            return value

        if isinstance(value, str):
            try:
                parsed = json.loads(value)
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Config '{key}' is not valid JSON",
                    code="CONFIG_BAD_JSON",
                    detail=str(e),
                ) from e
            if isinstance(parsed, dict):
                return parsed

        raise ConfigurationError(
            f"Config '{key}' must be a JSON object, got {type(value).__name__}",
            code="CONFIG_BAD_TYPE",
        )

    def validate(self, schema: Dict[str, Dict[str, Any]]):
        """
        Validate configuration against schema.

        Example schema:
        {
            "CHANGEPASS_MODE": {
                "type": str,
                "required": False,
                "pattern": r"^(change_known|change_forgotten|establish_new)$"
            },
        }
        """
        errors = []

        for key, rules in schema.items():
            value = self.get(key)

            if rules.get("required", False) and value is None:
                errors.append(f"Required config '{key}' is missing")
                continue

            if "type" in rules and value is not None and not isinstance(value, rules["type"]):
                errors.append(
                    f"Config '{key}' must be {rules['type'].__name__}, "
                    f"got {type(value).__name__}"
                )

            if "pattern" in rules and value and not re.match(rules["pattern"], str(value)):
                errors.append(
                    f"Config '{key}' does not match pattern {rules['pattern']}"
                )

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(f"- {e}" for e in errors),
                code="CONFIG_INVALID",
            )


CONFIG_SCHEMA = {
    "CHANGEPASS_LANGUAGE": {"type": str, "pattern": r"^[a-z]{2}$"},
    "CHANGEPASS_MODE": {
        "type": str,
        "pattern": r"^(change_known|change_forgotten|establish_new)$",
    },
    "LOG_LEVEL": {"type": str, "pattern": r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"},
}


# Singleton instance
config = Config.get_instance()


def is_debug_mode() -> bool:
    """Check if application is in debug mode"""
    return config.get_bool("DEBUG", False)
