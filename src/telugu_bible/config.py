"""
Configuration management for the Telugu Bible API server.
Uses Pydantic Settings with YAML configuration files and environment variable overrides.
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dotenv import load_dotenv

from telugu_bible.constants import (
    BOOKS_METADATA_DOCUMENT,
    DEFAULT_DATA_SOURCE_BASE_URL,
    TELUGU_BIBLE_SERVER_PORT,
)


# Load .env file if it exists (primarily for local development)
load_dotenv()


class DataSourceConfig(BaseModel):
    """Remote dataset configuration."""

    base_url: str = DEFAULT_DATA_SOURCE_BASE_URL
    metadata_document: str = BOOKS_METADATA_DOCUMENT
    # None keeps the HTTP transport default
    request_timeout: float | None = None

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = TELUGU_BIBLE_SERVER_PORT


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class TeluguBibleSettings(BaseSettings):
    """
    Root settings class for the Telugu Bible API server.
    Loads configuration from YAML files based on the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="TELUGU_BIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows overrides like TELUGU_BIBLE_DATA_SOURCE__BASE_URL
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    env: str = "local"

    # Nested configuration groups
    data_source: DataSourceConfig = DataSourceConfig()
    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()

    def __init__(self, **kwargs):
        """
        Load configuration from YAML files and merge with environment variables.
        """
        # 1. Check for explicit env var
        config_dir_env = os.getenv("TELUGU_BIBLE_CONFIG_DIR")
        if config_dir_env:
            config_dir = Path(config_dir_env)
        else:
            # 2. Fallback to the 'config' folder in the current working directory
            config_dir = Path.cwd() / "config"

        # Load base configuration
        base_config_path = config_dir / "base.yaml"
        if not base_config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {base_config_path}. It must exist at the root of the project "
                f"in config/base.yaml."
            )
        config_data = self._load_yaml(base_config_path)

        # Load environment-specific configuration if it exists
        env = os.getenv("TELUGU_BIBLE_ENV", "local")
        config_data["env"] = env
        env_config_path = config_dir / f"{env}.yaml"
        if env_config_path.exists():
            env_config = self._load_yaml(env_config_path)
            config_data = self._deep_merge(config_data, env_config)

        # Merge with any provided kwargs
        config_data = self._deep_merge(config_data, kwargs)

        super().__init__(**config_data)

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any]:
        """Load YAML configuration file."""
        if not path.exists():
            return {}
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """
        Deep merge two dictionaries.
        Override values take precedence over base values.
        """
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = TeluguBibleSettings._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


# Global settings instance
# Import this instance throughout the application
telugu_bible_settings = TeluguBibleSettings()
