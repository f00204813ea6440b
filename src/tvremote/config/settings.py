"""Configuration management for tvremote.

Loads settings from a YAML configuration file with environment variable
overrides. Supports .env files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from tvremote.domain.models import DEFAULT_TV_PORT

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/tvremote.yaml")
DEFAULT_RELAY_PORT = 8000
DEFAULT_DOTENV_PATH = Path(".env")


class TvConfig(BaseModel):
    host: str = Field(default="", description="IP address or hostname of the TV")
    port: str = Field(default=DEFAULT_TV_PORT)
    cors_mode: bool = Field(default=False, description="Send opaque no-cors requests")
    proxy_mode: bool = Field(default=False, description="Route requests through the relay")
    relay_base_url: str = Field(default=f"http://localhost:{DEFAULT_RELAY_PORT}")
    timeout: float = Field(default=5.0, gt=0)


class RelayConfig(BaseModel):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=DEFAULT_RELAY_PORT, ge=1, le=65535)
    static_root: str | None = Field(
        default=None, description="Directory served for non-proxy paths (default: bundled web/)"
    )
    upstream_timeout: float | None = Field(default=None)


class StorageConfig(BaseModel):
    path: str = Field(default="~/.config/tvremote/store.json")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for tvremote.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "TVREMOTE_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    tv: TvConfig = Field(default_factory=TvConfig)
    relay: RelayConfig = Field(default_factory=RelayConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs; environment must still win
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    # PORT has no prefix, so pydantic-settings will not read it from .env
    load_dotenv(DEFAULT_DOTENV_PATH)

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.debug("Config file %s not found, using defaults + env vars", path)

    _apply_env_overrides(yaml_data)

    return Settings(**yaml_data)


def _apply_env_overrides(yaml_data: dict) -> None:
    """Map the conventional ``PORT`` variable onto ``relay.port``."""
    port = os.environ.get("PORT", "").strip()
    if not port:
        return
    if not port.isdigit():
        logger.warning("Ignoring PORT=%r: not a port number", port)
        return
    if not isinstance(yaml_data.get("relay"), dict):
        yaml_data["relay"] = {}
    yaml_data["relay"]["port"] = int(port)
