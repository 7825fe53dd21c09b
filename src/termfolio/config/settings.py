"""Configuration management for termfolio.

Loads settings from a YAML configuration file with environment variable
overrides (TERMFOLIO_ prefix, ``__`` as the nested delimiter). Supports
.env files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/termfolio.yaml")


class ShellConfig(BaseModel):
    content_path: str = Field(
        default="config/content.yaml",
        description="YAML or JSON document with identity, banner, social and projects",
    )
    reveal_step_ms: int = Field(default=40, ge=0, description="Per-line typewriter increment")
    clear_line_modifiers: list[str] = Field(
        default_factory=lambda: ["meta", "ctrl"],
        description="Modifiers that turn 'c' into the clear-line chord",
    )


class EndpointConfig(BaseModel):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)


class ClientConfig(BaseModel):
    base_url: str = Field(default="http://localhost:8080")
    timeout: float = Field(default=10.0, gt=0)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for the termfolio shell.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "TERMFOLIO_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    shell: ShellConfig = Field(default_factory=ShellConfig)
    endpoint: EndpointConfig = Field(default_factory=EndpointConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Values passed from the YAML file take precedence over the
    environment for the keys they set; everything else falls back to
    TERMFOLIO_* variables and then to the defaults.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    return Settings(**yaml_data)
