"""Configuration loader for the shelf reader."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Shelf Reader"
    version: str = "1.0.0"


class ExtractionConfig(BaseModel):
    """Shelf page extraction settings."""

    base_url: str = "https://www.goodreads.com"
    row_selector: str = ".bookalike"
    cover_thumbnail_token: str = "Y75"
    cover_large_token: str = "X315"
    spoiler_marker: str = "**spoiler alert**"
    parser: str = "lxml"  # any BeautifulSoup tree builder


class OutputConfig(BaseModel):
    """JSON output settings."""

    indent: int | None = None  # None writes a single line


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = "INFO"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Environment variable -> (section, key) applied over the YAML values
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "SHELFREADER_LOG_LEVEL": ("logging", "level"),
    "SHELFREADER_BASE_URL": ("extraction", "base_url"),
    "SHELFREADER_PARSER": ("extraction", "parser"),
}


def _read_yaml(config_file: Path) -> dict:
    """Mapping from a YAML file; empty when the file is absent or blank."""
    if not config_file.exists():
        return {}
    with open(config_file, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from a YAML file, then apply environment overrides.

    A ``.env`` file in the working directory is loaded first, so overrides
    can live there as well as in the real environment.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Validated AppConfig instance.
    """
    load_dotenv()
    data = _read_yaml(Path(config_path))

    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[section] = {**(data.get(section) or {}), key: value}

    config = AppConfig.model_validate(data)
    config.logging.level = config.logging.level.upper()
    return config
