"""Configuration management for graphdot using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILE_NAME = ".graphdot.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class RenderOptions(BaseModel):
    """Switches applied to every render pass."""
    no_node_labels: bool = Field(alias="noNodeLabels", default=False)
    no_edge_labels: bool = Field(alias="noEdgeLabels", default=False)
    no_node_styles: bool = Field(alias="noNodeStyles", default=False)
    no_edge_styles: bool = Field(alias="noEdgeStyles", default=False)
    no_node_colors: bool = Field(alias="noNodeColors", default=False)
    no_edge_colors: bool = Field(alias="noEdgeColors", default=False)
    no_arrows: bool = Field(alias="noArrows", default=False)
    fontname: str | None = None
    dark_theme: bool = Field(alias="darkTheme", default=False)

    @field_validator("fontname")
    @classmethod
    def validate_fontname(cls, v):
        if v is not None and not v.strip():
            raise ValueError("fontname must not be blank")
        return v

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True, extra="forbid")


class GraphdotConfig(BaseModel):
    """Complete graphdot configuration model."""
    render: RenderOptions = Field(default_factory=RenderOptions)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> GraphdotConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .graphdot.json

    Returns:
        GraphdotConfig: Loaded and validated configuration

    Raises:
        ValueError: If the file is not valid JSON or the configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return GraphdotConfig.model_validate(config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except ValidationError as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    return GraphdotConfig()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .graphdot.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None
