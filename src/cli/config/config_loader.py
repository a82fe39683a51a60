"""Configuration loading with environment variable substitution."""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from src.cli.config.config_data import ConfigData
from src.cli.config.config_utils import substitute_env_vars

CONFIG_FILENAME = "config.yaml"


def load_config(file_path: Path) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file

    Returns:
        Validated ConfigData. A missing file yields the built-in defaults.

    Raises:
        ValueError: If required environment variables are missing, validation fails,
                   or YAML structure is invalid (missing 'config' key)

    YAML Structure Requirements:
        The YAML file must have a top-level 'config:' key containing configuration data.
    """
    if not file_path.exists():
        logger.info(f"No {file_path.name} found at {file_path.parent}, using defaults")
        return ConfigData()

    logger.debug(f"Loading configuration from {file_path}")
    content = substitute_env_vars(file_path.read_text())

    # Parse YAML
    try:
        loaded: dict[str, Any] | None = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    if not loaded:
        raise ValueError("Failed to parse YAML")

    # Validate and return as ConfigData
    if "config" not in loaded:
        raise ValueError("Invalid YAML structure: missing 'config' key")
    try:
        config = ConfigData(**(loaded["config"] or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    logger.info(f"Loaded configuration for project {config.project_name}")
    return config
