"""Development environment configuration."""

from .config_data import ConfigData
from .config_loader import CONFIG_FILENAME, load_config

__all__ = ["CONFIG_FILENAME", "ConfigData", "load_config"]
