"""
Configuration loader module for Folio.

This module provides utilities for loading and validating configuration files.
"""

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Type, TypeVar

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ValidationError

from folio.config.models import FolioConfig
from folio.exceptions import ConfigurationError
from folio.utils import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "FOLIO_SOURCE_DIRECTORY": ("source", "directory"),
    "FOLIO_LOGGING_LEVEL": ("logging", "level"),
}


def apply_env_overrides(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Override configuration values from the environment."""
    for env_key, (section, key) in ENV_OVERRIDES.items():
        if env_key in os.environ:
            config_dict.setdefault(section, {})[key] = os.environ[env_key]
    return config_dict


def load_config(config_path: str, config_model: Type[ModelT] = FolioConfig) -> ModelT:
    """
    Load and validate configuration from a TOML file using a Pydantic model.

    Args:
        config_path: Path to the configuration file.
        config_model: Pydantic model class to use for validation.

    Returns:
        Validated configuration object.

    Raises:
        ConfigurationError: If the configuration file doesn't exist or is invalid.
    """
    load_dotenv(find_dotenv(usecwd=True))

    config_file = Path(config_path).resolve()
    if not config_file.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}", path=str(config_file)
        )

    try:
        with open(config_file, "rb") as f:
            config_dict = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        logger.error("config_parse_failed", path=str(config_file), error=str(e))
        raise ConfigurationError(
            f"Invalid configuration: {e}", path=str(config_file)
        ) from e

    # Relative source directories are relative to the configuration file
    source = config_dict.get("source")
    if isinstance(source, dict) and isinstance(source.get("directory"), str):
        directory = Path(source["directory"]).expanduser()
        if not directory.is_absolute():
            source["directory"] = str(config_file.parent / directory)

    try:
        # Validate configuration using Pydantic model
        return config_model(**apply_env_overrides(config_dict))
    except ValidationError as e:
        logger.error("config_invalid", path=str(config_file), error=str(e))
        raise ConfigurationError(
            f"Invalid configuration: {e}", path=str(config_file)
        ) from e
