"""
Configuration module for Folio.

This module provides configuration models and utilities for loading and validating configuration.
"""

from folio.config.loader import load_config
from folio.config.models import (
    CatalogConfig,
    FolioConfig,
    LoggingConfig,
    SourceConfig,
)

__all__ = [
    "CatalogConfig",
    "FolioConfig",
    "LoggingConfig",
    "SourceConfig",
    "load_config",
]
