"""
Configuration models for Folio.

This module defines Pydantic models for configuration validation.
"""

from pathlib import Path
from typing import Any, List

from pydantic import BaseModel, Field, field_validator


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Console logging settings; ``structured`` picks JSON lines over plain text."""

    level: str = Field(default="INFO")
    structured: bool = Field(default=True)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case, e.g. ``debug`` from FOLIO_LOGGING_LEVEL."""
        if isinstance(v, str):
            v = v.strip().upper()
            if v not in LOG_LEVELS:
                raise ValueError(
                    f"unknown log level {v!r}, expected one of {', '.join(LOG_LEVELS)}"
                )
        return v


class SourceConfig(BaseModel):
    """Pydantic model for the article source directory."""

    directory: str
    include_patterns: List[str] = Field(default_factory=lambda: ["**/*.md"])
    exclude_patterns: List[str] = Field(default_factory=list)
    encoding: str = Field(default="utf-8")

    @field_validator("directory")
    @classmethod
    def validate_directory(cls, v: str) -> str:
        """Validate that the directory exists and is a directory."""
        path = Path(v).expanduser().resolve()
        if not path.exists():
            raise ValueError(f"Directory does not exist: {path}")
        if not path.is_dir():
            raise ValueError(f"Not a directory: {path}")
        return str(path)

    @field_validator("include_patterns")
    @classmethod
    def validate_include_patterns(cls, v: List[str]) -> List[str]:
        """Validate that at least one include pattern is given."""
        if not v:
            raise ValueError("At least one include pattern is required")
        return v


class CatalogConfig(BaseModel):
    """Pydantic model for listing defaults."""

    include_drafts: bool = Field(default=False)


class FolioConfig(BaseModel):
    """Pydantic model for the main configuration file."""

    source: SourceConfig
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
