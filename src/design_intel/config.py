# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to corpus/bundle locations, bundle version and logging config

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# src/design_intel/config.py -> project root. Only meaningful in a source checkout
# (or editable install); installed copies should set DESIGN_INTEL_OUTPUT_DIR.
PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_SOURCE_DIR = Path.home() / "projects" / "salvador" / "intelligence" / "data"
DEFAULT_OUTPUT_DIR = PROJECT_ROOT / "bundles"


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="DESIGN_INTEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
        populate_by_name=True,
    )

    # Corpus and bundle locations
    source_dir: Path = Field(
        default=DEFAULT_SOURCE_DIR,
        validation_alias=AliasChoices("DESIGN_INTEL_SOURCE_DIR", "SALVADOR_DATA"),
        description="Directory holding the source knowledge-base JSON documents",
    )
    output_dir: Path = Field(default=DEFAULT_OUTPUT_DIR, description="Directory bundles are written to")
    bundle_version: str = Field(default="1.0.0", description="Semantic version stamped on every bundle of a run")

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
