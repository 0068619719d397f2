"""
Configuration management using Pydantic v2.

This module provides type-safe configuration for the shortcode/longcode
library. Configuration is loaded from environment variables and validated
on initialization.

Environment variables use double underscore for nesting:
    CATALOG__PATH=/etc/longcode/longcodes.yml
    REGISTRY__UNDERLYINGS_PATH=/etc/longcode/underlyings.yml
    PARSER__ENABLE_TOKEN_ISSUANCE=true

Example:
    >>> from config.settings import load_settings
    >>> settings = load_settings()
    >>> print(settings.catalog.path)
"""

import logging
from pathlib import Path
from typing import Literal

# Pydantic v2 imports
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CATALOG_PATH = _PROJECT_DIR / "longcode" / "resources" / "longcodes.yml"
DEFAULT_UNDERLYINGS_PATH = _PROJECT_DIR / "data" / "resources" / "underlyings.yml"
DEFAULT_CONTRACT_TYPES_PATH = _PROJECT_DIR / "data" / "resources" / "contract_types.yml"


class CatalogConfig(BaseModel):
    """Template catalog configuration.

    Attributes:
        path: YAML file mapping template keys to phrase templates
    """

    path: Path = Field(
        default=DEFAULT_CATALOG_PATH, description="Longcode template catalog (YAML)"
    )


class RegistryConfig(BaseModel):
    """Data files backing the default instrument and contract-type registries.

    Attributes:
        underlyings_path: YAML file of instrument metadata keyed by symbol
        contract_types_path: YAML file of known contract-type codes
    """

    underlyings_path: Path = Field(
        default=DEFAULT_UNDERLYINGS_PATH, description="Instrument metadata (YAML)"
    )
    contract_types_path: Path = Field(
        default=DEFAULT_CONTRACT_TYPES_PATH, description="Contract-type codes (YAML)"
    )


class ParserConfig(BaseModel):
    """Shortcode grammar switches.

    Attributes:
        enable_token_issuance: Recognize BINARYICO token-issuance shortcodes
    """

    enable_token_issuance: bool = Field(
        default=False, description="Enable the BINARYICO grammar rule"
    )


class Settings(BaseSettings):
    """
    Main library settings loaded from environment variables.

    Configuration is automatically loaded from .env file and environment
    variables. Use double underscore for nested configuration:
        CATALOG__PATH=/path/to/longcodes.yml
        PARSER__ENABLE_TOKEN_ISSUANCE=true

    Attributes:
        catalog: Template catalog location
        registry: Registry data file locations
        parser: Grammar switches
        log_level: Root log level
        log_json: Emit JSON log lines on the console
    """

    model_config = SettingsConfigDict(env_nested_delimiter="__", env_file=".env", extra="ignore")

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Root log level"
    )
    log_json: bool = Field(default=False, description="JSON console logs")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v


def load_settings() -> Settings:
    """
    Load and validate settings from environment variables and .env file.

    Returns:
        Validated Settings instance

    Raises:
        ValidationError: If configuration is invalid
    """
    try:
        settings = Settings()
        logger.info(f"Settings loaded successfully. Log level: {settings.log_level}")
        logger.debug(f"Template catalog: {settings.catalog.path}")
        return settings
    except Exception as e:
        logger.error(f"Failed to load settings: {e}")
        raise
