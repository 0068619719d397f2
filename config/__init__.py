"""
Configuration module for the shortcode/longcode library.

This module provides configuration management through Pydantic models
and application constants.

Public API:
    - Settings: Main configuration class
    - load_settings: Factory function to load settings from environment
    - DURATION_TYPES: Coarse duration buckets
    - EXPIRY_TYPES: Expiry classification used for template keys
    - AMOUNT_TYPES: Meaning of the amount field
"""

from config.constants import (
    AMOUNT_TYPES,
    DURATION_TYPES,
    EXPIRY_TYPES,
    INVALID_BET_TYPE,
    LEGACY_UNDERLYING,
    STRIKE_MULTIPLIER,
)
from config.settings import Settings, load_settings

__all__ = [
    "Settings",
    "load_settings",
    "AMOUNT_TYPES",
    "DURATION_TYPES",
    "EXPIRY_TYPES",
    "INVALID_BET_TYPE",
    "LEGACY_UNDERLYING",
    "STRIKE_MULTIPLIER",
]
