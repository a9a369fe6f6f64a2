"""Configuration loading and validation."""

from validated_fields.config.models import (
    COLOR_SCHEMES,
    DEFAULT_COLORS,
    MINT_COLORS,
    SYSTEM_COLORS,
    ColorScheme,
    FieldConfig,
    FormConfig,
)
from validated_fields.config.loader import load_config

__all__ = [
    "COLOR_SCHEMES",
    "DEFAULT_COLORS",
    "MINT_COLORS",
    "SYSTEM_COLORS",
    "ColorScheme",
    "FieldConfig",
    "FormConfig",
    "load_config",
]
