"""Configuration module for matcolor."""

from matcolor.config.settings import THEME_CONFIG, ThemeConfig
from matcolor.config.constants import (
    DEFAULT_SEED_HEX,
    FALLBACK_COLOR_HEX,
    SEED_ENV_VAR,
    THEME_ENV_VAR,
    LIGHT_ACCENT_TONES,
    DARK_ACCENT_TONES,
    LIGHT_ROLE_TONES,
    DARK_ROLE_TONES,
)

__all__ = [
    "THEME_CONFIG",
    "ThemeConfig",
    "DEFAULT_SEED_HEX",
    "FALLBACK_COLOR_HEX",
    "SEED_ENV_VAR",
    "THEME_ENV_VAR",
    "LIGHT_ACCENT_TONES",
    "DARK_ACCENT_TONES",
    "LIGHT_ROLE_TONES",
    "DARK_ROLE_TONES",
]
