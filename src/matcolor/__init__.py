"""
matcolor - Material color schemes from a seed color

Derives key colors, tonal palettes and complete light and dark role-based
color schemes from a single seed color.
"""

__version__ = "1.0.0"

# Public API - import commonly used components
from matcolor.core import (
    RGBA,
    Key,
    Palette,
    Accent,
    Scheme,
    Schemes,
    key_from_primary,
    derive_key,
    new_palette,
    new_light_scheme,
    new_dark_scheme,
    derive_scheme,
)
from matcolor.config.settings import THEME_CONFIG
from matcolor.exceptions.errors import (
    MatColorError,
    ColorParseError,
    ToneRangeError,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "THEME_CONFIG",
    # Exceptions
    "MatColorError",
    "ColorParseError",
    "ToneRangeError",
    # Core
    "RGBA",
    "Key",
    "Palette",
    "Accent",
    "Scheme",
    "Schemes",
    "key_from_primary",
    "derive_key",
    "new_palette",
    "new_light_scheme",
    "new_dark_scheme",
    "derive_scheme",
]
