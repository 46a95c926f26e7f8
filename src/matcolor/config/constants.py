"""Centralized color policy constants for matcolor.

Every tone level and chroma used to derive keys and schemes is defined here
as a named table, so the policy can be reviewed in one place.
"""

# Environment variable names read by settings
SEED_ENV_VAR = "MATCOLOR_SEED"
THEME_ENV_VAR = "MATCOLOR_THEME"

# Default seed color (baseline purple) when none is configured
DEFAULT_SEED_HEX = "#6750A4"

# Returned by get_color() for unknown role names
FALLBACK_COLOR_HEX = "#FF00FF"

THEME_NAMES = ("light", "dark")

# =============================================================================
# KEY DERIVATION
# =============================================================================
# Reference lightness used to pick the hue/chroma of every key color
KEY_TONE = 40

# Primary chroma never drops below this floor
PRIMARY_MIN_CHROMA = 48

SECONDARY_CHROMA = 16

# Tertiary rotates away from primary by -60 degrees (not +60)
TERTIARY_HUE_SHIFT = -60
TERTIARY_CHROMA = 24

NEUTRAL_CHROMA = 4
NEUTRAL_VARIANT_CHROMA = 8

# Fixed error key, shared by every scheme: #B3261E
ERROR_KEY_RGBA = (179, 38, 30, 255)

# =============================================================================
# ACCENT TONES
# =============================================================================
# Applied to the primary, secondary, tertiary and error ramps alike
ACCENT_AXES = ("primary", "secondary", "tertiary", "error")

LIGHT_ACCENT_TONES = {
    "base": 40,
    "on": 100,
    "container": 90,
    "on_container": 10,
}

DARK_ACCENT_TONES = {
    "base": 80,
    "on": 20,
    "container": 30,
    "on_container": 90,
}

# =============================================================================
# ROLE TONES
# =============================================================================
# role -> (palette axis, tone)

LIGHT_ROLE_TONES = {
    "surface_dim": ("neutral", 87),
    "surface": ("neutral", 98),
    "surface_bright": ("neutral", 98),

    "surface_container_lowest": ("neutral", 100),
    "surface_container_low": ("neutral", 96),
    "surface_container": ("neutral", 94),
    "surface_container_high": ("neutral", 92),
    "surface_container_highest": ("neutral", 90),

    "surface_variant": ("neutral_variant", 90),
    "on_surface": ("neutral_variant", 10),
    "on_surface_variant": ("neutral_variant", 30),

    "inverse_surface": ("neutral", 20),
    "inverse_on_surface": ("neutral", 95),
    "inverse_primary": ("primary", 80),  # dark base tone

    "background": ("neutral", 98),
    "on_background": ("neutral", 10),

    "outline": ("neutral_variant", 50),
    "outline_variant": ("neutral_variant", 80),

    "shadow": ("neutral", 0),
    "surface_tint": ("primary", 40),
    "scrim": ("neutral", 0),
}

DARK_ROLE_TONES = {
    "surface_dim": ("neutral", 6),
    "surface": ("neutral", 6),
    "surface_bright": ("neutral", 24),

    "surface_container_lowest": ("neutral", 4),
    "surface_container_low": ("neutral", 10),
    "surface_container": ("neutral", 12),
    "surface_container_high": ("neutral", 17),
    "surface_container_highest": ("neutral", 22),

    "surface_variant": ("neutral_variant", 30),
    "on_surface": ("neutral_variant", 90),
    "on_surface_variant": ("neutral_variant", 80),

    "inverse_surface": ("neutral", 90),
    "inverse_on_surface": ("neutral", 20),
    "inverse_primary": ("primary", 40),  # light base tone

    "background": ("neutral", 6),
    "on_background": ("neutral", 90),

    "outline": ("neutral_variant", 60),
    "outline_variant": ("neutral_variant", 30),

    "shadow": ("neutral", 0),
    "surface_tint": ("primary", 80),
    "scrim": ("neutral", 0),
}
