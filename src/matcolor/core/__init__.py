"""Key, palette and scheme derivation."""

from matcolor.core.color import RGBA
from matcolor.core.perceptual import Perceptual, TonalRamp, to_perceptual
from matcolor.core.key import Key, key_from_primary, derive_key
from matcolor.core.palette import Palette, new_palette
from matcolor.core.accent import Accent, new_accent
from matcolor.core.scheme import (
    Scheme,
    Schemes,
    new_light_scheme,
    new_dark_scheme,
    derive_scheme,
)

__all__ = [
    "RGBA",
    "Perceptual",
    "TonalRamp",
    "to_perceptual",
    "Key",
    "key_from_primary",
    "derive_key",
    "Palette",
    "new_palette",
    "Accent",
    "new_accent",
    "Scheme",
    "Schemes",
    "new_light_scheme",
    "new_dark_scheme",
    "derive_scheme",
]
