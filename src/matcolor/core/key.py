"""Key colors: one anchor color per scheme axis."""

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional

from matcolor.config.constants import (
    KEY_TONE,
    PRIMARY_MIN_CHROMA,
    SECONDARY_CHROMA,
    TERTIARY_HUE_SHIFT,
    TERTIARY_CHROMA,
    NEUTRAL_CHROMA,
    NEUTRAL_VARIANT_CHROMA,
    ERROR_KEY_RGBA,
)
from matcolor.core.color import RGBA
from matcolor.core.perceptual import to_perceptual

logger = logging.getLogger(__name__)

ERROR_KEY = RGBA(*ERROR_KEY_RGBA)


@dataclass(frozen=True)
class Key:
    """The set of key colors used to generate a Palette and its Schemes.

    Attributes:
        primary: The primary accent key color.
        secondary: The secondary accent key color.
        tertiary: The tertiary accent key color.
        error: The error accent key color.
        neutral: Key for surface and surface container colors.
        neutral_variant: Key for surface variant and outline colors.
        custom: Named custom accent key colors. Carried through unchanged;
            schemes do not derive roles from them.
    """

    primary: RGBA
    secondary: RGBA
    tertiary: RGBA
    error: RGBA
    neutral: RGBA
    neutral_variant: RGBA
    custom: Optional[Mapping[str, RGBA]] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Snapshot the caller's mapping so the Key stays immutable
        object.__setattr__(self, "custom", MappingProxyType(dict(self.custom or {})))

    def with_custom(self, name: str, color: RGBA) -> "Key":
        """Return a copy of this Key with one more custom accent."""
        custom = dict(self.custom)
        custom[name] = color
        return replace(self, custom=custom)


def key_from_primary(primary: RGBA, custom: Optional[Mapping[str, RGBA]] = None) -> Key:
    """Derive a full Key from a single seed color.

    Only the hue and chroma of the seed matter: it is first moved to the
    reference tone, then every axis takes the seed's hue with a fixed
    chroma. Primary keeps the seed's chroma unless it is below the floor.
    Tertiary is rotated -60 degrees. Error is a constant red.

    Args:
        primary: The seed color.
        custom: Optional named custom accents to carry on the Key.

    Returns:
        A fully populated Key.
    """
    p = to_perceptual(primary).with_tone(KEY_TONE)
    logger.debug(
        "Deriving key from %s (hue=%.2f, chroma=%.2f at tone %d)",
        primary, p.hue, p.chroma, KEY_TONE,
    )

    primary_point = p.with_chroma(max(p.chroma, PRIMARY_MIN_CHROMA))

    return Key(
        primary=primary_point.to_rgba(),
        secondary=p.with_chroma(SECONDARY_CHROMA).to_rgba(),
        # Rotate from the hue primary actually landed on
        tertiary=primary_point.with_hue(primary_point.hue + TERTIARY_HUE_SHIFT)
        .with_chroma(TERTIARY_CHROMA)
        .to_rgba(),
        error=ERROR_KEY,
        neutral=p.with_chroma(NEUTRAL_CHROMA).to_rgba(),
        neutral_variant=p.with_chroma(NEUTRAL_VARIANT_CHROMA).to_rgba(),
        custom=custom or {},
    )


derive_key = key_from_primary
