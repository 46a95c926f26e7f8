"""Tonal palettes built from a Key."""

from dataclasses import dataclass

from matcolor.core.key import Key
from matcolor.core.perceptual import TonalRamp


@dataclass(frozen=True)
class Palette:
    """One tonal ramp per key color axis."""

    primary: TonalRamp
    secondary: TonalRamp
    tertiary: TonalRamp
    error: TonalRamp
    neutral: TonalRamp
    neutral_variant: TonalRamp

    @classmethod
    def from_key(cls, key: Key) -> "Palette":
        """Anchor each ramp at the hue and chroma of the matching key color.

        The tone of each key color plays no part in the ramp.
        """
        return cls(
            primary=TonalRamp.from_color(key.primary),
            secondary=TonalRamp.from_color(key.secondary),
            tertiary=TonalRamp.from_color(key.tertiary),
            error=TonalRamp.from_color(key.error),
            neutral=TonalRamp.from_color(key.neutral),
            neutral_variant=TonalRamp.from_color(key.neutral_variant),
        )


def new_palette(key: Key) -> Palette:
    """Return the tonal Palette for a Key.

    Args:
        key: The key colors anchoring each ramp.

    Returns:
        A Palette with one TonalRamp per axis.
    """
    return Palette.from_key(key)
