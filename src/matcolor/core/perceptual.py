"""Adapter over the HCT (hue, chroma, tone) color model.

The color science lives in the materialyoucolor package. This module keeps
its surface small: convert to and from RGBA, move one coordinate at a time,
and anchor a tonal ramp at a hue/chroma pair.
"""

from dataclasses import dataclass, field

from materialyoucolor.hct import Hct
from materialyoucolor.palettes.tonal_palette import TonalPalette

from matcolor.core.color import RGBA
from matcolor.exceptions.errors import ToneRangeError


def _from_hct(hct: Hct) -> "Perceptual":
    return Perceptual(hue=hct.hue, chroma=hct.chroma, tone=hct.tone)


@dataclass(frozen=True)
class Perceptual:
    """A point in HCT space.

    The setters re-solve the point, so the result holds the coordinates that
    are actually reachable in sRGB. Asking for more chroma than the gamut
    allows at a given hue and tone yields the maximum available chroma.
    """

    hue: float
    chroma: float
    tone: float

    def with_hue(self, hue: float) -> "Perceptual":
        return _from_hct(Hct.from_hct(hue % 360.0, self.chroma, self.tone))

    def with_chroma(self, chroma: float) -> "Perceptual":
        return _from_hct(Hct.from_hct(self.hue, chroma, self.tone))

    def with_tone(self, tone: float) -> "Perceptual":
        return _from_hct(Hct.from_hct(self.hue, self.chroma, tone))

    def to_rgba(self) -> RGBA:
        return RGBA.from_argb(Hct.from_hct(self.hue, self.chroma, self.tone).to_int())


def to_perceptual(color: RGBA) -> Perceptual:
    """Convert an RGBA color to its HCT coordinates. Alpha is ignored."""
    return _from_hct(Hct.from_int(color.to_argb()))


@dataclass(frozen=True)
class TonalRamp:
    """All tones of one hue/chroma pair.

    Calling the ramp with a tone in [0, 100] returns an opaque RGBA; tone 0
    is black and tone 100 is white whatever the hue. Results are cached by
    the underlying palette, and two ramps with the same hue and chroma are
    equal.
    """

    hue: float
    chroma: float
    _palette: TonalPalette = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(
            self, "_palette", TonalPalette.from_hue_and_chroma(self.hue, self.chroma)
        )

    @classmethod
    def from_color(cls, color: RGBA) -> "TonalRamp":
        """Anchor a ramp at the hue and chroma of an RGBA color."""
        point = to_perceptual(color)
        return cls(point.hue, point.chroma)

    def tone(self, tone: int) -> RGBA:
        """Return the color of this ramp at the given tone.

        Raises:
            ToneRangeError: If tone is outside [0, 100].
        """
        if not 0 <= tone <= 100:
            raise ToneRangeError(tone)
        return RGBA.from_argb(self._palette.tone(tone))

    def __call__(self, tone: int) -> RGBA:
        return self.tone(tone)
