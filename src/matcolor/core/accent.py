"""Accent color groups."""

from dataclasses import dataclass
from typing import Dict, Mapping

from matcolor.core.color import RGBA
from matcolor.core.perceptual import TonalRamp


@dataclass(frozen=True)
class Accent:
    """The four role colors taken from one accent ramp.

    On is legible on Base and OnContainer is legible on Container because
    the tones are picked from fixed tables, not computed per color.
    """

    base: RGBA
    on: RGBA
    container: RGBA
    on_container: RGBA

    def roles(self, name: str) -> Dict[str, RGBA]:
        """Flatten to role names, e.g. primary, on_primary, primary_container."""
        return {
            name: self.base,
            f"on_{name}": self.on,
            f"{name}_container": self.container,
            f"on_{name}_container": self.on_container,
        }


def new_accent(ramp: TonalRamp, tones: Mapping[str, int]) -> Accent:
    """Build an Accent from a ramp and a base/on/container/on_container tone table."""
    return Accent(
        base=ramp(tones["base"]),
        on=ramp(tones["on"]),
        container=ramp(tones["container"]),
        on_container=ramp(tones["on_container"]),
    )
