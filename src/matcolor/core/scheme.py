"""Light and dark color schemes derived from a Palette."""

import logging
from dataclasses import dataclass, fields
from functools import cached_property
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from matcolor.config.constants import (
    ACCENT_AXES,
    LIGHT_ACCENT_TONES,
    DARK_ACCENT_TONES,
    LIGHT_ROLE_TONES,
    DARK_ROLE_TONES,
)
from matcolor.core.accent import Accent, new_accent
from matcolor.core.color import RGBA
from matcolor.core.key import Key, key_from_primary
from matcolor.core.palette import Palette

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scheme:
    """The colors for one color scheme (light or dark).

    To generate a scheme, use new_light_scheme() or new_dark_scheme().

    Attributes:
        primary: Accent for important elements.
        secondary: Accent for less important elements.
        tertiary: Accent used to highlight elements and create contrast.
        error: Accent for elements that indicate an error or danger.
        surface_dim: Always the dimmest surface color.
        surface: Contained areas, like the background of an app.
        surface_bright: Always the brightest surface color.
        surface_container_lowest: Surface container with the lowest emphasis.
        surface_container_low: Surface container with lower emphasis.
        surface_container: Containers that contrast with the surface.
        surface_container_high: Surface container with higher emphasis.
        surface_container_highest: Surface container with the highest emphasis.
        surface_variant: Areas that contrast standard surface elements.
        on_surface: Content on top of surface.
        on_surface_variant: Content on top of surface_variant.
        inverse_surface: Elements drawn in the reverse of their surroundings.
        inverse_on_surface: Content on top of inverse_surface.
        inverse_primary: Interactive elements on top of inverse_surface.
        background: The app background and other low-emphasis areas.
        on_background: Content on top of background.
        outline: Emphasized boundaries that need sufficient contrast.
        outline_variant: Decorative boundaries.
        shadow: Shadows.
        surface_tint: Tint applied to surfaces.
        scrim: Semi-transparent overlays.
    """

    primary: Accent
    secondary: Accent
    tertiary: Accent
    error: Accent

    surface_dim: RGBA
    surface: RGBA
    surface_bright: RGBA

    surface_container_lowest: RGBA
    surface_container_low: RGBA
    surface_container: RGBA
    surface_container_high: RGBA
    surface_container_highest: RGBA

    surface_variant: RGBA
    on_surface: RGBA
    on_surface_variant: RGBA

    inverse_surface: RGBA
    inverse_on_surface: RGBA
    inverse_primary: RGBA

    background: RGBA
    on_background: RGBA

    outline: RGBA
    outline_variant: RGBA

    shadow: RGBA
    surface_tint: RGBA
    scrim: RGBA

    def roles(self) -> Dict[str, RGBA]:
        """Return every role color keyed by role name."""
        result: Dict[str, RGBA] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Accent):
                result.update(value.roles(f.name))
            else:
                result[f.name] = value
        return result

    def to_dict(self) -> Dict[str, str]:
        """Return every role as a '#RRGGBB' hex string keyed by role name."""
        return dict(self.hex_roles)

    @cached_property
    def hex_roles(self) -> Mapping[str, str]:
        """Read-only role name -> '#RRGGBB' mapping, computed once per Scheme."""
        return MappingProxyType({role: color.to_hex() for role, color in self.roles().items()})


def _build_scheme(
    palette: Palette,
    accent_tones: Mapping[str, int],
    role_tones: Mapping[str, Tuple[str, int]],
) -> Scheme:
    accents = {axis: new_accent(getattr(palette, axis), accent_tones) for axis in ACCENT_AXES}
    roles = {role: getattr(palette, axis)(tone) for role, (axis, tone) in role_tones.items()}
    return Scheme(**accents, **roles)


def new_light_scheme(palette: Palette) -> Scheme:
    """Return a new light-themed Scheme based on the given Palette."""
    return _build_scheme(palette, LIGHT_ACCENT_TONES, LIGHT_ROLE_TONES)


def new_dark_scheme(palette: Palette) -> Scheme:
    """Return a new dark-themed Scheme based on the given Palette."""
    return _build_scheme(palette, DARK_ACCENT_TONES, DARK_ROLE_TONES)


def derive_scheme(palette: Palette, dark: bool = False) -> Scheme:
    """Return the light or dark Scheme for a Palette.

    Args:
        palette: The tonal palettes to read tones from.
        dark: Build the dark variant instead of the light one.

    Returns:
        A fully populated Scheme.
    """
    return new_dark_scheme(palette) if dark else new_light_scheme(palette)


@dataclass(frozen=True)
class Schemes:
    """A matching light and dark Scheme built from the same Palette."""

    light: Scheme
    dark: Scheme

    @classmethod
    def from_palette(cls, palette: Palette) -> "Schemes":
        """Build both variants from one Palette."""
        return cls(light=new_light_scheme(palette), dark=new_dark_scheme(palette))

    @classmethod
    def from_key(cls, key: Key) -> "Schemes":
        """Build both variants from the ramps of a Key."""
        return cls.from_palette(Palette.from_key(key))

    @classmethod
    def from_seed(cls, seed: RGBA) -> "Schemes":
        """Derive both schemes from a single seed color."""
        logger.debug("Building schemes from seed %s", seed)
        return cls.from_key(key_from_primary(seed))

    def get(self, dark: bool) -> Scheme:
        """Return one variant of the pair.

        Args:
            dark: True for the dark Scheme, False for the light one.

        Returns:
            The selected Scheme.
        """
        return self.dark if dark else self.light
