"""Runtime theme settings."""

import logging
import os
from dataclasses import dataclass, field

from matcolor.config.constants import DEFAULT_SEED_HEX, SEED_ENV_VAR, THEME_ENV_VAR
from matcolor.core.color import RGBA
from matcolor.exceptions.errors import ColorParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemeConfig:
    """Seed color and light/dark preference used for the initial scheme."""

    seed: RGBA = field(default_factory=lambda: RGBA.from_hex(DEFAULT_SEED_HEX))
    dark: bool = False

    @classmethod
    def from_env(cls, environ=None) -> "ThemeConfig":
        """Build a config from MATCOLOR_SEED and MATCOLOR_THEME.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            A ThemeConfig. An unparseable seed falls back to the default.
        """
        environ = os.environ if environ is None else environ

        seed = RGBA.from_hex(DEFAULT_SEED_HEX)
        raw_seed = environ.get(SEED_ENV_VAR, "").strip()
        if raw_seed:
            try:
                seed = RGBA.from_hex(raw_seed)
            except ColorParseError as e:
                logger.warning("Ignoring %s: %s", SEED_ENV_VAR, e)

        dark = environ.get(THEME_ENV_VAR, "").strip().lower() == "dark"
        return cls(seed=seed, dark=dark)


THEME_CONFIG = ThemeConfig.from_env()
