"""Thread-safe active scheme management."""

import logging
import threading
from typing import Optional

from matcolor.config.settings import THEME_CONFIG
from matcolor.core.color import RGBA
from matcolor.core.scheme import Scheme, Schemes

logger = logging.getLogger(__name__)


class SchemeManager:
    """Thread-safe holder of the active light/dark scheme pair.

    Schemes are immutable, so switching is a reference swap under the lock.
    Readers get a Scheme they can keep using without further locking.
    """

    _schemes: Optional[Schemes] = None
    _theme: str = "dark" if THEME_CONFIG.dark else "light"
    _lock: threading.Lock = threading.Lock()

    @classmethod
    def _ensure_schemes(cls) -> Schemes:
        # Caller must hold the lock
        if cls._schemes is None:
            cls._schemes = Schemes.from_seed(THEME_CONFIG.seed)
        return cls._schemes

    @classmethod
    def get_schemes(cls) -> Schemes:
        """Get the active light/dark pair (thread-safe)."""
        with cls._lock:
            return cls._ensure_schemes()

    @classmethod
    def get_scheme(cls) -> Scheme:
        """Get the scheme for the current theme (thread-safe).

        Returns:
            The light or dark Scheme of the active pair.
        """
        with cls._lock:
            return cls._ensure_schemes().get(cls._theme == "dark")

    @classmethod
    def set_schemes(cls, schemes: Schemes) -> None:
        """Replace the active pair (thread-safe)."""
        with cls._lock:
            cls._schemes = schemes
        logger.debug("Active schemes replaced")

    @classmethod
    def set_seed(cls, seed: RGBA) -> Schemes:
        """Derive a new pair from a seed color and make it active.

        Derivation runs outside the lock; only the swap is guarded.

        Returns:
            The new Schemes.
        """
        schemes = Schemes.from_seed(seed)
        cls.set_schemes(schemes)
        logger.info("Active seed color set to %s", seed)
        return schemes

    @classmethod
    def get_theme(cls) -> str:
        """Get current theme name (thread-safe).

        Returns:
            Current theme name ('light' or 'dark').
        """
        with cls._lock:
            return cls._theme

    @classmethod
    def set_theme(cls, theme: str) -> None:
        """Set the current theme (thread-safe).

        Args:
            theme: Theme name ('light' or 'dark'). Other values are ignored.
        """
        with cls._lock:
            if theme in ("light", "dark"):
                cls._theme = theme
            else:
                logger.debug("Ignoring unknown theme %r", theme)

    @classmethod
    def toggle_theme(cls) -> str:
        """Toggle between light and dark theme (thread-safe).

        Returns:
            The new theme name.
        """
        with cls._lock:
            cls._theme = "dark" if cls._theme == "light" else "light"
            return cls._theme

    @classmethod
    def is_dark(cls) -> bool:
        """Check if dark theme is active."""
        return cls.get_theme() == "dark"

    @classmethod
    def reset(cls) -> None:
        """Restore the configured seed and theme."""
        with cls._lock:
            cls._schemes = None
            cls._theme = "dark" if THEME_CONFIG.dark else "light"


def set_theme(theme: str) -> None:
    """Set the current theme ('light' or 'dark').

    Args:
        theme: Theme name to set.
    """
    SchemeManager.set_theme(theme)


def toggle_theme() -> str:
    """Toggle between light and dark theme.

    Returns:
        The new theme name.
    """
    return SchemeManager.toggle_theme()


def set_seed(seed: RGBA) -> Schemes:
    """Derive and activate schemes for a new seed color."""
    return SchemeManager.set_seed(seed)
