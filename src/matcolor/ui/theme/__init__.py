"""Active scheme management for toolkit consumers."""

from matcolor.ui.theme.manager import SchemeManager, set_theme, toggle_theme, set_seed
from matcolor.ui.theme.colors import get_color, COLORS

__all__ = [
    "SchemeManager",
    "set_theme",
    "toggle_theme",
    "set_seed",
    "get_color",
    "COLORS",
]
