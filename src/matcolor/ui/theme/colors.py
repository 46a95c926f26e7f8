"""Dynamic color access based on the active scheme."""

from matcolor.config.constants import FALLBACK_COLOR_HEX
from matcolor.ui.theme.manager import SchemeManager


def get_color(role: str) -> str:
    """Get a role color from the active scheme.

    Args:
        role: Role name (e.g., 'primary', 'on_surface', 'outline_variant').

    Returns:
        Hex color string, or magenta (#FF00FF) for unknown roles.
    """
    return SchemeManager.get_scheme().hex_roles.get(role, FALLBACK_COLOR_HEX)


class _DynamicColors:
    """Dict-like accessor that always reads from the active scheme."""

    def __getitem__(self, role: str) -> str:
        return get_color(role)

    def get(self, role: str, default: str = "") -> str:
        """Get a role color, or default if the role is unknown."""
        result = get_color(role)
        return result if result != FALLBACK_COLOR_HEX else default


COLORS = _DynamicColors()
