"""Map a Scheme onto a Qt QPalette."""

import logging
from typing import Optional

from matcolor.core.scheme import Scheme
from matcolor.ui.theme.manager import SchemeManager

logger = logging.getLogger(__name__)

# QPalette.ColorRole name -> scheme role name
QPALETTE_ROLES = {
    "Window": "surface",
    "WindowText": "on_surface",
    "Base": "surface_container_lowest",
    "AlternateBase": "surface_container",
    "ToolTipBase": "inverse_surface",
    "ToolTipText": "inverse_on_surface",
    "PlaceholderText": "on_surface_variant",
    "Text": "on_surface",
    "Button": "surface_container_high",
    "ButtonText": "on_surface",
    "BrightText": "error",
    "Light": "surface_bright",
    "Midlight": "surface_container_highest",
    "Mid": "outline_variant",
    "Dark": "outline",
    "Shadow": "shadow",
    "Highlight": "primary",
    "HighlightedText": "on_primary",
    "Link": "primary",
    "LinkVisited": "tertiary",
}

# Roles that fade to on_surface_variant when widgets are disabled
DISABLED_TEXT_ROLES = ("WindowText", "Text", "ButtonText")


def build_qpalette(scheme: Scheme) -> "QPalette":
    """Create a QPalette whose roles come from the given scheme.

    Args:
        scheme: The Scheme to translate.

    Returns:
        A QPalette with every mapped color role set for all color groups.
    """
    from PyQt6.QtGui import QColor, QPalette

    roles = scheme.roles()
    palette = QPalette()
    for qt_role, role in QPALETTE_ROLES.items():
        color = roles[role]
        palette.setColor(getattr(QPalette.ColorRole, qt_role), QColor(color.r, color.g, color.b, color.a))

    disabled = roles["on_surface_variant"]
    for qt_role in DISABLED_TEXT_ROLES:
        palette.setColor(
            QPalette.ColorGroup.Disabled,
            getattr(QPalette.ColorRole, qt_role),
            QColor(disabled.r, disabled.g, disabled.b, disabled.a),
        )
    return palette


def apply_scheme(app: "QApplication", scheme: Optional[Scheme] = None) -> "QPalette":
    """Set a scheme's palette on the application.

    Args:
        app: The QApplication instance.
        scheme: Scheme to apply. Defaults to the active scheme.

    Returns:
        The QPalette that was applied.
    """
    if scheme is None:
        scheme = SchemeManager.get_scheme()
    palette = build_qpalette(scheme)
    app.setPalette(palette)
    logger.debug("Applied scheme palette to application")
    return palette
