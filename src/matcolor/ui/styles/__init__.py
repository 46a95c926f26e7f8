"""Qt styling driven by the active scheme."""

from matcolor.ui.styles.base import px, BORDER_RADIUS
from matcolor.ui.styles.button_styles import ButtonStyles
from matcolor.ui.styles.qt_palette import build_qpalette, apply_scheme

__all__ = [
    "px",
    "BORDER_RADIUS",
    "ButtonStyles",
    "build_qpalette",
    "apply_scheme",
]
