"""Toolkit-facing helpers for matcolor schemes."""

# Note: PyQt6 is imported lazily inside the styling helpers, so the theme
# manager and color accessors work without a Qt installation or display:
# from matcolor.ui.styles import ButtonStyles, build_qpalette, apply_scheme
