"""Button style generators for Qt widgets.

Each generator reads role colors from the active scheme at call time, so
re-applying a stylesheet after a theme or seed change picks up new colors.
Filled buttons pair a base role with its "on" role, tonal buttons pair a
container with its "on container" role.
"""

from matcolor.ui.theme.colors import get_color
from matcolor.ui.styles.base import BORDER_RADIUS, px


class ButtonStyles:
    """Collection of button style generators."""

    _FONT_STACK = '"Roboto", "Helvetica Neue", "Segoe UI", sans-serif'

    @staticmethod
    def accent() -> str:
        """Filled button - primary fill.

        Use for: Main actions like "Save", "Submit"
        """
        return f"""
            QPushButton {{
                background-color: {get_color('primary')};
                color: {get_color('on_primary')};
                border: none;
                border-radius: {px(BORDER_RADIUS["full"])};
                font-family: {ButtonStyles._FONT_STACK};
                font-size: 14px;
                font-weight: 500;
                padding: 10px 24px;
            }}
            QPushButton:hover {{
                background-color: {get_color('primary_container')};
                color: {get_color('on_primary_container')};
            }}
            QPushButton:pressed {{
                background-color: {get_color('inverse_primary')};
                color: {get_color('on_primary_container')};
            }}
            QPushButton:disabled {{
                background-color: {get_color('surface_container_highest')};
                color: {get_color('on_surface_variant')};
            }}
        """

    # Aliases for semantic clarity
    filled = accent

    @staticmethod
    def tonal() -> str:
        """Tonal button - secondary container fill.

        Use for: Secondary actions that still need some emphasis
        """
        return f"""
            QPushButton {{
                background-color: {get_color('secondary_container')};
                color: {get_color('on_secondary_container')};
                border: none;
                border-radius: {px(BORDER_RADIUS["full"])};
                font-family: {ButtonStyles._FONT_STACK};
                font-size: 14px;
                font-weight: 500;
                padding: 10px 24px;
            }}
            QPushButton:hover {{
                background-color: {get_color('surface_container_high')};
            }}
            QPushButton:disabled {{
                background-color: {get_color('surface_container_highest')};
                color: {get_color('on_surface_variant')};
            }}
        """

    @staticmethod
    def outlined() -> str:
        """Outlined button.

        Use for: Actions like "Cancel", "Back"
        """
        return f"""
            QPushButton {{
                background-color: transparent;
                color: {get_color('primary')};
                border: 1px solid {get_color('outline')};
                border-radius: {px(BORDER_RADIUS["full"])};
                font-family: {ButtonStyles._FONT_STACK};
                font-size: 14px;
                font-weight: 500;
                padding: 10px 24px;
            }}
            QPushButton:hover {{
                background-color: {get_color('surface_container_low')};
            }}
            QPushButton:disabled {{
                color: {get_color('on_surface_variant')};
                border-color: {get_color('outline_variant')};
            }}
        """

    @staticmethod
    def danger() -> str:
        """Generate danger/destructive action button.

        Returns:
            Stylesheet string for danger buttons.
        """
        return f"""
            QPushButton {{
                background-color: {get_color('error')};
                color: {get_color('on_error')};
                border: none;
                border-radius: {px(BORDER_RADIUS["full"])};
                font-family: {ButtonStyles._FONT_STACK};
                font-size: 14px;
                font-weight: 500;
                padding: 10px 24px;
            }}
            QPushButton:hover {{
                background-color: {get_color('error_container')};
                color: {get_color('on_error_container')};
            }}
        """
