"""Base style utilities."""

# Border Radius - Material shape scale
BORDER_RADIUS = {
    "xs": 4,
    "sm": 8,
    "md": 12,
    "lg": 16,
    "xl": 28,
    "full": 9999,  # For pills and circles
}


def px(value: int) -> str:
    """Return a CSS pixel value.

    Args:
        value: Pixel value as integer.

    Returns:
        CSS pixel string (e.g., '16px').
    """
    return f"{value}px"
